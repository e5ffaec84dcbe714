"""Reference template value objects.

A template is the trajectory the user is asked to trace. Its polyline is
defined in an arbitrary design space; the scoring layer maps it onto the
canvas when it needs canvas coordinates.

The module provides the following classes:
    Line: A straight guide line (used for baselines).
    TemplateLayout: Optional layout guides attached to a template.
    Template: Immutable reference trajectory with tracing parameters.

Example usage:
    Building a template::

        from ink_lib.domain import Point, Template

        tpl = Template(
            id='pattern/lines.long.01',
            polyline=(Point(0, 0), Point(180, 0)),
            tolerance=10,
            time_ms=6000,
        )
        print(tpl.bbox.width)  # 180
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .geometry import BBox, Point


@dataclass(frozen=True)
class Line:
    """A straight line between two points."""
    start: Point
    end: Point

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    def to_dict(self) -> Dict:
        return {'start': self.start.to_list(), 'end': self.end.to_list()}

    @classmethod
    def from_dict(cls, d: Dict) -> Line:
        return cls(Point.from_tuple(d['start']), Point.from_tuple(d['end']))


@dataclass(frozen=True)
class TemplateLayout:
    """Layout guides for a template.

    Attributes:
        baseline: Optional writing baseline.
        no_go_rects: Regions the user should avoid, as bounding boxes.
        target_gaps: Desired spacing between glyphs, in design units.
    """
    baseline: Optional[Line] = None
    no_go_rects: Tuple[BBox, ...] = ()
    target_gaps: Tuple[float, ...] = ()

    def to_dict(self) -> Dict:
        return {
            'baseline': self.baseline.to_dict() if self.baseline else None,
            'no_go_rects': [list(r.to_tuple()) for r in self.no_go_rects],
            'target_gaps': list(self.target_gaps),
        }

    @classmethod
    def from_dict(cls, d: Dict) -> TemplateLayout:
        baseline = d.get('baseline')
        return cls(
            baseline=Line.from_dict(baseline) if baseline else None,
            no_go_rects=tuple(BBox(*r) for r in d.get('no_go_rects', [])),
            target_gaps=tuple(float(g) for g in d.get('target_gaps', [])),
        )


@dataclass(frozen=True)
class Template:
    """Immutable reference trajectory.

    Attributes:
        id: Catalog identifier, e.g. ``'pattern/curves.arc.01'``.
        polyline: Ordered design-space points; order defines direction.
        tolerance: Allowed deviation in design units.
        time_ms: Suggested time budget for one attempt.
        type: One of ``'pattern'``, ``'glyph'`` or ``'word'``.
        layout: Optional layout guides.
    """
    id: str
    polyline: Tuple[Point, ...]
    tolerance: float = 12.0
    time_ms: int = 8000
    type: str = 'pattern'
    layout: TemplateLayout = field(default_factory=TemplateLayout)

    def __post_init__(self):
        # Store a tuple of Point so the template stays hashable
        polyline = tuple(p if isinstance(p, Point) else Point.from_tuple(p)
                         for p in self.polyline)
        object.__setattr__(self, 'polyline', polyline)

    @property
    def baseline(self) -> Optional[Line]:
        return self.layout.baseline

    @property
    def bbox(self) -> BBox:
        return BBox.from_points(self.polyline)

    def to_dict(self) -> Dict:
        return {
            'id': self.id,
            'type': self.type,
            'polyline': [p.to_list() for p in self.polyline],
            'layout': self.layout.to_dict(),
            'tolerance': self.tolerance,
            'time_ms': self.time_ms,
        }

    @classmethod
    def from_dict(cls, d: Dict) -> Template:
        return cls(
            id=d['id'],
            polyline=tuple(Point.from_tuple(p) for p in d['polyline']),
            tolerance=float(d.get('tolerance', 12.0)),
            time_ms=int(d.get('time_ms', 8000)),
            type=d.get('type', 'pattern'),
            layout=TemplateLayout.from_dict(d.get('layout') or {}),
        )
