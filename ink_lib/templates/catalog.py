"""Built-in practice templates."""

from __future__ import annotations

from ..domain.geometry import Point
from ..domain.template import Line, Template, TemplateLayout


def _polyline(*coords: tuple[float, float]) -> tuple[Point, ...]:
    return tuple(Point(float(x), float(y)) for x, y in coords)


CURVES_ARC_01 = Template(
    id='pattern/curves.arc.01',
    type='pattern',
    polyline=_polyline((0, 0), (40, 20), (80, 0), (120, -20), (160, 0)),
    layout=TemplateLayout(baseline=Line(Point(0, 0), Point(160, 0))),
    tolerance=12,
    time_ms=8000,
)

LINES_LONG_01 = Template(
    id='pattern/lines.long.01',
    type='pattern',
    polyline=_polyline((0, 0), (180, 0)),
    layout=TemplateLayout(baseline=Line(Point(0, 0), Point(180, 0))),
    tolerance=10,
    time_ms=6000,
)

LOOPS_01 = Template(
    id='pattern/loops.01',
    type='pattern',
    polyline=_polyline(
        (0, 0), (20, 30), (40, 0),
        (60, -30), (80, 0), (100, 30),
        (120, 0), (140, -30), (160, 0),
    ),
    layout=TemplateLayout(baseline=Line(Point(0, 0), Point(160, 0))),
    tolerance=14,
    time_ms=9000,
)

DEMO_TEMPLATES: tuple[Template, ...] = (CURVES_ARC_01, LINES_LONG_01, LOOPS_01)

# Returned for unknown identifiers
DEFAULT_TEMPLATE = CURVES_ARC_01
