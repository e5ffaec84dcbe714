"""Geometric value objects for ink trajectories."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple
import math
import uuid


@dataclass(frozen=True)
class Point:
    """Immutable 2D point."""
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_tuple(self) -> Tuple[float, float]:
        """Convert to tuple for compatibility."""
        return (self.x, self.y)

    def to_list(self) -> List[float]:
        """Convert to list for JSON serialization."""
        return [float(self.x), float(self.y)]

    @classmethod
    def from_tuple(cls, t: Sequence[float]) -> Point:
        """Create from tuple."""
        return cls(float(t[0]), float(t[1]))


@dataclass(frozen=True)
class BBox:
    """Immutable axis-aligned bounding box."""
    x_min: float
    y_min: float
    x_max: float
    y_max: float

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def aspect_ratio(self) -> float:
        """Width over height, with height floored at 1 unit."""
        return self.width / max(self.height, 1.0)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x_min, self.y_min, self.x_max, self.y_max)

    @classmethod
    def from_points(cls, points: Sequence[Point]) -> BBox:
        """Create bounding box containing all points."""
        if not points:
            return cls(0, 0, 0, 0)
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), min(ys), max(xs), max(ys))


@dataclass(frozen=True)
class CanvasSize:
    """Size of the drawing surface in canvas units."""
    width: float
    height: float

    @property
    def is_valid(self) -> bool:
        """True when both dimensions are strictly positive."""
        return self.width > 0 and self.height > 0

    @property
    def shorter_side(self) -> float:
        return min(self.width, self.height)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.width, self.height)


@dataclass(frozen=True)
class StrokeSample:
    """One captured pen/finger sample.

    Attributes:
        x: Canvas-space x coordinate.
        y: Canvas-space y coordinate.
        t: Capture time in seconds.
        pressure: Normalised force, 0 when the device does not report it.
        altitude: Stylus altitude angle in radians, if reported.
        azimuth: Stylus azimuth angle in radians, if reported.
    """
    x: float
    y: float
    t: float = 0.0
    pressure: float = 0.0
    altitude: Optional[float] = None
    azimuth: Optional[float] = None

    @property
    def location(self) -> Point:
        return Point(self.x, self.y)

    def to_dict(self) -> Dict:
        return {
            'x': self.x, 'y': self.y, 't': self.t,
            'pressure': self.pressure,
            'altitude': self.altitude, 'azimuth': self.azimuth,
        }

    @classmethod
    def from_dict(cls, d: Dict) -> StrokeSample:
        return cls(
            x=float(d['x']),
            y=float(d['y']),
            t=float(d.get('t', 0.0)),
            pressure=float(d.get('pressure', 0.0)),
            altitude=d.get('altitude'),
            azimuth=d.get('azimuth'),
        )


@dataclass
class Stroke:
    """A stroke as a sequence of captured samples."""
    samples: List[StrokeSample] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[StrokeSample]:
        return iter(self.samples)

    def __getitem__(self, idx) -> StrokeSample:
        return self.samples[idx]

    @property
    def points(self) -> List[Point]:
        return [s.location for s in self.samples]

    @property
    def timestamps(self) -> List[float]:
        return [s.t for s in self.samples]

    def to_list(self) -> List[List[float]]:
        """Convert to nested ``[x, y, t]`` lists for JSON serialization."""
        return [[s.x, s.y, s.t] for s in self.samples]

    @classmethod
    def from_list(cls, lst: Sequence[Sequence[float]]) -> Stroke:
        """Create from ``[x, y]`` or ``[x, y, t]`` rows."""
        samples = []
        for row in lst:
            t = float(row[2]) if len(row) > 2 else 0.0
            samples.append(StrokeSample(float(row[0]), float(row[1]), t))
        return cls(samples)

    @classmethod
    def from_points(cls, points: Sequence[Point],
                    timestamps: Optional[Sequence[float]] = None) -> Stroke:
        """Create from points, optionally paired with timestamps."""
        if timestamps is None:
            timestamps = [0.0] * len(points)
        return cls([StrokeSample(p.x, p.y, float(t))
                    for p, t in zip(points, timestamps)])


def flatten_strokes(strokes: Sequence[Stroke]) -> Tuple[List[Point], List[float]]:
    """Flatten strokes into one point list in stroke-then-sample order.

    Returns:
        Tuple of (points, timestamps), both with one entry per sample.
    """
    points: List[Point] = []
    timestamps: List[float] = []
    for stroke in strokes:
        for sample in stroke.samples:
            points.append(sample.location)
            timestamps.append(sample.t)
    return points, timestamps


@dataclass
class Attempt:
    """A recorded attempt at tracing one template."""
    template_id: str
    strokes: List[Stroke] = field(default_factory=list)
    duration_ms: int = 0
    device: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_dict(self) -> Dict:
        return {
            'id': self.id,
            'template_id': self.template_id,
            'strokes': [[s.to_dict() for s in stroke.samples] for stroke in self.strokes],
            'duration_ms': self.duration_ms,
            'device': self.device,
        }

    @classmethod
    def from_dict(cls, d: Dict) -> Attempt:
        strokes = [Stroke([StrokeSample.from_dict(s) for s in stroke])
                   for stroke in d.get('strokes', [])]
        return cls(
            template_id=d['template_id'],
            strokes=strokes,
            duration_ms=int(d.get('duration_ms', 0)),
            device=d.get('device'),
            id=d.get('id') or str(uuid.uuid4()),
        )
