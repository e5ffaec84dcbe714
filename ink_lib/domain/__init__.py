"""Domain objects for ink trajectory scoring.

This module provides the value objects shared by every layer of the
package: geometric primitives, captured strokes, reference templates and
evaluation results.

Geometry classes:
    Point: Immutable 2D point.
    BBox: Immutable axis-aligned bounding box.
    CanvasSize: Size of the drawing surface.
    StrokeSample, Stroke: Captured pen samples grouped into strokes.
    Attempt: A recorded attempt at one template.

Template classes:
    Line, TemplateLayout, Template: Reference trajectories.

Result classes:
    Metrics: Output of a full evaluation.
    AlignmentResult: DTW/Frechet distance pair.
    DifficultyParams, Recommendation, Session: Practice bookkeeping.

Example usage:
    Flattening captured strokes::

        from ink_lib.domain import Stroke, flatten_strokes

        strokes = [Stroke.from_list([[0, 0, 0.0], [5, 0, 0.01]])]
        points, timestamps = flatten_strokes(strokes)
"""

from .geometry import (
    Attempt,
    BBox,
    CanvasSize,
    Point,
    Stroke,
    StrokeSample,
    flatten_strokes,
)
from .metrics import AlignmentResult, Metrics
from .session import DifficultyParams, Recommendation, Session
from .template import Line, Template, TemplateLayout

__all__ = [
    'Point', 'BBox', 'CanvasSize', 'StrokeSample', 'Stroke', 'Attempt',
    'flatten_strokes',
    'Line', 'TemplateLayout', 'Template',
    'Metrics', 'AlignmentResult',
    'DifficultyParams', 'Recommendation', 'Session',
]
