"""Utility functions for trajectory scoring.

Geometry utilities:
    as_array, to_points: Convert between polylines and Nx2 arrays.
    segment_lengths, path_length: Arc length measurements.
    centroid, bounding_box, main_direction: Summary geometry.

Numeric utilities:
    sanitize, clamp01, is_finite: Guard values leaving the package.

Example usage::

    from ink_lib.utils import path_length, sanitize

    length = path_length([(0, 0), (3, 4)])      # 5.0
    safe = sanitize(float('inf'), default=0.0)  # 0.0
"""

from .geometry import (
    as_array,
    bounding_box,
    centroid,
    main_direction,
    path_length,
    segment_lengths,
    to_points,
)
from .numeric import clamp01, is_finite, sanitize

__all__ = [
    'as_array', 'to_points', 'segment_lengths', 'path_length',
    'centroid', 'bounding_box', 'main_direction',
    'sanitize', 'clamp01', 'is_finite',
]
