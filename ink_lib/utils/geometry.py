"""Geometric utility functions.

This module provides array-level helpers used by the analysis and scoring
layers. They accept a polyline in any of the forms callers hand around
(a list of Point, a list of (x, y) tuples, or an Nx2 numpy array) and
work on a float numpy array internally.

The module provides the following functions:
    as_array: Convert a polyline to an Nx2 float array.
    path_length: Total arc length of a polyline.
    centroid: Mean position of the points.
    bounding_box: Axis-aligned bounds as a BBox.
    main_direction: Angle of the net displacement vector.

Example usage:
    Measuring a polyline::

        from ink_lib.utils.geometry import path_length, main_direction

        pts = [(0, 0), (3, 4), (6, 8)]
        path_length(pts)      # 10.0
        main_direction(pts)   # atan2(8, 6)
"""

from __future__ import annotations

import math
from typing import Sequence, Union

import numpy as np

from ..domain.geometry import BBox, Point

PolylineLike = Union[Sequence[Point], Sequence[Sequence[float]], np.ndarray]


def as_array(points: PolylineLike) -> np.ndarray:
    """Convert a polyline to an Nx2 float array.

    Args:
        points: Points as Point objects, (x, y) pairs, or an array.

    Returns:
        Array of shape (N, 2). Empty input gives shape (0, 2).
    """
    if isinstance(points, np.ndarray):
        arr = points.astype(float, copy=False)
        return arr.reshape(-1, 2) if arr.size else np.empty((0, 2))
    if len(points) == 0:
        return np.empty((0, 2))
    if isinstance(points[0], Point):
        return np.array([[p.x, p.y] for p in points], dtype=float)
    return np.array([[p[0], p[1]] for p in points], dtype=float)


def to_points(arr: np.ndarray) -> list[Point]:
    """Convert an Nx2 array back to a list of Point."""
    return [Point(float(x), float(y)) for x, y in arr]


def segment_lengths(points: PolylineLike) -> np.ndarray:
    """Euclidean length of each consecutive segment."""
    arr = as_array(points)
    if len(arr) < 2:
        return np.empty(0)
    return np.hypot(np.diff(arr[:, 0]), np.diff(arr[:, 1]))


def path_length(points: PolylineLike) -> float:
    """Total arc length; 0 for fewer than two points."""
    return float(segment_lengths(points).sum())


def centroid(points: PolylineLike) -> Point:
    """Mean of the points (center of mass with unit weights)."""
    arr = as_array(points)
    if len(arr) == 0:
        return Point(0.0, 0.0)
    cx, cy = arr.mean(axis=0)
    return Point(float(cx), float(cy))


def bounding_box(points: PolylineLike) -> BBox:
    """Axis-aligned bounding box; all zeros for empty input."""
    arr = as_array(points)
    if len(arr) == 0:
        return BBox(0.0, 0.0, 0.0, 0.0)
    x_min, y_min = arr.min(axis=0)
    x_max, y_max = arr.max(axis=0)
    return BBox(float(x_min), float(y_min), float(x_max), float(y_max))


def main_direction(points: PolylineLike) -> float:
    """Angle in radians of the summed segment displacement.

    The sum of consecutive deltas telescopes to ``last - first``, so this
    is the direction from the first point to the last one.
    """
    arr = as_array(points)
    if len(arr) < 2:
        return 0.0
    total = np.diff(arr, axis=0).sum(axis=0)
    return math.atan2(float(total[1]), float(total[0]))
