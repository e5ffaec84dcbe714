"""Placement of design-space templates onto a canvas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np

from ..config import CANVAS_INSET
from ..domain.geometry import CanvasSize, Point
from ..utils.geometry import PolylineLike, as_array, to_points

CanvasLike = Union[CanvasSize, Sequence[float]]


def as_canvas_size(canvas_size: CanvasLike) -> CanvasSize:
    """Normalize a CanvasSize or a (width, height) pair to a float CanvasSize."""
    if isinstance(canvas_size, CanvasSize):
        return CanvasSize(float(canvas_size.width), float(canvas_size.height))
    return CanvasSize(float(canvas_size[0]), float(canvas_size[1]))


def map_to_canvas_array(polyline: PolylineLike, canvas_size: CanvasLike,
                        inset: float = CANVAS_INSET) -> np.ndarray:
    """Array form of map_to_canvas; returns an Nx2 array."""
    arr = as_array(polyline)
    if len(arr) == 0:
        return arr

    width, height = as_canvas_size(canvas_size).to_tuple()
    rect_w = width - 2 * inset
    rect_h = height - 2 * inset

    x_min, y_min = arr.min(axis=0)
    x_max, y_max = arr.max(axis=0)
    box_w = x_max - x_min
    box_h = y_max - y_min

    # Uniform scale; a flat box counts as 1 unit thick
    scale = min(rect_w / max(box_w, 1.0), rect_h / max(box_h, 1.0))

    offset_x = width / 2 - (x_min + box_w / 2) * scale
    offset_y = height / 2 - (y_min + box_h / 2) * scale
    return arr * scale + np.array([offset_x, offset_y])


def map_to_canvas(polyline: PolylineLike, canvas_size: CanvasLike,
                  inset: float = CANVAS_INSET) -> list[Point]:
    """Map a design-space polyline into canvas coordinates.

    The polyline's bounding box is scaled uniformly to fit the canvas
    rectangle shrunk by ``inset`` on every side, then centered in it.

    Args:
        polyline: Template points in design space.
        canvas_size: Target canvas as CanvasSize or (width, height).
        inset: Margin kept free on each side of the canvas.

    Returns:
        Mapped points in the same order. Empty input gives an empty list.

    Example:
        >>> map_to_canvas([(0, 0), (180, 0)], (212, 212))
        [Point(x=16.0, y=106.0), Point(x=196.0, y=106.0)]
    """
    return to_points(map_to_canvas_array(polyline, canvas_size, inset))


@dataclass(frozen=True)
class GeometryMapper:
    """Maps template polylines onto a canvas with a fixed inset."""
    inset: float = CANVAS_INSET

    def map(self, polyline: PolylineLike, canvas_size: CanvasLike) -> list[Point]:
        return map_to_canvas(polyline, canvas_size, self.inset)

    def map_array(self, polyline: PolylineLike, canvas_size: CanvasLike) -> np.ndarray:
        return map_to_canvas_array(polyline, canvas_size, self.inset)
