"""Live completion estimate while a template is being traced.

Completion combines two signals:
    - Coverage: traced path length relative to the placed template's
      path length, capped at 1.
    - Adherence: fraction of user points within a tolerance band of the
      placed template's points.

It runs on every drawing update, so it stays O(n log m) using a KD-tree
over the template points instead of a full nearest-neighbor scan.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from scipy.spatial import cKDTree

from ..analysis.mapping import CanvasLike, as_canvas_size, map_to_canvas_array
from ..config import DEFAULT_CONFIG, ScoringConfig
from ..utils.geometry import PolylineLike, as_array, path_length
from ..utils.numeric import clamp01


@dataclass(frozen=True)
class CompletionEstimator:
    """Estimates the traced fraction of a template."""
    config: ScoringConfig = DEFAULT_CONFIG

    def tolerance(self, canvas_size: CanvasLike) -> float:
        """Adherence band half-width for a canvas."""
        cfg = self.config
        return max(cfg.min_completion_tolerance,
                   as_canvas_size(canvas_size).shorter_side * cfg.completion_tolerance_fraction)

    def coverage(self, user: np.ndarray, mapped_template: np.ndarray) -> float:
        template_length = max(1.0, path_length(mapped_template))
        return min(1.0, path_length(user) / template_length)

    def adherence(self, user: np.ndarray, mapped_template: np.ndarray,
                  tolerance: float) -> float:
        """Fraction of user points within ``tolerance`` of a template point."""
        if len(user) == 0:
            return 0.0
        # KD-tree construction rejects non-finite coordinates
        targets = mapped_template[np.isfinite(mapped_template).all(axis=1)]
        queries = user[np.isfinite(user).all(axis=1)]
        if len(targets) == 0 or len(queries) == 0:
            return 0.0
        tree = cKDTree(targets)
        # Points with no neighbor inside the bound come back as inf
        dists, _ = tree.query(queries, k=1, distance_upper_bound=tolerance * (1 + 1e-9))
        near = int(np.count_nonzero(dists <= tolerance))
        return near / max(1, len(user))

    def completion(self, user_points: PolylineLike, template_points: PolylineLike,
                   canvas_size: CanvasLike) -> float:
        """Completion fraction in [0, 1].

        Args:
            user_points: Everything drawn so far, in canvas space.
            template_points: Template polyline in design space.
            canvas_size: Canvas as CanvasSize or (width, height).

        Returns:
            ``clamp01(0.6 * coverage + 0.4 * adherence)``; 0 for empty input
            or a non-positive canvas dimension.
        """
        user = as_array(user_points)
        template = as_array(template_points)
        canvas = as_canvas_size(canvas_size)
        if len(user) == 0 or len(template) == 0 or not canvas.is_valid:
            return 0.0

        cfg = self.config
        mapped = map_to_canvas_array(template, canvas, cfg.canvas_inset)
        coverage = self.coverage(user, mapped)
        adherence = self.adherence(user, mapped, self.tolerance(canvas))
        return clamp01(cfg.coverage_weight * coverage + cfg.adherence_weight * adherence)


def completion_percentage(user_points: PolylineLike, template_points: PolylineLike,
                          canvas_size: CanvasLike) -> float:
    """Completion with the default configuration."""
    return CompletionEstimator().completion(user_points, template_points, canvas_size)
