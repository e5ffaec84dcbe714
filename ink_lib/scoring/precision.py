"""Precision scoring of a drawn trajectory against a template.

The precision score fuses four independent sub-scores, each in [0, 1]:

    - Shape: DTW and Frechet distances between the user trace and the
      template, both in unnormalized canvas coordinates.
    - Position: Centroid offset between the user trace and the template
      as placed on the canvas.
    - Proportion: Difference of bounding-box aspect ratios.
    - Orientation: Difference of net drawing directions.

Each sub-score falls linearly from 1 to 0 as its discrepancy grows to an
acceptable threshold, and is forced to 0 once the discrepancy passes a
multiple of that threshold, so an obviously wrong attempt fails the
sub-score rather than merely lowering it.

Design Patterns:
    Sub-scores follow the Composite Scoring Pattern: each is a SubScore
    subclass with its own weight, and PrecisionScorer sums the weighted
    results. Alternate sub-score sets can be passed in for experiments.

Typical usage:
    from ink_lib.scoring.precision import PrecisionScorer

    scorer = PrecisionScorer()
    precision = scorer.score(user_points, template.polyline, (400, 300))

    # Per sub-score values for diagnostics
    parts = scorer.breakdown(user_points, template.polyline, (400, 300))
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np

from ..analysis.alignment import dtw_distance, frechet_distance
from ..analysis.mapping import CanvasLike, as_canvas_size, map_to_canvas_array
from ..config import DEFAULT_CONFIG, ScoringConfig
from ..domain.geometry import CanvasSize
from ..utils.geometry import PolylineLike, as_array, bounding_box, centroid, main_direction
from ..utils.numeric import clamp01

logger = logging.getLogger(__name__)


def linear_score(discrepancy: float, threshold: float, cutoff: float) -> float:
    """Score a discrepancy against an acceptable threshold.

    Args:
        discrepancy: Measured non-negative discrepancy.
        threshold: Discrepancy at which the score reaches 0.
        cutoff: Discrepancy beyond which the score is forced to 0.

    Returns:
        ``max(0, 1 - discrepancy / threshold)``, or 0 past the cutoff.
    """
    if discrepancy > cutoff:
        return 0.0
    return clamp01(1.0 - discrepancy / threshold)


@dataclass
class PrecisionContext:
    """Inputs shared by all sub-scores for one evaluation.

    Attributes:
        user: Nx2 array of user points in canvas space.
        template: Mx2 array of template points in design space.
        mapped_template: Mx2 array of template points placed on the canvas.
        canvas: Canvas the user drew on.
        config: Thresholds in effect.
    """
    user: np.ndarray
    template: np.ndarray
    mapped_template: np.ndarray
    canvas: CanvasSize
    config: ScoringConfig = DEFAULT_CONFIG


class SubScore(ABC):
    """Base class for precision sub-scores.

    Subclasses implement compute() and return a value in [0, 1], where 1
    is a perfect match.

    Attributes:
        name: Key used in breakdowns and logs.
        weight: Multiplier for this sub-score in the fused precision.
    """
    name = 'sub_score'

    def __init__(self, weight: float = 1.0):
        self.weight = weight

    @abstractmethod
    def compute(self, context: PrecisionContext) -> float:
        """Compute the sub-score for one evaluation."""


class ShapeScore(SubScore):
    """Similarity of the traced shape via DTW and Frechet distances.

    By default the user trace is compared with the template as placed on
    the canvas, not with the raw design-space polyline, so tracing the
    displayed guide exactly scores 1. Set
    ``ScoringConfig.shape_in_canvas_space = False`` to compare against
    the design-space points instead.
    """
    name = 'shape'

    def compute(self, context: PrecisionContext) -> float:
        cfg = context.config
        reference = context.mapped_template if cfg.shape_in_canvas_space else context.template
        dtw = dtw_distance(context.user, reference)
        frechet = frechet_distance(context.user, reference)

        if (dtw > cfg.dtw_threshold * cfg.shape_penalty_factor or
                frechet > cfg.frechet_threshold * cfg.shape_penalty_factor):
            logger.debug("Shape rejected: dtw=%.2f frechet=%.2f", dtw, frechet)
            return 0.0

        dtw_score = max(0.0, 1.0 - dtw / cfg.dtw_threshold)
        frechet_score = max(0.0, 1.0 - frechet / cfg.frechet_threshold)
        return clamp01(cfg.shape_dtw_weight * dtw_score +
                       cfg.shape_frechet_weight * frechet_score)


class PositionScore(SubScore):
    """Closeness of the user trace's centroid to the placed template's."""
    name = 'position'

    def compute(self, context: PrecisionContext) -> float:
        cfg = context.config
        user_center = centroid(context.user)
        template_center = centroid(context.mapped_template)
        dist = user_center.distance_to(template_center)
        threshold = context.canvas.shorter_side * cfg.position_fraction
        return linear_score(dist, threshold, threshold * cfg.severe_penalty_factor)


class ProportionScore(SubScore):
    """Agreement of bounding-box aspect ratios."""
    name = 'proportion'

    def compute(self, context: PrecisionContext) -> float:
        cfg = context.config
        diff = abs(bounding_box(context.user).aspect_ratio -
                   bounding_box(context.template).aspect_ratio)
        return linear_score(diff, cfg.aspect_threshold,
                            cfg.aspect_threshold * cfg.severe_penalty_factor)


class OrientationScore(SubScore):
    """Agreement of overall drawing direction."""
    name = 'orientation'

    def compute(self, context: PrecisionContext) -> float:
        cfg = context.config
        if len(context.user) < 2 or len(context.template) < 2:
            return cfg.neutral_orientation

        # Plain difference of atan2 angles, no wrap-around at +/-pi
        diff = abs(main_direction(context.user) - main_direction(context.template))
        return linear_score(diff, cfg.orientation_threshold,
                            cfg.orientation_threshold * cfg.severe_penalty_factor)


def default_sub_scores(config: ScoringConfig = DEFAULT_CONFIG) -> list[SubScore]:
    """The standard four sub-scores with their configured weights."""
    return [
        ShapeScore(weight=config.shape_weight),
        PositionScore(weight=config.position_weight),
        ProportionScore(weight=config.proportion_weight),
        OrientationScore(weight=config.orientation_weight),
    ]


class PrecisionScorer:
    """Fuses weighted sub-scores into one precision value in [0, 1].

    Example:
        >>> scorer = PrecisionScorer()
        >>> round(scorer.score([(16, 106), (196, 106)], [(0, 0), (180, 0)], (212, 212)), 3)
        1.0
    """

    def __init__(self, config: ScoringConfig | None = None,
                 sub_scores: list[SubScore] | None = None):
        """Initialize with thresholds and sub-scores.

        Args:
            config: Thresholds and weights. Defaults to DEFAULT_CONFIG.
            sub_scores: SubScore instances to fuse. If None, uses the
                standard shape/position/proportion/orientation set.
        """
        self.config = config or DEFAULT_CONFIG
        self.sub_scores = sub_scores if sub_scores is not None else default_sub_scores(self.config)

    def _context(self, user_points: PolylineLike, template_points: PolylineLike,
                 canvas_size: CanvasLike) -> PrecisionContext | None:
        user = as_array(user_points)
        template = as_array(template_points)
        canvas = as_canvas_size(canvas_size)
        if len(user) == 0 or len(template) == 0 or not canvas.is_valid:
            return None
        mapped = map_to_canvas_array(template, canvas, self.config.canvas_inset)
        return PrecisionContext(user, template, mapped, canvas, self.config)

    def breakdown(self, user_points: PolylineLike, template_points: PolylineLike,
                  canvas_size: CanvasLike) -> dict[str, float]:
        """Compute each sub-score by name; empty for invalid input."""
        context = self._context(user_points, template_points, canvas_size)
        if context is None:
            return {}
        return {s.name: clamp01(s.compute(context)) for s in self.sub_scores}

    def score(self, user_points: PolylineLike, template_points: PolylineLike,
              canvas_size: CanvasLike) -> float:
        """Precision of a user trace against a template.

        Args:
            user_points: User trace in canvas space.
            template_points: Template polyline in design space.
            canvas_size: Canvas as CanvasSize or (width, height).

        Returns:
            Weighted sum of sub-scores clamped to [0, 1]. Returns 0 for an
            empty input or a non-positive canvas dimension.
        """
        context = self._context(user_points, template_points, canvas_size)
        if context is None:
            return 0.0

        total = 0.0
        for sub in self.sub_scores:
            value = clamp01(sub.compute(context))
            logger.debug("%s=%.3f (weight %.2f)", sub.name, value, sub.weight)
            total += sub.weight * value
        return clamp01(total)


def calculate_precision(user_points: PolylineLike, template_points: PolylineLike,
                        canvas_size: CanvasLike) -> float:
    """Precision with the default configuration."""
    return PrecisionScorer().score(user_points, template_points, canvas_size)
