"""Full evaluation of a drawing attempt.

ScoringEngine is the interface callers depend on; DefaultScoring is the
standard implementation combining PrecisionScorer and TrajectoryMetrics
into one Metrics record. Alternate engines only need compute_metrics().
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..analysis.kinematics import TrajectoryMetrics
from ..analysis.mapping import CanvasLike, as_canvas_size
from ..config import DEFAULT_CONFIG, ScoringConfig
from ..domain.geometry import Stroke, flatten_strokes
from ..domain.metrics import Metrics
from ..domain.template import Template
from ..utils.geometry import PolylineLike, as_array
from ..utils.numeric import clamp01, sanitize
from .precision import PrecisionScorer

logger = logging.getLogger(__name__)


class ScoringEngine(ABC):
    """Interface for turning captured strokes into Metrics."""

    @abstractmethod
    def compute_metrics(self, strokes: Sequence[Stroke], template: Template,
                        canvas_size: CanvasLike) -> Metrics:
        """Evaluate strokes drawn on a canvas against a template."""


class DefaultScoring(ScoringEngine):
    """Standard engine: geometric precision plus speed-based fluency.

    Example:
        >>> engine = DefaultScoring()
        >>> metrics = engine.compute_metrics(strokes, template, (400, 300))
        >>> metrics.precision, metrics.microstops
    """

    def __init__(self, config: ScoringConfig | None = None):
        self.config = config or DEFAULT_CONFIG
        self.precision_scorer = PrecisionScorer(self.config)
        self.trajectory_metrics = TrajectoryMetrics(self.config.microstop_threshold,
                                                    self.config.microstop_run)

    def compute_metrics(self, strokes: Sequence[Stroke], template: Template,
                        canvas_size: CanvasLike) -> Metrics:
        if not strokes:
            return Metrics.default()
        points, timestamps = flatten_strokes(strokes)
        # Samples without capture times all carry t=0; fall back to distances
        has_times = any(t != timestamps[0] for t in timestamps) if timestamps else False
        return self.compute_metrics_for_points(points, template, canvas_size,
                                               timestamps if has_times else None)

    def compute_metrics_for_points(self, points: PolylineLike, template: Template,
                                   canvas_size: CanvasLike,
                                   timestamps: Optional[Sequence[float]] = None) -> Metrics:
        """Evaluate an already flattened point sequence.

        Args:
            points: User points in canvas space, stroke-then-sample order.
            template: Template being traced.
            canvas_size: Canvas as CanvasSize or (width, height).
            timestamps: Optional capture time per point, in seconds.

        Returns:
            Metrics with every value finite and in range. Empty input or a
            non-positive canvas dimension gives Metrics.default().
        """
        user = as_array(points)
        canvas = as_canvas_size(canvas_size)
        if len(user) == 0 or not canvas.is_valid:
            logger.debug("Nothing to score: %d points, canvas %sx%s",
                         len(user), canvas.width, canvas.height)
            return Metrics.default()

        precision = self.precision_scorer.score(user, template.polyline, canvas)
        summary = self.trajectory_metrics.summarize(user, timestamps)

        metrics = Metrics(
            precision=clamp01(precision),
            speed_mean=sanitize(summary.speed_mean, lo=0.0),
            speed_cv=sanitize(summary.speed_cv, lo=0.0),
            fluency_jerk=sanitize(summary.jerk, lo=0.0),
            microstops=max(0, summary.microstops),
        )
        logger.info("Scored %d points against %s: precision=%.3f",
                    len(user), template.id, metrics.precision)
        return metrics
