"""Scoring of drawn trajectories.

The module exports:
    PrecisionScorer: Fuses shape, position, proportion and orientation
        sub-scores into one precision value.
    SubScore and its four concrete subclasses: Building blocks of the
        precision score.
    CompletionEstimator: Live traced-fraction estimate.
    ScoringEngine, DefaultScoring: Full evaluation producing Metrics.

Example usage::

    from ink_lib.scoring import DefaultScoring, completion_percentage

    pct = completion_percentage(points, template.polyline, (400, 300))
    if pct > 0.95:
        metrics = DefaultScoring().compute_metrics(strokes, template, (400, 300))
"""

from .completion import CompletionEstimator, completion_percentage
from .engine import DefaultScoring, ScoringEngine
from .precision import (
    OrientationScore,
    PositionScore,
    PrecisionContext,
    PrecisionScorer,
    ProportionScore,
    ShapeScore,
    SubScore,
    calculate_precision,
    linear_score,
)

__all__ = [
    'PrecisionScorer', 'PrecisionContext', 'SubScore',
    'ShapeScore', 'PositionScore', 'ProportionScore', 'OrientationScore',
    'calculate_precision', 'linear_score',
    'CompletionEstimator', 'completion_percentage',
    'ScoringEngine', 'DefaultScoring',
]
