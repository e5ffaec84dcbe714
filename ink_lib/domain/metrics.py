"""Evaluation result value objects."""

from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Dict

from ..config import PLACEHOLDER_SUBSCORE


@dataclass(frozen=True)
class AlignmentResult:
    """Pair of dissimilarity measures between two polylines."""
    dtw: float
    frechet: float


@dataclass(frozen=True)
class Metrics:
    """Result of one full evaluation.

    Attributes:
        precision: Fused geometric match in [0, 1].
        speed_mean: Mean absolute speed (>= 0).
        speed_cv: Coefficient of variation of speed (>= 0).
        consistency: Reserved sub-score, fixed placeholder.
        spacing: Reserved sub-score, fixed placeholder.
        baseline: Reserved sub-score, fixed placeholder.
        planning: Reserved sub-score, fixed placeholder.
        fluency_jerk: Mean discrete jerk of the speed signal (>= 0).
        microstops: Number of hesitation runs (>= 0).
    """
    precision: float = 0.0
    speed_mean: float = 0.0
    speed_cv: float = 0.0
    consistency: float = PLACEHOLDER_SUBSCORE
    spacing: float = PLACEHOLDER_SUBSCORE
    baseline: float = PLACEHOLDER_SUBSCORE
    planning: float = PLACEHOLDER_SUBSCORE
    fluency_jerk: float = 0.0
    microstops: int = 0

    @classmethod
    def default(cls) -> Metrics:
        """Zero/neutral metrics used for empty or invalid input."""
        return cls()

    def to_dict(self) -> Dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict) -> Metrics:
        return cls(
            precision=float(d.get('precision', 0.0)),
            speed_mean=float(d.get('speed_mean', 0.0)),
            speed_cv=float(d.get('speed_cv', 0.0)),
            consistency=float(d.get('consistency', PLACEHOLDER_SUBSCORE)),
            spacing=float(d.get('spacing', PLACEHOLDER_SUBSCORE)),
            baseline=float(d.get('baseline', PLACEHOLDER_SUBSCORE)),
            planning=float(d.get('planning', PLACEHOLDER_SUBSCORE)),
            fluency_jerk=float(d.get('fluency_jerk', 0.0)),
            microstops=int(d.get('microstops', 0)),
        )
