"""Next-exercise recommendation from evaluation metrics."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Sequence

from ..domain.metrics import Metrics
from ..domain.session import DifficultyParams, Recommendation

# Deficit name -> templates that train it
DEFICIT_TEMPLATES: Dict[str, List[str]] = {
    'curves': ['pattern/curves.arc.01'],
    'speed_stability': ['pattern/lines.long.01'],
    'fluency': ['pattern/loops.01'],
    'spacing': ['word/mim'],
    'baseline': ['pattern/baseline.fade.01'],
}

TOP_DEFICITS = 3


class Recommender(ABC):
    """Interface for planning the next exercise."""

    @abstractmethod
    def next_plan(self, history: Sequence[Metrics], last: Metrics) -> Recommendation:
        """Recommend templates given past and latest metrics."""


class HeuristicRecommender(Recommender):
    """Ranks the latest metrics' deficits and maps the worst to templates.

    Example:
        >>> plan = HeuristicRecommender().next_plan([], Metrics(precision=0.2))
        >>> plan.next_template_ids[0]
        'pattern/curves.arc.01'
    """

    def deficits(self, last: Metrics) -> list[tuple[str, float]]:
        """Deficit per skill, largest first; ties keep declaration order."""
        items = [
            ('curves', 1 - last.precision),
            ('speed_stability', last.speed_cv),
            ('fluency', last.fluency_jerk),
            ('spacing', 1 - last.spacing),
            ('baseline', 1 - last.baseline),
        ]
        return sorted(items, key=lambda item: item[1], reverse=True)

    def next_plan(self, history: Sequence[Metrics], last: Metrics) -> Recommendation:
        top = [name for name, _ in self.deficits(last)[:TOP_DEFICITS]]
        ids = [tid for name in top for tid in DEFICIT_TEMPLATES.get(name, [])]
        return Recommendation(
            next_template_ids=ids,
            rationale=f"Focus on: {', '.join(top)}",
            params=DifficultyParams(difficulty=0.5, tolerance=12, time_ms=8000),
        )
