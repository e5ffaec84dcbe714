"""Practice session and recommendation value objects."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List

from .geometry import Attempt
from .metrics import Metrics


@dataclass(frozen=True)
class DifficultyParams:
    """Difficulty settings proposed for the next exercise."""
    difficulty: float = 0.5
    tolerance: float = 12.0
    time_ms: int = 8000

    def to_dict(self) -> Dict:
        return {'difficulty': self.difficulty, 'tolerance': self.tolerance,
                'time_ms': self.time_ms}

    @classmethod
    def from_dict(cls, d: Dict) -> DifficultyParams:
        return cls(float(d.get('difficulty', 0.5)),
                   float(d.get('tolerance', 12.0)),
                   int(d.get('time_ms', 8000)))


@dataclass(frozen=True)
class Recommendation:
    """Next templates to practise and why."""
    next_template_ids: List[str]
    rationale: str
    params: DifficultyParams = field(default_factory=DifficultyParams)

    def to_dict(self) -> Dict:
        return {
            'next_template_ids': list(self.next_template_ids),
            'rationale': self.rationale,
            'params': self.params.to_dict(),
        }

    @classmethod
    def from_dict(cls, d: Dict) -> Recommendation:
        return cls(
            next_template_ids=list(d.get('next_template_ids', [])),
            rationale=d.get('rationale', ''),
            params=DifficultyParams.from_dict(d.get('params') or {}),
        )


@dataclass
class Session:
    """A practice session: its attempts and aggregated metrics."""
    attempts: List[Attempt] = field(default_factory=list)
    metrics_agg: Metrics = field(default_factory=Metrics.default)

    def to_dict(self) -> Dict:
        return {
            'attempts': [a.to_dict() for a in self.attempts],
            'metrics_agg': self.metrics_agg.to_dict(),
        }

    @classmethod
    def from_dict(cls, d: Dict) -> Session:
        return cls(
            attempts=[Attempt.from_dict(a) for a in d.get('attempts', [])],
            metrics_agg=Metrics.from_dict(d.get('metrics_agg') or {}),
        )
