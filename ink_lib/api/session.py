"""Drawing session: live completion tracking and evaluation.

A DrawingSession holds the strokes drawn so far for one template on one
canvas. The capture layer calls update() on every drawing change; the
session recomputes the completion estimate and, once it passes the
auto-evaluate threshold, notifies an optional callback so the caller can
run a full evaluation.

evaluate() enforces the caller-side preconditions of a full evaluation
and raises EvaluationError subclasses when they are not met. The scoring
engine itself never raises.

Example usage::

    from ink_lib.api import DrawingSession

    session = DrawingSession(template, canvas_size=(400, 300),
                             on_auto_evaluate=lambda s: print(s.evaluate()))
    session.update(strokes)
    print(f"{session.completion:.0%}")
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from ..analysis.mapping import CanvasLike
from ..config import AUTO_EVALUATE_THRESHOLD, MAX_STROKES
from ..domain.geometry import Stroke, flatten_strokes
from ..domain.metrics import Metrics
from ..domain.template import Template
from ..scoring.completion import CompletionEstimator
from ..scoring.engine import DefaultScoring, ScoringEngine

logger = logging.getLogger(__name__)


class EvaluationError(ValueError):
    """A drawing cannot be evaluated in its current state."""


class NoStrokesError(EvaluationError):
    def __init__(self):
        super().__init__("No strokes to evaluate")


class TooManyStrokesError(EvaluationError):
    def __init__(self, count: int, limit: int):
        super().__init__(f"Too many separate strokes: {count} (limit {limit})")
        self.count = count
        self.limit = limit


class DrawingSession:
    """Strokes for one template on one canvas, with live completion.

    Attributes:
        template: Template being traced.
        canvas_size: Canvas as CanvasSize or (width, height).
        strokes: Strokes drawn so far.
        completion: Latest completion estimate in [0, 1].
        on_auto_evaluate: Called with the session when completion passes
            the threshold.
    """

    def __init__(self, template: Template, canvas_size: CanvasLike,
                 engine: Optional[ScoringEngine] = None,
                 estimator: Optional[CompletionEstimator] = None,
                 on_auto_evaluate: Optional[Callable[[DrawingSession], None]] = None,
                 auto_evaluate_threshold: float = AUTO_EVALUATE_THRESHOLD,
                 max_strokes: int = MAX_STROKES):
        self.template = template
        self.canvas_size = canvas_size
        self.engine = engine or DefaultScoring()
        self.estimator = estimator or CompletionEstimator()
        self.on_auto_evaluate = on_auto_evaluate
        self.auto_evaluate_threshold = auto_evaluate_threshold
        self.max_strokes = max_strokes
        self.strokes: List[Stroke] = []
        self.completion = 0.0

    def update(self, strokes: Sequence[Stroke]) -> float:
        """Replace the current strokes and recompute completion.

        Returns:
            The new completion estimate.
        """
        self.strokes = list(strokes)
        if not self.strokes:
            self.completion = 0.0
            return self.completion

        points, _ = flatten_strokes(self.strokes)
        self.completion = self.estimator.completion(points, self.template.polyline,
                                                    self.canvas_size)

        if self.completion > self.auto_evaluate_threshold and self.on_auto_evaluate:
            logger.info("Completion %.2f passed %.2f, requesting evaluation",
                        self.completion, self.auto_evaluate_threshold)
            self.on_auto_evaluate(self)
        return self.completion

    def add_stroke(self, stroke: Stroke) -> float:
        """Append one finished stroke and recompute completion."""
        return self.update(self.strokes + [stroke])

    def reset(self) -> None:
        self.strokes = []
        self.completion = 0.0

    def evaluate(self) -> Metrics:
        """Run a full evaluation of the current strokes.

        Raises:
            NoStrokesError: Nothing has been drawn.
            TooManyStrokesError: More strokes than max_strokes.
        """
        if not self.strokes:
            logger.warning("Evaluation requested with no strokes")
            raise NoStrokesError()
        if len(self.strokes) > self.max_strokes:
            logger.warning("Evaluation rejected: %d strokes", len(self.strokes))
            raise TooManyStrokesError(len(self.strokes), self.max_strokes)
        return self.engine.compute_metrics(self.strokes, self.template, self.canvas_size)
