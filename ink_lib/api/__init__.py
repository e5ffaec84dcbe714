"""Service layer around the scoring core.

The module contains the collaborators that sit between a capture surface
and the pure scoring functions:
    DrawingSession: Live completion tracking and guarded evaluation.
    EvaluationError, NoStrokesError, TooManyStrokesError: Precondition
        failures raised by DrawingSession.evaluate().
    Recommender, HeuristicRecommender: Next-exercise planning.
    FileStorage: JSON persistence of value objects.

Example usage::

    from ink_lib.api import DrawingSession, HeuristicRecommender

    session = DrawingSession(template, (400, 300))
    session.update(strokes)
    metrics = session.evaluate()
    plan = HeuristicRecommender().next_plan([], metrics)
"""

from .recommender import DEFICIT_TEMPLATES, HeuristicRecommender, Recommender
from .session import DrawingSession, EvaluationError, NoStrokesError, TooManyStrokesError
from .storage import FileStorage

__all__ = [
    'DrawingSession', 'EvaluationError', 'NoStrokesError', 'TooManyStrokesError',
    'Recommender', 'HeuristicRecommender', 'DEFICIT_TEMPLATES',
    'FileStorage',
]
