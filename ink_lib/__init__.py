"""Ink trajectory scoring package.

Compares a freehand ink trajectory, captured as an ordered sequence of 2D
points, with a reference template and derives a bounded precision score,
kinematic fluency metrics and a live completion estimate.

Architecture Overview:
    - ink_lib.domain provides typed value objects (Point, Stroke,
      Template, Metrics, ...)
    - ink_lib.utils holds pure geometry and numeric helpers
    - ink_lib.analysis implements the algorithms: canvas mapping,
      kinematics, DTW and Frechet alignment
    - ink_lib.scoring fuses them into precision, completion and a full
      ScoringEngine
    - ink_lib.templates serves the template catalog
    - ink_lib.api offers the drawing session, recommender and storage
      collaborators

Every function in analysis and scoring is pure and total: invalid
numeric intermediates are replaced by documented fallbacks instead of
raising.

Example usage:
    Scoring an attempt::

        from ink_lib import DefaultScoring, TemplateRepository

        template = TemplateRepository.with_defaults().by_id('pattern/loops.01')
        metrics = DefaultScoring().compute_metrics(strokes, template, (400, 300))
        print(f"Precision: {metrics.precision:.2f}")

    Live completion::

        from ink_lib import completion_percentage

        pct = completion_percentage(points, template.polyline, (400, 300))

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .analysis import GeometryMapper, SequenceAligner, TrajectoryMetrics, map_to_canvas
from .api import DrawingSession, FileStorage, HeuristicRecommender
from .config import ScoringConfig
from .domain import CanvasSize, Metrics, Point, Stroke, StrokeSample, Template
from .scoring import (
    CompletionEstimator,
    DefaultScoring,
    PrecisionScorer,
    ScoringEngine,
    completion_percentage,
)
from .templates import TemplateRepository

__all__ = [
    # Domain objects
    'Point', 'CanvasSize', 'Stroke', 'StrokeSample', 'Template', 'Metrics',
    # Analysis
    'GeometryMapper', 'map_to_canvas', 'TrajectoryMetrics', 'SequenceAligner',
    # Scoring
    'PrecisionScorer', 'CompletionEstimator', 'completion_percentage',
    'ScoringEngine', 'DefaultScoring', 'ScoringConfig',
    # Services
    'TemplateRepository', 'DrawingSession', 'HeuristicRecommender', 'FileStorage',
]

__version__ = '1.0.0'
