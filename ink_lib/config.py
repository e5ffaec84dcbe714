"""Shared configuration for trajectory scoring.

This module centralizes the thresholds and weights used by:
    - ink_lib.analysis (alignment sentinels, micro-stop detection)
    - ink_lib.scoring (precision fusion, completion estimate)
    - ink_lib.api (drawing session policy)

The values are fixed design constants. ScoringConfig bundles them so a
caller can override any of them for one scorer without touching the
module defaults.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

# Distance returned when either sequence is empty or the result is not
# finite; downstream thresholds treat it as "maximally dissimilar"
MAX_DISTANCE = 50.0

# Shape sub-score
DTW_THRESHOLD = 20.0
FRECHET_THRESHOLD = 25.0
SHAPE_DTW_WEIGHT = 0.6
SHAPE_FRECHET_WEIGHT = 0.4
SHAPE_PENALTY_FACTOR = 1.5      # shape fails outright at 1.5x its thresholds

# Other sub-scores fail outright at 2x their thresholds
SEVERE_PENALTY_FACTOR = 2.0
POSITION_FRACTION = 0.15        # of the canvas's shorter side
ASPECT_THRESHOLD = 0.5
ORIENTATION_THRESHOLD = math.pi / 4
NEUTRAL_ORIENTATION = 0.5       # fewer than two points on either side

# Precision fusion weights
SHAPE_WEIGHT = 0.4
POSITION_WEIGHT = 0.3
PROPORTION_WEIGHT = 0.2
ORIENTATION_WEIGHT = 0.1

# Template placement on the canvas
CANVAS_INSET = 16.0

# Completion estimate
COVERAGE_WEIGHT = 0.6
ADHERENCE_WEIGHT = 0.4
COMPLETION_TOLERANCE_FRACTION = 0.03
MIN_COMPLETION_TOLERANCE = 2.0

# Kinematics
MICROSTOP_THRESHOLD = 0.5
MICROSTOP_RUN = 3

# Reserved sub-metrics
PLACEHOLDER_SUBSCORE = 0.5

# Drawing session policy
AUTO_EVALUATE_THRESHOLD = 0.95
MAX_STROKES = 10


@dataclass(frozen=True)
class ScoringConfig:
    """Thresholds and weights for one scorer instance.

    Defaults equal the module constants, so ``ScoringConfig()`` reproduces
    the standard behaviour exactly.
    """
    dtw_threshold: float = DTW_THRESHOLD
    frechet_threshold: float = FRECHET_THRESHOLD
    shape_dtw_weight: float = SHAPE_DTW_WEIGHT
    shape_frechet_weight: float = SHAPE_FRECHET_WEIGHT
    shape_penalty_factor: float = SHAPE_PENALTY_FACTOR
    # False compares the user trace against the design-space template
    shape_in_canvas_space: bool = True
    severe_penalty_factor: float = SEVERE_PENALTY_FACTOR
    position_fraction: float = POSITION_FRACTION
    aspect_threshold: float = ASPECT_THRESHOLD
    orientation_threshold: float = ORIENTATION_THRESHOLD
    neutral_orientation: float = NEUTRAL_ORIENTATION
    shape_weight: float = SHAPE_WEIGHT
    position_weight: float = POSITION_WEIGHT
    proportion_weight: float = PROPORTION_WEIGHT
    orientation_weight: float = ORIENTATION_WEIGHT
    canvas_inset: float = CANVAS_INSET
    coverage_weight: float = COVERAGE_WEIGHT
    adherence_weight: float = ADHERENCE_WEIGHT
    completion_tolerance_fraction: float = COMPLETION_TOLERANCE_FRACTION
    min_completion_tolerance: float = MIN_COMPLETION_TOLERANCE
    microstop_threshold: float = MICROSTOP_THRESHOLD
    microstop_run: int = MICROSTOP_RUN


DEFAULT_CONFIG = ScoringConfig()


LOG_FORMAT = '%(levelname)s [%(name)s] %(message)s'


def configure_logging(level: str = 'WARNING') -> None:
    """Send ink_lib log records to stderr at the given level name.

    Unknown level names fall back to WARNING. Calling it again replaces
    the handler installed by the previous call.
    """
    level_no = logging.getLevelName(level.upper())
    if not isinstance(level_no, int):
        level_no = logging.WARNING

    pkg_logger = logging.getLogger('ink_lib')
    pkg_logger.setLevel(level_no)
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    pkg_logger.addHandler(handler)
