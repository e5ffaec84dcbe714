"""Kinematic quality metrics for a drawn trajectory.

Speeds are derived per segment, either as true speed (distance over time)
when timestamps are available or as plain segment length otherwise. The
segment-length proxy depends on the sampling rate and canvas scale but
preserves the ordering of fast and slow segments.

The module provides the following functions:
    velocities: Per-segment speed from points and optional timestamps.
    mean_speed: Mean absolute speed.
    speed_cv: Coefficient of variation of speed.
    micro_stops: Count of sustained near-zero speed runs.
    mean_jerk: Mean discrete third derivative of position.

And the TrajectoryMetrics class, which bundles them with configured
thresholds.

Example usage::

    from ink_lib.analysis.kinematics import TrajectoryMetrics

    summary = TrajectoryMetrics().summarize(points, timestamps)
    print(summary.speed_cv, summary.microstops)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from ..config import MICROSTOP_RUN, MICROSTOP_THRESHOLD
from ..utils.geometry import PolylineLike, as_array, segment_lengths
from ..utils.numeric import sanitize

logger = logging.getLogger(__name__)


def velocities(points: PolylineLike,
               timestamps: Optional[Sequence[float]] = None) -> list[float]:
    """Per-segment speed of a trajectory.

    Args:
        points: Ordered trajectory points.
        timestamps: Optional capture time per point, in seconds. Must have
            one entry per point to be used.

    Returns:
        One value per segment (``len(points) - 1``), empty for fewer than
        two points. With timestamps a segment whose time delta is not
        positive gets speed 0.
    """
    dists = segment_lengths(points)
    if len(dists) == 0:
        return []

    if timestamps is None:
        return [sanitize(float(d)) for d in dists]

    if len(timestamps) != len(dists) + 1:
        logger.debug("Ignoring %d timestamps for %d points",
                     len(timestamps), len(dists) + 1)
        return [sanitize(float(d)) for d in dists]

    dt = np.diff(np.asarray(timestamps, dtype=float))
    speeds = np.zeros_like(dists)
    positive = dt > 0
    speeds[positive] = dists[positive] / dt[positive]
    return [sanitize(v) for v in speeds]


def mean_speed(speeds: Sequence[float]) -> float:
    """Mean of absolute speeds; 0 for empty input."""
    if len(speeds) == 0:
        return 0.0
    return sanitize(float(np.mean(np.abs(speeds))))


def speed_std(speeds: Sequence[float]) -> float:
    """Sample standard deviation (n - 1 divisor); 0 below two samples."""
    if len(speeds) < 2:
        return 0.0
    return sanitize(float(np.std(np.asarray(speeds, dtype=float), ddof=1)))


def speed_cv(speeds: Sequence[float]) -> float:
    """Coefficient of variation of absolute speed; 0 when the mean is 0."""
    magnitudes = np.abs(np.asarray(speeds, dtype=float))
    m = mean_speed(magnitudes)
    if m == 0:
        return 0.0
    return sanitize(speed_std(magnitudes) / m)


def micro_stops(speeds: Sequence[float], thresh: float = MICROSTOP_THRESHOLD,
                run_len: int = MICROSTOP_RUN) -> int:
    """Count hesitation runs in a speed signal.

    Each block of ``run_len`` consecutive speeds below ``thresh`` counts
    once, and the run counter restarts after a count, so a long pause
    contributes one stop per ``run_len`` samples.

    Example:
        >>> micro_stops([0.1, 0.0, 0.2, 5.0, 5.0])
        1
        >>> micro_stops([0.0] * 6)
        2
    """
    count = 0
    run = 0
    for speed in speeds:
        if speed < thresh:
            run += 1
            if run == run_len:
                count += 1
                run = 0
        else:
            run = 0
    return count


def mean_jerk(speeds: Sequence[float]) -> float:
    """Mean absolute second difference of the speed signal.

    Speed is the first derivative of position, so its second difference
    approximates jerk. Needs at least three samples, else returns 0.
    """
    if len(speeds) < 3:
        return 0.0
    v = np.asarray(speeds, dtype=float)
    jerk = np.abs(np.diff(v, n=2))
    return sanitize(float(jerk.mean()))


@dataclass(frozen=True)
class KinematicSummary:
    """Summary statistics of one trajectory's speed signal."""
    speed_mean: float
    speed_cv: float
    jerk: float
    microstops: int


@dataclass(frozen=True)
class TrajectoryMetrics:
    """Speed-based fluency metrics with configurable micro-stop detection."""
    microstop_threshold: float = MICROSTOP_THRESHOLD
    microstop_run: int = MICROSTOP_RUN

    def velocities(self, points: PolylineLike,
                   timestamps: Optional[Sequence[float]] = None) -> list[float]:
        return velocities(points, timestamps)

    def summarize(self, points: PolylineLike,
                  timestamps: Optional[Sequence[float]] = None) -> KinematicSummary:
        """Compute every kinematic metric for one trajectory."""
        if len(as_array(points)) < 2:
            return KinematicSummary(0.0, 0.0, 0.0, 0)

        speeds = velocities(points, timestamps)
        magnitudes = [abs(v) for v in speeds]
        return KinematicSummary(
            speed_mean=mean_speed(magnitudes),
            speed_cv=speed_cv(magnitudes),
            jerk=mean_jerk(speeds),
            microstops=micro_stops(speeds, self.microstop_threshold,
                                   self.microstop_run),
        )
