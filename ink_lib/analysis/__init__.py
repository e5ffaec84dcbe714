"""Trajectory analysis module.

This module provides the algorithms the scoring layer is built from:

    GeometryMapper / map_to_canvas: Place a template polyline onto a
        canvas, preserving aspect ratio.
    TrajectoryMetrics: Speed, speed variability, jerk and micro-stops.
    SequenceAligner: DTW and discrete Frechet distances.

Example usage::

    from ink_lib.analysis import SequenceAligner, map_to_canvas

    mapped = map_to_canvas(template.polyline, (400, 300))
    result = SequenceAligner().align(user_points, mapped)
"""

from .alignment import SequenceAligner, dtw_distance, frechet_distance
from .kinematics import (
    KinematicSummary,
    TrajectoryMetrics,
    mean_jerk,
    mean_speed,
    micro_stops,
    speed_cv,
    velocities,
)
from .mapping import GeometryMapper, map_to_canvas, map_to_canvas_array

__all__ = [
    'GeometryMapper', 'map_to_canvas', 'map_to_canvas_array',
    'TrajectoryMetrics', 'KinematicSummary',
    'velocities', 'mean_speed', 'speed_cv', 'micro_stops', 'mean_jerk',
    'SequenceAligner', 'dtw_distance', 'frechet_distance',
]
