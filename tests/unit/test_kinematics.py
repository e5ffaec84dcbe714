"""Unit tests for ink_lib.analysis.kinematics.

Tests the speed-based fluency metrics:
    - velocities: With and without timestamps
    - mean_speed / speed_cv: Summary statistics
    - micro_stops: Run-length hesitation counting
    - mean_jerk: Discrete jerk of the speed signal
    - TrajectoryMetrics.summarize: Everything at once
"""

import math
import unittest

from ink_lib.analysis.kinematics import (
    KinematicSummary,
    TrajectoryMetrics,
    mean_jerk,
    mean_speed,
    micro_stops,
    speed_cv,
    speed_std,
    velocities,
)


class TestVelocities(unittest.TestCase):
    """Tests for velocities."""

    def test_distance_proxy_without_timestamps(self):
        pts = [(0, 0), (1, 0), (2, 0), (3, 0)]
        v = velocities(pts)
        self.assertEqual(len(v), len(pts) - 1)
        self.assertEqual(v, [1.0, 1.0, 1.0])

    def test_too_few_points(self):
        self.assertEqual(velocities([]), [])
        self.assertEqual(velocities([(5, 5)]), [])
        self.assertEqual(velocities([(5, 5)], [0.0]), [])

    def test_true_speed_with_timestamps(self):
        pts = [(0, 0), (3, 4), (6, 8)]
        self.assertEqual(velocities(pts, [0.0, 0.5, 1.0]), [10.0, 10.0])

    def test_non_positive_time_delta_gives_zero(self):
        pts = [(0, 0), (3, 4), (6, 8), (9, 12)]
        v = velocities(pts, [0.0, 0.0, 1.0, 0.5])
        self.assertEqual(v, [0.0, 5.0, 0.0])

    def test_mismatched_timestamps_fall_back_to_distance(self):
        pts = [(0, 0), (3, 4), (6, 8)]
        self.assertEqual(velocities(pts, [0.0, 1.0]), [5.0, 5.0])

    def test_all_non_negative(self):
        pts = [(0, 0), (-3, 4), (10, -2), (10, -2)]
        self.assertTrue(all(v >= 0 for v in velocities(pts)))

    def test_non_finite_points_give_finite_speeds(self):
        v = velocities([(0, 0), (math.nan, 0), (1, 0)])
        self.assertEqual(v, [0.0, 0.0])
        self.assertEqual(velocities([(0, 0), (math.inf, 0)]), [0.0])

    def test_non_finite_points_with_mismatched_timestamps(self):
        v = velocities([(0, 0), (math.nan, 0), (1, 0)], [0.0])
        self.assertTrue(all(math.isfinite(s) for s in v))
        self.assertEqual(len(v), 2)

    def test_summary_of_non_finite_trace_is_finite(self):
        summary = TrajectoryMetrics().summarize([(0, 0), (math.inf, 0), (2, 0), (3, 0)])
        for value in (summary.speed_mean, summary.speed_cv, summary.jerk):
            self.assertTrue(math.isfinite(value))


class TestSpeedStatistics(unittest.TestCase):
    """Tests for mean_speed, speed_std and speed_cv."""

    def test_mean_speed(self):
        self.assertAlmostEqual(mean_speed([1.0, 2.0, 3.0]), 2.0)

    def test_mean_speed_uses_absolute_values(self):
        self.assertAlmostEqual(mean_speed([-2.0, 2.0]), 2.0)

    def test_mean_speed_empty(self):
        self.assertEqual(mean_speed([]), 0.0)

    def test_sample_std_uses_n_minus_one(self):
        self.assertAlmostEqual(speed_std([1.0, 3.0]), math.sqrt(2))

    def test_std_single_sample_zero(self):
        self.assertEqual(speed_std([4.0]), 0.0)

    def test_cv_of_constant_speed_is_zero(self):
        self.assertEqual(speed_cv([5.0, 5.0, 5.0, 5.0]), 0.0)

    def test_cv_known_value(self):
        self.assertAlmostEqual(speed_cv([1.0, 3.0]), math.sqrt(2) / 2)

    def test_cv_zero_mean_is_zero_not_nan(self):
        self.assertEqual(speed_cv([0.0, 0.0, 0.0]), 0.0)
        self.assertEqual(speed_cv([]), 0.0)


class TestMicroStops(unittest.TestCase):
    """Tests for micro_stops."""

    def test_constant_high_speed_has_none(self):
        self.assertEqual(micro_stops([5.0] * 10), 0)

    def test_single_pause_then_motion(self):
        self.assertEqual(micro_stops([0.1, 0.0, 0.2, 5.0, 5.0, 5.0]), 1)

    def test_long_pause_counts_per_block(self):
        self.assertEqual(micro_stops([0.0] * 6), 2)
        self.assertEqual(micro_stops([0.0] * 8), 2)
        self.assertEqual(micro_stops([0.0] * 9), 3)

    def test_short_pauses_do_not_count(self):
        self.assertEqual(micro_stops([0.0, 0.0, 1.0, 0.0, 0.0, 1.0]), 0)

    def test_threshold_is_strict(self):
        self.assertEqual(micro_stops([0.5, 0.5, 0.5]), 0)

    def test_custom_threshold_and_run(self):
        self.assertEqual(micro_stops([1.0, 1.0], thresh=2.0, run_len=2), 1)

    def test_empty(self):
        self.assertEqual(micro_stops([]), 0)


class TestMeanJerk(unittest.TestCase):
    """Tests for mean_jerk."""

    def test_constant_velocity_zero(self):
        self.assertEqual(mean_jerk([3.0, 3.0, 3.0, 3.0]), 0.0)

    def test_constant_acceleration_zero(self):
        self.assertAlmostEqual(mean_jerk([1.0, 2.0, 3.0, 4.0]), 0.0)

    def test_known_value(self):
        # Second differences: (4-1)-(1-0)=2, (9-4)-(4-1)=2
        self.assertAlmostEqual(mean_jerk([0.0, 1.0, 4.0, 9.0]), 2.0)

    def test_absolute_values(self):
        # Second differences: 2, -2
        self.assertAlmostEqual(mean_jerk([0.0, 1.0, 4.0, 5.0]), 2.0)

    def test_fewer_than_three_samples(self):
        self.assertEqual(mean_jerk([]), 0.0)
        self.assertEqual(mean_jerk([1.0, 9.0]), 0.0)


class TestTrajectoryMetrics(unittest.TestCase):
    """Tests for TrajectoryMetrics.summarize."""

    def test_constant_speed_trace(self):
        pts = [(float(x), 0.0) for x in range(0, 40, 2)]
        summary = TrajectoryMetrics().summarize(pts)
        self.assertIsInstance(summary, KinematicSummary)
        self.assertAlmostEqual(summary.speed_mean, 2.0)
        self.assertAlmostEqual(summary.speed_cv, 0.0)
        self.assertAlmostEqual(summary.jerk, 0.0)
        self.assertEqual(summary.microstops, 0)

    def test_timed_trace(self):
        pts = [(0, 0), (10, 0), (20, 0), (30, 0)]
        times = [0.0, 0.5, 1.0, 1.5]
        summary = TrajectoryMetrics().summarize(pts, times)
        self.assertAlmostEqual(summary.speed_mean, 20.0)
        self.assertAlmostEqual(summary.speed_cv, 0.0)

    def test_hesitation_detected(self):
        pts = [(0, 0), (0.1, 0), (0.2, 0), (0.3, 0), (10, 0), (20, 0)]
        self.assertEqual(TrajectoryMetrics().summarize(pts).microstops, 1)

    def test_single_point_is_all_zero(self):
        self.assertEqual(TrajectoryMetrics().summarize([(1, 1)]),
                         KinematicSummary(0.0, 0.0, 0.0, 0))

    def test_configured_microstop_threshold(self):
        pts = [(0, 0), (1, 0), (2, 0), (3, 0)]
        self.assertEqual(TrajectoryMetrics(microstop_threshold=2.0).summarize(pts).microstops, 1)


if __name__ == '__main__':
    unittest.main()
