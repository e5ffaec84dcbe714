"""Unit tests for ink_lib.scoring.engine."""

import math
import unittest

from ink_lib.config import PLACEHOLDER_SUBSCORE
from ink_lib.domain import CanvasSize, Metrics, Point, Stroke, StrokeSample
from ink_lib.scoring.engine import DefaultScoring, ScoringEngine
from ink_lib.templates import LINES_LONG_01, LOOPS_01

CANVAS = CanvasSize(212, 212)


def line_stroke(step=2.0, dt=0.01):
    pts = []
    x = 16.0
    while x <= 196.0:
        pts.append(Point(x, 106.0))
        x += step
    return Stroke.from_points(pts, [i * dt for i in range(len(pts))])


class TestDefaultScoring(unittest.TestCase):
    """Tests for DefaultScoring.compute_metrics."""

    def test_no_strokes_gives_default(self):
        self.assertEqual(DefaultScoring().compute_metrics([], LINES_LONG_01, CANVAS),
                         Metrics.default())

    def test_empty_strokes_give_default(self):
        metrics = DefaultScoring().compute_metrics([Stroke(), Stroke()], LINES_LONG_01, CANVAS)
        self.assertEqual(metrics, Metrics.default())

    def test_default_metrics_values(self):
        m = Metrics.default()
        self.assertEqual(m.precision, 0.0)
        self.assertEqual(m.speed_mean, 0.0)
        self.assertEqual(m.fluency_jerk, 0.0)
        self.assertEqual(m.microstops, 0)
        for value in (m.consistency, m.spacing, m.baseline, m.planning):
            self.assertEqual(value, PLACEHOLDER_SUBSCORE)

    def test_invalid_canvas_gives_default(self):
        metrics = DefaultScoring().compute_metrics([line_stroke()], LINES_LONG_01, (0, 212))
        self.assertEqual(metrics, Metrics.default())

    def test_exact_trace(self):
        stroke = Stroke.from_points([Point(16, 106), Point(196, 106)], [0.0, 1.0])
        metrics = DefaultScoring().compute_metrics([stroke], LINES_LONG_01, CANVAS)
        self.assertGreaterEqual(metrics.precision, 0.9)
        self.assertAlmostEqual(metrics.speed_mean, 180.0)
        self.assertAlmostEqual(metrics.speed_cv, 0.0)
        self.assertAlmostEqual(metrics.fluency_jerk, 0.0)
        self.assertEqual(metrics.microstops, 0)

    def test_constant_speed_timed_trace(self):
        metrics = DefaultScoring().compute_metrics([line_stroke()], LINES_LONG_01, CANVAS)
        self.assertAlmostEqual(metrics.speed_mean, 200.0, places=6)
        self.assertAlmostEqual(metrics.speed_cv, 0.0, places=6)
        self.assertAlmostEqual(metrics.fluency_jerk, 0.0, places=3)
        self.assertEqual(metrics.microstops, 0)

    def test_untimed_samples_use_distance_proxy(self):
        stroke = Stroke([StrokeSample(float(x), 106.0) for x in range(16, 197, 2)])
        metrics = DefaultScoring().compute_metrics([stroke], LINES_LONG_01, CANVAS)
        self.assertAlmostEqual(metrics.speed_mean, 2.0)

    def test_strokes_flattened_in_order(self):
        first = Stroke.from_points([Point(16, 106), Point(106, 106)], [0.0, 0.5])
        second = Stroke.from_points([Point(106, 106), Point(196, 106)], [0.6, 1.1])
        metrics = DefaultScoring().compute_metrics([first, second], LINES_LONG_01, CANVAS)
        self.assertGreater(metrics.precision, 0.5)

    def test_single_point_stroke(self):
        stroke = Stroke([StrokeSample(106.0, 106.0, 0.0)])
        metrics = DefaultScoring().compute_metrics([stroke], LOOPS_01, CANVAS)
        self.assertTrue(math.isfinite(metrics.precision))
        self.assertLess(metrics.precision, 0.5)
        self.assertEqual(metrics.speed_mean, 0.0)

    def test_values_in_range(self):
        stroke = Stroke.from_points([Point(5, 300), Point(5, 300), Point(-40, 12)], [0.0, 0.0, -1.0])
        m = DefaultScoring().compute_metrics([stroke], LOOPS_01, CANVAS)
        self.assertTrue(0.0 <= m.precision <= 1.0)
        self.assertGreaterEqual(m.speed_mean, 0.0)
        self.assertGreaterEqual(m.speed_cv, 0.0)
        self.assertGreaterEqual(m.fluency_jerk, 0.0)
        self.assertGreaterEqual(m.microstops, 0)

    def test_points_entry_point(self):
        engine = DefaultScoring()
        m = engine.compute_metrics_for_points([(16, 106), (196, 106)], LINES_LONG_01, CANVAS)
        self.assertGreaterEqual(m.precision, 0.9)
        self.assertEqual(engine.compute_metrics_for_points([], LINES_LONG_01, CANVAS),
                         Metrics.default())


class TestScoringEngineInterface(unittest.TestCase):
    """Tests for the ScoringEngine abstraction."""

    def test_cannot_instantiate_abstract(self):
        with self.assertRaises(TypeError):
            ScoringEngine()

    def test_custom_engine(self):
        class FixedEngine(ScoringEngine):
            def compute_metrics(self, strokes, template, canvas_size):
                return Metrics(precision=0.42)

        self.assertEqual(FixedEngine().compute_metrics([], LOOPS_01, CANVAS).precision, 0.42)


class TestMetrics(unittest.TestCase):
    """Tests for the Metrics value object."""

    def test_dict_round_trip(self):
        m = Metrics(precision=0.8, speed_mean=12.5, speed_cv=0.1, fluency_jerk=0.3, microstops=2)
        self.assertEqual(Metrics.from_dict(m.to_dict()), m)

    def test_immutable(self):
        m = Metrics.default()
        with self.assertRaises(AttributeError):
            m.precision = 1.0


if __name__ == '__main__':
    unittest.main()
