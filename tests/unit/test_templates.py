"""Unit tests for ink_lib.templates and the Template value object."""

import unittest

from ink_lib.domain import Line, Point, Template, TemplateLayout
from ink_lib.templates import (
    CURVES_ARC_01,
    DEMO_TEMPLATES,
    LINES_LONG_01,
    LOOPS_01,
    TemplateRepository,
)


class TestCatalog(unittest.TestCase):
    """Tests for the built-in templates."""

    def test_ids(self):
        self.assertEqual([t.id for t in DEMO_TEMPLATES], [
            'pattern/curves.arc.01', 'pattern/lines.long.01', 'pattern/loops.01',
        ])

    def test_line_template(self):
        self.assertEqual(LINES_LONG_01.polyline, (Point(0, 0), Point(180, 0)))
        self.assertEqual(LINES_LONG_01.tolerance, 10)
        self.assertEqual(LINES_LONG_01.time_ms, 6000)

    def test_loops_template(self):
        self.assertEqual(len(LOOPS_01.polyline), 9)
        self.assertEqual(LOOPS_01.bbox.height, 60)

    def test_baseline(self):
        self.assertEqual(CURVES_ARC_01.baseline, Line(Point(0, 0), Point(160, 0)))
        self.assertEqual(CURVES_ARC_01.baseline.length, 160)


class TestTemplate(unittest.TestCase):
    """Tests for Template."""

    def test_list_polyline_stored_as_tuple(self):
        t = Template(id='x', polyline=[Point(0, 0), Point(1, 1)])
        self.assertIsInstance(t.polyline, tuple)
        hash(t)

    def test_pair_polyline_converted_to_points(self):
        t = Template(id='x', polyline=[(0, 0), (10, 5)])
        self.assertEqual(t.polyline, (Point(0, 0), Point(10, 5)))
        self.assertEqual(t.bbox.width, 10)
        self.assertEqual(t.to_dict()['polyline'], [[0.0, 0.0], [10.0, 5.0]])

    def test_no_baseline_by_default(self):
        self.assertIsNone(Template(id='x', polyline=()).baseline)

    def test_from_dict(self):
        t = Template.from_dict({
            'id': 'glyph/a', 'type': 'glyph',
            'polyline': [[0, 0], [10, 20]],
            'layout': {'baseline': {'start': [0, 0], 'end': [10, 0]},
                       'no_go_rects': [[0, 0, 5, 5]], 'target_gaps': [4]},
            'tolerance': 8, 'time_ms': 5000,
        })
        self.assertEqual(t.polyline, (Point(0, 0), Point(10, 20)))
        self.assertEqual(t.type, 'glyph')
        self.assertEqual(t.layout.target_gaps, (4.0,))
        self.assertEqual(t.layout.no_go_rects[0].width, 5)

    def test_dict_round_trip(self):
        self.assertEqual(Template.from_dict(LOOPS_01.to_dict()), LOOPS_01)


class TestTemplateRepository(unittest.TestCase):
    """Tests for TemplateRepository."""

    def test_with_defaults(self):
        repo = TemplateRepository.with_defaults()
        self.assertEqual(len(repo), 3)
        self.assertEqual(repo.list_ids()[1], 'pattern/lines.long.01')

    def test_by_id(self):
        repo = TemplateRepository.with_defaults()
        self.assertIs(repo.by_id('pattern/loops.01'), LOOPS_01)

    def test_unknown_id_falls_back(self):
        repo = TemplateRepository.with_defaults()
        self.assertIs(repo.by_id('word/unknown'), CURVES_ARC_01)

    def test_get_returns_none(self):
        self.assertIsNone(TemplateRepository().get('pattern/loops.01'))

    def test_register_replaces(self):
        repo = TemplateRepository.with_defaults()
        replacement = Template(id='pattern/loops.01', polyline=(Point(0, 0),))
        repo.register(replacement)
        self.assertIs(repo.get('pattern/loops.01'), replacement)
        self.assertEqual(len(repo), 3)

    def test_contains(self):
        repo = TemplateRepository.with_defaults()
        self.assertIn('pattern/curves.arc.01', repo)
        self.assertNotIn('nope', repo)

    def test_from_dict_uses_first_as_default(self):
        repo = TemplateRepository.from_dict([
            {'id': 'a', 'polyline': [[0, 0], [1, 0]]},
            {'id': 'b', 'polyline': [[0, 0], [0, 1]]},
        ])
        self.assertEqual(repo.by_id('missing').id, 'a')
        self.assertEqual(repo.list_ids(), ['a', 'b'])

    def test_from_empty_dict(self):
        repo = TemplateRepository.from_dict([])
        self.assertEqual(len(repo), 0)
        self.assertIs(repo.by_id('x'), CURVES_ARC_01)

    def test_layout_default(self):
        self.assertEqual(TemplateLayout().no_go_rects, ())


if __name__ == '__main__':
    unittest.main()
