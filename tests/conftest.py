"""Shared pytest fixtures for the ink_lib test suite.

Fixtures:
    canvas: Standard 212x212 canvas, which maps the long line template
        onto x 16..196 at y 106 with scale 1
    line_template: Straight horizontal template [(0, 0), (180, 0)]
    mapped_line: The line template placed on the standard canvas
    dense_mapped_line: Points every 2 units along the placed line
    timed_strokes: One stroke tracing the placed line at constant speed

Markers:
    slow: Mark test as slow-running (skip with -m "not slow")
    integration: Mark test as integration test
"""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from ink_lib.domain import CanvasSize, Point, Stroke, Template  # noqa: E402


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow-running (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


@pytest.fixture
def canvas():
    return CanvasSize(212, 212)


@pytest.fixture
def line_template():
    return Template(id='pattern/lines.long.01', polyline=(Point(0, 0), Point(180, 0)),
                    tolerance=10, time_ms=6000)


@pytest.fixture
def mapped_line():
    return [Point(16, 106), Point(196, 106)]


@pytest.fixture
def dense_mapped_line():
    return [Point(float(x), 106.0) for x in range(16, 197, 2)]


@pytest.fixture
def timed_strokes(dense_mapped_line):
    timestamps = [i * 0.01 for i in range(len(dense_mapped_line))]
    return [Stroke.from_points(dense_mapped_line, timestamps)]
