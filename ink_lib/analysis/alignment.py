"""Sequence alignment distances between two trajectories.

Two complementary dissimilarity measures are provided:

    dtw_distance: Dynamic Time Warping. Sums point-to-point costs along
        the cheapest monotone alignment and divides by ``len(a) + len(b)``,
        giving an average cost per aligned step. Tolerant of differing
        sampling rates and drawing speeds. Not symmetric in general.

    frechet_distance: Discrete Frechet distance. The smallest possible
        worst-case point-to-point distance over all monotone alignments
        (the "leash length"). Symmetric.

Both return MAX_DISTANCE when either input is empty or the computation
produces a non-finite value.

Example usage::

    from ink_lib.analysis.alignment import SequenceAligner

    result = SequenceAligner().align(user_points, template_points)
    print(result.dtw, result.frechet)
"""

from __future__ import annotations

import numpy as np
from scipy.spatial.distance import cdist

from ..config import MAX_DISTANCE
from ..domain.metrics import AlignmentResult
from ..utils.geometry import PolylineLike, as_array
from ..utils.numeric import sanitize


def _cost_matrix(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Euclidean distance between every point of a and every point of b."""
    return cdist(a, b, metric='euclidean')


def dtw_distance(a: PolylineLike, b: PolylineLike) -> float:
    """Path-length-normalized DTW cost between two polylines.

    Args:
        a: First polyline.
        b: Second polyline.

    Returns:
        ``dp[n][m] / (n + m)`` where ``dp`` is the accumulated cost
        matrix, or MAX_DISTANCE for empty or invalid input.
    """
    arr_a = as_array(a)
    arr_b = as_array(b)
    n, m = len(arr_a), len(arr_b)
    if n == 0 or m == 0:
        return MAX_DISTANCE

    cost = _cost_matrix(arr_a, arr_b).tolist()

    # Infinite borders force the alignment to start at (0, 0)
    prev = [0.0] + [np.inf] * m
    for i in range(1, n + 1):
        row = cost[i - 1]
        cur = [np.inf] * (m + 1)
        for j in range(1, m + 1):
            cur[j] = row[j - 1] + min(prev[j], cur[j - 1], prev[j - 1])
        prev = cur

    return sanitize(prev[m] / (n + m), default=MAX_DISTANCE)


def frechet_distance(a: PolylineLike, b: PolylineLike) -> float:
    """Discrete Frechet distance between two polylines.

    Filled bottom-up so stack depth stays constant for long inputs.

    Returns:
        The coupling distance, or MAX_DISTANCE for empty or invalid input.
    """
    arr_a = as_array(a)
    arr_b = as_array(b)
    n, m = len(arr_a), len(arr_b)
    if n == 0 or m == 0:
        return MAX_DISTANCE

    d = _cost_matrix(arr_a, arr_b).tolist()

    # First row: only moves along b are possible
    prev = [0.0] * m
    prev[0] = d[0][0]
    for j in range(1, m):
        prev[j] = max(prev[j - 1], d[0][j])

    for i in range(1, n):
        row = d[i]
        cur = [0.0] * m
        cur[0] = max(prev[0], row[0])
        for j in range(1, m):
            cur[j] = max(min(prev[j], prev[j - 1], cur[j - 1]), row[j])
        prev = cur

    return sanitize(float(prev[m - 1]), default=MAX_DISTANCE)


class SequenceAligner:
    """Computes DTW and Frechet distances between two polylines."""

    def dtw(self, a: PolylineLike, b: PolylineLike) -> float:
        return dtw_distance(a, b)

    def frechet(self, a: PolylineLike, b: PolylineLike) -> float:
        return frechet_distance(a, b)

    def align(self, a: PolylineLike, b: PolylineLike) -> AlignmentResult:
        """Both distances at once."""
        return AlignmentResult(dtw=dtw_distance(a, b), frechet=frechet_distance(a, b))
