"""Point selection and the solve/check pipeline.

The first k points by ascending key define the polynomial; every supplied
point, those k included, is then checked against it. Selection never looks
at the values.
"""

import logging
from typing import Mapping

from core.elimination import solve
from core.errors import InsufficientPoints
from core.linear_system import LinearSystem
from core.polynomial import Polynomial
from sim.metrics import SolveMetrics

logger = logging.getLogger(__name__)


def select_points(points: Mapping[int, int], k: int) -> list[tuple[int, int]]:
    if k < 1:
        raise ValueError(f"k must be > 0, got {k}")
    if len(points) < k:
        raise InsufficientPoints(required=k, available=len(points))
    return sorted(points.items())[:k]


def reconstruct(points: Mapping[int, int], k: int,
                metrics: SolveMetrics | None = None) -> Polynomial:
    """Interpolate the degree k-1 polynomial through the first k points."""
    chosen = select_points(points, k)
    logger.debug("interpolating through x = %s", [x for x, _ in chosen])
    return Polynomial(solve(LinearSystem.build(chosen), metrics))


def find_inconsistent(points: Mapping[int, int], k: int,
                      metrics: SolveMetrics | None = None) -> tuple[Polynomial, set[int]]:
    poly = reconstruct(points, k, metrics)
    wrong = poly.check_all(points)
    if metrics is not None:
        metrics.points_checked += len(points)
    logger.debug("%d of %d points inconsistent", len(wrong), len(points))
    return poly, wrong
