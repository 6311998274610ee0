"""Gauss-Jordan elimination over the rationals.

Pivoting takes the first non-zero entry at or below the diagonal, so the
sequence of row operations is fully determined by the input. Zero tests are
exact; there is no tolerance anywhere.
"""

import logging

from core.errors import SingularSystem
from core.linear_system import LinearSystem
from core.rational import Rational
from sim.metrics import SolveMetrics

logger = logging.getLogger(__name__)


def solve(system: LinearSystem, metrics: SolveMetrics | None = None) -> list[Rational]:
    """Reduce `system` in place to RREF and return coefficients a_0..a_{k-1}.

    Raises SingularSystem(col) when column col has no usable pivot.
    """
    k = system.size
    if metrics is not None:
        metrics.start()
    for col in range(k):
        pivot = system.pivot_row(col)
        if pivot is None:
            logger.debug("no pivot in column %d", col)
            raise SingularSystem(col)
        if pivot != col:
            system.swap_rows(pivot, col)
            if metrics is not None:
                metrics.row_swaps += 1

        # normalize pivot row
        pivot_row = system[col]
        pivot_val = pivot_row[col]
        for j in range(col, k + 1):
            pivot_row[j] = pivot_row[j] / pivot_val

        for r in range(k):
            if r == col:
                continue
            row = system[r]
            factor = row[col]
            if factor.is_zero():
                continue
            for j in range(col, k + 1):
                row[j] = row[j] - factor * pivot_row[j]
            if metrics is not None:
                metrics.row_eliminations += 1
        logger.debug("column %d: pivot row %d, pivot %s", col, pivot, pivot_val)

    if metrics is not None:
        metrics.stop()
    return system.solution()
