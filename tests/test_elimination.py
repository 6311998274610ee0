"""Tests for exact Gauss-Jordan elimination."""

import pytest

from core import rng
from core.elimination import solve
from core.errors import SingularSystem
from core.linear_system import LinearSystem
from core.polynomial import Polynomial
from core.rational import Rational
from sim.metrics import SolveMetrics
from tests.utils import points_on


def test_solve_quadratic():
    coeffs = solve(LinearSystem.build([(1, 4), (2, 7), (3, 12)]))
    assert coeffs == [3, 0, 1]


def test_solve_linear():
    assert solve(LinearSystem.build([(1, 5), (2, 7)])) == [3, 2]


def test_solve_constant():
    assert solve(LinearSystem.build([(4, 42)])) == [42]


def test_solve_rational_coefficients():
    # y = x^2 / 2 + x / 2 (triangular numbers)
    coeffs = solve(LinearSystem.build([(1, 1), (2, 3), (3, 6)]))
    assert coeffs == [0, Rational(1, 2), Rational(1, 2)]


def test_recovers_known_polynomial():
    expected = [7, -3, 0, 5, 2]
    pts = sorted(points_on(expected, [1, 3, 4, 8, 11]).items())
    assert solve(LinearSystem.build(pts)) == expected


def test_recovers_random_polynomials():
    rng.set_seed(42)
    for degree in range(6):
        poly = Polynomial.random(degree=degree, constant=rng.randbelow(10 ** 9))
        xs = range(2, degree + 3)
        pts = [(x, poly.evaluate(x).to_int()) for x in xs]
        assert solve(LinearSystem.build(pts)) == list(poly.coeffs)


def test_large_keys_and_values_exact():
    expected = [36 ** 30, 1, 36 ** 10]
    pts = sorted(points_on(expected, [10 ** 5, 10 ** 5 + 7, 10 ** 6]).items())
    assert solve(LinearSystem.build(pts)) == expected


def test_duplicate_x_is_singular():
    system = LinearSystem.build([(2, 5), (2, 9), (3, 1)])
    with pytest.raises(SingularSystem) as exc:
        solve(system)
    assert exc.value.column == 2


def test_duplicate_x_same_y_still_singular():
    with pytest.raises(SingularSystem):
        solve(LinearSystem.build([(4, 1), (4, 1)]))


def test_zero_pivot_needs_swap():
    # column 0 of the first row is zero, so the second row is swapped up
    system = LinearSystem([
        [Rational(0), Rational(1), Rational(2)],
        [Rational(1), Rational(0), Rational(3)],
    ])
    metrics = SolveMetrics()
    assert solve(system, metrics) == [3, 2]
    assert metrics.row_swaps == 1


def test_first_nonzero_pivot_taken():
    system = LinearSystem([
        [Rational(0), Rational(1), Rational(0), Rational(1)],
        [Rational(2), Rational(0), Rational(0), Rational(2)],
        [Rational(5), Rational(0), Rational(1), Rational(8)],
    ])
    solve(system)
    # row originally at index 1 is the column 0 pivot and stays first
    assert system.solution() == [1, 1, 3]
    assert system[0] == [1, 0, 0, 1]


def test_metrics_counts():
    metrics = SolveMetrics()
    solve(LinearSystem.build([(1, 4), (2, 7), (3, 12)]), metrics)
    assert metrics.row_swaps == 0
    assert metrics.row_eliminations > 0
    assert metrics.elapsed >= 0.0
    stats = metrics.summary()
    assert stats["row_eliminations"] == metrics.row_eliminations
    assert stats["points_checked"] == 0


def test_reduces_to_identity():
    system = LinearSystem.build([(1, 1), (2, 8), (3, 27), (4, 64)])
    solve(system)
    for i in range(4):
        for j in range(4):
            assert system[i][j] == (1 if i == j else 0)
