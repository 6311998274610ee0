"""Polynomials with exact rational coefficients: evaluation and consistency checks."""

from typing import Iterable, Mapping, Sequence

from core import rng
from core.rational import Rational


def _as_rational(value) -> Rational:
    return value if isinstance(value, Rational) else Rational(value)


def evaluate(coefficients: Sequence[Rational], x) -> Rational:
    """sum_j coefficients[j] * x^j using successive exact powers of x."""
    x = _as_rational(x)
    result = Rational.zero()
    xp = Rational.one()
    for coeff in coefficients:
        result = result + coeff * xp
        xp = xp * x
    return result


def check_all(coefficients: Sequence[Rational],
              points: Mapping[int, int] | Iterable[tuple[int, int]]) -> set[int]:
    """Keys x whose given y differs from the polynomial value at x.

    The empty set means every point lies on the polynomial.
    """
    items = points.items() if isinstance(points, Mapping) else points
    return {x for x, y in items if not evaluate(coefficients, x).equals_int(y)}


class Polynomial:
    """Polynomial over Q. coeffs[0] = constant term."""

    __slots__ = ('_coeffs',)

    def __init__(self, coeffs: Sequence[Rational | int]):
        self._coeffs = tuple(_as_rational(c) for c in coeffs)

    @property
    def coeffs(self) -> tuple[Rational, ...]:
        return self._coeffs

    @property
    def degree(self) -> int:
        return len(self._coeffs) - 1

    def evaluate(self, x) -> Rational:
        return evaluate(self._coeffs, x)

    def __call__(self, x) -> Rational:
        return self.evaluate(x)

    def check_all(self, points) -> set[int]:
        return check_all(self._coeffs, points)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._coeffs == other._coeffs

    def __hash__(self):
        return hash(self._coeffs)

    def __str__(self):
        terms = []
        for i, c in enumerate(self._coeffs):
            if i == 0:
                terms.append(str(c))
            elif i == 1:
                terms.append(f"{c}*x")
            else:
                terms.append(f"{c}*x^{i}")
        return " + ".join(terms)

    def __repr__(self):
        return f"Polynomial({list(self._coeffs)!r})"

    @staticmethod
    def random(degree: int, constant: int, bound: int = 1000) -> 'Polynomial':
        """Random integer polynomial of given degree with p(0) = constant.

        Higher coefficients are drawn from [1, bound], so the leading one is non-zero.
        """
        coeffs = [constant]
        for _ in range(degree):
            coeffs.append(rng.randbelow(bound) + 1)
        return Polynomial(coeffs)
