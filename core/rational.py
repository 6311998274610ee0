"""Exact rational arithmetic over arbitrary-precision integers."""

from math import gcd

from core.errors import DivisionByZero


class Rational:
    """Fraction kept in lowest terms with a positive denominator."""

    __slots__ = ('num', 'den')

    def __init__(self, numerator: int, denominator: int = 1):
        if denominator == 0:
            raise DivisionByZero("Denominator zero")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        g = gcd(numerator, denominator)
        if g != 1:
            numerator //= g
            denominator //= g
        object.__setattr__(self, 'num', numerator)
        object.__setattr__(self, 'den', denominator)

    def __setattr__(self, name, value):
        raise AttributeError("Rational is immutable")

    @staticmethod
    def _coerce(other):
        if isinstance(other, Rational):
            return other
        if isinstance(other, int):
            return Rational(other)
        return None

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Rational(self.num * other.den + other.num * self.den,
                        self.den * other.den)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Rational(self.num * other.den - other.num * self.den,
                        self.den * other.den)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Rational(self.num * other.num, self.den * other.den)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if other.is_zero():
            raise DivisionByZero("Divide by zero fraction")
        return Rational(self.num * other.den, self.den * other.num)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other / self

    def __neg__(self):
        return Rational(-self.num, self.den)

    def _cross(self, other):
        """(lhs, rhs) such that self ? other  <=>  lhs ? rhs."""
        return self.num * other.den, other.num * self.den

    def __eq__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.num == other.num and self.den == other.den

    def __lt__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        lhs, rhs = self._cross(other)
        return lhs < rhs

    def __le__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        lhs, rhs = self._cross(other)
        return lhs <= rhs

    def __gt__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        lhs, rhs = self._cross(other)
        return lhs > rhs

    def __ge__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        lhs, rhs = self._cross(other)
        return lhs >= rhs

    def __hash__(self):
        if self.den == 1:
            return hash(self.num)
        return hash((self.num, self.den))

    def __bool__(self):
        return self.num != 0

    def __str__(self):
        if self.den == 1:
            return str(self.num)
        return f"{self.num}/{self.den}"

    def __repr__(self):
        return f"Q({self})"

    def is_zero(self) -> bool:
        return self.num == 0

    def equals_int(self, value: int) -> bool:
        """Exact comparison with an integer by cross multiplication."""
        return self.num == value * self.den

    def to_int(self) -> int:
        if self.den != 1:
            raise ValueError(f"{self} is not an integer")
        return self.num

    @staticmethod
    def parse(text: str) -> 'Rational':
        """Parse "n" or "n/d" as printed by str()."""
        num, sep, den = text.strip().partition('/')
        if sep:
            return Rational(int(num), int(den))
        return Rational(int(num))

    @staticmethod
    def zero():
        return Rational(0)

    @staticmethod
    def one():
        return Rational(1)
