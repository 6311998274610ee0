"""Error taxonomy for reconstruction and consistency checking.

Every failure carries enough context for a caller to print a diagnostic
without recomputing anything.
"""


class ReconstructionError(Exception):
    """Base class for all reconstruction failures."""


class DivisionByZero(ReconstructionError, ZeroDivisionError):
    """Zero denominator or division by the zero fraction."""

    def __init__(self, message: str = "division by zero"):
        super().__init__(message)


class InvalidBase(ReconstructionError, ValueError):
    def __init__(self, base: int):
        self.base = base
        super().__init__(f"Base {base} not supported (expected 2..36)")


class InvalidDigit(ReconstructionError, ValueError):
    """A character does not map to a digit value in [0, base)."""

    def __init__(self, char: str, base: int, position: int, digits: str,
                 key: int | None = None):
        self.char = char
        self.base = base
        self.position = position
        self.digits = digits
        self.key = key
        super().__init__(self._message())

    def _message(self) -> str:
        where = f" (point {self.key})" if self.key is not None else ""
        return (f"Digit {self.char!r} at position {self.position} of "
                f"{self.digits!r} not valid for base {self.base}{where}")

    def with_key(self, key: int) -> 'InvalidDigit':
        return InvalidDigit(self.char, self.base, self.position, self.digits, key)


class InsufficientPoints(ReconstructionError):
    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(
            f"Not enough points provided: need k={required} but found {available}")


class SingularSystem(ReconstructionError):
    """No non-zero pivot in `column`; the chosen points admit no unique polynomial."""

    def __init__(self, column: int):
        self.column = column
        super().__init__(
            f"Matrix singular or no unique solution (pivot at column {column} is zero)")
