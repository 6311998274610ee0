"""Augmented Vandermonde systems over the rationals."""

from typing import Sequence

from core.rational import Rational


class LinearSystem:
    """k x (k+1) augmented matrix; row i encodes sum_j a_j * x_i^j = y_i.

    Owned by the eliminator while it is being solved.
    """

    def __init__(self, rows: list[list[Rational]]):
        self.rows = rows

    @property
    def size(self) -> int:
        return len(self.rows)

    def __getitem__(self, index: int) -> list[Rational]:
        return self.rows[index]

    @staticmethod
    def build(points: Sequence[tuple[int, int]]) -> 'LinearSystem':
        """One row per (x, y): successive powers x^0..x^(k-1), then y."""
        k = len(points)
        rows = []
        for x, y in points:
            row = []
            xp = 1
            for _ in range(k):
                row.append(Rational(xp))
                xp *= x
            row.append(Rational(y))
            rows.append(row)
        return LinearSystem(rows)

    def pivot_row(self, col: int) -> int | None:
        """Lowest row index >= col with a non-zero entry in col."""
        for r in range(col, self.size):
            if not self.rows[r][col].is_zero():
                return r
        return None

    def swap_rows(self, i: int, j: int):
        self.rows[i], self.rows[j] = self.rows[j], self.rows[i]

    def solution(self) -> list[Rational]:
        """Augmented column; the solution once the matrix is in RREF."""
        k = self.size
        return [self.rows[i][k] for i in range(k)]

    def __repr__(self):
        body = '; '.join(' '.join(str(v) for v in row) for row in self.rows)
        return f"LinearSystem[{body}]"
