"""Share-like dataset generation for exercising the consistency checker.

Shares are evaluations of a known integer polynomial at the given keys,
encoded in a chosen base. Tampered keys get a non-zero offset added, so the
checker must report exactly those keys (provided they are not among the
first k keys, which define the reconstructed polynomial).
"""

from typing import Iterable, Sequence

from core import rng
from core.polynomial import Polynomial
from core.radix import encode


def make_shares(poly: Polynomial, xs: Iterable[int]) -> dict[int, int]:
    """Evaluate poly at each key. Integer polynomials only."""
    return {x: poly.evaluate(x).to_int() for x in xs}


def tamper(shares: dict[int, int], keys: Iterable[int], bound: int = 1000) -> dict[int, int]:
    """Copy of shares with a random non-zero offset added at each key."""
    result = dict(shares)
    for x in keys:
        if x not in result:
            raise KeyError(f"Cannot tamper with missing point {x}")
        offset = rng.randbelow(bound) + 1
        # stay non-negative so the value can still be encoded
        if result[x] - offset >= 0 and rng.randbelow(2):
            offset = -offset
        result[x] += offset
    return result


def generate_dataset(poly: Polynomial, xs: Sequence[int], base: int = 10,
                     tampered: Iterable[int] = (), seed: int | None = None) -> dict:
    """JSON-ready dataset document in the ingestion format."""
    if seed is not None:
        rng.set_seed(seed)
    shares = tamper(make_shares(poly, xs), tampered)
    doc: dict = {"keys": {"n": len(shares), "k": poly.degree + 1}}
    for x in sorted(shares):
        doc[str(x)] = {"base": str(base), "value": encode(shares[x], base)}
    return doc
