"""Test utilities: sample datasets, polynomial point helpers."""

import json

from core.polynomial import Polynomial

# Share dataset whose points all lie on x^2 + 3.
SAMPLE_DOCUMENT = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},
}


def sample_json(extra: dict | None = None) -> str:
    doc = dict(SAMPLE_DOCUMENT)
    doc.update(extra or {})
    return json.dumps(doc)


def points_on(coeffs, xs) -> dict[int, int]:
    """{x: p(x)} for an integer-valued polynomial."""
    poly = Polynomial(coeffs)
    return {x: poly.evaluate(x).to_int() for x in xs}
