"""Ingestion models for share datasets.

A dataset document maps decimal keys to encoded share values plus a "keys"
block carrying the threshold k (and optionally n):

    {"keys": {"n": 4, "k": 3},
     "1": {"base": "10", "value": "4"},
     "2": {"base": "2", "value": "111"}}
"""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core.errors import InvalidDigit
from core.radix import decode

logger = logging.getLogger(__name__)


class DatasetError(ValueError):
    """Malformed dataset document."""


class ShareEntry(BaseModel):
    """One encoded point value."""

    model_config = ConfigDict(frozen=True)

    base: int
    value: str = Field(..., min_length=1)

    @field_validator("value")
    @classmethod
    def strip_value(cls, v: str) -> str:
        return v.strip()

    def decode(self, key: int | None = None) -> int:
        try:
            return decode(self.value, self.base)
        except InvalidDigit as e:
            if key is None:
                raise
            raise e.with_key(key) from e


class DatasetKeys(BaseModel):
    model_config = ConfigDict(frozen=True)

    n: int | None = Field(default=None, ge=0)
    k: int = Field(..., gt=0)


class Dataset(BaseModel):
    """Decoded points keyed by x, in ascending key order."""

    model_config = ConfigDict(frozen=True)

    k: int = Field(..., gt=0)
    n: int | None = None
    points: dict[int, int]

    @field_validator("points")
    @classmethod
    def sort_points(cls, v: dict[int, int]) -> dict[int, int]:
        for x in v:
            if x < 1:
                raise ValueError(f"point key must be a positive integer, got {x}")
        return dict(sorted(v.items()))

    @classmethod
    def from_document(cls, doc: Any) -> 'Dataset':
        if not isinstance(doc, dict):
            raise DatasetError("dataset must be a JSON object")
        try:
            if "keys" in doc:
                keys = DatasetKeys.model_validate(doc["keys"])
            elif "k" in doc:
                keys = DatasetKeys(k=doc["k"], n=doc.get("n"))
            else:
                raise DatasetError("k not found in dataset")

            entries = {}
            for name, raw in doc.items():
                if not (name.isascii() and name.isdigit()):
                    continue
                x = int(name)
                if x in entries:
                    # "7" and "07" name the same point
                    logger.warning("duplicate key %d collapsed, last value kept", x)
                entries[x] = ShareEntry.model_validate(raw)
            points = {x: entry.decode(x) for x, entry in entries.items()}
            dataset = cls(k=keys.k, n=keys.n, points=points)
        except ValidationError as e:
            raise DatasetError(_summarize(e)) from e

        if dataset.n is not None and dataset.n != len(dataset.points):
            logger.warning("keys.n = %d but %d points were supplied",
                           dataset.n, len(dataset.points))
        return dataset


def _summarize(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)
