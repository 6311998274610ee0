"""Read dataset documents from JSON text, files or streams."""

import json
import logging
import sys
from pathlib import Path
from typing import IO

from dataset.models import Dataset, DatasetError

logger = logging.getLogger(__name__)


def _collapse_duplicates(pairs: list[tuple[str, object]]) -> dict:
    """JSON object hook: later duplicate keys replace earlier ones."""
    result = {}
    for key, value in pairs:
        if key in result:
            logger.warning("duplicate key %r collapsed, last value kept", key)
        result[key] = value
    return result


def parse_dataset(text: str) -> Dataset:
    try:
        doc = json.loads(text, object_pairs_hook=_collapse_duplicates)
    except json.JSONDecodeError as e:
        raise DatasetError(f"invalid JSON: {e}") from e
    return Dataset.from_document(doc)


def load_dataset(source: str | Path | IO[str] = "-") -> Dataset:
    """Load from a path, an open text stream, or "-" for stdin."""
    if hasattr(source, "read"):
        return parse_dataset(source.read())
    if str(source) == "-":
        return parse_dataset(sys.stdin.read())
    path = Path(source)
    logger.debug("loading dataset from %s", path)
    return parse_dataset(path.read_text(encoding="utf-8"))
