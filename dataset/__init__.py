"""Dataset ingestion: JSON documents of base-encoded points."""

from dataset.models import Dataset, DatasetError, DatasetKeys, ShareEntry
from dataset.loader import load_dataset, parse_dataset
