"""
dataset.loader - Read the location dataset and pick its search column.

The dataset is an ordered list of records (one JSON object per port or
trade lane).  It is read once, frozen, and handed to the suggestion
service as a single immutable Dataset object.  A refresh means building a
new Dataset and swapping the reference; records are never edited in place.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

import config

logger = logging.getLogger(__name__)


class DatasetError(Exception):
    """The dataset source is missing or malformed."""


def text_value(value) -> str:
    """Text representation used for scoring and matching.

    Only string values count; absent, null and numeric values read as "".
    """
    return value if isinstance(value, str) else ""


def detect_search_field(
    records: Iterable[Mapping],
    sample_size: int = config.FIELD_SAMPLE_SIZE,
) -> Optional[str]:
    """
    Pick the column most likely to hold human-readable names.

    Each candidate scores the summed length of its trimmed text over the
    first ``sample_size`` records; the highest score wins and ties go to
    the column that appears first in the first record.
    """
    records = list(records)
    if not records:
        return None

    keys = list(records[0].keys())
    if not keys:
        return None

    # Only columns every record carries; fall back to the first row's keys
    shared = [k for k in keys if all(k in rec for rec in records)]
    candidates = shared or keys

    sample = records[:sample_size]
    best_key = candidates[0]
    best_score = 0
    for key in candidates:
        score = sum(len(text_value(rec.get(key)).strip()) for rec in sample)
        if score > best_score:
            best_key, best_score = key, score
    return best_key


@dataclass(frozen=True)
class Dataset:
    records: tuple[Mapping, ...]
    search_field: Optional[str]
    source: Optional[Path] = None

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Mapping],
        sample_size: int = config.FIELD_SAMPLE_SIZE,
        source: Optional[Path] = None,
    ) -> "Dataset":
        records = tuple(MappingProxyType(dict(row)) for row in rows)
        return cls(
            records=records,
            search_field=detect_search_field(records, sample_size),
            source=source,
        )

    def __len__(self) -> int:
        return len(self.records)

    def values(self):
        """Yield the search-field text of every record, in dataset order."""
        key = self.search_field
        for rec in self.records:
            yield text_value(rec.get(key)) if key is not None else ""

    def stats(self) -> dict:
        return {"records": len(self.records), "search_field": self.search_field}


def load_dataset(
    path: str | Path,
    sample_size: int = config.FIELD_SAMPLE_SIZE,
) -> Dataset:
    """
    Read a JSON array of objects from ``path``.

    Raises DatasetError if the file cannot be read or does not hold a
    list of objects.  An empty list is accepted.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as fh:
            rows = json.load(fh)
    except FileNotFoundError as e:
        raise DatasetError(f"dataset not found: {path}") from e
    except OSError as e:
        raise DatasetError(f"cannot read dataset {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise DatasetError(f"{path} is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise DatasetError(f"invalid JSON in {path}: {e}") from e

    if not isinstance(rows, list):
        raise DatasetError(f"{path}: expected a JSON array of records")
    for idx, row in enumerate(rows):
        if not isinstance(row, dict):
            raise DatasetError(f"{path}: record {idx} is not an object")

    dataset = Dataset.from_rows(rows, sample_size=sample_size, source=path)
    logger.info("Loaded %d records from %s", len(dataset), path)
    logger.info("Detected search column: %s", dataset.search_field)
    return dataset
