"""
dataset - Static location dataset loaded once at startup.

Public API:
    load_dataset(path)        → Dataset read from a JSON file
    Dataset.from_rows(rows)   → Dataset built from in-memory rows
    detect_search_field(rows) → column used for suggestions
    DatasetError              → raised when the source cannot be read
"""

from dataset.loader import (                         # noqa: F401
    Dataset,
    DatasetError,
    load_dataset,
    detect_search_field,
    text_value,
)
