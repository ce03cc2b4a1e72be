"""
services.suggest_service - Autocomplete suggestions for location fields.

Prefix matches rank ahead of substring matches, both in dataset order.
The scan stops as soon as the prefix list is full, so later records are
never looked at once enough prefix matches have been found.
"""

from __future__ import annotations

import re
from typing import Optional

import config
from dataset import Dataset

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_limit(raw, default: int = config.SUGGEST_DEFAULT_LIMIT) -> int:
    """
    Turn a ?limit= value into a positive int, falling back to default.

    Reads the leading integer and ignores the rest ("3.5" → 3, "5abc" → 5).
    """
    if raw is None:
        return default
    match = _LEADING_INT.match(str(raw))
    if not match:
        return default
    limit = int(match.group(1))
    return limit if limit > 0 else default


def split_highlight(text: str, q: str) -> list[dict]:
    """
    Split ``text`` around the first case-insensitive occurrence of ``q``.

    Returns [{"text": ..., "match": bool}, ...] for dropdown highlighting.
    """
    idx = text.lower().find(q.lower()) if q else -1
    if idx == -1:
        return [{"text": text, "match": False}]
    end = idx + len(q)
    parts = []
    if text[:idx]:
        parts.append({"text": text[:idx], "match": False})
    parts.append({"text": text[idx:end], "match": True})
    if text[end:]:
        parts.append({"text": text[end:], "match": False})
    return parts


class SuggestService:

    def __init__(self, dataset: Dataset):
        self._dataset = dataset

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    def swap(self, dataset: Dataset) -> Dataset:
        """Replace the dataset wholesale.  Returns the previous one."""
        old, self._dataset = self._dataset, dataset
        return old

    def suggest(self, q: Optional[str], limit: int = config.SUGGEST_DEFAULT_LIMIT) -> list[str]:
        """
        Return up to ``limit`` distinct values of the search column that
        contain ``q``, prefix matches first.
        """
        q = (q or "").strip().lower()
        if not q:
            return []

        dataset = self._dataset     # one snapshot for the whole scan
        prefix: list[str] = []
        substr: list[str] = []

        for val in dataset.values():
            low = val.lower()
            if low.startswith(q):
                prefix.append(val)
            elif q in low:
                substr.append(val)
            if len(prefix) >= limit:
                break

        combined = (prefix + substr)[:limit]
        return list(dict.fromkeys(combined))
