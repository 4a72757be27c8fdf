"""Subsequence fuzzy matching for filtering result rows by a query."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")

_SEPARATORS = {"/", "-", "_", " "}


def fuzzy_match(query: str, target: str) -> bool:
    """True when every query character appears in `target`, in order."""
    if not query:
        return True
    remaining = iter(target.lower())
    return all(char in remaining for char in query.lower())


def fuzzy_score(query: str, target: str) -> int:
    """Score a match, higher is better; -1 when `query` does not match."""
    if not query:
        return 0
    query = query.lower()
    target = target.lower()

    score = 0
    pos = 0
    last_match: int | None = None
    consecutive = 0
    for i, char in enumerate(target):
        if pos >= len(query) or char != query[pos]:
            continue
        pos += 1
        if last_match is not None:
            if i == last_match + 1:
                consecutive += 1
                score += consecutive * 10
            else:
                consecutive = 0
        if i == 0:
            score += 20
        elif target[i - 1] in _SEPARATORS:
            score += 15
        last_match = i
        score += 5

    if pos < len(query):
        return -1
    return score


def fuzzy_sort(items: list[T], query: str, key: Callable[[T], str]) -> list[T]:
    """Return `items` ordered by descending score; ties keep input order."""
    return sorted(items, key=lambda item: fuzzy_score(query, key(item)), reverse=True)
