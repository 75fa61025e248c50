# tag_browser/filters.py
from __future__ import annotations
from typing import Dict, Iterable, List, Sequence

from .catalog import ALL_LABEL, TagRecord


def matches_query(rec: TagRecord, query: str) -> bool:
    """Case-folded substring test against the tag name or its short description."""
    q = query.casefold()
    return q in rec.name.casefold() or q in rec.description.casefold()


def compute_visible(
    records: Iterable[TagRecord],
    category: str,
    query: str,
    *,
    all_label: str = ALL_LABEL,
) -> List[TagRecord]:
    """
    Records shown for the current (category, query) pair, in catalog order.

    The all-label skips the category test; an empty or whitespace-only query
    skips the text test. Both tests are plain predicates, so the result is
    always a subsequence of ``records``.
    """
    work = list(records)

    if category != all_label:
        work = [r for r in work if r.category == category]

    if query and query.strip():
        work = [r for r in work if matches_query(r, query)]

    return work


def category_counts(records: Iterable[TagRecord], labels: Sequence[str]) -> Dict[str, int]:
    out = {label: 0 for label in labels}
    for r in records:
        if r.category in out:
            out[r.category] += 1
    return out
