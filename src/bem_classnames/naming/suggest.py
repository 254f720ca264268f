# src/bem_classnames/naming/suggest.py
from __future__ import annotations

"""
suggest.py

Does: Fuzzy "did you mean" lookup of element names for error messages.
Returns: suggest_elements() -> close candidates, best first.
Used by: UnknownElement raised from format_child_class.
"""

from collections.abc import Iterable

from rapidfuzz import fuzz, process

__all__ = ["SUGGEST_THRESHOLD", "suggest_elements"]

# ── Tunables ─────────────────────────────────────────────────────────────────
SUGGEST_THRESHOLD = 70
SUGGEST_LIMIT = 3


def suggest_elements(
    name: str,
    candidates: Iterable[str],
    *,
    limit: int = SUGGEST_LIMIT,
    threshold: int = SUGGEST_THRESHOLD,
) -> list[str]:
    """
    Does: Score `name` against `candidates` with rapidfuzz's ratio.
    Returns: Up to `limit` candidates scoring >= threshold, best first.
    """
    if not name:
        return []
    matches = process.extract(
        name,
        list(candidates),
        scorer=fuzz.ratio,
        limit=limit,
        score_cutoff=threshold,
    )
    return [candidate for candidate, _score, _idx in matches]
