"""Public phrase set discovery."""

from typing import Iterable, List

from ..board.models import PhraseSet
from .ranker import rank_by_score, CONFIDENCE


DEFAULT_LIMIT = 30


def matches_query(phrase_set: PhraseSet, query: str) -> bool:
    """Case-insensitive substring match over title, code and phrases."""
    term = query.strip().lower()
    if not term:
        return True
    haystack = f"{phrase_set.title} {phrase_set.code} {' '.join(phrase_set.phrases)}".lower()
    return term in haystack


def search_public(
    sets: Iterable[PhraseSet],
    query: str = "",
    limit: int = DEFAULT_LIMIT,
    confidence: float = CONFIDENCE,
) -> List[PhraseSet]:
    """
    Public sets matching `query`, ranked by score and capped at `limit`.

    Equal scores are listed newest first.
    """
    candidates = sorted(
        (s for s in sets if s.is_public and matches_query(s, query)),
        key=lambda s: s.created_at,
        reverse=True,
    )
    return rank_by_score(candidates, confidence=confidence)[:limit]
