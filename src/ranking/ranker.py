"""
Bayesian popularity ranking for rated phrase sets.

Each set's score blends its own ratings with a prior mean m:

    score = (C * m + rating_total) / (C + rating_count)

where m is the mean of `rating_average` across the rated sets and C is the
confidence constant, measured in equivalent ratings. Unrated sets score
exactly m.
"""

import logging
from typing import List, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

CONFIDENCE = 5

# Any object with rating_total, rating_count and rating_average attributes
RatableSet = TypeVar("RatableSet")


def _check_confidence(confidence: float) -> None:
    if confidence <= 0:
        raise ValueError(f"confidence must be positive, got {confidence!r}")


def prior_mean(sets: Sequence[RatableSet]) -> Optional[float]:
    """Mean of the per-set averages over rated sets, or None if none are rated."""
    rated = [s for s in sets if s.rating_count > 0]
    if not rated:
        return None
    return sum(s.rating_average for s in rated) / len(rated)


def bayesian_score(
    rating_total: float,
    rating_count: int,
    prior: float,
    confidence: float = CONFIDENCE,
) -> float:
    """Smoothed rating estimate using the stored rating total."""
    _check_confidence(confidence)
    return (confidence * prior + rating_total) / (confidence + rating_count)


def rank_by_score(
    sets: Sequence[RatableSet],
    confidence: float = CONFIDENCE,
) -> List[RatableSet]:
    """
    Order sets by Bayesian-adjusted score, highest first.

    The input is not modified. When no set has been rated the original
    order is returned. Equal scores keep their input order.
    """
    _check_confidence(confidence)
    prior = prior_mean(sets)
    if prior is None:
        return list(sets)

    logger.debug("Ranking %d sets with prior mean %.3f (C=%s)", len(sets), prior, confidence)

    return sorted(
        sets,
        key=lambda s: bayesian_score(s.rating_total, s.rating_count, prior, confidence),
        reverse=True,
    )
