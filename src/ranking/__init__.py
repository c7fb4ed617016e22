"""Popularity ranking and discovery."""

from .ranker import rank_by_score, bayesian_score, prior_mean, CONFIDENCE
from .search import search_public, matches_query, DEFAULT_LIMIT

__all__ = [
    "rank_by_score",
    "bayesian_score",
    "prior_mean",
    "CONFIDENCE",
    "search_public",
    "matches_query",
    "DEFAULT_LIMIT",
]
