"""Rank scored sources and keep the top results."""

from __future__ import annotations

from src.models import SourceResult


def rank_results(results: list[SourceResult], max_sources: int) -> list[SourceResult]:
    """Sort by relevance descending, truncate, and assign 1-based ranks.

    The sort is stable, so equal scores keep their discovery order and
    still receive distinct consecutive ranks.

    Args:
        results: Scored, unranked sources.
        max_sources: Maximum number of sources to keep.

    Returns:
        New SourceResult objects with rank set to 1..n.
    """
    ordered = sorted(results, key=lambda r: r.relevance_score, reverse=True)
    return [
        r.model_copy(update={"rank": i + 1})
        for i, r in enumerate(ordered[:max_sources])
    ]
