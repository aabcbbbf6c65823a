"""Source fetching for a flagged claim: search, score, rank, retry.

``fetch_sources`` is the only entry point the rest of the pipeline uses.
It never raises: per-query provider failures are absorbed by the search
client, malformed links by the scorer, and anything else by the retry loop
here, which ends in an empty list.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from src.models import SourceConfig, SourceResult
from src.retrieval.query_builder import build_queries, clean_claim
from src.retrieval.ranking import rank_results
from src.retrieval.scoring import score_results
from src.retrieval.serpapi_client import search_all

logger = logging.getLogger(__name__)


def _fetch_once(claim: str, config: SourceConfig) -> list[SourceResult]:
    """Run query building, search, scoring and ranking once."""
    cleaned = clean_claim(claim)
    logger.info("Searching sources for: %r", cleaned)

    queries = build_queries(claim, config)
    raw_results = search_all(queries, config)
    scored = score_results(raw_results, cleaned, config)
    ranked = rank_results(scored, config.max_sources)

    logger.info("Successfully found %d relevant sources", len(ranked))
    return ranked


def fetch_sources(
    claim: str,
    options: Union[SourceConfig, dict[str, Any], None] = None,
) -> list[SourceResult]:
    """Find and rank candidate evidence sources for a claim.

    Retrying is opt-in: the whole search is repeated only when
    ``current_retry`` is set (non-zero) and below ``retry_count``, with
    ``current_retry`` incremented on each attempt.

    Args:
        claim: The claim sentence to find sources for.
        options: SourceConfig, dict of option fields, or None for defaults.

    Returns:
        Up to ``max_sources`` SourceResult ranked 1..n, or an empty list if
        nothing was found or the fetch failed.
    """
    try:
        config = SourceConfig.resolve(options)
    except Exception as e:
        logger.error("Invalid source options: %s", e)
        return []

    while True:
        try:
            return _fetch_once(claim, config)
        except Exception as e:
            logger.error("Source fetch error: %s", e)

        attempt: Optional[int] = config.current_retry
        if not attempt or attempt >= config.retry_count:
            return []

        logger.info("Retrying source fetch (%d/%d)...", attempt + 1, config.retry_count)
        config = config.model_copy(update={"current_retry": attempt + 1})
