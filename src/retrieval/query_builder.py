"""Build search query variants from a claim sentence."""

from __future__ import annotations

import re

from src.models import FACT_CHECK_LABEL, GENERAL_LABEL, SearchQuery, SourceConfig

_NON_WORD_PATTERN = re.compile(r"[^\w\s]")

FACT_CHECK_PREFIX = "Fact check: "


def clean_claim(claim: str) -> str:
    """Replace punctuation and other non-word characters with spaces, then strip."""
    return _NON_WORD_PATTERN.sub(" ", claim).strip()


def build_queries(claim: str, config: SourceConfig) -> list[SearchQuery]:
    """Build the ordered list of search queries for a claim.

    Args:
        claim: Raw claim sentence.
        config: Resolved source options.

    Returns:
        The general query, followed by the fact-check query when
        ``include_fact_check_sites`` is set.
    """
    cleaned = clean_claim(claim)
    queries = [SearchQuery(q=cleaned, label=GENERAL_LABEL)]
    if config.include_fact_check_sites:
        queries.append(SearchQuery(q=f"{FACT_CHECK_PREFIX}{cleaned}", label=FACT_CHECK_LABEL))
    return queries
