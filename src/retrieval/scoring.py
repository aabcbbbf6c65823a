"""Trust and relevance scoring for raw search results.

Each result earns an additive score:

- +10 when its domain is a trusted fact-checker (if enabled)
- +5 when it came from the fact-check query variant
- +1 / +0.5 per claim keyword found in the title / snippet
- +2 / +1 per fact-check term found in the title / snippet

Scores are only meaningful relative to each other within one claim.
"""

from __future__ import annotations

import logging
from urllib.parse import urlparse

from src.models import FACT_CHECK_LABEL, SourceConfig, SourceResult
from src.retrieval.serpapi_client import RawResult
from src.retrieval.trusted_domains import FACT_CHECK_TERMS, TRUSTED_FACT_CHECK_DOMAINS

logger = logging.getLogger(__name__)

TRUSTED_DOMAIN_BONUS = 10.0
FACT_CHECK_QUERY_BONUS = 5.0
KEYWORD_TITLE_WEIGHT = 1.0
KEYWORD_SNIPPET_WEIGHT = 0.5
TERM_TITLE_WEIGHT = 2.0
TERM_SNIPPET_WEIGHT = 1.0

MIN_KEYWORD_LENGTH = 4


def extract_domain(link: str) -> str:
    """Return the hostname of a link with any leading "www." removed.

    Raises:
        ValueError: If the link is not an absolute URL with a host.
    """
    if not isinstance(link, str):
        raise ValueError(f"Invalid URL: {link!r}")
    parsed = urlparse(link)
    host = parsed.hostname
    if not parsed.scheme or not host:
        raise ValueError(f"Invalid URL: {link!r}")
    return host[4:] if host.startswith("www.") else host


def extract_keywords(cleaned_claim: str) -> list[str]:
    """Lowercased claim words of at least four characters."""
    return [
        word for word in cleaned_claim.lower().split()
        if len(word) >= MIN_KEYWORD_LENGTH
    ]


def score_result(
    result: RawResult,
    domain: str,
    keywords: list[str],
    config: SourceConfig,
) -> float:
    """Compute the relevance score of a single result.

    Args:
        result: Raw search hit with a non-empty title.
        domain: Domain already extracted from the result's link.
        keywords: Claim keywords from extract_keywords.
        config: Resolved source options.

    Returns:
        Non-negative additive score.
    """
    score = 0.0

    if config.include_trusted_domains and domain in TRUSTED_FACT_CHECK_DOMAINS:
        score += TRUSTED_DOMAIN_BONUS

    if result.query_label == FACT_CHECK_LABEL:
        score += FACT_CHECK_QUERY_BONUS

    title = result.title.lower()
    snippet = result.snippet.lower() if isinstance(result.snippet, str) else ""

    for keyword in keywords:
        if keyword in title:
            score += KEYWORD_TITLE_WEIGHT
        if keyword in snippet:
            score += KEYWORD_SNIPPET_WEIGHT

    for term in FACT_CHECK_TERMS:
        if term in title:
            score += TERM_TITLE_WEIGHT
        if term in snippet:
            score += TERM_SNIPPET_WEIGHT

    return score


def score_results(
    results: list[RawResult],
    cleaned_claim: str,
    config: SourceConfig,
) -> list[SourceResult]:
    """Filter and score raw results, keeping discovery order.

    Results without a title or link are skipped. A result whose link cannot
    be parsed is logged and skipped; it never fails the batch.

    Returns:
        Unranked SourceResult list (rank 0).
    """
    keywords = extract_keywords(cleaned_claim)
    scored = []

    for result in results:
        if not result.title or not result.link:
            continue
        if not isinstance(result.title, str):
            logger.error("Skipping result with non-text title: %r", result.title)
            continue

        try:
            domain = extract_domain(result.link)
        except ValueError as e:
            logger.error("Skipping result with malformed link: %s", e)
            continue

        scored.append(SourceResult(
            title=result.title,
            snippet=result.snippet if isinstance(result.snippet, str) else "",
            link=result.link,
            source=domain,
            relevance_score=score_result(result, domain, keywords, config),
        ))

    return scored
