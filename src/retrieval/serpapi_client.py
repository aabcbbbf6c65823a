"""SerpAPI client for Google web search results."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Optional

import requests

from src.config import SEARCH_COUNTRY, SEARCH_LANGUAGE, SERP_API_KEY, SERPAPI_SEARCH_URL
from src.models import GENERAL_LABEL, SearchQuery, SourceConfig

logger = logging.getLogger(__name__)


@dataclass
class RawResult:
    """An organic search hit as returned by the provider."""
    title: Optional[str]
    link: Optional[str]
    snippet: Optional[str] = None
    query_label: str = GENERAL_LABEL


def search(query: SearchQuery, config: SourceConfig) -> list[RawResult]:
    """Run one Google search through SerpAPI.

    Request failures and malformed response bodies are logged and treated
    as an empty result so that one failing query never affects the others.

    ``timeout_ms`` is passed to requests as its timeout, which bounds the
    connect and each socket read separately. A server that keeps trickling
    bytes can therefore hold the request past ``timeout_ms`` in total.

    Args:
        query: The query to run.
        config: Resolved source options (result count and timeout).

    Returns:
        List of RawResult tagged with the query's label.
    """
    if not SERP_API_KEY:
        logger.warning("SERP_API_KEY not set, skipping %r search", query.label)
        return []

    params = {
        "q": query.q,
        "api_key": SERP_API_KEY,
        "num": config.max_sources * 2,
        "hl": SEARCH_LANGUAGE,
        "gl": SEARCH_COUNTRY,
    }

    try:
        resp = requests.get(SERPAPI_SEARCH_URL, params=params, timeout=config.timeout_seconds)
        resp.raise_for_status()
        data = resp.json()
    except requests.exceptions.HTTPError as e:
        logger.error("Error with %r search (HTTP %s): %s", query.label, e.response.status_code, e)
        return []
    except (requests.exceptions.RequestException, ValueError) as e:
        logger.error("Error with %r search: %s", query.label, e)
        return []

    results = [
        _parse_result(item, query.label)
        for item in _organic_results(data, query.label)
        if isinstance(item, dict)
    ]

    if config.verbose:
        logger.info("Found %d results for %r query", len(results), query.label)
    return results


def search_all(queries: list[SearchQuery], config: SourceConfig) -> list[RawResult]:
    """Run every query and flatten the results in query order.

    Queries run concurrently; the flattened list still follows the order
    the queries were declared in, not completion order.
    """
    if not queries:
        return []

    if len(queries) == 1:
        batches = [search(queries[0], config)]
    else:
        with ThreadPoolExecutor(max_workers=len(queries)) as executor:
            batches = list(executor.map(lambda q: search(q, config), queries))

    all_results: list[RawResult] = []
    for batch in batches:
        all_results.extend(batch)
    return all_results


def _organic_results(data: Any, label: str) -> list:
    """The organic result list of a response body, or [] if the body is malformed."""
    if not isinstance(data, dict):
        logger.error("Error with %r search: unexpected response body %s", label, type(data).__name__)
        return []
    organic = data.get("organic_results") or []
    if not isinstance(organic, list):
        logger.error("Error with %r search: organic_results is %s", label, type(organic).__name__)
        return []
    return organic


def _text_field(data: dict, key: str) -> Optional[str]:
    value = data.get(key)
    return value if isinstance(value, str) else None


def _parse_result(data: dict, label: str) -> RawResult:
    """Parse a SerpAPI organic result into a RawResult.

    Non-string title, link or snippet values are stored as None.
    """
    return RawResult(
        title=_text_field(data, "title"),
        link=_text_field(data, "link"),
        snippet=_text_field(data, "snippet"),
        query_label=label,
    )
