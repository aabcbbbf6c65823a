"""Source retrieval: query building, web search, scoring and ranking."""

from src.retrieval.query_builder import build_queries, clean_claim
from src.retrieval.serpapi_client import RawResult, search, search_all
from src.retrieval.scoring import extract_domain, extract_keywords, score_result, score_results
from src.retrieval.ranking import rank_results
from src.retrieval.source_fetcher import fetch_sources
from src.retrieval.trusted_domains import FACT_CHECK_TERMS, TRUSTED_FACT_CHECK_DOMAINS

__all__ = [
    "build_queries",
    "clean_claim",
    "RawResult",
    "search",
    "search_all",
    "extract_domain",
    "extract_keywords",
    "score_result",
    "score_results",
    "rank_results",
    "fetch_sources",
    "FACT_CHECK_TERMS",
    "TRUSTED_FACT_CHECK_DOMAINS",
]
