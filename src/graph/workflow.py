"""Main LangGraph workflow for article fact-checking."""

import logging
from typing import Any, List, Optional, Union

from langgraph.graph import StateGraph, END

from src.config import MIN_ARTICLE_LENGTH
from src.functions import claim_extractor, source_retriever
from src.models import ArticleCheckState, FactCheckClaim, SourceConfig

logger = logging.getLogger(__name__)


class InvalidArticleError(ValueError):
    """Raised when the article text is missing or too short to check."""


def create_workflow() -> StateGraph:
    """Create the article fact-checking workflow graph."""

    workflow = StateGraph(ArticleCheckState)

    # Add nodes
    workflow.add_node("claim_extractor", claim_extractor.run_claim_extractor)
    workflow.add_node("source_retriever", source_retriever.run_source_retriever)

    # Define edges
    workflow.set_entry_point("claim_extractor")
    workflow.add_edge("claim_extractor", "source_retriever")
    workflow.add_edge("source_retriever", END)

    return workflow.compile()


def validate_article(article: Any) -> str:
    """Return the article text, or raise InvalidArticleError."""
    if not isinstance(article, str) or len(article) < MIN_ARTICLE_LENGTH:
        logger.error("Invalid article input.")
        raise InvalidArticleError("Invalid article input.")
    return article


async def run_article_check(
    article: str,
    options: Union[SourceConfig, dict, None] = None,
) -> ArticleCheckState:
    """Run the full workflow and return the final state (claims plus traces).

    Args:
        article: Article text, at least MIN_ARTICLE_LENGTH characters.
        options: Source options applied to every claim's source fetch.

    Returns:
        Final state with claims and agent_trace.

    Raises:
        InvalidArticleError: If the article is missing or too short.
    """
    article = validate_article(article)
    source_options: Optional[SourceConfig] = None
    if options is not None:
        source_options = SourceConfig.resolve(options)

    workflow = create_workflow()

    initial_state: ArticleCheckState = {
        "article": article,
        "source_options": source_options,
        "claims": [],
        "agent_trace": [],
        "total_cost_usd": 0.0,
        "total_duration_seconds": 0.0,
    }

    result = await workflow.ainvoke(initial_state)
    logger.info("Found %d inaccurate claim(s).", len(result["claims"]))
    return result


async def check_article(
    article: str,
    options: Union[SourceConfig, dict, None] = None,
) -> List[FactCheckClaim]:
    """Fact-check an article.

    Args:
        article: Article text to check.
        options: Source options applied to every claim's source fetch.

    Returns:
        Flagged claims, each with its ranked sources.

    Raises:
        InvalidArticleError: If the article is missing or too short.
    """
    result = await run_article_check(article, options)
    return result["claims"]
