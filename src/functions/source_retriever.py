"""Source Retriever: Function (no reasoning loop).

Attaches ranked evidence sources to each flagged claim. Claims are handled
one after another, in the order the extractor returned them.

Type: Function (no LLM call)

Input (from state):
- claims: flagged claims from the claim extractor
- source_options: optional SourceConfig for every fetch

Output (to state):
- claims: same claims with sources populated
"""

from __future__ import annotations

import logging
import time

from src.models import ArticleCheckState, FactCheckClaim, NodeTrace
from src.retrieval.source_fetcher import fetch_sources

logger = logging.getLogger(__name__)


async def run_source_retriever(state: ArticleCheckState) -> ArticleCheckState:
    """Run the source retriever node.

    Args:
        state: Pipeline state with claims populated.

    Returns:
        Updated state with sources attached to every claim.
    """
    start_time = time.time()
    claims = state.get("claims", [])
    options = state.get("source_options")

    updated_claims = []
    for claim in claims:
        logger.info("Fetching sources for inaccurate claim: %r", claim.sentence)
        sources = fetch_sources(claim.sentence, options)
        updated_claims.append(FactCheckClaim(sentence=claim.sentence, sources=sources))

    duration = time.time() - start_time
    total_sources = sum(len(c.sources) for c in updated_claims)

    trace = NodeTrace(
        node="source_retriever",
        duration_seconds=round(duration, 2),
        input_summary=f"{len(claims)} claims",
        output_summary=f"{total_sources} sources across {len(updated_claims)} claims",
        success=True,
        tools_called=["serpapi_search"] if claims else [],
    )

    existing_traces = state.get("agent_trace", [])
    existing_duration = state.get("total_duration_seconds", 0.0)

    return {
        **state,
        "claims": updated_claims,
        "agent_trace": existing_traces + [trace],
        "total_duration_seconds": existing_duration + duration,
    }
