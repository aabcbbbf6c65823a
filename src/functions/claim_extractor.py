"""Claim Extractor: Function (no reasoning loop).

Sends the article to Claude and gets back the statements it judges to be
factually inaccurate, quoted verbatim. The response is parsed as a JSON
array of ``{"sentence": ...}`` objects.

Type: Function (single LLM call, no tool use)
Model: Claude Sonnet

Input (from state):
- article: full article text

Output (to state):
- claims: list of FactCheckClaim with empty sources
"""

from __future__ import annotations

import logging
import time

import anthropic

from src.config import ANTHROPIC_API_KEY, CLAUDE_MAX_TOKENS, CLAUDE_MODEL
from src.functions.json_extraction import extract_json_array
from src.models import ArticleCheckState, FactCheckClaim, NodeTrace

logger = logging.getLogger(__name__)

_SYSTEM_PROMPT = """\
You are a specialized fact-checking assistant designed to identify \
inaccuracies in articles.

Instructions:
1. Analyze the provided article to identify factual claims.
2. Evaluate each claim for accuracy using your knowledge.
3. Extract ONLY statements that contain inaccurate or unfactual information.
4. For each inaccurate claim, include the exact verbatim text as it appears \
in the article.
5. If no inaccurate claims are found, return an empty array.

Response Format:
Return ONLY a properly formatted JSON array with the following structure:
[
  {
    "sentence": "The exact text of the inaccurate statement"
  }
]

Do not include any explanatory text, commentary, or any content other than \
the JSON array."""

_USER_PROMPT_TEMPLATE = """\
Please analyze the following article for factual accuracy:

ARTICLE TEXT:
{article}

Identify and extract ONLY statements containing inaccurate or misleading \
information. Return your findings as a JSON array of inaccurate statements \
exactly as they appear in the text. If all statements are factually \
accurate, return an empty array."""


def _response_text(message) -> str:
    """First text block of a Messages API response, or "" if absent."""
    content = getattr(message, "content", None) or []
    if not content:
        return ""
    return getattr(content[0], "text", "") or ""


def _parse_claims(items: list) -> list[FactCheckClaim]:
    """Keep items shaped like {"sentence": "<non-empty text>"}."""
    claims = []
    for item in items:
        if not isinstance(item, dict):
            continue
        sentence = item.get("sentence")
        if isinstance(sentence, str) and sentence.strip():
            claims.append(FactCheckClaim(sentence=sentence.strip()))
    return claims


def generate_candidate_claims(article_text: str) -> tuple[list[FactCheckClaim], float]:
    """Ask Claude for the inaccurate statements in an article.

    Args:
        article_text: Full article text.

    Returns:
        (claims, cost_usd). Claims is empty when the key is missing or the
        response holds no usable JSON array.
    """
    if not ANTHROPIC_API_KEY:
        logger.warning("ANTHROPIC_API_KEY not set, no claims extracted")
        return [], 0.0

    client = anthropic.Anthropic(api_key=ANTHROPIC_API_KEY)
    message = client.messages.create(
        model=CLAUDE_MODEL,
        max_tokens=CLAUDE_MAX_TOKENS,
        system=_SYSTEM_PROMPT,
        messages=[
            {
                "role": "user",
                "content": _USER_PROMPT_TEMPLATE.format(article=article_text),
            }
        ],
    )

    response_text = _response_text(message).strip()
    logger.info("Extracted JSON:\n%s", response_text)

    claims = _parse_claims(extract_json_array(response_text))

    input_tokens = message.usage.input_tokens
    output_tokens = message.usage.output_tokens
    cost = (input_tokens * 3.0 + output_tokens * 15.0) / 1_000_000  # Sonnet pricing

    return claims, cost


async def run_claim_extractor(state: ArticleCheckState) -> ArticleCheckState:
    """Run the claim extractor node.

    Args:
        state: Pipeline state with 'article' populated.

    Returns:
        Updated state with claims and a trace entry.
    """
    start_time = time.time()
    article = state["article"]
    success = True

    try:
        claims, cost = generate_candidate_claims(article)
    except Exception as e:
        logger.error("Error processing AI response: %s", e)
        claims, cost = [], 0.0
        success = False

    duration = time.time() - start_time

    trace = NodeTrace(
        node="claim_extractor",
        duration_seconds=round(duration, 2),
        cost_usd=round(cost, 6),
        input_summary=f"Article: {len(article)} chars",
        output_summary=f"{len(claims)} inaccurate claims flagged",
        success=success,
        tools_called=["claude_messages", "extract_json_array"],
    )

    existing_traces = state.get("agent_trace", [])
    existing_cost = state.get("total_cost_usd", 0.0)
    existing_duration = state.get("total_duration_seconds", 0.0)

    return {
        **state,
        "claims": claims,
        "agent_trace": existing_traces + [trace],
        "total_cost_usd": existing_cost + cost,
        "total_duration_seconds": existing_duration + duration,
    }
