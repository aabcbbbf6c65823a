"""End-to-end demo: Claim Extractor → Source Retriever.

Runs both pipeline nodes on an article and prints the output of each step
so you can see what each node does.

Usage:
    uv run python scripts/e2e_article_demo.py
    uv run python scripts/e2e_article_demo.py "Your custom article text here"
"""

from __future__ import annotations

import asyncio
import sys
import textwrap

from src.functions.claim_extractor import run_claim_extractor
from src.functions.source_retriever import run_source_retriever
from src.graph.workflow import validate_article
from src.logging_config import setup_logging
from src.models import ArticleCheckState, SourceConfig


DEFAULT_ARTICLE = (
    "The Great Wall of China is the only man-made structure visible from the "
    "Moon with the naked eye. Recent studies also confirm that vaccines cause "
    "autism in young children. Water boils at 100 degrees Celsius at sea level."
)


def _hr(title: str = "") -> None:
    if title:
        print(f"\n{'=' * 70}")
        print(f"  {title}")
        print(f"{'=' * 70}\n")
    else:
        print(f"\n{'-' * 70}\n")


def _wrap(text: str, indent: int = 4) -> str:
    return textwrap.fill(text, width=80, initial_indent=" " * indent,
                         subsequent_indent=" " * indent)


def print_step1(state: ArticleCheckState) -> None:
    """Print claim extractor output."""
    _hr("STEP 1: Claim Extractor (function node)")
    print("What it does:")
    print("  1. Sends the article to Claude with a fact-checking prompt")
    print("  2. Recovers the JSON array of inaccurate sentences")
    _hr()

    claims = state.get("claims", [])
    print(f"  Flagged claims ({len(claims)}):")
    for i, claim in enumerate(claims, 1):
        print(_wrap(f"{i}. {claim.sentence}"))
    if not claims:
        print("    (none flagged)")


def print_step2(state: ArticleCheckState) -> None:
    """Print source retriever output."""
    _hr("STEP 2: Source Retriever (function node)")
    print("What it does:")
    print("  1. Builds a general and a fact-check search query per claim")
    print("  2. Searches Google via SerpAPI")
    print("  3. Scores results by trust, query type and keyword overlap")
    print("  4. Keeps the top-ranked sources")
    _hr()

    for claim in state.get("claims", []):
        print(_wrap(f"Claim: {claim.sentence}"))
        if not claim.sources:
            print("      (no sources found)")
        for src in claim.sources:
            print(f"      #{src.rank} [{src.relevance_score:g}] {src.source}")
            print(_wrap(src.title, indent=9))
            print(f"         {src.link}")
        print()


def print_summary(state: ArticleCheckState) -> None:
    _hr("SUMMARY")
    for trace in state.get("agent_trace", []):
        status = "ok" if trace.success else "FAILED"
        print(f"  {trace.node:<18} {status:<7} {trace.duration_seconds:>6.2f}s  "
              f"${trace.cost_usd:.4f}  {trace.output_summary}")
    print(f"\n  Total: {state.get('total_duration_seconds', 0.0):.2f}s, "
          f"${state.get('total_cost_usd', 0.0):.4f}")


async def main(article: str) -> None:
    article = validate_article(article)
    print(f"\n  Article: {len(article)} chars")

    state: ArticleCheckState = {
        "article": article,
        "source_options": SourceConfig(verbose=True),
        "claims": [],
        "agent_trace": [],
        "total_cost_usd": 0.0,
        "total_duration_seconds": 0.0,
    }

    # Step 1: Claim Extractor
    print("\n  Running claim extractor...", flush=True)
    state = await run_claim_extractor(state)
    print_step1(state)

    # Step 2: Source Retriever
    print("\n  Running source retriever...", flush=True)
    state = await run_source_retriever(state)
    print_step2(state)

    print_summary(state)


if __name__ == "__main__":
    setup_logging(log_dir=None)
    article = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_ARTICLE
    asyncio.run(main(article))
