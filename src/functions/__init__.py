"""Functions (single-pass nodes) for the article fact-check pipeline.

Functions execute a fixed sequence of steps with at most one LLM call.
They do NOT have a reasoning loop or tool-use capability.

Modules:
    claim_extractor: Article → flagged inaccurate sentences (single LLM call)
    source_retriever: Flagged sentences → ranked web sources (no LLM)
    json_extraction: JSON array recovery from model output
"""

from src.functions import claim_extractor, json_extraction, source_retriever

__all__ = ["claim_extractor", "json_extraction", "source_retriever"]
