"""Tests for the Claim Extractor function node."""

from __future__ import annotations

import asyncio
import json
from unittest.mock import MagicMock, patch

import pytest

from src.functions.claim_extractor import (
    _parse_claims,
    _response_text,
    generate_candidate_claims,
    run_claim_extractor,
)
from src.models import FactCheckClaim, NodeTrace


ARTICLE = (
    "The Great Wall of China is visible from the Moon. "
    "Water boils at 100 degrees Celsius at sea level."
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_state(article: str = ARTICLE) -> dict:
    """Build a minimal ArticleCheckState dict for testing."""
    return {
        "article": article,
        "source_options": None,
        "claims": [],
        "agent_trace": [],
        "total_cost_usd": 0.0,
        "total_duration_seconds": 0.0,
    }


def _make_message(text: str | None, input_tokens: int = 1000, output_tokens: int = 200):
    """Create a mock Anthropic Messages API response."""
    message = MagicMock()
    message.content = [] if text is None else [MagicMock(text=text)]
    message.usage.input_tokens = input_tokens
    message.usage.output_tokens = output_tokens
    return message


def _mock_client(message):
    client = MagicMock()
    client.messages.create.return_value = message
    return client


# ---------------------------------------------------------------------------
# Tests: response parsing
# ---------------------------------------------------------------------------


class TestParsing:
    def test_response_text_first_block(self):
        assert _response_text(_make_message("[]")) == "[]"

    def test_response_text_missing_content(self):
        assert _response_text(_make_message(None)) == ""

    def test_parse_claims_keeps_valid_sentences(self):
        items = [
            {"sentence": "  The Moon is made of cheese.  "},
            {"sentence": ""},
            {"sentence": 42},
            {"text": "wrong key"},
            "just a string",
        ]

        claims = _parse_claims(items)

        assert claims == [FactCheckClaim(sentence="The Moon is made of cheese.")]


# ---------------------------------------------------------------------------
# Tests: generate_candidate_claims
# ---------------------------------------------------------------------------


class TestGenerateCandidateClaims:
    def test_no_api_key_returns_empty(self):
        with patch("src.functions.claim_extractor.ANTHROPIC_API_KEY", None):
            with patch("src.functions.claim_extractor.anthropic.Anthropic") as mock_cls:
                claims, cost = generate_candidate_claims(ARTICLE)

        assert claims == []
        assert cost == 0.0
        mock_cls.assert_not_called()

    def test_parses_flagged_sentences(self):
        response = json.dumps([{"sentence": "The Great Wall of China is visible from the Moon."}])
        client = _mock_client(_make_message(f"```json\n{response}\n```"))

        with patch("src.functions.claim_extractor.ANTHROPIC_API_KEY", "test-key"):
            with patch("src.functions.claim_extractor.anthropic.Anthropic", return_value=client):
                claims, cost = generate_candidate_claims(ARTICLE)

        assert [c.sentence for c in claims] == ["The Great Wall of China is visible from the Moon."]
        assert claims[0].sources == []
        assert cost == pytest.approx((1000 * 3.0 + 200 * 15.0) / 1_000_000)

    def test_article_sent_in_user_prompt(self):
        client = _mock_client(_make_message("[]"))

        with patch("src.functions.claim_extractor.ANTHROPIC_API_KEY", "test-key"):
            with patch("src.functions.claim_extractor.anthropic.Anthropic", return_value=client):
                generate_candidate_claims(ARTICLE)

        kwargs = client.messages.create.call_args.kwargs
        assert ARTICLE in kwargs["messages"][0]["content"]
        assert kwargs["messages"][0]["role"] == "user"
        assert "JSON array" in kwargs["system"]

    def test_unparseable_response_returns_empty(self):
        client = _mock_client(_make_message("I could not find any problems."))

        with patch("src.functions.claim_extractor.ANTHROPIC_API_KEY", "test-key"):
            with patch("src.functions.claim_extractor.anthropic.Anthropic", return_value=client):
                claims, _ = generate_candidate_claims(ARTICLE)

        assert claims == []

    def test_empty_content_returns_empty(self):
        client = _mock_client(_make_message(None))

        with patch("src.functions.claim_extractor.ANTHROPIC_API_KEY", "test-key"):
            with patch("src.functions.claim_extractor.anthropic.Anthropic", return_value=client):
                claims, _ = generate_candidate_claims(ARTICLE)

        assert claims == []


# ---------------------------------------------------------------------------
# Tests: node entry point
# ---------------------------------------------------------------------------


class TestRunClaimExtractor:
    def test_claims_and_trace_added(self):
        flagged = [FactCheckClaim(sentence="The Great Wall of China is visible from the Moon.")]

        with patch(
            "src.functions.claim_extractor.generate_candidate_claims",
            return_value=(flagged, 0.0042),
        ):
            result = asyncio.run(run_claim_extractor(_make_state()))

        assert result["claims"] == flagged
        assert len(result["agent_trace"]) == 1
        trace = result["agent_trace"][0]
        assert trace.node == "claim_extractor"
        assert trace.success is True
        assert result["total_cost_usd"] == pytest.approx(0.0042)

    def test_llm_failure_gives_empty_claims(self):
        with patch(
            "src.functions.claim_extractor.generate_candidate_claims",
            side_effect=Exception("API error"),
        ):
            result = asyncio.run(run_claim_extractor(_make_state()))

        assert result["claims"] == []
        assert result["agent_trace"][0].success is False
        assert result["total_cost_usd"] == 0.0

    def test_trace_accumulation(self):
        prior = NodeTrace(
            node="earlier",
            duration_seconds=1.0,
            cost_usd=0.01,
            input_summary="test",
            output_summary="test",
            success=True,
        )
        state = _make_state()
        state["agent_trace"] = [prior]
        state["total_cost_usd"] = 0.01
        state["total_duration_seconds"] = 1.0

        with patch(
            "src.functions.claim_extractor.generate_candidate_claims",
            return_value=([], 0.002),
        ):
            result = asyncio.run(run_claim_extractor(state))

        assert [t.node for t in result["agent_trace"]] == ["earlier", "claim_extractor"]
        assert result["total_cost_usd"] == pytest.approx(0.012)
        assert result["total_duration_seconds"] >= 1.0
