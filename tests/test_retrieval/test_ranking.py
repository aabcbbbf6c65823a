"""Tests for result ranking."""

from __future__ import annotations

from src.models import SourceResult
from src.retrieval.ranking import rank_results


def _make_result(title: str, score: float) -> SourceResult:
    return SourceResult(
        title=title,
        link=f"https://example.com/{title}",
        source="example.com",
        relevance_score=score,
    )


class TestRankResults:
    def test_sorted_descending(self):
        results = [_make_result("a", 1.0), _make_result("b", 7.5), _make_result("c", 3.0)]

        ranked = rank_results(results, max_sources=5)

        assert [r.title for r in ranked] == ["b", "c", "a"]

    def test_ranks_are_dense_from_one(self):
        results = [_make_result(str(i), float(i)) for i in range(4)]

        ranked = rank_results(results, max_sources=10)

        assert [r.rank for r in ranked] == [1, 2, 3, 4]

    def test_truncates_to_max_sources(self):
        results = [_make_result(str(i), float(i)) for i in range(8)]

        ranked = rank_results(results, max_sources=3)

        assert len(ranked) == 3
        assert [r.relevance_score for r in ranked] == [7.0, 6.0, 5.0]

    def test_ties_keep_discovery_order_with_distinct_ranks(self):
        results = [
            _make_result("first", 2.0),
            _make_result("top", 5.0),
            _make_result("second", 2.0),
            _make_result("third", 2.0),
        ]

        ranked = rank_results(results, max_sources=3)

        assert [r.title for r in ranked] == ["top", "first", "second"]
        assert [r.rank for r in ranked] == [1, 2, 3]

    def test_input_not_mutated(self):
        results = [_make_result("a", 1.0)]

        rank_results(results, max_sources=1)

        assert results[0].rank == 0

    def test_empty(self):
        assert rank_results([], max_sources=5) == []
