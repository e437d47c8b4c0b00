"""Performance benchmarks for Chapter Search."""

import pytest

from chapter_search.core.engine import SearchEngine
from chapter_search.core.index import SearchIndex


class TestPerformanceBenchmarks:
    """Performance benchmark tests."""

    @pytest.fixture
    def large_engine(self):
        """Create a search engine over a large generated index."""
        entries = [
            {
                "title": f"Глава {i}: Topic {i}",
                "url": f"chapters/{i:04d}-topic.html",
                "keywords": f"topic{i} swift uikit viper section{i % 50}",
            }
            for i in range(5000)
        ]
        entries.append({"title": "Needle", "url": "chapters/needle.html", "keywords": "haystack"})

        return SearchEngine(SearchIndex.from_manifest(entries))

    def test_wide_match_performance(self, large_engine, benchmark):
        """Benchmark a query matching every record."""
        outcome = benchmark(large_engine.search, "swift")

        assert outcome.kind == "results"
        assert len(outcome.matches) == 5000

    def test_narrow_match_performance(self, large_engine, benchmark):
        """Benchmark a query matching one record."""
        outcome = benchmark(large_engine.search, "haystack")

        assert [r.title for r in outcome.matches] == ["Needle"]

    def test_no_match_performance(self, large_engine, benchmark):
        """Benchmark a full scan without matches."""
        outcome = benchmark(large_engine.search, "zzz")

        assert outcome.kind == "no_results"

    def test_render_performance(self, large_engine, benchmark):
        """Benchmark rendering a large result set."""
        outcome = large_engine.search("topic")

        payload = benchmark(large_engine.render, outcome, "topic")

        assert len(payload.entries) == 5000
        assert payload.entries[0].title_segments[1].highlighted is True
