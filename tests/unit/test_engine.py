"""Unit tests for the search engine facade."""

import pytest

from chapter_search.core.engine import SearchEngine
from chapter_search.core.index import SearchIndex
from chapter_search.models.payload import SearchMessages


class TestSearchEngine:
    """Test cases for the SearchEngine class."""

    @pytest.fixture
    def index(self):
        """Sample chapter index."""
        return SearchIndex.from_manifest([
            {"title": "Introduction", "url": "chapters/00-introduction.html", "keywords": "intro overview start"},
            {"title": "Testing Guide", "url": "chapters/11-testing.html", "keywords": "unit tests xctest mock"},
        ])

    @pytest.fixture
    def engine(self, index):
        """Create a search engine instance for testing."""
        return SearchEngine(index)

    def test_engine_initialization(self, engine, index):
        """Test search engine initialization."""
        assert engine.index is index
        assert engine.matcher.min_query_length == 2
        assert engine._stats["total_queries"] == 0

    def test_example_scenarios(self, engine):
        """Test the documented example queries."""
        assert engine.search("").kind == "prompt"
        assert engine.search("t").kind == "prompt"
        assert engine.search("zzz").kind == "no_results"
        assert engine.search("a.*").kind == "no_results"

        test_outcome = engine.search("test")
        assert [r.title for r in test_outcome.matches] == ["Testing Guide"]

        intro_outcome, payload = engine.search_and_render("INTRO")
        assert [r.title for r in intro_outcome.matches] == ["Introduction"]
        assert payload.entries[0].title_segments[0].text == "Intro"
        assert payload.entries[0].title_segments[0].highlighted is True

    def test_search_and_render_base_path(self, engine):
        """Test that the base path reaches the payload."""
        _, payload = engine.search_and_render("guide", base_path="../")

        assert payload.entries[0].url == "../chapters/11-testing.html"

    def test_search_and_render_prompt(self, engine):
        """Test rendering of a short query."""
        outcome, payload = engine.search_and_render("x")

        assert outcome.kind == "prompt"
        assert payload.kind == "prompt"
        assert payload.hint == "Минимум 2 символа"

    def test_settings_flow_into_components(self, index):
        """Test that constructor options reach the matcher and renderer."""
        engine = SearchEngine(
            index,
            min_query_length=3,
            summary_size=1,
            messages=SearchMessages(prompt_hint="min {min_query_length}"),
        )

        _, prompt = engine.search_and_render("te")
        assert prompt.hint == "min 3"

        _, results = engine.search_and_render("tes")
        assert results.entries[0].summary == "unit"

    def test_repeated_search_identical(self, engine):
        """Test that statistics do not change outcomes."""
        first = engine.search("in")
        second = engine.search("in")

        assert first == second

    def test_performance_metrics(self, engine):
        """Test statistics tracking."""
        engine.search("t")
        engine.search("zzz")
        engine.search("in")
        engine.search("test")

        stats = engine.get_stats()

        assert stats["total_queries"] == 4
        assert stats["prompts"] == 1
        assert stats["no_results"] == 1
        assert stats["result_queries"] == 2
        assert stats["total_matches"] == 3
        assert stats["prompt_rate"] == 1 / 4
        assert stats["no_results_rate"] == 1 / 4
        assert stats["results_rate"] == 2 / 4
        assert stats["average_execution_time_ms"] >= 0
        assert stats["index_stats"]["total_records"] == 2

    def test_empty_stats(self, engine):
        """Test statistics before any query."""
        stats = engine.get_stats()

        assert stats["total_queries"] == 0
        assert stats["average_execution_time_ms"] == 0.0
        assert stats["results_rate"] == 0.0

    def test_reset_stats(self, engine):
        """Test clearing statistics."""
        engine.search("intro")
        engine.reset_stats()

        assert engine.get_stats()["total_queries"] == 0
        assert engine.search("intro").kind == "results"
