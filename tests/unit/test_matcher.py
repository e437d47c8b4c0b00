"""Unit tests for the query matcher."""

import pytest

from chapter_search.core.index import SearchIndex
from chapter_search.core.matcher import QueryMatcher
from chapter_search.models.outcome import NoResultsOutcome, PromptOutcome, ResultsOutcome


class TestQueryMatcher:
    """Test cases for the QueryMatcher class."""

    @pytest.fixture
    def index(self):
        """Sample chapter index."""
        return SearchIndex.from_manifest([
            {"title": "Introduction", "url": "chapters/00-introduction.html", "keywords": "intro overview start", "chapter": "Введение"},
            {"title": "Testing Guide", "url": "chapters/11-testing.html", "keywords": "unit tests xctest mock", "chapter": "Глава 11"},
            {"title": "Протоколы", "url": "chapters/06-protocols.html", "keywords": "protocol протокол extension delegate", "chapter": "Глава 6"},
            {"title": "C++ Interop", "url": "chapters/cpp-interop.html", "keywords": "c++ bridging objc"},
            {"title": "Introduction", "url": "chapters/intro-copy.html", "keywords": ""},
        ])

    @pytest.fixture
    def matcher(self, index):
        """Create a matcher over the sample index."""
        return QueryMatcher(index)

    def titles(self, outcome):
        return [record.title for record in outcome.matches]

    @pytest.mark.parametrize("query", ["", "t", "Z", "+", "я"])
    def test_short_query_prompts(self, matcher, query):
        """Test that queries under two characters produce a prompt."""
        outcome = matcher.search(query)

        assert isinstance(outcome, PromptOutcome)
        assert outcome.kind == "prompt"

    def test_short_query_prompts_on_empty_index(self):
        """Test the prompt does not depend on index contents."""
        assert QueryMatcher(SearchIndex()).search("a").kind == "prompt"

    def test_custom_min_query_length(self, index):
        """Test a raised minimum query length."""
        matcher = QueryMatcher(index, min_query_length=4)

        assert matcher.search("int").kind == "prompt"
        assert matcher.search("intr").kind == "results"

    def test_title_match(self, matcher):
        """Test matching on the title."""
        outcome = matcher.search("test")

        assert isinstance(outcome, ResultsOutcome)
        assert "Testing Guide" in self.titles(outcome)
        assert outcome.query == "test"

    def test_keyword_match(self, matcher):
        """Test matching on keywords only."""
        outcome = matcher.search("xctest")

        assert self.titles(outcome) == ["Testing Guide"]

    def test_case_insensitive(self, matcher):
        """Test that matching ignores case."""
        outcome = matcher.search("INTRO")

        assert self.titles(outcome) == ["Introduction", "Introduction"]

    def test_cyrillic_case_insensitive(self, matcher):
        """Test case folding for non-Latin text."""
        assert self.titles(matcher.search("ПРОТО")) == ["Протоколы"]
        assert self.titles(matcher.search("ПРОТОКОЛ")) == ["Протоколы"]

    def test_every_substring_casing_matches(self, matcher, index):
        """Test that any casing of a title or keyword substring finds its record."""
        for record in index:
            samples = [record.title[:3], record.title[-2:]]
            if len(record.keywords) >= 2:
                samples.append(record.keywords[:4])

            for sample in samples:
                for variant in (sample, sample.upper(), sample.lower(), sample.swapcase()):
                    outcome = matcher.search(variant)
                    assert outcome.kind == "results", variant
                    assert record in outcome.matches, variant

    def test_order_preserved(self, matcher, index):
        """Test that matches keep index order."""
        outcome = matcher.search("in")

        assert [r.url for r in outcome.matches] == [
            "chapters/00-introduction.html",
            "chapters/11-testing.html",
            "chapters/cpp-interop.html",
            "chapters/intro-copy.html",
        ]

        positions = [index.records.index(r) for r in outcome.matches]
        assert positions == sorted(positions)

    def test_no_results(self, matcher):
        """Test a query that occurs nowhere."""
        outcome = matcher.search("zzz")

        assert isinstance(outcome, NoResultsOutcome)
        assert outcome.query == "zzz"

    def test_query_not_trimmed(self, matcher):
        """Test that surrounding whitespace is part of the query."""
        # " t" has length two and occurs in "unit tests"
        assert self.titles(matcher.search(" t")) == ["Testing Guide"]
        assert matcher.search("  ").kind == "no_results"
        assert matcher.search("intro ").kind == "results"
        assert matcher.search("guide ").kind == "no_results"

    @pytest.mark.parametrize("query", ["a.*", "a.*b", "[test", "a\\b", "(((", "^$", "?*"])
    def test_metacharacters_are_literal(self, matcher, query):
        """Test that pattern metacharacters are plain text for matching."""
        assert matcher.search(query).kind == "no_results"

    def test_plus_plus_literal(self, matcher):
        """Test a query made of metacharacters that does occur."""
        assert self.titles(matcher.search("c++")) == ["C++ Interop"]

    def test_very_long_query(self, matcher):
        """Test that long queries do not fail."""
        assert matcher.search("x" * 100000).kind == "no_results"

    def test_deterministic(self, matcher):
        """Test that repeated searches give equal outcomes."""
        for query in ["", "t", "in", "zzz", "INTRO"]:
            assert matcher.search(query) == matcher.search(query)

    def test_duplicates_surface_separately(self, matcher):
        """Test that duplicate titles are both returned."""
        outcome = matcher.search("introduction")

        assert len(outcome.matches) == 2
        assert outcome.matches[0].url != outcome.matches[1].url
