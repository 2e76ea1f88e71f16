"""Tests for the symbol codec and the criteria resolver."""

from datetime import date

import pytest

from commit_search.criteria import CriteriaResolver, build_search_label
from commit_search.models import SearchArgs, SearchDimension
from commit_search.symbols import (
    DIMENSION_TO_SYMBOL,
    SYMBOL_TO_DIMENSION,
    dimension_to_symbol,
    parse_prefix,
    symbol_to_dimension,
)


class TestSymbolCodec:
    """Tests for prefix symbol mapping."""

    def test_round_trip_is_bijective(self):
        """Test every symbol maps to one dimension and back."""
        for symbol in SYMBOL_TO_DIMENSION:
            assert dimension_to_symbol(symbol_to_dimension(symbol)) == symbol
        for dimension in DIMENSION_TO_SYMBOL:
            assert symbol_to_dimension(dimension_to_symbol(dimension)) == dimension
        assert len(set(SYMBOL_TO_DIMENSION.values())) == len(SYMBOL_TO_DIMENSION)

    def test_known_symbols(self):
        """Test the fixed symbol table."""
        assert symbol_to_dimension("@") == SearchDimension.AUTHOR
        assert symbol_to_dimension("~") == SearchDimension.CHANGED_LINES
        assert symbol_to_dimension("=") == SearchDimension.CHANGES
        assert symbol_to_dimension(":") == SearchDimension.FILES
        assert symbol_to_dimension("#") == SearchDimension.SHA

    def test_unknown_symbol(self):
        """Test unrecognized symbols and unmapped dimensions are absent."""
        assert symbol_to_dimension("!") is None
        assert dimension_to_symbol(SearchDimension.MESSAGE) is None
        assert dimension_to_symbol(SearchDimension.BRANCH) is None

    def test_table_is_immutable(self):
        """Test the table cannot be modified."""
        with pytest.raises(TypeError):
            SYMBOL_TO_DIMENSION["!"] = SearchDimension.MESSAGE

    def test_parse_prefix(self):
        """Test prefix parsing with and without a separating space."""
        assert parse_prefix("@jane") == (SearchDimension.AUTHOR, "jane")
        assert parse_prefix("@ jane") == (SearchDimension.AUTHOR, "jane")
        assert parse_prefix("@") == (SearchDimension.AUTHOR, "")
        assert parse_prefix("jane") is None
        assert parse_prefix("") is None


class TestCriteriaResolver:
    """Tests for CriteriaResolver.resolve."""

    @pytest.fixture
    def resolver(self):
        return CriteriaResolver()

    def test_author_prefix(self, resolver):
        """Test '@jane' searches the author and the message."""
        resolved = resolver.resolve(SearchArgs(search="@jane"))
        assert resolved.criteria == {
            SearchDimension.AUTHOR: "jane",
            SearchDimension.MESSAGE: "@jane",
        }
        assert list(resolved.criteria) == [SearchDimension.AUTHOR, SearchDimension.MESSAGE]
        assert resolved.search_by == SearchDimension.MESSAGE

    def test_sha_prefix(self, resolver):
        """Test '#abc123' searches the sha and the message."""
        resolved = resolver.resolve(SearchArgs(search="#abc123"))
        assert resolved.criteria[SearchDimension.SHA] == "abc123"
        assert resolved.criteria[SearchDimension.MESSAGE] == "#abc123"

    def test_prefix_with_space(self, resolver):
        """Test a space after the symbol is dropped."""
        resolved = resolver.resolve(SearchArgs(search=": src/app.py"))
        assert resolved.criteria[SearchDimension.FILES] == "src/app.py"

    def test_prefix_without_value(self, resolver):
        """Test a bare symbol yields an empty value that is kept."""
        resolved = resolver.resolve(SearchArgs(search="~"))
        assert resolved.criteria == {
            SearchDimension.CHANGED_LINES: "",
            SearchDimension.MESSAGE: "~",
        }

    def test_unknown_prefix_is_plain_text(self, resolver):
        """Test text with an unknown symbol becomes a message search."""
        resolved = resolver.resolve(SearchArgs(search="!important"))
        assert resolved.criteria == {SearchDimension.MESSAGE: "!important"}

    def test_prefix_beats_explicit_author(self, resolver):
        """Test the parsed author wins over the author filter."""
        resolved = resolver.resolve(SearchArgs(search="@bob", author="jane"))
        assert resolved.criteria[SearchDimension.AUTHOR] == "bob"
        assert resolved.criteria[SearchDimension.MESSAGE] == "@bob"

    def test_explicit_author(self, resolver):
        """Test the author filter applies when no author was parsed."""
        resolved = resolver.resolve(SearchArgs(search="fix", author="jane"))
        assert resolved.criteria == {
            SearchDimension.MESSAGE: "fix",
            SearchDimension.AUTHOR: "jane",
        }

    def test_explicit_sha_overwrites(self, resolver):
        """Test the sha filter overwrites a parsed sha."""
        resolved = resolver.resolve(SearchArgs(search="#abc", sha="def456"))
        assert resolved.criteria[SearchDimension.SHA] == "def456"

    def test_branch(self, resolver):
        """Test the branch filter is always set."""
        resolved = resolver.resolve(SearchArgs(search="fix", branch="main"))
        assert resolved.criteria[SearchDimension.BRANCH] == "main"

    def test_before_and_after_without_since(self, resolver):
        """Test since '-1' leaves room for before/after."""
        resolved = resolver.resolve(SearchArgs(
            since="-1",
            before=date(2024, 1, 31),
            after=date(2024, 1, 1),
        ))
        assert resolved.criteria[SearchDimension.BEFORE] == "2024-01-31"
        assert resolved.criteria[SearchDimension.AFTER] == "2024-01-01"
        assert SearchDimension.SINCE not in resolved.criteria

    def test_since_excludes_before_and_after(self, resolver):
        """Test a real since drops before/after."""
        resolved = resolver.resolve(SearchArgs(
            since="2024-01-01",
            before=date(2024, 1, 31),
            after=date(2023, 12, 1),
        ))
        assert resolved.criteria[SearchDimension.SINCE] == "2024-01-01"
        assert SearchDimension.BEFORE not in resolved.criteria
        assert SearchDimension.AFTER not in resolved.criteria

    def test_prefill_reencodes_dimension(self, resolver):
        """Test prefill turns a structured search back into prefixed text."""
        resolved = resolver.resolve(SearchArgs(
            search="jane",
            search_by=SearchDimension.AUTHOR,
            prefill_only=True,
        ))
        assert resolved.search == "@jane"
        assert resolved.criteria == {
            SearchDimension.AUTHOR: "jane",
            SearchDimension.MESSAGE: "@jane",
        }
        assert resolved.origin_args.search_by is None
        assert resolver.last_search == "@jane"

    def test_dimension_without_search(self, resolver):
        """Test a dimension alone synthesizes its symbol as the search."""
        resolved = resolver.resolve(SearchArgs(search_by=SearchDimension.FILES))
        assert resolved.search == ":"
        assert resolved.criteria == {
            SearchDimension.FILES: "",
            SearchDimension.MESSAGE: ":",
        }
        assert resolved.search_by == SearchDimension.FILES

    def test_structured_search_is_not_reparsed(self, resolver):
        """Test search plus dimension falls back to a plain message search."""
        resolved = resolver.resolve(SearchArgs(search="@jane", search_by=SearchDimension.MESSAGE))
        assert resolved.criteria == {SearchDimension.MESSAGE: "@jane"}
        assert resolved.search_by == SearchDimension.MESSAGE
        assert resolver.last_search is None

    def test_structured_search_keeps_explicit_author(self, resolver):
        """Test a structured search does not shadow the author filter."""
        resolved = resolver.resolve(SearchArgs(
            search="jane",
            search_by=SearchDimension.AUTHOR,
            author="bob",
        ))
        assert resolved.criteria == {SearchDimension.AUTHOR: "bob"}
        assert resolved.search == "jane"
        assert resolved.search_by == SearchDimension.AUTHOR

    def test_structured_search_only_filters(self, resolver):
        """Test a structured search with filters uses the filters alone."""
        resolved = resolver.resolve(SearchArgs(
            search="jane",
            search_by=SearchDimension.AUTHOR,
            branch="main",
        ))
        assert resolved.criteria == {SearchDimension.BRANCH: "main"}

    def test_empty_search(self, resolver):
        """Test empty input still yields a message criterion."""
        resolved = resolver.resolve(SearchArgs())
        assert resolved.criteria == {SearchDimension.MESSAGE: ""}
        assert resolved.search == ""
        assert resolver.last_search == ""

    def test_last_search_tracks_latest(self, resolver):
        """Test the last search slot is overwritten by each parse."""
        resolver.resolve(SearchArgs(search="first"))
        resolver.resolve(SearchArgs(search="second"))
        assert resolver.last_search == "second"

    def test_no_fallback_to_last_search(self, resolver):
        """Test an empty search does not reuse the previous one."""
        resolver.resolve(SearchArgs(search="@jane"))
        resolved = resolver.resolve(SearchArgs())
        assert resolved.criteria == {SearchDimension.MESSAGE: ""}

    def test_caller_args_untouched(self, resolver):
        """Test the resolver works on a copy."""
        args = SearchArgs(search="jane", search_by=SearchDimension.AUTHOR, prefill_only=True)
        resolved = resolver.resolve(args)
        assert args.search == "jane"
        assert args.search_by == SearchDimension.AUTHOR
        assert resolved.args is not args

    def test_origin_args_replay(self, resolver):
        """Test resolving the origin args again gives the same criteria."""
        first = resolver.resolve(SearchArgs(
            search="jane",
            search_by=SearchDimension.AUTHOR,
            prefill_only=True,
            branch="main",
        ))
        replay = resolver.resolve(first.origin_args)
        assert replay.criteria == first.criteria
        assert replay.search == first.search


class TestSearchLabel:
    """Tests for build_search_label."""

    def test_echoes_criteria_in_order(self):
        """Test the label lists criteria in insertion order."""
        label = build_search_label({
            SearchDimension.AUTHOR: "jane",
            SearchDimension.MESSAGE: "@jane",
        })
        assert label == 'commits matching author "jane", message "@jane"'

    def test_empty_values(self):
        """Test criteria without values describe all commits."""
        assert build_search_label({SearchDimension.MESSAGE: ""}) == "all commits"
