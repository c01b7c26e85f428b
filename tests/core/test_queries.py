"""Tests for the Union-Find query runner."""

import pytest

from cp_toolkit.core.queries import (
    Query,
    QueryFormatError,
    QueryKind,
    parse_queries,
    run_queries,
    yesno,
)
from cp_toolkit.structures.union_find import IndexOutOfRangeError

SAMPLE = """4 7
1 0 1
0 0 1
0 2 3
1 0 1
1 1 2
0 0 2
1 1 3
"""


class TestParseQueries:
    """Tests for parse_queries."""

    def test_parse_sample(self):
        """Test header and query lines are parsed."""
        n, queries = parse_queries(SAMPLE)
        assert n == 4
        assert len(queries) == 7
        assert queries[0] == Query(kind=QueryKind.SAME, u=0, v=1)
        assert queries[1] == Query(kind=QueryKind.UNITE, u=0, v=1)

    def test_blank_lines_ignored(self):
        """Test blank lines between queries are skipped."""
        n, queries = parse_queries("2 1\n\n0 0 1\n\n")
        assert n == 2
        assert len(queries) == 1

    def test_zero_queries(self):
        """Test header-only input."""
        assert parse_queries("5 0\n") == (5, [])

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "4\n",
            "a b\n",
            "4 1\n0 1\n",
            "4 1\n0 x 1\n",
            "4 1\n2 0 1\n",
            "4 2\n0 0 1\n",
            "-1 0\n",
        ],
    )
    def test_malformed_input(self, text):
        """Test malformed input raises QueryFormatError."""
        with pytest.raises(QueryFormatError):
            parse_queries(text)

    def test_format_error_is_value_error(self):
        """Test QueryFormatError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_queries("")


class TestRunQueries:
    """Tests for run_queries."""

    def test_digit_answers(self):
        """Test answers as 1/0."""
        n, queries = parse_queries(SAMPLE)
        assert run_queries(n, queries) == ["0", "1", "0", "1"]

    def test_yesno_answers(self):
        """Test answers as Yes/No."""
        n, queries = parse_queries(SAMPLE)
        assert run_queries(n, queries, answer_style="yesno") == ["No", "Yes", "No", "Yes"]

    def test_out_of_range(self):
        """Test query referencing element >= n raises."""
        n, queries = parse_queries("3 1\n0 0 3\n")
        with pytest.raises(IndexOutOfRangeError):
            run_queries(n, queries)

    def test_unknown_answer_style(self):
        """Test unknown answer style is rejected."""
        with pytest.raises(ValueError):
            run_queries(1, [], answer_style="bool")


def test_yesno():
    """Test yesno helper."""
    assert yesno(True) == "Yes"
    assert yesno(False) == "No"
