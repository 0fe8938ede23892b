"""Tests for query string and CQL construction."""

from __future__ import annotations

from wikiview.api.client import build_query_string
from wikiview.api.search import build_cql


def test_query_string_encodes_values_in_input_order() -> None:
    """Values are percent-encoded and pairs keep their order."""

    params = [("cql", 'text ~ "foo bar"'), ("limit", "100")]
    assert build_query_string(params) == "?cql=text%20~%20%22foo%20bar%22&limit=100"


def test_query_string_keeps_mapping_insertion_order() -> None:
    assert build_query_string({"b": "2", "a": "1"}) == "?b=2&a=1"


def test_query_string_empty() -> None:
    assert build_query_string(None) == ""
    assert build_query_string([]) == ""
    assert build_query_string({}) == ""


def test_query_string_encodes_reserved_characters() -> None:
    assert build_query_string([("q", "a&b=c/d")]) == "?q=a%26b%3Dc%2Fd"


def test_cql_text_mode_wraps_terms() -> None:
    assert build_cql("foo") == 'text ~ "foo"'
    assert build_cql("foo bar", raw=False) == 'text ~ "foo bar"'


def test_cql_raw_mode_passes_terms_through() -> None:
    assert build_cql("foo", raw=True) == "foo"
    assert build_cql('space = DOC and title ~ "x"', raw=True) == 'space = DOC and title ~ "x"'
