"""Tests for page id extraction from browser URLs."""

from __future__ import annotations

import pytest

from wikiview.api.urls import page_id_from_url


def test_extracts_id_from_space_page_url() -> None:
    url = "https://example.atlassian.net/wiki/spaces/DOC/pages/123456/Some+Title"
    assert page_id_from_url(url) == "123456"


def test_extracts_id_without_title_segment() -> None:
    assert page_id_from_url("https://example.atlassian.net/wiki/spaces/DOC/pages/98765") == "98765"


def test_segment_is_returned_verbatim() -> None:
    url = "https://example.atlassian.net/wiki/spaces/DOC/pages/00042/Title"
    assert page_id_from_url(url) == "00042"


def test_other_shapes_take_the_positional_segment() -> None:
    """Extraction is positional: a differently shaped URL yields whatever sits at that position."""

    url = "https://example.atlassian.net/wiki/spaces/DOC/pages/edit-v2/555"
    assert page_id_from_url(url) == "edit-v2"


def test_short_url_raises() -> None:
    with pytest.raises(ValueError):
        page_id_from_url("https://example.atlassian.net/wiki/x/AbCd")
