"""Tests for content: content_file_path, title_from_metadata, resolve_title."""

from pathlib import Path

import pytest

from popular_pages.content import content_file_path, resolve_title, title_from_metadata
from popular_pages.errors import ContentReadError, FrontMatterError


def test_content_file_path_is_plain_concatenation():
    assert content_file_path("/site", "/foo/bar") == Path("/site/foo/barindex.md")
    assert content_file_path("/site", "/foo/bar/") == Path("/site/foo/bar/index.md")


def test_title_from_metadata_any_case():
    assert title_from_metadata({"title": "x"}) == "x"
    assert title_from_metadata({"Title": "y"}) == "y"
    assert title_from_metadata({"TITLE": 2024}) == "2024"


def test_title_from_metadata_missing():
    assert title_from_metadata({}) == ""
    assert title_from_metadata({"date": "2024-01-01"}) == ""
    assert title_from_metadata({"title": None}) == ""


def test_resolve_title_yaml(tmp_path, write_page):
    write_page(tmp_path, "/posts/hello/", "---\ntitle: Hello World\ndraft: false\n---")
    assert resolve_title(str(tmp_path), "/posts/hello/") == "Hello World"


def test_resolve_title_toml(tmp_path, write_page):
    write_page(tmp_path, "/posts/toml/", '+++\ntitle = "TOML Page"\n+++')
    assert resolve_title(str(tmp_path), "/posts/toml/") == "TOML Page"


def test_resolve_title_json(tmp_path, write_page):
    write_page(tmp_path, "/posts/json/", '{\n  "title": "JSON Page"\n}')
    assert resolve_title(str(tmp_path), "/posts/json/") == "JSON Page"


def test_resolve_title_empty_when_field_absent(tmp_path, write_page):
    write_page(tmp_path, "/posts/untitled/", "---\ndate: 2024-01-01\n---")
    assert resolve_title(str(tmp_path), "/posts/untitled/") == ""


def test_resolve_title_empty_without_front_matter(tmp_path):
    page = tmp_path / "plain" / "index.md"
    page.parent.mkdir()
    page.write_text("# Just a heading\n", encoding="utf-8")
    assert resolve_title(str(tmp_path), "/plain/") == ""


def test_resolve_title_reads_joined_path_verbatim(tmp_path):
    (tmp_path / "foo").mkdir()
    (tmp_path / "foo" / "barindex.md").write_text("---\ntitle: Bar\n---\n", encoding="utf-8")
    assert resolve_title(str(tmp_path), "/foo/bar") == "Bar"


def test_resolve_title_missing_file(tmp_path):
    with pytest.raises(ContentReadError) as exc:
        resolve_title(str(tmp_path), "/missing/")
    assert str(tmp_path / "missing" / "index.md") in str(exc.value)


def test_resolve_title_malformed_yaml(tmp_path, write_page):
    write_page(tmp_path, "/broken/", "---\ntitle: [unclosed\n---")
    with pytest.raises(FrontMatterError):
        resolve_title(str(tmp_path), "/broken/")


def test_resolve_title_malformed_toml(tmp_path, write_page):
    write_page(tmp_path, "/broken-toml/", "+++\ntitle = \n+++")
    with pytest.raises(FrontMatterError):
        resolve_title(str(tmp_path), "/broken-toml/")
