"""Tests for linklist.extract module."""

import pytest

from linklist.classify import LinkKind
from linklist.errors import MalformedUrlError, NoLinksFoundError
from linklist.extract import LinkSelection, extract_links
from linklist.format import DisplayMode

MIXED_HTML = """
<html><head>
    <link rel="stylesheet" href="/static/site.css">
</head><body>
    <a href="/about">About</a>
    <a href="http://h/about">About again</a>
    <a href="http://other/x">Elsewhere</a>
    <a href="/docs/">Docs</a>
    <a href="/docs/guide#install">Guide</a>
    <a href="/img/logo.png">Logo</a>
    <a href='files/report.pdf?download=1'>Report</a>
    <a href="mailto:team@h">Mail</a>
</body></html>
"""


class TestLinkSelection:
    def test_default_pages_only(self):
        selection = LinkSelection.from_file_type(None)
        assert selection.include_pages
        assert not selection.include_files

    def test_all(self):
        selection = LinkSelection.from_file_type("all")
        assert selection.include_pages
        assert selection.file_type == "all"

    def test_extension_excludes_pages(self):
        selection = LinkSelection.from_file_type("png")
        assert not selection.include_pages
        assert selection.file_type == "png"


class TestExtractLinks:
    def test_same_target_collapses(self):
        html = """
        <a href="/about">About</a>
        <a href="http://h/about">About</a>
        <a href="http://other/x">External</a>
        """
        entries = extract_links(html, "http://h", LinkSelection(include_pages=True))
        assert [e.path for e in entries] == ["/about"]
        assert entries[0].text == "http://h/about"

    def test_relative_display(self):
        entries = extract_links(MIXED_HTML, "http://h", display_mode=DisplayMode.RELATIVE)
        assert [e.text for e in entries] == ["/about", "/docs/", "/docs/guide"]

    def test_pages_and_files(self):
        entries = extract_links(MIXED_HTML, "http://h", LinkSelection.from_file_type("all"))
        assert [e.path for e in entries] == [
            "/about",
            "/docs/",
            "/docs/guide",
            "/img/logo.png",
            "/static/site.css",
            "files/report.pdf",
        ]

    def test_only_one_file_type(self):
        entries = extract_links(MIXED_HTML, "http://h", LinkSelection.from_file_type("png"))
        assert [e.text for e in entries] == ["http://h/img/logo.png"]
        assert entries[0].kind is LinkKind.FILE

    def test_entry_categories(self):
        entries = {e.path: e for e in extract_links(
            MIXED_HTML, "http://h", LinkSelection.from_file_type("all"),
        )}
        assert entries["/docs/"].is_directory
        assert entries["/docs/"].kind is LinkKind.PAGE
        assert not entries["/about"].is_directory
        assert entries["files/report.pdf"].kind is LinkKind.FILE

    def test_base_path_of_file_url(self):
        entries = extract_links('<a href="next">', "http://h/dir/page.html")
        assert entries[0].text == "http://h/dir/next"

    def test_port_origin(self):
        html = '<a href="http://h:8080/a/b"></a><a href="http://h/a/c"></a>'
        entries = extract_links(html, "http://h:8080/", display_mode=DisplayMode.RELATIVE)
        assert [e.path for e in entries] == ["/a/b"]

    def test_empty_document(self):
        with pytest.raises(NoLinksFoundError):
            extract_links("", "http://h")

    def test_only_cross_origin(self):
        html = '<a href="http://other/x"></a><a href="https://h.example/y"></a>'
        with pytest.raises(NoLinksFoundError):
            extract_links(html, "http://h")

    def test_filter_without_matches(self):
        with pytest.raises(NoLinksFoundError):
            extract_links(MIXED_HTML, "http://h", LinkSelection.from_file_type("zip"))

    def test_malformed_source(self):
        with pytest.raises(MalformedUrlError):
            extract_links(MIXED_HTML, "not a url")

    def test_source_query_not_in_links(self):
        entries = extract_links('<a href="/about">', "http://h/docs?x=1")
        assert entries[0].text == "http://h/docs/about"

    def test_source_credentials_not_in_links(self):
        entries = extract_links('<a href="/about">', "http://u:pw@h/")
        assert entries[0].text == "http://h/about"
