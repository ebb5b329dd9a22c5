"""Unit tests for post-processing pre-rendered diff markup."""

import pytest
from bs4 import BeautifulSoup
from utils import change_elements, navigation_indices, parse_html

from memodiff.diff.engine import pretty_html
from memodiff.diff.renderers.document import DocumentAssembler
from memodiff.diff.renderers.postprocess import (
    DEFAULT_PASSES,
    PostProcessor,
    assign_navigation_indices,
    mark_deleted_inert,
    render_prerendered_document,
    replace_placeholder,
    strip_inline_styles,
)

PRETTY = (
    "<span>ca</span>"
    '<del style="background:#ffe6e6;">t</del>'
    '<ins style="background:#e6ffe6;">r</ins>'
    "<span>&para;<br></span>"
)


def _soup(markup: str = PRETTY) -> BeautifulSoup:
    return BeautifulSoup(markup, "html.parser")


@pytest.mark.unit
class TestTreePasses:
    """Tests for the individual tree passes."""

    def test_strip_inline_styles(self):
        """Test that style attributes are removed from change elements."""
        soup = strip_inline_styles(_soup())
        assert not any(tag.has_attr("style") for tag in change_elements(soup))

    def test_strip_inline_styles_leaves_other_elements(self):
        """Test that only ins/del lose their style."""
        soup = strip_inline_styles(_soup('<span style="color:red">x</span><ins style="a">y</ins>'))
        assert soup.span["style"] == "color:red"
        assert not soup.ins.has_attr("style")

    def test_strip_inline_styles_is_idempotent(self):
        """Test that a second run changes nothing."""
        once = str(strip_inline_styles(_soup()))
        twice = str(strip_inline_styles(strip_inline_styles(_soup())))
        assert once == twice

    def test_assign_navigation_indices(self):
        """Test document-order numbering starting at 1."""
        soup = assign_navigation_indices(_soup("<ins>a</ins><span>b</span><del>c</del><del>d</del>"))
        assert navigation_indices(soup) == [1, 2, 3]

    def test_assign_navigation_indices_overwrites_existing(self):
        """Test that stale indices are replaced."""
        soup = assign_navigation_indices(_soup('<del tabindex="7">a</del><ins tabindex="3">b</ins>'))
        assert navigation_indices(soup) == [1, 2]

    def test_mark_deleted_inert(self):
        """Test that only delete elements become inert."""
        soup = mark_deleted_inert(_soup())
        assert soup.find("del").has_attr("inert")
        assert not soup.find("ins").has_attr("inert")

    def test_replace_placeholder(self):
        """Test the pilcrow to return-arrow substitution."""
        assert replace_placeholder("<span>¶<br></span>") == "<span>↵<br></span>"
        assert replace_placeholder("no placeholder") == "no placeholder"


@pytest.mark.unit
class TestPostProcessor:
    """Tests for PostProcessor and render_prerendered_document."""

    def test_default_passes_order(self):
        """Test the standard pass order."""
        assert DEFAULT_PASSES == (strip_inline_styles, assign_navigation_indices, mark_deleted_inert)

    def test_process_runs_passes_in_order(self):
        """Test that custom passes run in the given order."""
        calls = []

        def first(soup):
            calls.append("first")
            return soup

        def second(soup):
            calls.append("second")
            return soup

        PostProcessor([first, second]).process(_soup())
        assert calls == ["first", "second"]

    def test_prerendered_document(self):
        """Test the full pre-rendered path on the cat/car markup."""
        html = render_prerendered_document("'a.txt'→'b.txt'", PRETTY)
        assert "¶" not in html
        assert "↵<br>" in html
        assert "style=" not in html.split("</head>", 1)[1]
        assert '<del tabindex="1" inert>t</del>' in html
        assert '<ins tabindex="2">r</ins>' in html

    def test_prerendered_document_structure(self):
        """Test that the pre-rendered body is wrapped like any other fragment."""
        soup = parse_html(render_prerendered_document("title", PRETTY))
        container = soup.find("div", id="diff-container")
        assert [child.name for child in container.children] == ["h1", "span", "del", "ins", "span"]
        assert navigation_indices(soup) == [1, 2]

    def test_prettyhtml_output_round_trip(self, cat_car_operations):
        """Test post-processing real diff_prettyHtml output."""
        html = render_prerendered_document("title", pretty_html(cat_car_operations))
        soup = parse_html(html)
        assert navigation_indices(soup) == [1, 2]
        assert soup.find("del").has_attr("inert")
        assert "↵" in soup.find("div", id="diff-container").get_text()

    def test_without_changes(self):
        """Test that markup without changes passes through untouched."""
        html = render_prerendered_document("title", "<span>same</span>")
        assert '<div id="diff-container"><h1>title</h1><span>same</span></div>' in html

    def test_processing_assembled_tree_keeps_head(self):
        """Test that tree passes never touch the document head."""
        assembler = DocumentAssembler()
        soup = PostProcessor().process(assembler.build_tree("title", PRETTY))
        head = soup.find("head")
        assert [child.name for child in head.children] == ["meta", "meta", "link", "title", "style"]

    def test_placeholder_replaced_throughout_document(self):
        """Test that the glyph swap also applies to pilcrows in the title."""
        html = render_prerendered_document("t¶", "<span>x</span>")
        assert "<h1>t↵</h1>" in html
        assert "<title>t↵</title>" in html
        assert "¶" not in html
