"""Unit tests for the diff markup renderer."""

import pytest
from utils import change_elements, navigation_indices, parse_html

from memodiff.diff.operations import DiffKind, DiffOperation
from memodiff.diff.renderers.markup import MarkupRenderer, render_fragment
from memodiff.options.html import DiffHtmlOptions


@pytest.mark.unit
class TestMarkupRenderer:
    """Tests for MarkupRenderer.render."""

    def test_single_substitution(self, cat_car_operations):
        """Test the exact markup of a substitution followed by a newline."""
        assert MarkupRenderer().render(cat_car_operations) == (
            "<span>ca</span>"
            '<del tabindex="1" inert>t</del>'
            '<ins tabindex="2">r</ins>'
            '<span><span class="break"></span><br></span>'
        )

    def test_empty_input_renders_nothing(self):
        """Test that no operations give an empty fragment."""
        assert MarkupRenderer().render([]) == ""

    def test_identical_text_renders_plain_span(self):
        """Test that a single equal operation gives one span without changes."""
        html = render_fragment([DiffOperation(DiffKind.EQUAL, "same")])
        assert html == "<span>same</span>"
        assert change_elements(parse_html(html)) == []

    def test_pure_insertion(self):
        """Test that a lone insert is numbered 1 and interactive."""
        assert render_fragment([DiffOperation(DiffKind.INSERT, "new")]) == '<ins tabindex="1">new</ins>'

    def test_empty_text_still_renders_element(self):
        """Test that empty spans keep their element and index."""
        html = render_fragment(
            [
                DiffOperation(DiffKind.EQUAL, ""),
                DiffOperation(DiffKind.INSERT, ""),
                DiffOperation(DiffKind.DELETE, ""),
            ]
        )
        assert html == '<span></span><ins tabindex="1"></ins><del tabindex="2" inert></del>'

    def test_text_is_escaped(self):
        """Test that markup characters in text never form elements."""
        html = render_fragment([DiffOperation(DiffKind.EQUAL, "<script>&</script>")])
        assert html == "<span>&lt;script&gt;&amp;&lt;/script&gt;</span>"
        soup = parse_html(html)
        assert soup.find("script") is None
        assert soup.span.get_text() == "<script>&</script>"

    def test_non_ascii_text_is_written_literally(self):
        """Test that CJK text and glyphs are not entity-encoded."""
        html = render_fragment([DiffOperation(DiffKind.INSERT, "日本語¶→")])
        assert html == '<ins tabindex="1">日本語¶→</ins>'

    def test_multiple_newlines_in_one_span(self):
        """Test that each newline gets its own break marker inside the element."""
        html = render_fragment([DiffOperation(DiffKind.DELETE, "a\n\nb")])
        assert html == (
            '<del tabindex="1" inert>a'
            '<span class="break"></span><br>'
            '<span class="break"></span><br>'
            "b</del>"
        )

    def test_custom_break_class(self):
        """Test that the break marker class comes from options."""
        renderer = MarkupRenderer(DiffHtmlOptions(break_class="eol"))
        html = renderer.render([DiffOperation(DiffKind.EQUAL, "\n")])
        assert html == '<span><span class="eol"></span><br></span>'

    def test_one_element_per_operation(self, cat_car_operations):
        """Test that the fragment has one top-level element per operation, in order."""
        soup = parse_html(MarkupRenderer().render(cat_car_operations))
        assert [node.name for node in soup.contents] == ["span", "del", "ins", "span"]

    def test_indices_and_inert(self):
        """Test navigation numbering and inert marking across several changes."""
        ops = [
            DiffOperation(DiffKind.INSERT, "a"),
            DiffOperation(DiffKind.EQUAL, "b"),
            DiffOperation(DiffKind.DELETE, "c"),
            DiffOperation(DiffKind.DELETE, "d"),
            DiffOperation(DiffKind.INSERT, "e"),
        ]
        soup = parse_html(render_fragment(ops))
        assert navigation_indices(soup) == [1, 2, 3, 4]
        assert all(tag.has_attr("inert") for tag in soup.find_all("del"))
        assert not any(tag.has_attr("inert") for tag in soup.find_all("ins"))
        assert not any(tag.has_attr("tabindex") for tag in soup.find_all("span"))


@pytest.mark.unit
class TestRenderNodes:
    """Tests for building detached nodes."""

    def test_nodes_are_detached_tags(self, cat_car_operations):
        """Test that render_nodes returns parentless elements."""
        from bs4 import BeautifulSoup

        soup = BeautifulSoup("", "html.parser")
        nodes = MarkupRenderer().render_nodes(cat_car_operations, soup)
        assert len(nodes) == 4
        assert all(node.parent is None for node in nodes)
        assert nodes[1]["tabindex"] == "1"
