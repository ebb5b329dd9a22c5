"""Document-level scenarios running the engine, renderer and assembler together."""

import pytest
from utils import change_elements, navigation_indices, parse_html

from memodiff.diff.api import diff_texts, make_title
from memodiff.diff.engine import compute_diff
from memodiff.diff.operations import DiffKind, DiffOperation
from memodiff.diff.sources import FromOperations


@pytest.mark.unit
@pytest.mark.parametrize("strategy", ["operations", "prerendered"])
class TestReviewScenarios:
    """End-to-end scenarios, checked for both rendering strategies."""

    def test_single_character_substitution(self, strategy):
        """cat -> car: one inert deletion then one interactive insertion."""
        title = make_title("a.txt", "b.txt")
        html = diff_texts("cat\n", "car\n", title=title, strategy=strategy)

        assert html.startswith("<!DOCTYPE html>")
        assert f"<title>{title}</title>" in html
        soup = parse_html(html)
        assert len(soup.find_all("style")) == 1
        assert len(soup.find_all("link", rel="icon")) == 1

        deleted, inserted = change_elements(soup)
        assert deleted.name == "del"
        assert deleted.get_text() == "t"
        assert deleted["tabindex"] == "1"
        assert deleted.has_attr("inert")
        assert inserted.name == "ins"
        assert inserted.get_text() == "r"
        assert inserted["tabindex"] == "2"
        assert not inserted.has_attr("inert")

    def test_identical_texts(self, strategy):
        """Identical inputs render without any navigable or inert element."""
        text = "unchanged line\nsecond line\n"
        assert compute_diff(text, text) == [DiffOperation(DiffKind.EQUAL, text)]

        soup = parse_html(diff_texts(text, text, title="same", strategy=strategy))
        assert navigation_indices(soup) == []
        assert soup.find_all(attrs={"tabindex": True}) == []
        assert soup.find_all(attrs={"inert": True}) == []


@pytest.mark.unit
class TestEmbeddedNewline:
    """A span with an embedded newline stays one element."""

    def test_newline_inside_single_element(self):
        """line1\\nline2 renders as one element holding both lines and a break."""
        html = FromOperations((DiffOperation(DiffKind.INSERT, "line1\nline2"),)).render_document("t")
        container = parse_html(html).find("div", id="diff-container")

        elements = container.find_all("ins")
        assert len(elements) == 1
        ins = elements[0]
        assert [getattr(child, "name", None) for child in ins.children] == [None, "span", "br", None]
        assert ins.contents[0] == "line1"
        assert ins.contents[-1] == "line2"
        assert ins.find("span")["class"] == ["break"]
