#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/memodiff/diff/renderers/markup.py
"""Render diff operations as an annotated HTML fragment.

Each operation becomes exactly one element, in input order:

- ``EQUAL`` to ``<span>``
- ``INSERT`` to ``<ins tabindex="N">``
- ``DELETE`` to ``<del tabindex="N" inert>``

``N`` is a navigation index shared by inserts and deletes, so stepping
through the document with the keyboard visits every change in reading
order. Deleted text stays visible but is inert: it is skipped by focus
navigation and cannot be activated.

Elements are built as BeautifulSoup nodes and serialized once, so escaping
of ``&``, ``<`` and ``>`` happens per text node in the serializer rather
than through string templates. Embedded newlines become a break marker
span followed by ``<br>`` inside the same element.
"""

from __future__ import annotations

import logging
from typing import Iterable

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

from memodiff.constants import DELETE_TAG, EQUAL_TAG, INERT_ATTR, INSERT_TAG, NAV_INDEX_ATTR
from memodiff.diff.operations import AnnotatedSpan, DiffOperation, annotate
from memodiff.options.html import DiffHtmlOptions

logger = logging.getLogger(__name__)


class DiffHtmlFormatter(HTMLFormatter):
    """HTML5 serialization for diff documents.

    Only ``&``, ``<`` and ``>`` are escaped, so non-ASCII text (titles,
    CJK content, the pilcrow placeholder) is written as-is. Void elements
    have no trailing slash, empty attributes are written as bare boolean
    attributes, and attributes keep the order in which they were set.
    """

    def __init__(self):
        super().__init__(
            entity_substitution=EntitySubstitution.substitute_xml,
            void_element_close_prefix=None,
            empty_attributes_are_booleans=True,
        )

    def attributes(self, tag):
        if tag.attrs is None:
            return []
        return [(key, None if value == "" else value) for key, value in tag.attrs.items()]


HTML_FORMATTER = DiffHtmlFormatter()

_ROLE_TAGS = {
    "equal": EQUAL_TAG,
    "inserted": INSERT_TAG,
    "deleted": DELETE_TAG,
}


class MarkupRenderer:
    """Render an ordered list of diff operations into HTML markup.

    Parameters
    ----------
    options : DiffHtmlOptions or None, default = None
        Rendering options; only ``break_class`` affects the fragment.

    Examples
    --------
    Render a single substitution:
        >>> from memodiff.diff.operations import DiffKind, DiffOperation
        >>> ops = [
        ...     DiffOperation(DiffKind.EQUAL, "ca"),
        ...     DiffOperation(DiffKind.DELETE, "t"),
        ...     DiffOperation(DiffKind.INSERT, "r"),
        ... ]
        >>> MarkupRenderer().render(ops)
        '<span>ca</span><del tabindex="1" inert>t</del><ins tabindex="2">r</ins>'

    """

    def __init__(self, options: DiffHtmlOptions | None = None):
        """Initialize the renderer with options."""
        self.options = options or DiffHtmlOptions()

    def render(self, operations: Iterable[DiffOperation]) -> str:
        """Render operations to a fragment string.

        Parameters
        ----------
        operations : iterable of DiffOperation
            Edit script in document order. May be empty.

        Returns
        -------
        str
            Concatenated markup of one element per operation, with no
            enclosing element. Empty input gives an empty string.

        """
        soup = BeautifulSoup("", "html.parser")
        nodes = self.render_nodes(operations, soup)
        return "".join(node.decode(formatter=HTML_FORMATTER) for node in nodes)

    def render_nodes(self, operations: Iterable[DiffOperation], soup: BeautifulSoup) -> list[Tag]:
        """Build one element per operation using ``soup`` as the node factory.

        The returned elements are detached; callers insert them into a
        document tree (see :class:`~memodiff.diff.renderers.document.DocumentAssembler`).
        """
        nodes = [self._build_element(span, soup) for span in annotate(operations)]
        logger.debug("Rendered %d diff elements", len(nodes))
        return nodes

    def _build_element(self, span: AnnotatedSpan, soup: BeautifulSoup) -> Tag:
        element = soup.new_tag(_ROLE_TAGS[span.role])
        if span.nav_index is not None:
            element[NAV_INDEX_ATTR] = str(span.nav_index)
        if not span.interactive:
            element[INERT_ATTR] = ""
        self._append_text(element, span.text, soup)
        return element

    def _append_text(self, element: Tag, text: str, soup: BeautifulSoup) -> None:
        """Append ``text``, replacing each newline with a visible line break."""
        for position, line in enumerate(text.split("\n")):
            if position:
                element.append(soup.new_tag("span", attrs={"class": self.options.break_class}))
                element.append(soup.new_tag("br"))
            if line:
                element.append(NavigableString(line))


def render_fragment(operations: Iterable[DiffOperation], options: DiffHtmlOptions | None = None) -> str:
    """Render operations to an HTML fragment string.

    Parameters
    ----------
    operations : iterable of DiffOperation
        Edit script in document order.
    options : DiffHtmlOptions, optional
        Rendering options.

    Returns
    -------
    str
        Markup fragment without an enclosing element.

    """
    return MarkupRenderer(options).render(operations)
