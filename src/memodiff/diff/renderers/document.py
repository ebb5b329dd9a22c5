#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/memodiff/diff/renderers/document.py
"""Assemble a diff fragment into a complete, self-contained HTML document.

The document tree is built with BeautifulSoup in a fixed order:

- ``<html lang="...">``
- ``<head>``: charset and viewport metadata, an inline SVG favicon,
  the title and the embedded stylesheet
- ``<body>``: a single container holding an ``<h1>`` with the title,
  followed by the fragment

The stylesheet and favicon are inlined so the result renders without
network access. Serialization happens once, prefixed by ``<!DOCTYPE html>``.
"""

from __future__ import annotations

import logging
from typing import Sequence, Union
from urllib.parse import quote

from bs4 import BeautifulSoup, PageElement, Tag
from bs4.element import Stylesheet

from memodiff.constants import (
    DEFAULT_CHARSET,
    DOCTYPE,
    FAVICON_MIME_TYPE,
    FAVICON_SVG_TEMPLATE,
    URI_COMPONENT_SAFE_CHARS,
)
from memodiff.diff.renderers.markup import HTML_FORMATTER
from memodiff.options.html import DiffHtmlOptions

logger = logging.getLogger(__name__)

Fragment = Union[str, Sequence[PageElement]]


def favicon_data_uri(codepoint: int) -> str:
    """Return a data URI for an SVG icon drawing a single Unicode glyph.

    The SVG is percent-encoded the way ``encodeURIComponent`` encodes it,
    which keeps the URI valid inside an attribute value.
    """
    svg = FAVICON_SVG_TEMPLATE.format(codepoint=codepoint)
    return f"data:{FAVICON_MIME_TYPE},{quote(svg, safe=URI_COMPONENT_SAFE_CHARS)}"


class DocumentAssembler:
    """Wrap a diff fragment in a complete HTML document.

    Parameters
    ----------
    options : DiffHtmlOptions or None, default = None
        Document options (language, viewport, favicon, container id,
        stylesheet).

    Examples
    --------
    Assemble a fragment produced by the markup renderer:
        >>> from memodiff.diff.renderers.markup import render_fragment
        >>> assembler = DocumentAssembler()
        >>> html = assembler.assemble("'a.txt'→'b.txt'", render_fragment([]))
        >>> html.startswith("<!DOCTYPE html>")
        True

    """

    def __init__(self, options: DiffHtmlOptions | None = None):
        """Initialize the assembler with options."""
        self.options = options or DiffHtmlOptions()

    def assemble(self, title: str, fragment: Fragment) -> str:
        """Build and serialize the full document.

        Parameters
        ----------
        title : str
            Human-readable description of the comparison. Escaped as text.
        fragment : str or sequence of PageElement
            Diff body, either as markup or as already-built nodes.

        Returns
        -------
        str
            ``<!DOCTYPE html>`` followed by the document markup.

        """
        return self.serialize(self.build_tree(title, fragment))

    def build_tree(self, title: str, fragment: Fragment) -> BeautifulSoup:
        """Build the document tree without serializing it.

        Parameters
        ----------
        title : str
            Document title, used for ``<title>`` and the ``<h1>`` heading.
        fragment : str or sequence of PageElement
            Diff body. Markup strings are parsed with ``html.parser``;
            node sequences are moved into the tree as-is.

        Returns
        -------
        BeautifulSoup
            Tree whose only child is the ``<html>`` element.

        """
        soup = BeautifulSoup("", "html.parser")

        root = soup.new_tag("html", attrs={"lang": self.options.language})
        soup.append(root)

        head = soup.new_tag("head")
        root.append(head)
        self._append_metadata(soup, head)
        self._append_favicon(soup, head)
        head.append(soup.new_tag("title", string=title))
        self._append_stylesheet(soup, head)

        body = soup.new_tag("body")
        root.append(body)
        container = soup.new_tag("div", attrs={"id": self.options.container_id})
        body.append(container)
        container.append(soup.new_tag("h1", string=title))
        container.extend(self._fragment_nodes(fragment))

        return soup

    def serialize(self, soup: BeautifulSoup) -> str:
        """Serialize a tree built by :meth:`build_tree` into the final document string."""
        root = soup.find("html")
        if not isinstance(root, Tag):
            raise ValueError("Document tree has no <html> element")
        return DOCTYPE + root.decode(formatter=HTML_FORMATTER)

    def _append_metadata(self, soup: BeautifulSoup, head: Tag) -> None:
        head.append(soup.new_tag("meta", attrs={"charset": DEFAULT_CHARSET}))
        head.append(soup.new_tag("meta", attrs={"name": "viewport", "content": self.options.viewport}))

    def _append_favicon(self, soup: BeautifulSoup, head: Tag) -> None:
        href = favicon_data_uri(self.options.favicon_codepoint)
        head.append(soup.new_tag("link", attrs={"rel": "icon", "href": href}))

    def _append_stylesheet(self, soup: BeautifulSoup, head: Tag) -> None:
        style = soup.new_tag("style")
        style.append(Stylesheet(self.options.stylesheet))
        head.append(style)

    def _fragment_nodes(self, fragment: Fragment) -> list[PageElement]:
        if isinstance(fragment, str):
            parsed = BeautifulSoup(fragment, "html.parser")
            nodes = list(parsed.contents)
        else:
            nodes = list(fragment)
        logger.debug("Assembling document with %d top-level fragment nodes", len(nodes))
        return nodes


def assemble_document(title: str, fragment: Fragment, options: DiffHtmlOptions | None = None) -> str:
    """Wrap ``fragment`` in a complete HTML document titled ``title``."""
    return DocumentAssembler(options).assemble(title, fragment)
