#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/memodiff/diff/renderers/postprocess.py
"""Finishing passes for diff markup produced by an external renderer.

``diff_match_patch.diff_prettyHtml`` emits ``<ins>``/``<del>`` elements
carrying inline ``style`` attributes and encodes each newline as
``&para;<br>``. After such a fragment has been assembled into a document
tree, the passes below bring it to the same shape as markup built by
:class:`~memodiff.diff.renderers.markup.MarkupRenderer`:

1. strip inline styles from change elements
2. number change elements with a shared navigation index
3. mark deleted elements inert

A final string-level step replaces the pilcrow placeholder with the
return-arrow glyph. It runs on the serialized document, after every tree
pass, so a literal pilcrow in the title or in the compared text is
replaced as well.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from bs4 import BeautifulSoup, Tag

from memodiff.constants import (
    DELETE_TAG,
    INERT_ATTR,
    INSERT_TAG,
    NAV_INDEX_ATTR,
    PILCROW,
    RETURN_ARROW,
)
from memodiff.diff.renderers.document import DocumentAssembler
from memodiff.options.html import DiffHtmlOptions

logger = logging.getLogger(__name__)

TreePass = Callable[[BeautifulSoup], BeautifulSoup]

CHANGE_TAGS = [INSERT_TAG, DELETE_TAG]


def _change_elements(soup: BeautifulSoup) -> list[Tag]:
    return [tag for tag in soup.find_all(CHANGE_TAGS) if isinstance(tag, Tag)]


def strip_inline_styles(soup: BeautifulSoup) -> BeautifulSoup:
    """Remove ``style`` attributes from every insert and delete element."""
    for tag in _change_elements(soup):
        if tag.has_attr("style"):
            del tag["style"]
    return soup


def assign_navigation_indices(soup: BeautifulSoup) -> BeautifulSoup:
    """Number insert and delete elements 1..k in document order."""
    for index, tag in enumerate(_change_elements(soup), start=1):
        tag[NAV_INDEX_ATTR] = str(index)
    return soup


def mark_deleted_inert(soup: BeautifulSoup) -> BeautifulSoup:
    """Mark every delete element inert."""
    for tag in soup.find_all(DELETE_TAG):
        if isinstance(tag, Tag):
            tag[INERT_ATTR] = ""
    return soup


def replace_placeholder(markup: str) -> str:
    """Replace the pilcrow line-break placeholder with the return-arrow glyph."""
    return markup.replace(PILCROW, RETURN_ARROW)


DEFAULT_PASSES: tuple[TreePass, ...] = (
    strip_inline_styles,
    assign_navigation_indices,
    mark_deleted_inert,
)


class PostProcessor:
    """Apply the finishing passes to an assembled document tree.

    Parameters
    ----------
    passes : sequence of callables, optional
        Tree passes applied in order. Defaults to :data:`DEFAULT_PASSES`.

    """

    def __init__(self, passes: Sequence[TreePass] = DEFAULT_PASSES):
        self.passes = tuple(passes)

    def process(self, soup: BeautifulSoup) -> BeautifulSoup:
        """Run every tree pass on ``soup`` in order and return it."""
        for tree_pass in self.passes:
            soup = tree_pass(soup)
            logger.debug("Applied post-processing pass %s", tree_pass.__name__)
        return soup

    def finalize(self, markup: str) -> str:
        """Apply the string-level step to the serialized document."""
        return replace_placeholder(markup)


def render_prerendered_document(
    title: str,
    markup: str,
    options: DiffHtmlOptions | None = None,
    post_processor: PostProcessor | None = None,
) -> str:
    """Assemble externally rendered diff markup into a finished document.

    Parameters
    ----------
    title : str
        Document title.
    markup : str
        Fragment as produced by ``diff_match_patch.diff_prettyHtml``.
    options : DiffHtmlOptions, optional
        Document options.
    post_processor : PostProcessor, optional
        Custom pass list; defaults to the standard passes.

    Returns
    -------
    str
        Complete HTML document.

    """
    assembler = DocumentAssembler(options)
    processor = post_processor or PostProcessor()
    soup = processor.process(assembler.build_tree(title, markup))
    return processor.finalize(assembler.serialize(soup))
