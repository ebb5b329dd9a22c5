#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/memodiff/diff/sources.py
"""Fragment sources: the two ways of producing the diff body.

``FromOperations`` builds the body from diff operations and is the
canonical path. ``FromPrerendered`` accepts markup from
``diff_match_patch.diff_prettyHtml`` and repairs it with the
post-processing passes. Both produce documents with the same navigation
and inert semantics.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Sequence, runtime_checkable

from bs4 import BeautifulSoup

from memodiff.diff.operations import DiffOperation
from memodiff.diff.renderers.document import DocumentAssembler
from memodiff.diff.renderers.markup import MarkupRenderer
from memodiff.diff.renderers.postprocess import render_prerendered_document
from memodiff.options.html import DiffHtmlOptions


@runtime_checkable
class FragmentSource(Protocol):
    """Anything that can render itself into a complete diff document."""

    def render_document(self, title: str, options: DiffHtmlOptions | None = None) -> str:
        """Return the complete HTML document for this diff body."""
        ...


@dataclass(frozen=True)
class FromOperations:
    """Diff body built directly from diff operations."""

    operations: Sequence[DiffOperation] = field(default_factory=tuple)

    def render_document(self, title: str, options: DiffHtmlOptions | None = None) -> str:
        assembler = DocumentAssembler(options)
        factory = BeautifulSoup("", "html.parser")
        nodes = MarkupRenderer(assembler.options).render_nodes(self.operations, factory)
        return assembler.assemble(title, nodes)


@dataclass(frozen=True)
class FromPrerendered:
    """Diff body supplied as markup from an external renderer."""

    markup: str

    def render_document(self, title: str, options: DiffHtmlOptions | None = None) -> str:
        return render_prerendered_document(title, self.markup, options)
