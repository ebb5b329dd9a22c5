#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/memodiff/diff/renderers/__init__.py
"""Renderers turning diff operations into an HTML review document.

Available Renderers
-------------------
- MarkupRenderer: diff operations to an annotated HTML fragment
- DocumentAssembler: fragment to a complete, self-contained document
- PostProcessor: finishing passes for fragments pre-rendered by
  ``diff_match_patch.diff_prettyHtml``

Examples
--------
Render operations as a full document:
    >>> from memodiff.diff.engine import compute_diff
    >>> from memodiff.diff.renderers import DocumentAssembler, MarkupRenderer
    >>> ops = compute_diff("cat\\n", "car\\n")
    >>> html = DocumentAssembler().assemble("'a.txt'→'b.txt'", MarkupRenderer().render(ops))

"""

from memodiff.diff.renderers.document import DocumentAssembler, assemble_document
from memodiff.diff.renderers.markup import MarkupRenderer, render_fragment
from memodiff.diff.renderers.postprocess import PostProcessor, render_prerendered_document

__all__ = [
    "DocumentAssembler",
    "MarkupRenderer",
    "PostProcessor",
    "assemble_document",
    "render_fragment",
    "render_prerendered_document",
]
