#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/memodiff/diff/__init__.py
"""Text comparison rendered as an accessible HTML review document.

Key Features
------------
- Character-level diff via diff-match-patch with semantic cleanup
- One element per diff operation: ``<span>``, ``<ins>`` or ``<del>``
- Keyboard navigation through every change in reading order
- Deleted text stays visible but inert
- Self-contained output: stylesheet and favicon are inlined

Examples
--------
Compare two files:
    >>> from memodiff.diff import compare_files
    >>> html = compare_files("draft_v1.txt", "draft_v2.txt")

Render operations you already have:
    >>> from memodiff.diff import DiffKind, DiffOperation, render_diff
    >>> ops = [DiffOperation(DiffKind.EQUAL, "ca"), DiffOperation(DiffKind.INSERT, "r")]
    >>> html = render_diff("example", ops)

"""

from memodiff.diff.api import compare_files, derive_output_path, diff_texts, make_title, render_diff, write_diff
from memodiff.diff.engine import compute_diff, normalize_line_endings
from memodiff.diff.operations import DiffKind, DiffOperation

__all__ = [
    "DiffKind",
    "DiffOperation",
    "compare_files",
    "compute_diff",
    "derive_output_path",
    "diff_texts",
    "make_title",
    "normalize_line_endings",
    "render_diff",
    "write_diff",
]
