#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/memodiff/diff/engine.py
"""Adapter around diff-match-patch.

The edit script itself is computed by ``diff-match-patch``; this module
only normalizes line endings, picks the cleanup pass and converts the
result into :class:`~memodiff.diff.operations.DiffOperation` values.
"""

from __future__ import annotations

import logging
from typing import Iterable

from diff_match_patch import diff_match_patch

from memodiff.constants import DEFAULT_CLEANUP, DEFAULT_DIFF_TIMEOUT, CleanupMode
from memodiff.diff.operations import DiffKind, DiffOperation, operations_from_tuples
from memodiff.exceptions import ValidationError

logger = logging.getLogger(__name__)

CLEANUP_MODES: tuple[str, ...] = ("semantic-lossless", "semantic", "efficiency", "none")

# diff_prettyHtml skips zero-length operations; these keep one element per operation
_EMPTY_PRETTY_ELEMENTS = {
    DiffKind.EQUAL: "<span></span>",
    DiffKind.INSERT: "<ins></ins>",
    DiffKind.DELETE: "<del></del>",
}


def normalize_line_endings(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _create_matcher(timeout: float) -> diff_match_patch:
    if timeout < 0:
        raise ValidationError(
            f"timeout must be non-negative, got {timeout}",
            parameter_name="timeout",
            parameter_value=timeout,
        )
    dmp = diff_match_patch()
    # 0 disables the deadline
    dmp.Diff_Timeout = timeout
    return dmp


def _apply_cleanup(dmp: diff_match_patch, diffs: list, cleanup: str) -> None:
    if cleanup == "semantic-lossless":
        dmp.diff_cleanupSemanticLossless(diffs)
    elif cleanup == "semantic":
        dmp.diff_cleanupSemantic(diffs)
    elif cleanup == "efficiency":
        dmp.diff_cleanupEfficiency(diffs)


def compute_diff(
    original: str,
    revised: str,
    *,
    timeout: float = DEFAULT_DIFF_TIMEOUT,
    cleanup: CleanupMode = DEFAULT_CLEANUP,
) -> list[DiffOperation]:
    """Compute the edit script between two texts.

    Parameters
    ----------
    original : str
        Original text. Line endings are normalized to LF first.
    revised : str
        Revised text. Line endings are normalized to LF first.
    timeout : float, default 0.0
        diff-match-patch deadline in seconds; 0 means no deadline.
    cleanup : {"semantic-lossless", "semantic", "efficiency", "none"}
        Post-pass applied to the raw edit script.

    Returns
    -------
    list of DiffOperation
        Ordered operations covering both texts completely.

    Raises
    ------
    ValidationError
        If ``cleanup`` or ``timeout`` is invalid.

    """
    if cleanup not in CLEANUP_MODES:
        raise ValidationError(
            f"Invalid cleanup mode: {cleanup}. Must be one of: {', '.join(CLEANUP_MODES)}",
            parameter_name="cleanup",
            parameter_value=cleanup,
        )
    dmp = _create_matcher(timeout)
    diffs = dmp.diff_main(normalize_line_endings(original), normalize_line_endings(revised))
    _apply_cleanup(dmp, diffs, cleanup)
    logger.debug("Computed %d diff operations (cleanup=%s)", len(diffs), cleanup)
    return operations_from_tuples(diffs)


def pretty_html(operations: Iterable[DiffOperation]) -> str:
    """Return ``diff_match_patch.diff_prettyHtml`` markup for ``operations``.

    The markup uses inline ``style`` attributes on ``<ins>``/``<del>`` and
    encodes each newline as ``&para;<br>``. It is the input expected by
    :class:`~memodiff.diff.renderers.postprocess.PostProcessor`.

    Every operation yields exactly one element, including operations with
    empty text, so navigation indices assigned later match the operations.
    """
    dmp = diff_match_patch()
    parts = []
    for op in operations:
        markup = dmp.diff_prettyHtml([op.to_tuple()])
        parts.append(markup or _EMPTY_PRETTY_ELEMENTS[op.kind])
    return "".join(parts)
