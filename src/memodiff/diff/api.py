#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/memodiff/diff/api.py
"""Python API for producing HTML diff documents.

This module wires the diff engine, the fragment sources and file I/O
together: read two text files, diff them, render the review document and
write it next to the revised file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence, Union

from memodiff.constants import (
    DEFAULT_CLEANUP,
    DEFAULT_STRATEGY,
    OUTPUT_EXTENSION,
    OUTPUT_NAME_TEMPLATE,
    TITLE_TEMPLATE,
    CleanupMode,
    RenderStrategy,
)
from memodiff.diff.engine import compute_diff, pretty_html
from memodiff.diff.operations import DiffOperation
from memodiff.diff.sources import FragmentSource, FromOperations, FromPrerendered
from memodiff.exceptions import FileAccessError, FileNotFoundError, OutputWriteError, ValidationError
from memodiff.options.html import DiffHtmlOptions

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

STRATEGIES: tuple[str, ...] = ("operations", "prerendered")


def make_title(origin: PathLike, revised: PathLike) -> str:
    """Return the document title ``'<origin name>'→'<revised name>'``."""
    return TITLE_TEMPLATE.format(origin=Path(origin).name, revised=Path(revised).name)


def derive_output_path(origin: PathLike, revised: PathLike, out: PathLike | None = None) -> Path:
    """Choose where the diff document is written.

    Parameters
    ----------
    origin : str or Path
        Original input file.
    revised : str or Path
        Revised input file.
    out : str or Path, optional
        Explicit output path. When empty, the document is placed next to
        the revised file as ``<revised stem>_diff_from_<origin stem>.html``.

    Returns
    -------
    Path
        Output path, always ending in ``.html``.

    Examples
    --------
        >>> derive_output_path("notes/a.txt", "notes/b.txt")
        PosixPath('notes/b_diff_from_a.html')
        >>> derive_output_path("a.txt", "b.txt", out="review")
        PosixPath('review.html')

    """
    if not out:
        revised_path = Path(revised)
        name = OUTPUT_NAME_TEMPLATE.format(revised=revised_path.stem, origin=Path(origin).stem)
        return revised_path.parent / name

    out_str = str(out)
    if not out_str.endswith(OUTPUT_EXTENSION):
        out_str += OUTPUT_EXTENSION
    return Path(out_str)


def read_text(path: PathLike) -> str:
    """Read a UTF-8 text file, replacing undecodable bytes.

    Raises
    ------
    FileNotFoundError
        If ``path`` is not an existing file.
    FileAccessError
        If the file cannot be read.

    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(str(path))
    try:
        return file_path.read_text(encoding="utf-8-sig", errors="replace")
    except OSError as e:
        raise FileAccessError(str(path), original_error=e) from e


def _fragment_source(operations: Sequence[DiffOperation], strategy: str) -> FragmentSource:
    if strategy == "operations":
        return FromOperations(tuple(operations))
    if strategy == "prerendered":
        return FromPrerendered(pretty_html(operations))
    raise ValidationError(
        f"Invalid strategy: {strategy}. Must be one of: {', '.join(STRATEGIES)}",
        parameter_name="strategy",
        parameter_value=strategy,
    )


def render_diff(
    title: str,
    operations: Sequence[DiffOperation],
    options: DiffHtmlOptions | None = None,
    strategy: RenderStrategy = DEFAULT_STRATEGY,
) -> str:
    """Render already computed operations as a complete HTML document.

    Parameters
    ----------
    title : str
        Document title.
    operations : sequence of DiffOperation
        Edit script in document order.
    options : DiffHtmlOptions, optional
        Document options.
    strategy : {"operations", "prerendered"}, default "operations"
        Build the body from the operations directly, or render it with
        ``diff_prettyHtml`` and repair it with the post-processing passes.

    Returns
    -------
    str
        Complete HTML document.

    Raises
    ------
    ValidationError
        If ``strategy`` is invalid.

    """
    source = _fragment_source(operations, strategy)
    logger.debug("Rendering %d operations with %s strategy", len(operations), strategy)
    return source.render_document(title, options)


def diff_texts(
    original: str,
    revised: str,
    title: str = "",
    options: DiffHtmlOptions | None = None,
    strategy: RenderStrategy = DEFAULT_STRATEGY,
    cleanup: CleanupMode = DEFAULT_CLEANUP,
) -> str:
    """Diff two texts and render the review document.

    Raises
    ------
    ValidationError
        If ``strategy`` or ``cleanup`` is invalid.

    """
    operations = compute_diff(original, revised, cleanup=cleanup)
    return render_diff(title, operations, options=options, strategy=strategy)


def compare_files(
    origin: PathLike,
    revised: PathLike,
    options: DiffHtmlOptions | None = None,
    strategy: RenderStrategy = DEFAULT_STRATEGY,
    cleanup: CleanupMode = DEFAULT_CLEANUP,
) -> str:
    """Read two files and return the HTML diff document comparing them.

    Raises
    ------
    FileNotFoundError
        If either file does not exist.

    """
    original_text = read_text(origin)
    revised_text = read_text(revised)
    logger.info("Comparing %s and %s", origin, revised)
    return diff_texts(
        original_text,
        revised_text,
        title=make_title(origin, revised),
        options=options,
        strategy=strategy,
        cleanup=cleanup,
    )


def write_document(document: str, output_path: PathLike) -> Path:
    """Write a rendered document as UTF-8 text.

    Raises
    ------
    OutputWriteError
        If the file cannot be written.

    """
    path = Path(output_path)
    try:
        path.write_text(document, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(str(path), original_error=e) from e
    logger.info("Diff written to: %s", path)
    return path


def write_diff(
    origin: PathLike,
    revised: PathLike,
    out: PathLike | None = None,
    options: DiffHtmlOptions | None = None,
    strategy: RenderStrategy = DEFAULT_STRATEGY,
    cleanup: CleanupMode = DEFAULT_CLEANUP,
) -> Path:
    """Compare two files and write the HTML document to disk.

    Parameters
    ----------
    origin : str or Path
        Original file.
    revised : str or Path
        Revised file.
    out : str or Path, optional
        Output path; see :func:`derive_output_path`.
    options : DiffHtmlOptions, optional
        Document options.
    strategy : {"operations", "prerendered"}, default "operations"
        Body construction strategy.
    cleanup : {"semantic-lossless", "semantic", "efficiency", "none"}
        Cleanup pass applied by the diff engine.

    Returns
    -------
    Path
        Path of the written document.

    Raises
    ------
    FileNotFoundError
        If either input file does not exist.
    OutputWriteError
        If the document cannot be written.

    """
    document = compare_files(origin, revised, options=options, strategy=strategy, cleanup=cleanup)
    return write_document(document, derive_output_path(origin, revised, out))
