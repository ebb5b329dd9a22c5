"""Command-line interface for memodiff.

Compare two text files and write the result as a self-contained HTML page.

Examples
--------
Write ``b_diff_from_a.html`` next to ``b.txt``::

    $ memodiff --origin a.txt --revised b.txt

Choose the output path (``.html`` is appended when missing)::

    $ memodiff --origin a.txt --revised b.txt --out review

Print a change summary and use an English document language::

    $ memodiff --origin a.txt --revised b.txt --lang en --stats

Use environment variables for defaults::

    $ export MEMODIFF_LANG=en
    $ memodiff --origin a.txt --revised b.txt

"""

import logging
import sys
from pathlib import Path
from typing import Sequence

from memodiff.cli.builder import (
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_RENDERING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
)
from memodiff.diff.api import derive_output_path, make_title, read_text, render_diff, write_document
from memodiff.diff.engine import compute_diff
from memodiff.diff.operations import DiffOperation, count_changes
from memodiff.exceptions import FileError, RenderingError, ValidationError
from memodiff.logging_utils import configure_logging
from memodiff.options.html import DiffHtmlOptions

logger = logging.getLogger(__name__)


def find_invalid_paths(*paths: str) -> list[str]:
    """Return the given paths that are empty or do not name an existing file."""
    return [path for path in paths if not path or not Path(path).is_file()]


def print_stats(operations: Sequence[DiffOperation], title: str, output_path: Path) -> None:
    """Print a rich summary table of the changes to stderr."""
    from rich.console import Console
    from rich.table import Table

    stats = count_changes(operations)
    table = Table(title=title)
    table.add_column("Insertions", style="red", justify="right")
    table.add_column("Deletions", style="cyan", justify="right")
    table.add_column("Total changes", style="bold", justify="right")
    table.add_column("Output", style="green")
    table.add_row(
        str(stats["insertions"]),
        str(stats["deletions"]),
        str(stats["total_changes"]),
        str(output_path),
    )
    Console(stderr=True).print(table)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the memodiff command.

    Parameters
    ----------
    argv : sequence of str, optional
        Command line arguments, defaults to ``sys.argv[1:]``.

    Returns
    -------
    int
        Exit code (0 for success)

    """
    parser = create_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else EXIT_SUCCESS

    configure_logging(args.log_level, log_file=args.log_file, trace_mode=args.trace)

    invalids = find_invalid_paths(args.origin, args.revised)
    if invalids:
        for path in invalids:
            print(f"invalid path: {path}", file=sys.stderr)
        return EXIT_FILE_ERROR

    try:
        options = DiffHtmlOptions(language=args.lang)
        original = read_text(args.origin)
        revised = read_text(args.revised)
        operations = compute_diff(original, revised, cleanup=args.cleanup)

        title = make_title(args.origin, args.revised)
        document = render_diff(title, operations, options=options, strategy=args.strategy)
        output_path = write_document(document, derive_output_path(args.origin, args.revised, args.out))
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except FileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR
    except RenderingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RENDERING_ERROR
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Error comparing files: {e}", file=sys.stderr)
        return EXIT_ERROR

    if args.stats:
        print_stats(operations, title, output_path)

    return EXIT_SUCCESS


__all__ = ["main"]
