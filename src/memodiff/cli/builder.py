#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/memodiff/cli/builder.py
"""Argument parser construction and exit codes for the memodiff CLI."""

import argparse

from memodiff import __version__
from memodiff.cli.actions import create_env_aware_argument
from memodiff.constants import DEFAULT_CLEANUP, DEFAULT_LANGUAGE, DEFAULT_STRATEGY
from memodiff.diff.api import STRATEGIES
from memodiff.diff.engine import CLEANUP_MODES

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_RENDERING_ERROR = 7

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def create_parser() -> argparse.ArgumentParser:
    """Create the argparse parser for the memodiff command.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser. Every option can be preset through a
        ``MEMODIFF_<OPTION>`` environment variable.

    """
    parser = argparse.ArgumentParser(
        prog="memodiff",
        description="Compare two text files and write the changes as a self-contained HTML page",
        epilog="Options can be preset with MEMODIFF_<OPTION> environment variables, e.g. MEMODIFF_LANG=en.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # Inputs and output
    create_env_aware_argument(parser, "--origin", default="", help="Original text file")
    create_env_aware_argument(parser, "--revised", default="", help="Revised text file")
    create_env_aware_argument(
        parser,
        "--out",
        default="",
        help="Output path (default: <revised stem>_diff_from_<origin stem>.html next to the revised file)",
    )

    # Rendering
    create_env_aware_argument(
        parser,
        "--strategy",
        choices=STRATEGIES,
        default=DEFAULT_STRATEGY,
        help="Build the diff body from operations (default) or post-process diff_prettyHtml markup",
    )
    create_env_aware_argument(
        parser,
        "--cleanup",
        choices=CLEANUP_MODES,
        default=DEFAULT_CLEANUP,
        help=f"Cleanup pass applied to the raw diff (default: {DEFAULT_CLEANUP})",
    )
    create_env_aware_argument(
        parser,
        "--lang",
        default=DEFAULT_LANGUAGE,
        help=f"Language tag for the HTML lang attribute (default: {DEFAULT_LANGUAGE})",
    )
    create_env_aware_argument(
        parser,
        "--stats",
        action="store_true",
        help="Print a summary table of insertions and deletions to stderr",
    )

    # Logging
    create_env_aware_argument(
        parser,
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    create_env_aware_argument(parser, "--log-file", default=None, help="Also write log output to this file")
    create_env_aware_argument(
        parser,
        "--trace",
        action="store_true",
        help="Include timestamps and logger names in log output",
    )

    return parser
