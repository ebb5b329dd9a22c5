"""Test utilities for the memodiff test suite."""

import shutil
import tempfile
from pathlib import Path

from bs4 import BeautifulSoup, Tag


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)


def parse_html(markup: str) -> BeautifulSoup:
    """Parse rendered markup the same way the assembler parses fragments."""
    return BeautifulSoup(markup, "html.parser")


def change_elements(soup: BeautifulSoup) -> list[Tag]:
    """Return every ``<ins>``/``<del>`` element in document order."""
    return list(soup.find_all(["ins", "del"]))


def navigation_indices(soup: BeautifulSoup) -> list[int]:
    """Return the ``tabindex`` values of change elements in document order."""
    return [int(tag["tabindex"]) for tag in change_elements(soup)]
