"""Pytest configuration and shared fixtures for the memodiff test suite."""

import logging
import os
from pathlib import Path
from typing import Generator

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import cleanup_test_dir, create_test_temp_dir

from memodiff.diff.operations import DiffKind, DiffOperation

# Configure Hypothesis for property-based testing
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for test files.

    Yields
    ------
    Path
        Temporary directory path that will be cleaned up after test.

    """
    temp_path = create_test_temp_dir()
    try:
        yield temp_path
    finally:
        cleanup_test_dir(temp_path)


@pytest.fixture
def cat_car_operations() -> list[DiffOperation]:
    """Edit script turning ``"cat\\n"`` into ``"car\\n"``."""
    return [
        DiffOperation(DiffKind.EQUAL, "ca"),
        DiffOperation(DiffKind.DELETE, "t"),
        DiffOperation(DiffKind.INSERT, "r"),
        DiffOperation(DiffKind.EQUAL, "\n"),
    ]


@pytest.fixture
def text_files(temp_dir: Path) -> tuple[Path, Path]:
    """Write ``a.txt`` ("cat") and ``b.txt`` ("car") into a temporary directory."""
    origin = temp_dir / "a.txt"
    revised = temp_dir / "b.txt"
    origin.write_text("cat\n", encoding="utf-8")
    revised.write_text("car\n", encoding="utf-8")
    return origin, revised


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    """Restore the memodiff package logger after a test reconfigures logging."""
    package_logger = logging.getLogger("memodiff")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    try:
        yield
    finally:
        for handler in package_logger.handlers:
            if handler not in handlers:
                handler.close()
        package_logger.handlers[:] = handlers
        package_logger.setLevel(level)
        package_logger.propagate = propagate
