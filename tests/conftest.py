# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures."""

from __future__ import annotations

from typing import Generator

import pytest
from click.testing import CliRunner

from semver_ranges.logger import reset_logging


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_logging() -> Generator[None, None, None]:
    """Undo handlers the CLI installs on the package logger."""
    yield
    reset_logging()
