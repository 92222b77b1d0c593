"""Shared test fixtures for hookloader.

Provides isolated config directories, a fresh loader backed by a mock
dispatcher, and automatic reset of the process-wide loader and output
manager between tests.
"""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from hookloader.dispatch import Dispatcher, HookTable
from hookloader.loader import HookLoader, reset_loader
from hookloader.output import OutputFormat, OutputManager, reset_output, set_output


# ---------------------------------------------------------------------------
# Auto-reset global state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_globals() -> None:
    """Reset the process-wide loader, OutputManager and log handlers after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time, which go stale once CliRunner restores the real streams.
    """
    logger = logging.getLogger("hookloader")
    handlers, level = list(logger.handlers), logger.level
    yield
    reset_loader()
    reset_output()
    logger.handlers = handlers
    logger.setLevel(level)


# ---------------------------------------------------------------------------
# Loader fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def dispatcher() -> MagicMock:
    """A mock dispatcher that records every call in ``mock_calls``."""
    return MagicMock(spec=Dispatcher)


@pytest.fixture
def loader(dispatcher: MagicMock) -> HookLoader:
    """A fresh loader forwarding to the mock dispatcher."""
    return HookLoader(dispatcher)


@pytest.fixture
def table() -> HookTable:
    return HookTable()


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Points XDG_CONFIG_HOME and XDG_DATA_HOME at subdirectories of tmp_path,
    forces the XDG layout, clears HOOKLOADER_* variables and changes the
    working directory to tmp_path.

    Returns:
        The tmp_path root directory for additional file creation.
    """
    monkeypatch.setattr("hookloader.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    for var in ["HOOKLOADER_FORMAT", "HOOKLOADER_ASSETS_URL", "HOOKLOADER_LOG_LEVEL"]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def quiet_output() -> OutputManager:
    """Install a PLAIN-format, quiet OutputManager as the global output."""
    output = OutputManager(format=OutputFormat.PLAIN, quiet=True)
    set_output(output)
    yield output
    reset_output()


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
