"""Shared fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def cli_module():
    """Load the CLI module under test.

    Returns:
        module: Imported ``dnsprobe.cli`` module.
    """
    import dnsprobe.cli as cli

    return cli


@pytest.fixture
def scan_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the CLI from an empty working directory.

    The resume file is resolved relative to the working directory.

    Args:
        tmp_path (Path): Pytest temporary directory.
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.

    Returns:
        Path: Working directory used by the test.
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def captured_levels(monkeypatch: pytest.MonkeyPatch, cli_module) -> list[int]:
    """Record logging levels applied by the CLI.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
        cli_module: Imported CLI module.

    Returns:
        list[int]: Levels passed to ``_setup_logging`` in call order.
    """
    levels: list[int] = []
    monkeypatch.setattr(cli_module, "_setup_logging", levels.append)
    return levels
