"""Packaging layout regression tests."""

from __future__ import annotations

import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent


def _pyproject() -> dict:
    with (ROOT / "pyproject.toml").open("rb") as handle:
        return tomllib.load(handle)


def test_setuptools_uses_src_layout() -> None:
    """Ensure setuptools installs packages from src/ only."""
    setuptools = _pyproject().get("tool", {}).get("setuptools", {})
    assert setuptools.get("package-dir") == {"": "src"}
    assert setuptools.get("packages", {}).get("find", {}).get("where") == ["src"]


def test_console_script_targets_cli_main() -> None:
    """Ensure the console script points at the CLI entrypoint."""
    scripts = _pyproject()["project"]["scripts"]
    assert scripts == {"dnsprobe": "dnsprobe.cli:main"}


def test_runtime_dependencies_are_declared() -> None:
    """Ensure imported third-party libraries are declared."""
    deps = " ".join(_pyproject()["project"]["dependencies"])
    assert "dnspython" in deps
    assert "PyYAML" in deps
