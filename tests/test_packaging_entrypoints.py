"""Packaging entrypoint tests."""

from __future__ import annotations

import tomllib
from pathlib import Path


def _pyproject() -> dict:
    pyproject = Path(__file__).resolve().parents[1] / "pyproject.toml"
    return tomllib.loads(pyproject.read_text(encoding="utf-8"))


def test_subgrep_entrypoint() -> None:
    """The subgrep script should point at the CLI entrypoint."""
    scripts = _pyproject()["project"]["scripts"]
    assert scripts["subgrep"] == "subgrep.cli:main"


def test_runtime_dependencies_declared() -> None:
    deps = " ".join(_pyproject()["project"]["dependencies"])
    assert "pathspec" in deps
    assert "rich" in deps
