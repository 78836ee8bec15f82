"""Exclusion pattern handling using pathspec."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pathspec


def _clean_lines(lines: Iterable[str]) -> list[str]:
    """Drop blank lines and `#` comments."""
    return [line for line in lines if line.strip() and not line.strip().startswith("#")]


def compile_excludes(patterns: Iterable[str]) -> pathspec.GitIgnoreSpec | None:
    """
    Compile gitignore-style exclusion patterns into a `GitIgnoreSpec`,
    or `None` if there are no patterns.
    """
    lines = _clean_lines(patterns)
    if not lines:
        return None
    return pathspec.GitIgnoreSpec.from_lines(lines)


def read_pattern_file(path: Path) -> list[str]:
    """
    Read exclusion patterns from a file, one per line, in gitignore syntax.
    Blank lines and comments are skipped. Read errors propagate as `OSError`.
    """
    return _clean_lines(path.read_text(encoding="utf-8").splitlines())
