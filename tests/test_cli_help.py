"""Tests for CLI help and version output."""

from __future__ import annotations

import pytest

from subgrep.cli import main


def _render_help(capsys: pytest.CaptureFixture[str], flag: str = "--help") -> str:
    """Run `subgrep --help` via CLI entrypoint and return captured stdout."""
    assert main([flag]) == 0
    return capsys.readouterr().out


def test_help_includes_tagline(capsys: pytest.CaptureFixture[str]) -> None:
    out = _render_help(capsys)
    assert "subgrep: Search files for lines containing a literal string" in out


def test_help_includes_usage_line(capsys: pytest.CaptureFixture[str]) -> None:
    out = _render_help(capsys)
    assert "usage: subgrep [OPTIONS] <pattern> <path...>" in out


def test_help_lists_all_flags(capsys: pytest.CaptureFixture[str]) -> None:
    out = _render_help(capsys)
    for flag in ["-i", "-n", "-v", "-r", "-f", "-c", "-h, --help", "--exclude", "--list-files"]:
        assert flag in out


def test_help_includes_common_usage(capsys: pytest.CaptureFixture[str]) -> None:
    out = _render_help(capsys)
    assert "Common usage:" in out
    assert "subgrep -n -f -r TODO src/" in out


def test_short_help_flag(capsys: pytest.CaptureFixture[str]) -> None:
    assert "Common usage:" in _render_help(capsys, "-h")


def test_help_skips_search_even_with_other_args(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Help wins over a search, so missing paths are never touched."""
    assert main(["-n", "foo", "/nonexistent/file.txt", "-h"]) == 0
    captured = capsys.readouterr()
    assert "Common usage:" in captured.out
    assert captured.err == ""


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--version"]) == 0
    out = capsys.readouterr().out.strip()
    assert out.startswith("v") or out == "unknown (package not installed)"


def test_help_mentions_double_dash(capsys: pytest.CaptureFixture[str]) -> None:
    out = _render_help(capsys)
    assert "subgrep -- --> page.html" in out


def test_help_ends_with_single_newline(capsys: pytest.CaptureFixture[str]) -> None:
    out = _render_help(capsys)
    assert out.endswith("\n")
    assert not out.endswith("\n\n")
