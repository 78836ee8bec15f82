"""Output line assembly, including highlighted match spans."""

from __future__ import annotations

from rich.color import ColorSystem
from rich.style import Style

from subgrep.config import SearchConfig
from subgrep.scanner import MatchResult

MATCH_STYLE = Style(color="red", bold=True)


def highlight(line: str, start: int, length: int, style: Style = MATCH_STYLE) -> str:
    """
    Return `line` with `line[start:start + length]` wrapped in ANSI escapes for
    `style`. Text outside the span is left untouched (no tab expansion or
    control-code stripping).
    """
    end = start + length
    span = style.render(line[start:end], color_system=ColorSystem.STANDARD)
    return f"{line[:start]}{span}{line[end:]}"


def format_match(result: MatchResult, config: SearchConfig) -> str:
    """Build the output line: optional filename, optional line number, then the body."""
    prefix = ""
    if config.show_filenames:
        prefix += f"{result.file_path}: "
    if config.show_line_numbers:
        prefix += f"{result.line_number}: "

    if result.match_start is None or result.match_length is None:
        return prefix + result.line_text
    return prefix + highlight(result.line_text, result.match_start, result.match_length)
