"""
Line scanning: reads resolved files and decides, line by line, what to report.

Files are read fully, one at a time, in the order given. Results are yielded
lazily so that output for earlier files is written before later files are
read; a read failure aborts the scan at that point.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from subgrep.config import SearchConfig
from subgrep.errors import FileDecodeError, FileReadError


@dataclass(frozen=True)
class MatchResult:
    """
    The outcome of evaluating one line. `match_start` and `match_length` are
    set only when the line is reported with highlighting.
    """

    line_number: int
    file_path: str
    line_text: str
    is_match: bool
    match_start: int | None = None
    match_length: int | None = None


def split_lines(text: str) -> list[str]:
    """
    Split text into lines on `\\n` and `\\r\\n`, without terminators. A lone `\\r`
    stays part of the line, and a trailing newline does not produce an empty last
    line.
    """
    lines = text.split("\n")
    last = lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if last:
        lines.append(last)
    return lines


def read_lines(path: str) -> list[str]:
    """Read a whole file as UTF-8 and split it into lines."""
    try:
        # newline="" keeps line endings as written; split_lines handles them.
        with open(path, encoding="utf-8", newline="") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise FileDecodeError(path, f"not valid UTF-8 text ({e.reason})") from e
    except OSError as e:
        raise FileReadError(path, e.strerror or str(e)) from e
    return split_lines(text)


def line_matches(line: str, pattern: str, case_insensitive: bool = False) -> bool:
    """Literal substring containment, optionally ignoring case."""
    if case_insensitive:
        return pattern.lower() in line.lower()
    return pattern in line


def evaluate_line(line: str, line_number: int, file_path: str, config: SearchConfig) -> MatchResult:
    """Apply case folding and inversion to one line and locate the span to highlight."""
    raw_match = line_matches(line, config.pattern, config.case_insensitive)
    is_match = not raw_match if config.invert else raw_match

    if is_match and config.highlight_enabled:
        return MatchResult(
            line_number=line_number,
            file_path=file_path,
            line_text=line,
            is_match=True,
            match_start=line.find(config.pattern),
            match_length=len(config.pattern),
        )
    return MatchResult(
        line_number=line_number, file_path=file_path, line_text=line, is_match=is_match
    )


def scan_lines(lines: Iterable[str], file_path: str, config: SearchConfig) -> Iterator[MatchResult]:
    """Yield a result for each reported line. Numbering starts at 1 and counts every line."""
    for line_number, line in enumerate(lines, start=1):
        result = evaluate_line(line, line_number, file_path, config)
        if result.is_match:
            yield result


def scan_files(files: Iterable[str], config: SearchConfig) -> Iterator[MatchResult]:
    """Scan files in order, yielding reported lines. Raises `FileReadError` on the first failure."""
    for file_path in files:
        yield from scan_lines(read_lines(file_path), file_path, config)
