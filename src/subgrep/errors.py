"""
Fatal error kinds for a subgrep run.

Every failure that aborts a search is a `SubgrepError` subclass, so the CLI can
catch one type, print its message, and pick an exit code by kind. Non-fatal
conditions (a directory given without `-r`, an unreadable subdirectory) are not
errors; the resolver reports them through its `warn` callback.
"""

from __future__ import annotations


class SubgrepError(Exception):
    """Base class for errors that abort the whole run."""


class UsageError(SubgrepError):
    """Too few positional arguments, or an empty pattern."""


class PathNotFoundError(SubgrepError):
    """A path named on the command line does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"{path}: No such file or directory")
        self.path: str = path


class PathAccessError(SubgrepError):
    """A path named on the command line exists but cannot be statted."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path: str = path


class GlobPatternError(SubgrepError):
    """A wildcard path could not be expanded."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid wildcard pattern {pattern!r}: {reason}")
        self.pattern: str = pattern


class FileReadError(SubgrepError):
    """A resolved file could not be opened or read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path: str = path


class FileDecodeError(FileReadError):
    """A resolved file is not valid UTF-8 text."""
