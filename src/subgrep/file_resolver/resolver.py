"""
FileResolver: turns command-line path arguments into a list of files to scan.

Handles plain files, directories (walked only in recursive mode), and glob
patterns, preserving the order in which paths were given.
"""

from __future__ import annotations

import os
import stat
import sys
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

import pathspec

from subgrep.errors import GlobPatternError, PathAccessError, PathNotFoundError
from subgrep.file_resolver.patterns import compile_excludes
from subgrep.file_resolver.types import FileResolverConfig

# Characters that indicate a path is a glob pattern rather than a literal path.
_GLOB_CHARS = frozenset("*?[")

WarnCallback = Callable[[str], None]


def _print_warning(message: str) -> None:
    print(message, file=sys.stderr)


def is_glob(path: str) -> bool:
    """Check if a path argument contains glob characters."""
    return any(c in path for c in _GLOB_CHARS)


class FileResolver:
    """
    Expands path arguments into concrete file paths.

    Non-fatal conditions (a directory without recursive mode, an unreadable
    subdirectory during a walk) are reported through `warn`, which prints to
    stderr by default. Anything else raises a `SubgrepError`.
    """

    def __init__(self, config: FileResolverConfig, warn: WarnCallback = _print_warning) -> None:
        self._config: FileResolverConfig = config
        self._warn: WarnCallback = warn
        self._exclude_spec: pathspec.GitIgnoreSpec | None = compile_excludes(config.exclude)

    def resolve(self, paths: Sequence[str]) -> list[str]:
        """
        Resolve input paths into an ordered list of files.

        Each input is handled as:
        - Glob pattern that does not name an existing path → expanded, sorted
        - Missing path → `PathNotFoundError`
        - Path that cannot be statted → `PathAccessError`
        - Directory → walked if recursive, otherwise a warning and no files
        - Anything else → included as given
        """
        result: list[str] = []
        for raw_path in paths:
            result.extend(self._resolve_one(raw_path))
        return result

    def _resolve_one(self, raw_path: str) -> list[str]:
        p = Path(raw_path)
        if is_glob(raw_path) and not os.path.lexists(p):
            return self._expand_glob(raw_path)

        try:
            mode = p.stat().st_mode
        except FileNotFoundError as e:
            raise PathNotFoundError(raw_path) from e
        except OSError as e:
            raise PathAccessError(raw_path, e.strerror or str(e)) from e

        if stat.S_ISDIR(mode):
            if not self._config.recursive:
                self._warn(f"{raw_path} is a directory. Use -r to search recursively.")
                return []
            return list(self._walk_directory(raw_path))

        return [raw_path]

    def _walk_directory(self, root: str) -> Iterator[str]:
        """
        Walk a directory tree depth-first in sorted order, pruning excluded
        directories in-place. Symlinked directories are not descended into.
        """
        root_path = Path(root)

        def on_error(error: OSError) -> None:
            self._warn(f"{error.filename}: {error.strerror}")

        for dirpath, dirnames, filenames in os.walk(root, onerror=on_error, followlinks=False):
            rel_to_root = Path(dirpath).relative_to(root_path)

            # Prune excluded directories in-place (prevents descent)
            dirnames[:] = sorted(
                d for d in dirnames if not self._is_excluded(rel_to_root / d, is_dir=True)
            )

            for filename in sorted(filenames):
                if self._is_excluded(rel_to_root / filename):
                    continue
                filepath = os.path.join(dirpath, filename)
                # Skips FIFOs, sockets and dangling symlinks.
                if os.path.isfile(filepath):
                    yield filepath

    def _expand_glob(self, pattern: str) -> list[str]:
        """Expand a glob pattern into sorted file paths, then apply exclusions."""
        # The root for globbing is everything before the first wildcard component
        parts = Path(pattern).parts
        root = Path(".")
        glob_part = pattern
        for i, part in enumerate(parts):
            if is_glob(part):
                root = Path(*parts[:i]) if i > 0 else Path(".")
                glob_part = Path(*parts[i:]).as_posix()
                break

        try:
            matches = sorted(root.glob(glob_part))
        except (ValueError, NotImplementedError) as e:
            raise GlobPatternError(pattern, str(e)) from e

        return [
            str(path)
            for path in matches
            if path.is_file() and not self._is_excluded(path.relative_to(root))
        ]

    def _is_excluded(self, rel_path: Path, is_dir: bool = False) -> bool:
        """Check a path relative to its walk or glob root against exclusions."""
        if self._exclude_spec is None:
            return False
        candidate = rel_path.as_posix()
        if is_dir:
            candidate += "/"
        return self._exclude_spec.match_file(candidate)
