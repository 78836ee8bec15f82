"""
Path resolution: expands files, directories and glob patterns into the
ordered list of files a search reads.

Usage::

    from subgrep.file_resolver import FileResolver, FileResolverConfig

    resolver = FileResolver(FileResolverConfig(recursive=True, exclude=["*.log"]))
    files = resolver.resolve(["src", "notes/*.txt", "README.md"])
"""

from subgrep.file_resolver.patterns import compile_excludes, read_pattern_file
from subgrep.file_resolver.resolver import FileResolver, is_glob
from subgrep.file_resolver.types import FileResolverConfig

__all__ = [
    "FileResolver",
    "FileResolverConfig",
    "compile_excludes",
    "is_glob",
    "read_pattern_file",
]
