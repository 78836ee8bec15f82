"""
Search configuration shared by the CLI, the path resolver and the scanner.

A `SearchConfig` is built once from command-line arguments and never changes
afterwards. There is no config file: everything comes from argv.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchConfig:
    """
    Options for one search run.

    When `show_usage` is set, the remaining fields are not consulted and no
    search runs. Otherwise `pattern` is non-empty and `paths` has at least one
    entry.
    """

    pattern: str = ""
    paths: tuple[str, ...] = ()
    case_insensitive: bool = False
    show_line_numbers: bool = False
    invert: bool = False
    recursive: bool = False
    show_filenames: bool = False
    color_output: bool = False
    show_usage: bool = False
    # Supplementary options
    exclude: tuple[str, ...] = ()
    list_files: bool = False
    show_version: bool = False

    @property
    def highlight_enabled(self) -> bool:
        """Whether matched spans are emphasized. Never under `invert` or `case_insensitive`."""
        return self.color_output and not self.invert and not self.case_insensitive
