"""Configuration types for file resolution."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class FileResolverConfig:
    """
    Configuration for path expansion.

    `recursive=False` means directories contribute no files (a diagnostic is
    emitted instead). `exclude` holds gitignore-style patterns applied to files
    found by directory walks and glob expansion; explicitly named files are never
    excluded.
    """

    recursive: bool = False
    exclude: list[str] = field(default_factory=list)
