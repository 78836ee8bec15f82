#!/usr/bin/env python3
"""
subgrep: Search files for lines containing a literal string

Common usage:
  subgrep TODO notes.txt
  subgrep -n -f -r TODO src/
  subgrep -i -c error 'logs/*.log'
  subgrep -v '#' settings.ini

The pattern is always matched as a literal substring, never as a regular
expression. Put `--` before a pattern that starts with `-`:
  subgrep -- --> page.html
"""

from __future__ import annotations

import argparse
import importlib.metadata
import sys
from pathlib import Path

from subgrep.config import SearchConfig
from subgrep.errors import SubgrepError, UsageError
from subgrep.file_resolver import FileResolver, FileResolverConfig, read_pattern_file
from subgrep.formatting import format_match
from subgrep.scanner import scan_files

_USAGE_HINT = "Use -h or --help for usage information."


def _build_parser() -> argparse.ArgumentParser:
    # Use the module's docstring as the description
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    parser = argparse.ArgumentParser(
        prog="subgrep",
        usage="%(prog)s [OPTIONS] <pattern> <path...>",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "arguments",
        nargs="*",
        type=str,
        default=[],
        metavar="PATTERN PATH",
        help="Literal pattern to search for, followed by one or more files, "
        "directories or glob patterns",
    )
    parser.add_argument(
        "-i",
        "--ignore-case",
        action="store_true",
        dest="case_insensitive",
        help="Case-insensitive search",
    )
    parser.add_argument(
        "-n",
        "--line-number",
        action="store_true",
        dest="show_line_numbers",
        help="Print line numbers",
    )
    parser.add_argument(
        "-v",
        "--invert-match",
        action="store_true",
        dest="invert",
        help="Invert match (print lines that do not contain the pattern)",
    )
    parser.add_argument(
        "-r", "--recursive", action="store_true", help="Recursive directory search"
    )
    parser.add_argument(
        "-f",
        "--with-filename",
        action="store_true",
        dest="show_filenames",
        help="Print filenames",
    )
    parser.add_argument(
        "-c",
        "--color",
        action="store_true",
        dest="color_output",
        help="Highlight the first match on each line (ignored with -i or -v)",
    )
    parser.add_argument(
        "-h", "--help", action="store_true", dest="show_usage", help="Show help information"
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Skip files found in directories or by wildcards that match this "
        "gitignore-style pattern (e.g., '*.log', 'build/'). Can be repeated",
    )
    parser.add_argument(
        "--exclude-from",
        action="append",
        default=[],
        dest="exclude_from",
        metavar="FILE",
        help="Read exclusion patterns from FILE, one per line. Can be repeated",
    )
    parser.add_argument(
        "--list-files",
        action="store_true",
        dest="list_files",
        help="Print the files that would be searched, without searching them",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        dest="show_version",
        help="Show version information and exit",
    )
    return parser


def _parse_args(args: list[str] | None = None) -> SearchConfig:
    """
    Parse command-line arguments into a `SearchConfig`.

    Flags may appear anywhere among the positionals. Raises `UsageError` when a
    search is requested without a pattern and at least one path.
    """
    opts = _build_parser().parse_intermixed_args(args)

    if opts.show_usage:
        return SearchConfig(show_usage=True)
    if opts.show_version:
        return SearchConfig(show_version=True)

    if len(opts.arguments) < 2:
        raise UsageError("Expected a pattern followed by at least one path.")
    pattern, *paths = opts.arguments
    if not pattern:
        raise UsageError("The search pattern must not be empty.")

    exclude: list[str] = list(opts.exclude)
    for pattern_file in opts.exclude_from:
        try:
            exclude.extend(read_pattern_file(Path(pattern_file)))
        except (OSError, UnicodeDecodeError) as e:
            raise UsageError(f"Cannot read exclude file {pattern_file}: {e}") from e

    return SearchConfig(
        pattern=pattern,
        paths=tuple(paths),
        case_insensitive=opts.case_insensitive,
        show_line_numbers=opts.show_line_numbers,
        invert=opts.invert,
        recursive=opts.recursive,
        show_filenames=opts.show_filenames,
        color_output=opts.color_output,
        exclude=tuple(exclude),
        list_files=opts.list_files,
    )


def _resolve_files(config: SearchConfig) -> list[str]:
    """Expand directories and wildcards in `config.paths` into the files to scan."""
    resolver = FileResolver(
        FileResolverConfig(recursive=config.recursive, exclude=list(config.exclude))
    )
    return resolver.resolve(config.paths)


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the subgrep CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, 1 for search errors, 2 for usage errors)
    """
    try:
        config = _parse_args(args)
    except UsageError as e:
        print(f"Error: {e} {_USAGE_HINT}", file=sys.stderr)
        return 2

    if config.show_usage:
        print(_build_parser().format_help(), end="")
        return 0

    # Display version information if requested
    if config.show_version:
        try:
            version = importlib.metadata.version("subgrep")
            print(f"v{version}")
        except importlib.metadata.PackageNotFoundError:
            print("unknown (package not installed)")
        return 0

    try:
        files = _resolve_files(config)

        if config.list_files:
            for f in files:
                print(f)
            return 0

        for result in scan_files(files, config):
            print(format_match(result, config))
    except SubgrepError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
