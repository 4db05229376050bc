"""
Command-line entry point.

    designer-cleaner -path <directory> [-prefix <char>] (-clean | -report) [-export <file>]

Configuration errors stop the run before any file is read. Problems with an
individual designer/companion pair are printed and the run continues.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from designer_cleaner.config import (
    DEFAULT_PREFIX,
    CleanerConfig,
    ConfigurationError,
    Mode,
    resolve_mode,
    validate_directory,
)
from designer_cleaner.orchestrator import process_directory
from designer_cleaner.serialization import save_reports


USAGE = """Usage:
  -path <directory>      Path to the directory containing designer and custom class files
  -prefix <char>         Prefix for backing fields (default: f)
  -clean                 Clean designer files
  -report                Report duplicates and backing fields
  -export <file>         With -report: also write findings to a .json or .yaml file

Note: -clean and -report are mutually exclusive."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="designer-cleaner",
        description="Remove designer-file members duplicated in the companion partial class",
        usage=USAGE,
        add_help=False,
    )
    parser.add_argument("-path")
    parser.add_argument("-prefix", default=DEFAULT_PREFIX)
    parser.add_argument("-clean", action="store_true")
    parser.add_argument("-report", action="store_true")
    parser.add_argument("-export")
    parser.add_argument("-h", "-help", "--help", action="store_true", dest="help")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()

    if not argv:
        print(USAGE)
        return 0

    args = parser.parse_args(argv)
    if args.help:
        print(USAGE)
        return 0

    try:
        config = CleanerConfig(prefix=args.prefix)
        mode = resolve_mode(args.clean, args.report)
        if args.export and mode is not Mode.REPORT:
            raise ConfigurationError("The -export parameter can only be used with -report")
        directory = validate_directory(args.path)
    except ConfigurationError as e:
        print(f"❌ {e}")
        return 1

    summary = process_directory(directory, config, mode)

    if args.export:
        try:
            save_reports(summary.reports, args.export)
        except (OSError, ValueError) as e:
            print(f"❌ Error exporting report: {e}")
            return 1
        print(f"✅ Report exported to {args.export}")

    return 0


def run() -> None:
    """Console script entry point."""
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")
    sys.exit(main())


if __name__ == "__main__":
    run()
