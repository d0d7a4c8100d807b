"""Command-line interface for swift-outline."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from outline.extract import outline_files
from report.write import write_outline
from scan.files import find_swift_files
from settings.config import ConfigError, config_root, load_config
from settings.log import configure_logging, get_logger

__version__ = "0.1.0"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="swift-outline",
        description="Print a JSON outline of the declarations in Swift files.",
    )
    parser.add_argument("path", help="Path to a Swift file or directory")
    parser.add_argument(
        "--deep",
        action="store_true",
        default=None,
        help="Enable detection of nested functions and symbols",
    )
    parser.add_argument(
        "--recursive",
        action="store_true",
        default=None,
        help="Process directories recursively",
    )
    parser.add_argument(
        "--show-type",
        action="store_true",
        default=None,
        help="Attach inferred type labels to variables",
    )
    parser.add_argument(
        "--jobs",
        type=int,
        default=None,
        help="Number of files outlined in parallel (default: config jobs)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostics level on stderr (default: config log_level)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"swift-outline {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    target = Path(args.path).expanduser()

    try:
        config = load_config(config_root(target))
    except ConfigError as exc:
        sys.stderr.write(f"Error: {exc}\n")
        return 1

    if args.jobs is not None and args.jobs < 1:
        parser.error("--jobs must be at least 1")

    recursive = config.recursive if args.recursive is None else args.recursive
    deep = config.deep if args.deep is None else args.deep
    show_type = config.show_type if args.show_type is None else args.show_type
    jobs = config.jobs if args.jobs is None else args.jobs

    configure_logging(args.log_level or config.log_level)
    logger = get_logger("cli")

    swift_files = list(
        find_swift_files(
            target,
            recursive=recursive,
            include_patterns=config.include,
            exclude_patterns=config.exclude,
            nested_gitignore=config.nested_gitignore,
        )
    )
    if not swift_files:
        logger.debug("no_swift_files", path=str(target))
        sys.stderr.write(f"Error: No Swift files found at: {args.path}\n")
        return 1

    results = outline_files(
        swift_files,
        deep=deep,
        infer_types=show_type,
        jobs=jobs,
    )

    write_outline(results, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
