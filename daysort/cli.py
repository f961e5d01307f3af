"""Command line interface: copy media from source trees into dated folders."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .core.config import ExtensionRules, OrganizerConfig, load_rules_file, prepare_destination
from .core.errors import OrganizeError
from .core.protocols import ProgressReporter
from .logging.rich_logger import RichProgressReporter, QuietProgressReporter
from .services.organizer import Organizer


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="daysort",
        description="Copy photos and videos into DESTINATION/YYYY/MM/DD by modification date.",
    )

    parser.add_argument(
        "sources",
        nargs="+",
        type=Path,
        help="Source directories (or files) to scan",
    )
    parser.add_argument(
        "destination",
        type=Path,
        help="Destination root",
    )

    parser.add_argument(
        "-d", "--dry",
        action="store_true",
        help="Show what would be done without creating or copying anything",
    )
    parser.add_argument(
        "-c", "--create",
        action="store_true",
        help="Create the destination root if it does not exist",
    )
    parser.add_argument(
        "-o", "--overwrite",
        action="store_true",
        help="Replace files that already exist in the destination",
    )
    parser.add_argument(
        "--min-size",
        type=int,
        default=None,
        help="Skip media files smaller than this many bytes (default: 10240)",
    )
    parser.add_argument(
        "--rules",
        type=Path,
        default=None,
        help="JSON file overriding image_extensions, other_extensions, skip_dirs, min_size",
    )
    parser.add_argument(
        "--no-follow-symlinks",
        dest="follow_symlinks",
        action="store_false",
        help="Ignore symbolic links instead of following them",
    )

    # Output options
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only print warnings and errors",
    )

    return parser


def build_config(args: argparse.Namespace) -> OrganizerConfig:
    """Build the run configuration from parsed arguments."""
    rules = ExtensionRules()
    min_size: Optional[int] = None
    if args.rules is not None:
        rules_file = load_rules_file(args.rules)
        rules = rules_file.apply(rules)
        min_size = rules_file.min_size
    if args.min_size is not None:
        min_size = args.min_size

    config_kwargs = {}
    if min_size is not None:
        config_kwargs["min_size"] = min_size

    return OrganizerConfig(
        destination=args.destination,
        rules=rules,
        dry_run=args.dry,
        overwrite=args.overwrite,
        follow_symlinks=args.follow_symlinks,
        **config_kwargs,
    )


def run(args: argparse.Namespace, reporter: ProgressReporter) -> int:
    """Check the destination, then organize every source in order."""
    config = build_config(args)

    reporter.print_header("daysort" + (" (dry run)" if config.dry_run else ""))
    reporter.print_config({
        "Sources": ", ".join(str(s) for s in args.sources),
        **config.describe(),
    })

    prepare_destination(config.destination, create=args.create, dry_run=config.dry_run)

    organizer = Organizer(config, reporter=reporter)
    stats = organizer.organize(args.sources)
    reporter.print_stats(stats)
    return 0


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.quiet:
        reporter = QuietProgressReporter()
    else:
        reporter = RichProgressReporter(verbose=args.verbose)
    setup_logging(args.verbose)

    with reporter:
        try:
            return run(args, reporter)
        except KeyboardInterrupt:
            # Clean exit on Ctrl+C - no stack trace
            return 130
        except (OrganizeError, ValueError) as e:
            reporter.error(str(e))
            return 1


if __name__ == "__main__":
    sys.exit(main())
