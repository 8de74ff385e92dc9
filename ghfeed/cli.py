"""Command line interface for ghfeed."""

import argparse
import sys

from .config import LOG_LEVELS, Config
from .logging_config import setup_structured_logging
from .models import FeedKind
from .pipeline import RunOptions, run


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ghfeed",
        description="Print and save the latest releases or commits of a GitHub repository.",
    )
    parser.add_argument("-u", dest="url", default="", help="GitHub repository URL (required)")
    parser.add_argument("-r", dest="releases", action="store_true", help="Read releases.atom")
    parser.add_argument("-c", dest="commits", action="store_true", help="Read commits.atom")
    parser.add_argument(
        "-all", dest="all", action="store_true", help="Read both releases.atom and commits.atom"
    )
    parser.add_argument("-n", dest="count", type=int, default=1, help="Number of entries to show (default: 1)")
    parser.add_argument(
        "-o",
        dest="output_dir",
        default=None,
        help="Output directory for releases.atom / commits.atom (default: current directory)",
    )
    parser.add_argument(
        "--insecure",
        action="store_true",
        help="Disable TLS certificate verification (exposes the fetch to man-in-the-middle attacks)",
    )
    parser.add_argument(
        "--plain-text", action="store_true", help="Strip HTML markup from release notes"
    )
    parser.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds")
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default=None, help="Log level (stderr)"
    )
    return parser


def requested_kinds(args: argparse.Namespace) -> list[FeedKind]:
    """Feed kinds selected by the flags; releases when none is given."""
    kinds = []
    if args.releases or args.all:
        kinds.append(FeedKind.RELEASES)
    if args.commits or args.all:
        kinds.append(FeedKind.COMMITS)
    return kinds or [FeedKind.RELEASES]


def build_options(args: argparse.Namespace, config: Config) -> RunOptions:
    """Merge parsed flags over environment configuration."""
    fetch_config = config.get_fetch_config()
    if args.insecure:
        fetch_config.verify_tls = False
    if args.timeout is not None:
        fetch_config.timeout = args.timeout

    output_config = config.get_output_config()
    if args.output_dir is not None:
        output_config.output_dir = args.output_dir
    if args.plain_text:
        output_config.plain_text = True

    return RunOptions(
        repo_url=args.url,
        kinds=requested_kinds(args),
        count=args.count,
        fetch=fetch_config,
        output=output_config,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.url:
        parser.print_help()
        return 0

    try:
        config = Config()
    except ValueError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    setup_structured_logging(args.log_level or config.log_level)

    report = run(build_options(args, config))

    for message in report.errors:
        print(f"[ERROR] {message}")

    return 0 if report.success else 1
