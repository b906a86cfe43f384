"""
Command-line interface for showcase-publish.

This module is responsible for argument parsing and delegating to the
setup sequence in the workflow module.
"""

from __future__ import annotations

import argparse
from typing import List, Optional

from .config import DEFAULT_REPO_NAME, Config
from .console import Reporter
from .errors import PublishError
from .logging_utils import configure_logging
from .workflow import run_publish


def build_arg_parser() -> argparse.ArgumentParser:
    # -h is handled by the workflow so the header is printed before usage.
    parser = argparse.ArgumentParser(
        prog="showcase-publish",
        description=(
            "Turn the current folder into a git repository, push it to "
            "GitHub and print the steps to host it on Netlify."
        ),
        add_help=False,
    )

    parser.add_argument(
        "-u",
        "--username",
        default=None,
        help="GitHub username used in URLs and commands (prompted if omitted).",
    )
    parser.add_argument(
        "-r",
        "--repo-name",
        default=DEFAULT_REPO_NAME,
        help=f"Name of the GitHub repository (default: {DEFAULT_REPO_NAME}).",
    )
    parser.add_argument(
        "-C",
        "--directory",
        default=".",
        help="Folder containing the site (default: current directory).",
    )
    parser.add_argument(
        "--no-pause",
        dest="pause",
        action="store_false",
        help="Do not wait for a keypress after the manual GitHub instructions.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (can be specified multiple times).",
    )
    parser.add_argument(
        "-h",
        "--help",
        dest="show_help",
        action="store_true",
        help="Show this help message and exit.",
    )

    return parser


def main(argv: Optional[List[str]] = None, reporter: Optional[Reporter] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    config = Config(
        username=args.username,
        repo_name=args.repo_name,
        show_help=args.show_help,
        directory=args.directory,
        pause=args.pause,
        verbosity=args.verbose,
    )

    configure_logging(verbosity=config.verbosity)
    reporter = reporter or Reporter()

    try:
        run_publish(config, reporter, usage=parser.format_help())
    except KeyboardInterrupt:
        return 130
    except PublishError as exc:
        reporter.error(f"showcase-publish: error: {exc}")
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
