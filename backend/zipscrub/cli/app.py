from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from rich.console import Console

from ..scanner.errors import PlaceholderMissingError
from ..scanner.models import DEFAULT_PLACEHOLDER_PATH, ScrubSettings
from ..scanner.rewriter import load_placeholder
from .display import render_summary
from .failure_policy import DeleteOnFailure, FailurePolicy, PreserveOnFailure
from .scheduler import ArchiveScheduler

console = Console()


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from exc
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zipscrub",
        description=(
            "Rewrite every .zip under a directory in place: PNG entries are replaced "
            f"with {DEFAULT_PLACEHOLDER_PATH} and source assets are dropped."
        ),
        allow_abbrev=False,
    )
    parser.add_argument(
        "-path",
        "--path",
        dest="path",
        default=".",
        help="The root directory to process zip files (default: current directory).",
    )
    parser.add_argument(
        "--workers",
        type=_positive_int,
        default=None,
        help="Maximum number of archives rewritten at once (default: CPU count).",
    )
    parser.add_argument(
        "--preserve-on-failure",
        action="store_true",
        help="Leave archives that fail to rewrite on disk instead of deleting them.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log per-archive progress.",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> ScrubSettings:
    return ScrubSettings(
        root=Path(args.path),
        workers=args.workers,
        preserve_on_failure=args.preserve_on_failure,
        verbose=args.verbose,
    )


def failure_policy_for(settings: ScrubSettings) -> FailurePolicy:
    if settings.preserve_on_failure:
        return PreserveOnFailure()
    return DeleteOnFailure()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
    )


def run(settings: ScrubSettings) -> int:
    try:
        placeholder = load_placeholder(settings.placeholder_path)
    except PlaceholderMissingError as exc:
        console.print(str(exc), markup=False, highlight=False, soft_wrap=True)
        return 1

    scheduler = ArchiveScheduler(
        placeholder,
        workers=settings.workers,
        failure_policy=failure_policy_for(settings),
    )
    summary = scheduler.run(settings.root)

    render_summary(console, summary)
    console.print("Processing complete.", highlight=False)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)
    _configure_logging(settings.verbose)
    return run(settings)
