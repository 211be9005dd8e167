"""Command-line runner for the reference wildcard suites."""

from __future__ import annotations

import argparse
from collections import defaultdict
from collections.abc import Sequence

from fastwild.suites import (
    Mode,
    SuiteResult,
    empty_cases,
    run_suite,
    tame_cases,
    utf8_cases,
    wild_cases,
)

__all__ = ["build_parser", "main"]

_PERFORMANCE_REPS = 1_000_000

_TIMING_LABELS = (
    (
        "fast_wild_compare_utf8",
        "fast_wild_compare_utf8 - version providing UTF-8 enablement",
    ),
    (
        "fast_wild_compare_ascii",
        "fast_wild_compare_ascii - light-weight version for byte strings",
    ),
)


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the suite runner."""
    parser = argparse.ArgumentParser(
        prog="fastwild",
        description="Check the wildcard matchers against their reference cases.",
    )
    parser.add_argument(
        "--performance",
        action="store_true",
        help="check with both matchers, repeat the tame and empty suites "
        f"{_PERFORMANCE_REPS} times, and report cumulative timings",
    )
    parser.add_argument(
        "--reps",
        type=_positive_int,
        default=None,
        help="repetitions of the tame and empty suites "
        f"(default: 1, or {_PERFORMANCE_REPS} with --performance)",
    )
    parser.add_argument(
        "--no-tame", dest="tame", action="store_false", help="skip the tame suite"
    )
    parser.add_argument(
        "--no-empty", dest="empty", action="store_false", help="skip the empty suite"
    )
    parser.add_argument(
        "--no-wild", dest="wild", action="store_false", help="skip the wildcard suite"
    )
    parser.add_argument(
        "--utf8",
        action="store_true",
        help="also run the case-insensitive UTF-8 suite",
    )
    return parser


def _print_timings(results: Sequence[SuiteResult]) -> None:
    totals: dict[str, float] = defaultdict(float)
    for result in results:
        for name, seconds in result.timings.items():
            totals[name] += seconds
    for name, label in _TIMING_LABELS:
        if name in totals:
            print(f"{label}: {round(totals[name])} seconds")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the selected suites, print their verdicts and return an exit status."""
    args = build_parser().parse_args(argv)

    mode = Mode.BOTH if args.performance else Mode.ASCII
    if args.reps is not None:
        reps = args.reps
    else:
        reps = _PERFORMANCE_REPS if args.performance else 1

    results: list[SuiteResult] = []
    if args.tame:
        results.append(run_suite("tame string", tame_cases(), reps, mode))
    if args.empty:
        results.append(run_suite("empty string", empty_cases(), reps, mode))
    if args.wild:
        cases = wild_cases(include_extra=args.performance)
        results.append(run_suite("wildcard", cases, 1, mode))
    if args.utf8:
        results.append(run_suite("UTF-8", utf8_cases(), 1, Mode.CASELESS))

    for result in results:
        print(result.summary)

    if args.performance:
        _print_timings(results)

    return 0 if all(result.passed for result in results) else 1