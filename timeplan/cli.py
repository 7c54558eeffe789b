"""
CLI interface for the critical path calculator.

Runs the calculator and the relation validator over generated plans.
"""

import argparse
import logging
import sys
import time
from typing import Optional

from timeplan.config.settings import settings
from timeplan.analysis.critical_path import analyze_critical_path, format_critical_path_report
from timeplan.generator import generate_time_plan
from timeplan.utils.logger import configure_logging
from timeplan.validation.relation_validator import validate_relations


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the package logger for CLI use."""
    logger = configure_logging("timeplan")
    if verbose:
        logger.setLevel(logging.DEBUG)
    return logger


def _add_plan_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--timelines", type=int, default=settings.BENCH_TIMELINES,
        help=f"Number of timelines (default: {settings.BENCH_TIMELINES})",
    )
    parser.add_argument(
        "--lines", type=int, default=settings.BENCH_LINES_PER_TIMELINE,
        help=f"Lines per timeline (default: {settings.BENCH_LINES_PER_TIMELINE})",
    )
    parser.add_argument(
        "--density", type=float, default=settings.BENCH_RELATION_DENSITY,
        help=f"Relation density 0-1 (default: {settings.BENCH_RELATION_DENSITY})",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Random seed for a reproducible plan",
    )


def run_bench(args: argparse.Namespace) -> int:
    """Generate a plan, time the calculation and print the report."""
    logger = logging.getLogger(__name__)

    plan = generate_time_plan(
        num_timelines=args.timelines,
        num_lines_per_timeline=args.lines,
        relation_density=args.density,
        seed=args.seed,
    )
    logger.info(f"Generated {len(plan.tasks)} tasks, {len(plan.relations)} relations")

    started = time.perf_counter()
    result = analyze_critical_path(plan.tasks, plan.relations)
    elapsed_ms = (time.perf_counter() - started) * 1000

    print(format_critical_path_report(result))
    print(f"Elapsed: {elapsed_ms:.1f} ms")
    return 0


def run_validate(args: argparse.Namespace) -> int:
    """Generate a plan and print relation validation warnings."""
    plan = generate_time_plan(
        num_timelines=args.timelines,
        num_lines_per_timeline=args.lines,
        relation_density=args.density,
        seed=args.seed,
    )
    result = validate_relations(plan.relations, plan.tasks)

    print(f"Relations: {len(plan.relations)}")
    print(f"Invalid: {len(plan.relations) - len(result.fixed_relations)}")
    for warning in result.warnings:
        print(f"  - [{warning.type}] {warning.message} (relation {warning.relation_id})")
    if result.valid:
        print("All relations are valid")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Critical path calculator for time plans",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    bench = subparsers.add_parser("bench", help="Time the calculator on a generated plan")
    _add_plan_arguments(bench)
    bench.set_defaults(func=run_bench)

    validate = subparsers.add_parser("validate", help="Validate relations of a generated plan")
    _add_plan_arguments(validate)
    validate.set_defaults(func=run_validate)

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if not 0.0 <= args.density <= 1.0:
        parser.error("--density must be between 0 and 1")

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
