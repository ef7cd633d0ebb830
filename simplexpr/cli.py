#!/usr/bin/env python3
"""
SIMPLEXPR Command-Line Interface

Simplifies a fixed catalogue of sample expressions and prints the results.

Usage:
    simplexpr                       # Simplify every sample
    simplexpr -l                    # List sample names
    simplexpr -s square -s double   # Only the named samples
    simplexpr -t -f chain           # Show which rules fired
    simplexpr --json                # Machine-readable output
    simplexpr -v                    # Debug logging of every rule
"""

import argparse
import json
import logging
import sys
from typing import Callable, Dict, List, Optional

from . import __version__
from .expression import Expression, UndefinedOperationError, simplify
from .factory import E

_logger = logging.getLogger(__name__)

TRACE_FORMATS = ["verbose", "compact", "rules", "chain"]

# Sample expressions over x, y and z, built lazily
SAMPLES: Dict[str, Callable[[], Expression]] = {
    "distinct-terms": lambda: E.add(E.mul(7, "x"), E.mul(9, "y")),
    "term-plus-variable": lambda: E.add(E.mul(4, "x"), "x"),
    "double": lambda: E.add("x", "x"),
    "like-terms": lambda: E.add(E.mul(2, E.pow("x", 2)), E.mul(3, E.pow("x", 2))),
    "add-zero": lambda: E.add(0, E.div("x", "y")),
    "mul-one": lambda: E.mul(1, E.add("x", "y")),
    "mul-zero": lambda: E.mul(0, E.pow("z", "y")),
    "square": lambda: E.mul("z", "z"),
    "self-division": lambda: E.div("y", "y"),
    "unit-denominator": lambda: E.div(E.add("x", 0), 1),
    "unit-exponent": lambda: E.pow(E.mul("x", 1), 1),
    "zero-exponent": lambda: E.pow(E.add("x", "y"), 0),
    "zero-power": lambda: E.pow(0, -2),
    "nested": lambda: E.div(E.add(E.mul(2, 3), E.pow(1, "z")), E.mul(7, 1)),
}


def run_sample(name: str, trace: bool = False, trace_format: str = "verbose") -> Dict:
    """
    Build and simplify one sample.

    Returns:
        Dict with "name", "input" and either "output" or "error"; with
        trace=True it also holds "trace" (formatted) and "steps".
    """
    expr = SAMPLES[name]()
    report = {"name": name, "input": expr.pretty_print()}
    try:
        if trace:
            result, steps = simplify(expr, trace=True)
            report["trace"] = steps.format(trace_format)
            report["steps"] = steps.to_dict()["steps"]
        else:
            result = simplify(expr)
    except UndefinedOperationError as e:
        _logger.debug("sample %s failed: %s", name, e)
        report["error"] = str(e)
        return report
    report["output"] = result.pretty_print()
    return report


def format_report(report: Dict) -> str:
    """Render a sample report as "input => output" plus any trace."""
    if "error" in report:
        line = f"{report['input']} => error: {report['error']}"
    else:
        line = f"{report['input']} => {report['output']}"
    if report.get("trace"):
        trace_lines = report["trace"].splitlines()
        line += "\n" + "\n".join(f"    {t}" for t in trace_lines)
    return line


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="simplexpr",
        description="SIMPLEXPR - Simplifying EXPRessions",
        epilog="Examples:\n"
               "  simplexpr                      Simplify every sample\n"
               "  simplexpr -s square            Simplify one sample\n"
               "  simplexpr -t -f rules          Show the rules that fired\n",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        "-l", "--list",
        action="store_true",
        help="List sample names and exit"
    )

    parser.add_argument(
        "-s", "--sample",
        action="append",
        default=[],
        help="Simplify only this sample (can be specified multiple times)"
    )

    parser.add_argument(
        "-t", "--trace",
        action="store_true",
        help="Show the rules applied to each sample"
    )

    parser.add_argument(
        "-f", "--format",
        default="verbose",
        choices=TRACE_FORMATS,
        help="Trace format"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log every rule application to stderr"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.list:
        for name in SAMPLES:
            print(name)
        return 0

    names = args.sample or list(SAMPLES)
    unknown = [name for name in names if name not in SAMPLES]
    if unknown:
        print(f"Unknown sample: {', '.join(unknown)}", file=sys.stderr)
        print("Use --list to see the available samples.", file=sys.stderr)
        return 2

    reports = [run_sample(name, trace=args.trace, trace_format=args.format)
               for name in names]

    if args.json:
        print(json.dumps(reports, indent=2))
    else:
        for report in reports:
            print(format_report(report))

    return 0


if __name__ == "__main__":
    sys.exit(main())
