"""CLI entrypoint: read an expression, print its rendering and value."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from .execution import calculate
from .utils.logging import setup_logging


def run_once(line: str, *, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    """Calculate one line and print the outcome. Returns the exit code."""
    out = out or sys.stdout
    err = err or sys.stderr
    result = calculate(line)
    for warning in result.warnings:
        print(f"WARNING: {warning}", file=err)
    if not result.success:
        print(f"ERROR: {result.error}", file=err)
        return 1
    print(f"Expression: {result.expression}", file=out)
    print(f"Result: {result.value}", file=out)
    return 0


def run_repl(*, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    """Evaluate lines until EOF or exit. Returns 1 if any line failed."""
    out = out or sys.stdout
    print("relcalc (type 'exit' to quit)", file=out)
    status = 0
    while True:
        try:
            line = input("> ")
        except EOFError:
            break
        if not line.strip():
            continue
        if line.strip().lower() in {"exit", "quit"}:
            break
        status = max(status, run_once(line, out=out, err=err))
    return status


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="relcalc",
        description="Parse and evaluate an integer expression (+ - * < > = and parentheses)",
    )
    parser.add_argument("expression", nargs="?", help="Expression to evaluate; read from stdin when omitted")
    parser.add_argument("--repl", action="store_true", help="Evaluate expressions interactively")
    parser.add_argument("--log-file", type=Path, help="Write logs to this file")
    parser.add_argument("--verbose", action="store_true", help="Also log to stderr")
    args = parser.parse_args(argv)

    setup_logging(args.log_file, console=True if args.verbose else None)

    if args.repl:
        return run_repl()

    if args.expression is not None:
        line = args.expression
    else:
        line = sys.stdin.readline().rstrip("\r\n")
    return run_once(line)


if __name__ == "__main__":
    sys.exit(main())
