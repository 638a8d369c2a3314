"""Command-line entry point: run a minilisp file, or start the REPL."""

import argparse
import logging
import sys

from minilisp.config import get_log_level
from minilisp.interpreter import Interpreter
from minilisp.shell import LispShell, run_source


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="minilisp")
    parser.add_argument("file", help="file to run (if omitted, starts the REPL)", nargs="?")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="logging level (default from MINILISP_LOG_LEVEL)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level or get_log_level())

    interp = Interpreter()
    if args.file is None:
        LispShell(interp).cmdloop()
        return 0

    try:
        with open(args.file, encoding="utf-8") as fh:
            source = fh.read()
    except OSError as ex:
        print(f"Error reading {args.file}: {ex}", file=sys.stderr)
        return 1
    failures = run_source(interp, source, sys.stdout, sys.stderr)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
