import argparse
import logging
from pathlib import Path

from hexcalc.driver import ProgramResult, run
from hexcalc.report import format_outcome, format_variables


def print_outcomes(result: ProgramResult, skip: int = 0) -> int:
    for outcome in result.outcomes[skip:]:
        print(format_outcome(outcome, with_pointer=True))
    return len(result.outcomes)


if __name__ == "__main__":
    arg_parser = argparse.ArgumentParser(description="Hex calculator: run a program or start an interactive session")
    arg_parser.add_argument("file", nargs="?", type=Path, help="program to run")
    arg_parser.add_argument("-e", "--expr", help="program text to run")
    arg_parser.add_argument("-v", "--verbose", action="store_true", help="trace every statement")
    args = arg_parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(name)s: %(message)s")

    if args.expr is not None or args.file is not None:
        source = args.expr if args.expr is not None else args.file.read_text()
        result = run(source)
        print_outcomes(result)
        print(format_variables(result.variables))
    else:
        # each line is one or more terminated statements; the whole session is re-run
        # from an empty table and only the new outcomes are shown
        session = ""
        seen = 0
        while True:
            try:
                code = input("> ")
            except EOFError:
                break
            if code.strip() == ":vars":
                print(format_variables(run(session).variables))
                continue
            if not code.rstrip().endswith(";"):
                code += ";"
            session += code + "\n"
            seen = print_outcomes(run(session), skip=seen)
