"""
Argscan

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from typing import Sequence

from rich.markup import escape
from rich.table import Table

from argscan.console import console, error_console
from argscan.exceptions import RetrievalError
from argscan.parser import ArgumentParser
from argscan.utils import program_name, setup_logging


def get_parser() -> ArgumentParser:
    """Build the sample grammar used by `python -m argscan`."""
    parser = ArgumentParser(
        description="Parse the given arguments against a sample grammar and "
        "print the resulting values."
    )
    parser.add_argument("-n", "--name", required=True, help="Name to greet.")
    parser.add_argument(
        "-i", "--input", default="123", required=True, help="An integer input."
    )
    parser.add_argument("--strings", nargs="+", help="One or more strings.")
    parser.add_argument("-v", "--verbose", nargs=0, help="Enable debug logging.")
    parser.add_argument("-h", "--help", nargs=0, help="Show this help message.")
    parser.add_final_argument("output", help="Where the output would go.")
    return parser


def render_values(parser: ArgumentParser) -> Table:
    table = Table(title=escape(f"{parser.app_name} arguments"))
    table.add_column("argument")
    table.add_column("supplied")
    table.add_column("value")
    for name, value in parser.as_dict().items():
        if name in ("help", "verbose"):
            continue
        shown = " ".join(value) if isinstance(value, list) else value
        table.add_row(name, "yes" if parser.supplied(name) else "no", escape(shown))
    return table


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv if argv is None else argv)
    verbose = any(token in ("-v", "--verbose") for token in argv[1:])
    setup_logging(console_log_level=logging.DEBUG if verbose else logging.WARNING)
    if verbose:
        logging.getLogger("argscan").setLevel(logging.DEBUG)

    parser = get_parser()
    if any(token in ("-h", "--help") for token in argv[1:]):
        parser.set_app_name(program_name(argv[0]) if argv else "argscan")
        parser.print_help()
        return 0

    parser.parse(argv)

    console.print(render_values(parser))
    try:
        greeting = f"Hello, {parser.retrieve('name')}!"
        total = parser.retrieve("input", int) + 1
    except RetrievalError as error:
        error_console.print(f"[error]Error:[/error] {escape(str(error))}", soft_wrap=True)
        return 1
    console.print(greeting, markup=False)
    console.print(f"input + 1 = {total}", markup=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
