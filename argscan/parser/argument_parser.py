# Argscan — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentParser`, the public entry point of argscan.

An `ArgumentParser` owns one `GrammarRegistry` and runs a `ParsingEngine` over it.
It adds the configuration surface (app name, skipping of the invocation token, the
error mode) and typed retrieval by name.

Key Features:
- Declarative argument registration via `add_argument()` / `add_final_argument()`
- Arity via `nargs`: an int, `"+"`, `"*"` or `None` for a single value
- One forward scan per `parse()` call with a reserved trailing window for the
  final argument
- Typed retrieval via `retrieve(name, int)`, `retrieve(name, list[float])`, ...
- Usage and help rendering, printed through rich on stderr when parsing fails

Error Modes:
- `ErrorMode.EXIT` (default): registration and parse errors print
  `ArgumentParser error: <message>` (plus the usage line for parse errors) to
  stderr and exit with status -5.
- `ErrorMode.RAISE`: the `ArgscanError` propagates to the caller.
Retrieval errors always propagate.

Example Usage:
    parser = ArgumentParser()
    parser.add_argument("-n", "--name", required=True)
    parser.add_argument("-i", "--input", default="123")
    parser.add_argument("--strings", nargs="+")
    parser.add_final_argument("output")

    parser.parse(["app", "-n", "bob", "--strings", "a", "b", "out.txt"])

    parser.retrieve("name")                # "bob"
    parser.retrieve("input", int)          # 123
    parser.retrieve("strings")             # ["a", "b"]
    parser.retrieve("output")              # "out.txt"
"""
from __future__ import annotations

import sys
from typing import Any, NoReturn, Sequence

from rich.markup import escape

from argscan.console import console, error_console
from argscan.exceptions import (
    ArgscanError,
    InvalidArgumentNameError,
    UnknownArgumentError,
)
from argscan.logger import logger
from argscan.mode import ErrorMode
from argscan.parser.argument import Argument
from argscan.parser.arity import Arity
from argscan.parser.engine import ParsingEngine
from argscan.parser.registry import GrammarRegistry
from argscan.parser.usage import USAGE_WIDTH, UsageFormatter
from argscan.utils import program_name

EXIT_STATUS = -5


class ArgumentParser:
    """
    Command-line argument parser with a declarative grammar.

    Features:
    - Short (`-x`) and long (`--name`) argument names.
    - Fixed and variadic arity.
    - Required arguments, ordered before optional ones in the input.
    - String defaults.
    - A positional final argument matched against the trailing tokens.
    - Typed retrieval with explicit conversion errors.
    """

    def __init__(
        self,
        app_name: str = "",
        skip_first: bool = True,
        error_mode: ErrorMode | str = ErrorMode.EXIT,
        usage_width: int = USAGE_WIDTH,
        description: str = "",
    ) -> None:
        self.app_name: str = app_name
        self.skip_first: bool = skip_first
        self.error_mode: ErrorMode = ErrorMode(error_mode)
        self.description: str = description
        self.registry: GrammarRegistry = GrammarRegistry()
        self.engine: ParsingEngine = ParsingEngine(self.registry)
        self.formatter: UsageFormatter = UsageFormatter(self.registry, usage_width)

    def set_error_mode(self, error_mode: ErrorMode | str) -> None:
        self.error_mode = ErrorMode(error_mode)

    def set_app_name(self, app_name: str) -> None:
        self.app_name = app_name

    def set_skip_first(self, skip_first: bool) -> None:
        self.skip_first = skip_first

    def _fail(self, error: ArgscanError) -> NoReturn:
        """Apply the error mode to a registration or parse error."""
        if self.error_mode is ErrorMode.RAISE:
            raise error
        logger.warning("ArgumentParser error: %s", error)
        error_console.print(
            f"[error]ArgumentParser error:[/error] {escape(str(error))}", soft_wrap=True
        )
        if error.show_usage:
            error_console.print(escape(self.usage()), soft_wrap=True)
        sys.exit(EXIT_STATUS)

    def add_argument(
        self,
        *names: str,
        nargs: Arity | int | str | None = None,
        default: str = "",
        required: bool = False,
        help: str = "",
    ) -> int:
        """
        Define a new named argument.

        Args:
            *names (str): One short name (`-i`), one long name (`--input`), or both.
            nargs (Arity | int | str | None): Number of values the argument consumes.
                `None` means one value, stored as a string.
            default (str): Value used when the argument is not supplied.
            required (bool): Whether this argument is mandatory. Ignored for
                requiredness checks when a default is given.
            help (str): Help text for rendering.

        Returns:
            int: Position of the argument in registration order.
        """
        try:
            short_name, long_name = self._split_names(names)
            arity = Arity.coerce(nargs)
            return self.registry.register(
                short_name=short_name,
                long_name=long_name,
                arity=arity,
                default=default,
                required=required,
                help=help,
            )
        except ArgscanError as error:
            self._fail(error)

    def add_final_argument(
        self,
        name: str,
        nargs: Arity | int | str | None = 1,
        default: str = "",
        required: bool = True,
        help: str = "",
    ) -> int:
        """
        Define the positional argument that receives the trailing tokens.

        Args:
            name (str): Retrieval name, e.g. `"output"`.
            nargs (Arity | int | str | None): A positive count or `"+"`.
        """
        try:
            return self.registry.register_final(
                name,
                arity=Arity.coerce(nargs),
                default=default,
                required=required,
                help=help,
            )
        except ArgscanError as error:
            self._fail(error)

    @staticmethod
    def _split_names(names: Sequence[str]) -> tuple[str, str]:
        for name in names:
            if not isinstance(name, str):
                raise InvalidArgumentNameError(f"Argument name {name!r} must be a string")
        short_names = [name for name in names if name and not name.startswith("--")]
        long_names = [name for name in names if name and name.startswith("--")]
        if len(short_names) > 1 or len(long_names) > 1:
            raise InvalidArgumentNameError(
                f"An argument takes at most one short and one long name, got {names}"
            )
        return (
            short_names[0] if short_names else "",
            long_names[0] if long_names else "",
        )

    def parse(self, *args: Any) -> None:
        """
        Parse an argument vector.

        Accepts `parse(argv)`, `parse(argc, argv)` or `parse()` for `sys.argv`.
        """
        if not args:
            tokens = list(sys.argv)
        elif len(args) == 1:
            tokens = list(args[0])
        elif len(args) == 2:
            argc, argv = args
            tokens = list(argv)[:argc]
        else:
            raise TypeError(
                f"parse() takes an argument vector or (argc, argv), got {len(args)} values"
            )

        if not self.app_name and self.skip_first and tokens:
            self.app_name = program_name(tokens[0])

        try:
            self.engine.parse(tokens, skip_first=self.skip_first)
        except ArgscanError as error:
            self._fail(error)

    def _resolve(self, name: str) -> int:
        index = self.registry.resolve(name)
        if index is None:
            raise UnknownArgumentError(f"Argument '{name}' is not registered")
        return index

    def retrieve(self, name: str, type_: Any = None) -> Any:
        """
        Return an argument's value converted to `type_`.

        Args:
            name (str): Bare (`input`, `i`) or delimited (`--input`, `-i`) name.
            type_ (Any): `str`, `int`, `float`, `bool` for single values; `list`,
                `tuple`, `list[int]`, ... for sequences. `None` returns the value
                in its stored shape.

        Raises:
            UnknownArgumentError: The name is not registered.
            ShapeMismatchError: A sequence was requested from a single value or
                the other way round.
            EmptyValueError: A single-value argument has neither a value nor a default.
            TypeConversionError: The stored string does not convert to `type_`.
        """
        index = self._resolve(name)
        slot = self.registry.slot(index)
        if type_ is None:
            type_ = str if self.registry.argument(index).arity.is_scalar else list
        return slot.get(name, type_)

    def count(self, name: str) -> int:
        """Return 0/1 for a single-value argument, or the number of stored values."""
        return self.registry.slot(self._resolve(name)).count()

    def exists(self, name: str) -> bool:
        return self.registry.resolve(name) is not None

    def supplied(self, name: str) -> bool:
        """Return True if the argument's key appeared in the last parsed input."""
        index = self._resolve(name)
        if index == self.registry.final_index:
            return self.engine.state.final_consumed > 0
        return index in self.engine.state.opened

    def get_argument(self, name: str) -> Argument | None:
        index = self.registry.resolve(name)
        return None if index is None else self.registry.argument(index)

    def is_empty(self) -> bool:
        return self.registry.is_empty()

    def clear(self) -> None:
        """Remove every registered argument and its value."""
        self.registry.clear()
        self.engine = ParsingEngine(self.registry)

    def as_dict(self) -> dict[str, str | list[str]]:
        """Return every argument's value in its stored shape, keyed by bare name."""
        return {
            argument.dest: self.registry.slot(index).native()
            for index, argument in enumerate(self.registry)
        }

    def usage(self) -> str:
        return self.formatter.render(self.app_name)

    def format_help(self) -> str:
        return self.formatter.render_help(self.app_name, self.description)

    def print_help(self) -> None:
        """Print usage and the argument listing using Rich output."""
        console.print(escape(self.format_help()), soft_wrap=True)

    def __str__(self) -> str:
        required = sum(argument.required for argument in self.registry)
        return (
            f"ArgumentParser(args={len(self.registry)}, "
            f"required={required}, final={self.registry.final is not None})"
        )

    def __repr__(self) -> str:
        return str(self)
