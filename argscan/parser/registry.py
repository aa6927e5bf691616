# Argscan — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `GrammarRegistry`, the ordered collection of registered arguments.

The registry keeps:
- the `Argument` descriptors in registration order,
- a name index from every key name (short and long) to the descriptor position,
- a `ValueStore` with one slot per descriptor,
- the number of arguments that must be supplied (`required_count`).

The final argument is indexed under a synthetic name so it can be retrieved like
any other argument, but `lookup()` never reports it as a key.
"""
from __future__ import annotations

from typing import Iterator

from argscan.exceptions import (
    DuplicateArgumentNameError,
    DuplicateFinalArgumentError,
    InvalidArgumentNameError,
    InvalidArityError,
)
from argscan.logger import logger
from argscan.parser.argument import Argument
from argscan.parser.arity import Arity, ArityKind
from argscan.parser.utils import delimit, validate_name
from argscan.parser.value_store import ValueSlot, ValueStore


class GrammarRegistry:
    """Registered arguments, their name index and their value slots."""

    def __init__(self) -> None:
        self._arguments: list[Argument] = []
        self._index: dict[str, int] = {}
        self._final_index: int | None = None
        self.required_count: int = 0
        self.store: ValueStore = ValueStore()

    def _check_available(self, names: tuple[str, ...]) -> None:
        for name in names:
            if name in self._index:
                existing = self._arguments[self._index[name]]
                raise DuplicateArgumentNameError(
                    f"Name '{name}' is already used by argument '{existing.dest}'"
                )
        if len(names) != len(set(names)):
            raise DuplicateArgumentNameError(f"Names {names} must be distinct")

    def _insert(self, argument: Argument) -> int:
        index = len(self._arguments)
        self._arguments.append(argument)
        self.store.add(argument)
        for name in argument.names:
            self._index[name] = index
        if argument.counts_as_required:
            self.required_count += 1
        logger.debug(
            "Registered argument '%s' (nargs=%s, required=%s, final=%s)",
            argument.canonical_name,
            argument.arity,
            argument.required,
            argument.final,
        )
        return index

    def register(
        self,
        short_name: str | None = None,
        long_name: str | None = None,
        arity: Arity = Arity.fixed(1),
        default: str = "",
        required: bool = False,
        help: str = "",
    ) -> int:
        """
        Add a named argument to the grammar.

        Args:
            short_name (str | None): `-x` form, or None/"" for none.
            long_name (str | None): `--name` form, or None/"" for none.
            arity (Arity): Number of tokens the argument consumes.
            default (str): Initial value of a scalar slot. A non-empty default means
                the argument never has to be supplied.
            required (bool): Whether the argument must be supplied.
            help (str): Help text.

        Returns:
            int: The position of the new argument.

        Raises:
            InvalidArgumentNameError: If a name violates the name syntax, both names
                are missing, or a name is already registered.
        """
        short_name = short_name or ""
        long_name = long_name or ""
        if not short_name and not long_name:
            raise InvalidArgumentNameError("An argument needs a short or a long name")
        if short_name:
            validate_name(short_name)
            if len(short_name) != 2:
                raise InvalidArgumentNameError(
                    f"Invalid short name '{short_name}'. Use a single '-' and one character"
                )
        if long_name:
            validate_name(long_name)
            if len(long_name) == 2:
                raise InvalidArgumentNameError(
                    f"Invalid long name '{long_name}'. Use '--' and at least two characters"
                )
        names = tuple(name for name in (short_name, long_name) if name)
        self._check_available(names)
        argument = Argument(
            short_name=short_name,
            long_name=long_name,
            arity=arity,
            required=required,
            default=default or "",
            help=help,
        )
        return self._insert(argument)

    def register_final(
        self,
        name: str,
        arity: Arity = Arity.fixed(1),
        default: str = "",
        required: bool = True,
        help: str = "",
    ) -> int:
        """
        Add the unnamed argument that receives the trailing tokens of the input.

        Args:
            name (str): Retrieval name, bare (`output`) or delimited (`--output`).
            arity (Arity): `Fixed(n)` with `n >= 1`, or `OneOrMore`.

        Raises:
            DuplicateFinalArgumentError: If a final argument is already registered.
            InvalidArityError: For `ZeroOrMore` or `Fixed(0)`.
            InvalidArgumentNameError: If the name is empty, malformed or taken.
        """
        if self._final_index is not None:
            existing = self._arguments[self._final_index]
            raise DuplicateFinalArgumentError(
                f"A final argument is already registered as '{existing.dest}'"
            )
        if arity.kind is ArityKind.ZERO_OR_MORE:
            raise InvalidArityError("The final argument cannot take zero or more values")
        if arity.minimum < 1:
            raise InvalidArityError("The final argument must take at least one value")
        if not isinstance(name, str) or not name:
            raise InvalidArgumentNameError("argument names must be non-empty")
        synthetic = validate_name(delimit(name))
        self._check_available((synthetic,))
        argument = Argument(
            long_name=synthetic if len(synthetic) > 2 else "",
            short_name=synthetic if len(synthetic) == 2 else "",
            arity=arity,
            required=required,
            default=default or "",
            help=help,
            final=True,
        )
        self._final_index = self._insert(argument)
        return self._final_index

    def lookup(self, token: str) -> int | None:
        """Return the position of the argument keyed by `token`, or None."""
        index = self._index.get(token)
        if index is None or index == self._final_index:
            return None
        return index

    def resolve(self, name: str) -> int | None:
        """Return the position for a retrieval name (bare or delimited), or None."""
        return self._index.get(delimit(name)) if name else None

    def argument(self, index: int) -> Argument:
        return self._arguments[index]

    def slot(self, index: int) -> ValueSlot:
        return self.store[index]

    @property
    def final_index(self) -> int | None:
        return self._final_index

    @property
    def final(self) -> Argument | None:
        if self._final_index is None:
            return None
        return self._arguments[self._final_index]

    def named_arguments(self) -> list[Argument]:
        return [argument for argument in self._arguments if not argument.final]

    def is_empty(self) -> bool:
        return not self._index

    def clear(self) -> None:
        """Forget every argument, name and value."""
        self._arguments.clear()
        self._index.clear()
        self._final_index = None
        self.required_count = 0
        self.store.clear()
        logger.debug("Grammar registry cleared")

    def __iter__(self) -> Iterator[Argument]:
        return iter(self._arguments)

    def __len__(self) -> int:
        return len(self._arguments)

    def __str__(self) -> str:
        return (
            f"GrammarRegistry(args={len(self._arguments)}, names={len(self._index)}, "
            f"required={self.required_count}, final={self.final is not None})"
        )

    def __repr__(self) -> str:
        return str(self)
