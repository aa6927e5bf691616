# Argscan — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value slots for parsed arguments and typed retrieval from them.

Every registered argument owns exactly one slot, whose shape is fixed at
registration from the argument's arity:

- `ScalarSlot`: a single string, for `Fixed(1)` arguments. Starts at the default.
- `SequenceSlot`: an ordered list of strings, for every other arity. Starts empty.

Slots store raw strings. Conversion happens only on retrieval, through
`ValueSlot.get()`, which never coerces one shape into the other.

Supported retrieval types:
- Scalar slots: `str`, `int`, `float`, `bool`
- Sequence slots: `list`, `tuple`, `list[str]`, `list[int]`, `list[float]`
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union, get_args, get_origin

from argscan.exceptions import EmptyValueError, ShapeMismatchError, TypeConversionError
from argscan.parser.argument import Argument
from argscan.parser.utils import coerce_scalar

SCALAR_TYPES = (str, int, float, bool)
SEQUENCE_TYPES = (list, tuple)


def _is_sequence_type(target_type: Any) -> bool:
    return target_type in SEQUENCE_TYPES or get_origin(target_type) in SEQUENCE_TYPES


@dataclass
class ScalarSlot:
    """Holds the single string value of a `Fixed(1)` argument."""

    default: str = ""
    value: str = ""

    def __post_init__(self) -> None:
        if not self.value:
            self.value = self.default

    def reset(self) -> None:
        self.value = self.default

    def store(self, token: str) -> None:
        self.value = token

    def count(self) -> int:
        return 1 if self.value else 0

    def native(self) -> str:
        return self.value

    def get(self, name: str, target_type: Any = str) -> Any:
        if _is_sequence_type(target_type):
            raise ShapeMismatchError(
                f"Argument '{name}' holds a single value and cannot be retrieved "
                f"as {_type_name(target_type)}"
            )
        if target_type not in SCALAR_TYPES:
            raise TypeConversionError(
                f"Unsupported type {_type_name(target_type)} for argument '{name}'"
            )
        if not self.value:
            raise EmptyValueError(f"Argument '{name}' has no value")
        return coerce_scalar(self.value, target_type)


@dataclass
class SequenceSlot:
    """Holds the ordered string values of a sequence-shaped argument."""

    values: list[str] = field(default_factory=list)

    def reset(self) -> None:
        self.values.clear()

    def store(self, token: str) -> None:
        self.values.append(token)

    def count(self) -> int:
        return len(self.values)

    def native(self) -> list[str]:
        return list(self.values)

    def get(self, name: str, target_type: Any = list) -> Any:
        if not _is_sequence_type(target_type):
            raise ShapeMismatchError(
                f"Argument '{name}' holds a sequence and cannot be retrieved "
                f"as {_type_name(target_type)}"
            )
        container = get_origin(target_type) or target_type
        args = get_args(target_type)
        item_type = args[0] if args else str
        if item_type not in SCALAR_TYPES:
            raise TypeConversionError(
                f"Unsupported type {_type_name(target_type)} for argument '{name}'"
            )
        return container(coerce_scalar(value, item_type) for value in self.values)


ValueSlot = Union[ScalarSlot, SequenceSlot]


def _type_name(target_type: Any) -> str:
    if get_origin(target_type) is not None:
        return str(target_type)
    return getattr(target_type, "__name__", repr(target_type))


def make_slot(argument: Argument) -> ValueSlot:
    """Create the initial slot for an argument."""
    if argument.arity.is_scalar:
        return ScalarSlot(default=argument.default)
    return SequenceSlot()


class ValueStore:
    """
    One slot per registered argument, indexed by registration position.

    The store only knows positions; name lookup belongs to the `GrammarRegistry`.
    """

    def __init__(self) -> None:
        self._slots: list[ValueSlot] = []

    def add(self, argument: Argument) -> int:
        self._slots.append(make_slot(argument))
        return len(self._slots) - 1

    def __getitem__(self, index: int) -> ValueSlot:
        return self._slots[index]

    def __len__(self) -> int:
        return len(self._slots)

    def reset(self) -> None:
        """Return every slot to its initial value."""
        for slot in self._slots:
            slot.reset()

    def clear(self) -> None:
        self._slots.clear()
