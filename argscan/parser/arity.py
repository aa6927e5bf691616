# Argscan — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Arity`, the number of trailing tokens an argument consumes.

An arity is one of three variants:

- `Fixed(n)`: exactly `n` tokens. `Fixed(1)` stores a scalar, every other count
  (including zero) stores a sequence.
- `OneOrMore` (`"+"`): greedily consumes at least one token.
- `ZeroOrMore` (`"*"`): greedily consumes any number of tokens.

`Arity.coerce()` accepts the conventional `nargs` spellings so callers can write
`nargs=2`, `nargs="+"` or `nargs="*"`.

Example:
    Arity.coerce(None)   → Arity.fixed(1)
    Arity.coerce(3)      → Arity.fixed(3)
    Arity.coerce("+")    → ONE_OR_MORE
    Arity.coerce("zero_or_more") → ZERO_OR_MORE
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from argscan.exceptions import InvalidArityError


class ArityKind(Enum):
    """The three arity variants."""

    FIXED = "fixed"
    ONE_OR_MORE = "+"
    ZERO_OR_MORE = "*"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "one_or_more": "+",
            "zero_or_more": "*",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArityKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower().replace("-", "_")
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Arity:
    """
    Number of values an argument consumes.

    Attributes:
        kind (ArityKind): Which variant this is.
        count (int): Token count for `FIXED`; always 0 for the variadic kinds.
    """

    kind: ArityKind
    count: int = 0

    def __post_init__(self) -> None:
        if self.kind is ArityKind.FIXED:
            if isinstance(self.count, bool) or not isinstance(self.count, int):
                raise InvalidArityError(f"Fixed arity must be an int, got {self.count!r}")
            if self.count < 0:
                raise InvalidArityError(
                    f"Fixed arity must be non-negative, got {self.count}"
                )
        elif self.count != 0:
            raise InvalidArityError(f"{self.kind.name} arity does not take a count")

    @classmethod
    def fixed(cls, count: int) -> Arity:
        return cls(ArityKind.FIXED, count)

    @classmethod
    def coerce(cls, nargs: Arity | int | str | None) -> Arity:
        """
        Convert an `nargs`-style value into an `Arity`.

        Args:
            nargs (Arity | int | str | None): `None` for a single value, an int for a
                fixed count, `"+"` or `"*"` (or their spelled-out aliases) for the
                variadic forms.

        Raises:
            InvalidArityError: If the value is not understood.
        """
        if isinstance(nargs, Arity):
            return nargs
        if nargs is None:
            return cls.fixed(1)
        if isinstance(nargs, bool):
            raise InvalidArityError(f"Invalid nargs value: {nargs!r}")
        if isinstance(nargs, int):
            return cls.fixed(nargs)
        if isinstance(nargs, str):
            try:
                kind = ArityKind(nargs)
            except ValueError:
                raise InvalidArityError(f"Invalid nargs value: {nargs!r}") from None
            if kind is ArityKind.FIXED:
                raise InvalidArityError("nargs 'fixed' needs an explicit count")
            return cls(kind)
        raise InvalidArityError(
            f"nargs must be an int, '+', '*' or None, got {type(nargs).__name__}"
        )

    @property
    def is_fixed(self) -> bool:
        return self.kind is ArityKind.FIXED

    @property
    def is_variadic(self) -> bool:
        return self.kind is not ArityKind.FIXED

    @property
    def is_scalar(self) -> bool:
        """True if values are stored as a single string rather than a list."""
        return self.kind is ArityKind.FIXED and self.count == 1

    @property
    def minimum(self) -> int:
        """Fewest tokens the argument must receive."""
        if self.kind is ArityKind.FIXED:
            return self.count
        if self.kind is ArityKind.ONE_OR_MORE:
            return 1
        return 0

    def is_satisfied(self, consumed: int) -> bool:
        """Return True if `consumed` tokens meet the minimum."""
        if self.kind is ArityKind.FIXED:
            return consumed == self.count
        return consumed >= self.minimum

    def accepts_more(self, consumed: int) -> bool:
        """Return True if another token can be consumed after `consumed`."""
        if self.kind is ArityKind.FIXED:
            return consumed < self.count
        return True

    def __str__(self) -> str:
        if self.kind is ArityKind.FIXED:
            return str(self.count)
        return self.kind.value


ONE_OR_MORE = Arity(ArityKind.ONE_OR_MORE)
ZERO_OR_MORE = Arity(ArityKind.ZERO_OR_MORE)
