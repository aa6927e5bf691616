# Argscan — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Argument` dataclass, the immutable descriptor of one registered
argument.

Each `Argument` records an argument's names, arity, requiredness, default and help
text. The `GrammarRegistry` owns the descriptors; the `ParsingEngine` and
`UsageFormatter` only read them.

Key Attributes:
- `short_name` / `long_name`: `-x` / `--name` forms, at least one present
- `arity`: `Arity` describing how many tokens the argument consumes
- `required`: whether the argument must appear in the input
- `default`: string used when the argument is absent (scalar arguments only)
- `final`: whether this is the unnamed trailing argument
"""
from __future__ import annotations

from dataclasses import dataclass

from argscan.parser.arity import Arity, ArityKind
from argscan.parser.utils import strip_dashes


@dataclass(frozen=True)
class Argument:
    """
    Represents a registered command-line argument.

    Attributes:
        short_name (str): Short form such as `-i`, or "" if absent.
        long_name (str): Long form such as `--input`, or "" if absent.
        arity (Arity): How many tokens the argument consumes.
        required (bool): True if the argument must be supplied.
        default (str): Value used when the argument is not supplied.
        help (str): Help text for rendering.
        final (bool): True for the positional argument matched against the
            trailing tokens of the input.
    """

    short_name: str = ""
    long_name: str = ""
    arity: Arity = Arity.fixed(1)
    required: bool = False
    default: str = ""
    help: str = ""
    final: bool = False

    @property
    def canonical_name(self) -> str:
        """The long name if present, otherwise the short name."""
        return self.long_name or self.short_name

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(name for name in (self.short_name, self.long_name) if name)

    @property
    def dest(self) -> str:
        """Canonical name without its leading dashes."""
        return strip_dashes(self.canonical_name)

    @property
    def metavar(self) -> str:
        return self.dest.upper()

    @property
    def counts_as_required(self) -> bool:
        """A required argument with a default never has to be supplied."""
        return self.required and not self.default

    def get_values_text(self) -> str:
        """Render the value placeholders for this argument, e.g. `NAME [NAME...]`."""
        metavar = self.metavar
        if self.arity.is_fixed:
            shown = min(self.arity.count, 3)
            text = " ".join([metavar] * shown)
            if self.arity.count > shown:
                text = f"{text} ..."
            return text
        if self.arity.kind is ArityKind.ONE_OR_MORE:
            return f"{metavar} [{metavar}...]"
        return f"[{metavar} [{metavar}...]]"

    def get_usage_text(self) -> str:
        """
        Render this argument for a usage line.

        Named arguments show their canonical name and are bracketed when optional;
        the final argument shows only its placeholders.
        """
        values_text = self.get_values_text()
        if self.final:
            return values_text
        text = f"{self.canonical_name} {values_text}" if values_text else self.canonical_name
        if not self.required:
            text = f"[{text}]"
        return text
