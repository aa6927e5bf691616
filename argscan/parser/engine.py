# Argscan — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements `ParsingEngine`, the token scanner that fills a `GrammarRegistry`'s value
slots from a token sequence.

Parsing is a single left-to-right scan. Each token is either a key (it matches a
registered name and opens that argument) or a value (it is stored into the
currently open argument). When the final argument must be supplied, the last
tokens of the input are reserved for it: the size of that window is its minimum
arity, so the scan never consumes tokens that belong to it and no backtracking is
needed. A `"+"` or optional final argument also takes the values left over after
the last key that the open argument cannot absorb.

Ordering rules enforced while scanning:
- A new key may only open once the previous argument has its minimum inputs.
- Arguments that must be supplied come before any optional argument.
- A newly opened argument must have enough tokens left before the final window.

Every violation raises a `ParseError` subclass and ends the parse.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from argscan.exceptions import (
    IncompleteArgumentError,
    InsufficientLookaheadError,
    MissingRequiredArgumentsError,
    TooManyInputsError,
    UnexpectedKeyInFinalRegionError,
    UnexpectedOptionalBeforeRequiredError,
)
from argscan.logger import logger
from argscan.parser.registry import GrammarRegistry


@dataclass
class ParseState:
    """Scan position bookkeeping for one `parse` call."""

    active: int | None = None
    consumed: int = 0
    remaining_required: int = 0
    final_consumed: int = 0
    opened: set[int] = field(default_factory=set)

    def open(self, index: int) -> None:
        self.active = index
        self.consumed = 0
        self.opened.add(index)


class ParsingEngine:
    """Parses token sequences against one `GrammarRegistry`."""

    def __init__(self, registry: GrammarRegistry) -> None:
        self.registry = registry
        self.state = ParseState()

    def _name(self, index: int | None) -> str:
        if index is None:
            return "(none)"
        return self.registry.argument(index).canonical_name

    def final_window(self) -> int:
        """
        Number of trailing tokens reserved for the final argument.

        Only a final argument that must be supplied reserves a window; an optional
        one takes whatever values are left over after the last key.
        """
        final = self.registry.final
        if final is None or not final.counts_as_required:
            return 0
        return final.arity.minimum

    def _store(self, index: int, token: str) -> None:
        self.registry.slot(index).store(token)

    def _last_key_position(self, tokens: Sequence[str], start: int, end: int) -> int:
        for position in range(end - 1, start - 1, -1):
            if self.registry.lookup(tokens[position]) is not None:
                return position
        return start - 1

    def _check_active_satisfied(self, token: str | None) -> None:
        state = self.state
        if state.active is None:
            return
        arity = self.registry.argument(state.active).arity
        if not arity.is_satisfied(state.consumed):
            found = f"argument {token}" if token else "end of input"
            raise IncompleteArgumentError(
                f"Encountered {found} when expecting more inputs to "
                f"{self._name(state.active)}"
            )

    def _open_key(self, token: str, index: int, position: int, scan_end: int) -> None:
        state = self.state
        self._check_active_satisfied(token)
        argument = self.registry.argument(index)
        if not argument.counts_as_required and state.remaining_required > 0:
            raise UnexpectedOptionalBeforeRequiredError(
                f"Encountered optional argument {token} when expecting "
                f"{state.remaining_required} more required argument(s)"
            )
        available = scan_end - position - 1
        if argument.arity.minimum > available:
            raise InsufficientLookaheadError(f"Too few inputs passed to argument {token}")
        if index in state.opened:
            self.registry.slot(index).reset()
        elif argument.counts_as_required:
            state.remaining_required -= 1
        state.open(index)

    def _consume_value(self, token: str) -> None:
        state = self.state
        if state.active is None:
            raise TooManyInputsError(f"Unexpected input '{token}' with no open argument")
        arity = self.registry.argument(state.active).arity
        if not arity.accepts_more(state.consumed):
            raise TooManyInputsError(
                f"Attempt to pass too many inputs to {self._name(state.active)}"
            )
        self._store(state.active, token)
        state.consumed += 1

    def _can_absorb(self) -> bool:
        state = self.state
        if state.active is None:
            return False
        return self.registry.argument(state.active).arity.accepts_more(state.consumed)

    def parse(self, tokens: Sequence[str], skip_first: bool = True) -> None:
        """
        Scan `tokens` and fill the registry's value slots.

        Args:
            tokens (Sequence[str]): The argument vector.
            skip_first (bool): Ignore `tokens[0]` (the program invocation).

        Raises:
            ParseError: On the first token that violates the grammar, or when
                required inputs are missing at the end.
        """
        registry = self.registry
        registry.store.reset()
        final = registry.final
        final_index = registry.final_index
        window = self.final_window()
        start = 1 if skip_first and tokens else 0
        scan_end = max(start, len(tokens) - window)

        self.state = state = ParseState(
            remaining_required=registry.required_count
            - (1 if final is not None and final.counts_as_required else 0)
        )
        logger.debug(
            "Parsing %d token(s) from position %d (final window %d)",
            len(tokens),
            start,
            window,
        )

        open_ended_final = final is not None and (
            final.arity.is_variadic or not final.counts_as_required
        )
        last_key = (
            self._last_key_position(tokens, start, scan_end) if open_ended_final else 0
        )
        final_start = scan_end

        for position in range(start, scan_end):
            token = tokens[position]
            index = registry.lookup(token)
            if index is not None:
                self._open_key(token, index, position, scan_end)
            elif open_ended_final and position > last_key and not self._can_absorb():
                final_start = position
                break
            else:
                self._consume_value(token)

        self._check_active_satisfied(None)

        if final is not None and final_index is not None:
            for token in tokens[final_start:]:
                if registry.lookup(token) is not None:
                    raise UnexpectedKeyInFinalRegionError(
                        f"Encountered argument specifier {token} while parsing final "
                        "inputs"
                    )
                if not final.arity.accepts_more(state.final_consumed):
                    raise TooManyInputsError(
                        f"Attempt to pass too many inputs to {final.dest}"
                    )
                self._store(final_index, token)
                state.final_consumed += 1

        self._check_complete()
        logger.debug("Parsed %d token(s) successfully", len(tokens))

    def _check_complete(self) -> None:
        state = self.state
        final = self.registry.final
        final_missing = False
        if final is not None:
            if state.final_consumed or final.counts_as_required:
                final_missing = not final.arity.is_satisfied(state.final_consumed)
        if state.remaining_required > 0 or final_missing:
            raise MissingRequiredArgumentsError("Too few required arguments passed")
