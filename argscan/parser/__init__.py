"""
Argscan

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import Argument
from .argument_parser import EXIT_STATUS, ArgumentParser
from .arity import ONE_OR_MORE, ZERO_OR_MORE, Arity, ArityKind
from .engine import ParseState, ParsingEngine
from .registry import GrammarRegistry
from .usage import UsageFormatter
from .value_store import ScalarSlot, SequenceSlot, ValueStore

__all__ = [
    "Argument",
    "ArgumentParser",
    "Arity",
    "ArityKind",
    "EXIT_STATUS",
    "GrammarRegistry",
    "ONE_OR_MORE",
    "ParseState",
    "ParsingEngine",
    "ScalarSlot",
    "SequenceSlot",
    "UsageFormatter",
    "ValueStore",
    "ZERO_OR_MORE",
]
