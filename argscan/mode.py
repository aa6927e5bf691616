# Argscan — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ErrorMode`, the policy an `ArgumentParser` applies to registration and
parse failures.

Example:
    ErrorMode("raise")      → ErrorMode.RAISE
    ErrorMode("exceptions") → ErrorMode.RAISE (via alias)
    ErrorMode("exit")       → ErrorMode.EXIT
"""
from __future__ import annotations

from enum import Enum


class ErrorMode(Enum):
    """
    How an `ArgumentParser` surfaces registration and parse errors.

    Members:
        RAISE: Re-raise the `ArgscanError` to the caller.
        EXIT: Print the message (and usage, for parse errors) to stderr and exit
            the process with a non-zero status.

    Aliases:
        - "exceptions" → "raise"
        - "report" / "report_and_exit" → "exit"
    """

    RAISE = "raise"
    EXIT = "exit"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "exceptions": "raise",
            "report": "exit",
            "report_and_exit": "exit",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ErrorMode:
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
