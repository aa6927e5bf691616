# Argscan — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by argscan.

Errors fall into three families, matching the three phases a parser goes through:
registering the grammar, parsing a token sequence against it, and retrieving typed
values afterwards.

All exceptions inherit from `ArgscanError`, the base exception for the package.

Exception Hierarchy:
- ArgscanError
    ├── RegistrationError
    │   ├── InvalidArgumentNameError
    │   │   └── DuplicateArgumentNameError
    │   ├── InvalidArityError
    │   └── DuplicateFinalArgumentError
    ├── ParseError
    │   ├── TooManyInputsError
    │   ├── IncompleteArgumentError
    │   ├── UnexpectedOptionalBeforeRequiredError
    │   ├── InsufficientLookaheadError
    │   ├── UnexpectedKeyInFinalRegionError
    │   └── MissingRequiredArgumentsError
    └── RetrievalError
        ├── UnknownArgumentError
        ├── ShapeMismatchError
        ├── TypeConversionError
        └── EmptyValueError

Registration and parse errors are routed through the parser's `ErrorMode`.
Retrieval errors are always raised to the caller.
"""


class ArgscanError(Exception):
    """Base exception for argscan."""

    show_usage: bool = False

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class RegistrationError(ArgscanError):
    """Raised when an argument cannot be added to the grammar."""


class InvalidArgumentNameError(RegistrationError):
    """Exception raised when an argument name violates the name syntax."""


class DuplicateArgumentNameError(InvalidArgumentNameError):
    """Exception raised when an argument name is already registered."""


class InvalidArityError(RegistrationError):
    """Exception raised when an arity (nargs) value is not understood or not allowed."""


class DuplicateFinalArgumentError(RegistrationError):
    """Exception raised when a second final argument is registered."""


class ParseError(ArgscanError):
    """Raised when a token sequence does not match the registered grammar."""

    show_usage = True


class TooManyInputsError(ParseError):
    """A value token arrived with no argument left to receive it."""


class IncompleteArgumentError(ParseError):
    """A key token arrived before the active argument received its minimum inputs."""


class UnexpectedOptionalBeforeRequiredError(ParseError):
    """An optional key token arrived while required arguments were still unsatisfied."""


class InsufficientLookaheadError(ParseError):
    """Too few tokens remain to satisfy a newly opened argument."""


class UnexpectedKeyInFinalRegionError(ParseError):
    """A registered key appeared among the tokens reserved for the final argument."""


class MissingRequiredArgumentsError(ParseError):
    """Parsing ended with required arguments or final inputs still missing."""


class RetrievalError(ArgscanError):
    """Raised when a parsed value cannot be returned as requested."""


class UnknownArgumentError(RetrievalError, KeyError):
    """Exception raised when a name is not registered."""


class ShapeMismatchError(RetrievalError, TypeError):
    """Exception raised when a scalar is requested from a sequence slot or vice versa."""


class TypeConversionError(RetrievalError, ValueError):
    """Exception raised when a stored string cannot be converted to the requested type."""


class EmptyValueError(RetrievalError):
    """Exception raised when a scalar slot holds no value and no default."""
