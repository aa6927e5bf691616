# Argscan — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Name handling and value coercion utilities for argscan parsing.

Functions:
- is_short_name / is_long_name: The token name syntax.
- validate_name: Enforce the name syntax at registration.
- delimit: Turn a bare retrieval name (`input`, `i`) into its keyed form.
- strip_dashes: Remove the leading dashes from a name.
- coerce_bool: Convert a string to a boolean.
- coerce_scalar: Convert a stored string to `str`, `int`, `float` or `bool`.
"""
from typing import Any

from argscan.exceptions import InvalidArgumentNameError, TypeConversionError


def is_short_name(name: str) -> bool:
    """A dash followed by one alphanumeric character, e.g. `-x`."""
    return len(name) == 2 and name[0] == "-" and name[1].isalnum()


def is_long_name(name: str) -> bool:
    """Two dashes followed by at least two characters, e.g. `--name`."""
    return len(name) >= 4 and name.startswith("--") and name[2] != "-"


def validate_name(name: str) -> str:
    """
    Check a registration name against the name syntax.

    Args:
        name (str): `-x` or `--name`.

    Returns:
        str: The name, unchanged.

    Raises:
        InvalidArgumentNameError: If the name has any other shape.
    """
    if not isinstance(name, str):
        raise InvalidArgumentNameError(f"Argument name {name!r} must be a string")
    if not name:
        raise InvalidArgumentNameError("Argument names must be non-empty")
    if name.startswith("--") or len(name) > 3:
        if not is_long_name(name):
            raise InvalidArgumentNameError(
                f"Invalid argument '{name}'. Multi-character names must begin with "
                "'--' and be at least 4 characters long"
            )
    elif not is_short_name(name):
        raise InvalidArgumentNameError(
            f"Invalid argument '{name}'. Short names must be '-' followed by a "
            "single letter or digit"
        )
    return name


def strip_dashes(name: str) -> str:
    """Remove up to two leading dashes."""
    if name.startswith("--") and len(name) > 3:
        return name[2:]
    if name.startswith("-"):
        return name[1:]
    return name


def delimit(name: str) -> str:
    """
    Return the keyed form of a name.

    Bare single characters gain one dash and longer names gain two; names that
    already start with a dash are returned unchanged.
    """
    if name.startswith("-"):
        return name
    return "-" * min(len(name), 2) + name


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts various truthy and falsy representations such as 'true', 'yes', '0', 'off'.

    Raises:
        TypeConversionError: If the value is not a recognised boolean word.
    """
    normalized = value.strip().lower()
    if normalized in {"true", "t", "1", "yes", "y", "on"}:
        return True
    if normalized in {"false", "f", "0", "no", "n", "off"}:
        return False
    raise TypeConversionError(f"Value '{value}' could not be parsed as a bool")


def coerce_scalar(value: str, target_type: type) -> Any:
    """
    Convert a stored string to the given scalar type.

    Numeric parsing uses Python's `int()`/`float()`, which do not depend on the
    process locale.

    Raises:
        TypeConversionError: If the value is malformed for `target_type` or the
            type is not supported.
    """
    if target_type is str:
        return value
    if target_type is bool:
        return coerce_bool(value)
    if target_type in (int, float):
        try:
            return target_type(value)
        except ValueError as error:
            raise TypeConversionError(
                f"Value '{value}' could not be converted to {target_type.__name__}"
            ) from error
    raise TypeConversionError(
        f"Unsupported target type {getattr(target_type, '__name__', target_type)!r}"
    )
