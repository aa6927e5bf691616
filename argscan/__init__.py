"""
Argscan

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .logger import logger
from .mode import ErrorMode
from .parser import ONE_OR_MORE, ZERO_OR_MORE, ArgumentParser, Arity
from .version import __version__

__all__ = [
    "ArgumentParser",
    "Arity",
    "ErrorMode",
    "ONE_OR_MORE",
    "ZERO_OR_MORE",
    "logger",
    "__version__",
]
