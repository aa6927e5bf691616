# Argscan — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for argscan."""
import logging

logger = logging.getLogger("argscan")
