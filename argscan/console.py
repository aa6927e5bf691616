# Argscan — (c) 2025 rtj.dev LLC — MIT Licensed
"""Console instances used for help output and error reporting."""
from rich.console import Console
from rich.theme import Theme

theme = Theme({"error": "bold red"})

console = Console(theme=theme, highlight=False)
error_console = Console(theme=theme, highlight=False, stderr=True)
