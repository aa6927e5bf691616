# Argscan — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders a `GrammarRegistry` as a usage synopsis and as a help listing.

The usage line lists required named arguments, then optional named arguments,
then the final argument, each group in registration order:

    Usage: app --name NAME [--input INPUT] [--strings STRINGS [STRINGS...]] OUTPUT

Lines longer than the usage width wrap, with continuation lines indented to the
column of the first argument. Rendering never fails; an empty registry renders as
just the `Usage:` prefix and app name.
"""
from __future__ import annotations

from argscan.parser.argument import Argument
from argscan.parser.registry import GrammarRegistry

USAGE_WIDTH = 80
HELP_COLUMN = 30


def quote_app_name(app_name: str) -> str:
    """Quote an app name that contains a space."""
    if " " in app_name:
        return f'"{app_name}"'
    return app_name


class UsageFormatter:
    """Formats usage and help text for a registry."""

    def __init__(self, registry: GrammarRegistry, width: int = USAGE_WIDTH) -> None:
        self.registry = registry
        self.width = width

    def ordered_arguments(self) -> list[Argument]:
        named = self.registry.named_arguments()
        ordered = [argument for argument in named if argument.required]
        ordered.extend(argument for argument in named if not argument.required)
        if self.registry.final is not None:
            ordered.append(self.registry.final)
        return ordered

    def render(self, app_name: str = "") -> str:
        """
        Render the usage synopsis.

        Args:
            app_name (str): Program name shown after `Usage:`.

        Returns:
            str: The usage text, possibly spanning several lines.
        """
        prefix = f"Usage: {quote_app_name(app_name)}"
        lines: list[str] = []
        line = prefix
        line_has_arguments = False
        for argument in self.ordered_arguments():
            piece = f" {argument.get_usage_text()}"
            if line_has_arguments and len(line) + len(piece) > self.width:
                lines.append(line)
                line = " " * len(prefix)
            line += piece
            line_has_arguments = True
        lines.append(line)
        return "\n".join(lines)

    def _help_line(self, label: str, help_text: str) -> str:
        line = f"  {label:<{HELP_COLUMN}} "
        if help_text and len(label) > HELP_COLUMN:
            return f"{line.rstrip()}\n{'':<{HELP_COLUMN + 3}}{help_text}"
        return f"{line}{help_text}".rstrip()

    def _help_text(self, argument: Argument) -> str:
        text = argument.help
        if argument.default:
            default_text = f"(default: {argument.default})"
            text = f"{text} {default_text}" if text else default_text
        return text

    def render_help(self, app_name: str = "", description: str = "") -> str:
        """
        Render usage followed by a per-argument listing with help text.

        Args:
            app_name (str): Program name shown in the usage line.
            description (str): Optional paragraph shown after the usage line.
        """
        sections = [self.render(app_name)]
        if description:
            sections.append(description)

        final = self.registry.final
        if final is not None:
            lines = ["positional:"]
            lines.append(self._help_line(final.get_values_text(), self._help_text(final)))
            sections.append("\n".join(lines))

        named = self.registry.named_arguments()
        if named:
            lines = ["options:"]
            for argument in named:
                label = ", ".join(argument.names)
                values_text = argument.get_values_text()
                if values_text:
                    label = f"{label} {values_text}"
                lines.append(self._help_line(label, self._help_text(argument)))
            sections.append("\n".join(lines))

        return "\n\n".join(sections)
