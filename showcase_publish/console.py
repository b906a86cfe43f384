"""
Operator-facing console output for showcase-publish.

Every line is printed with an explicit style argument, so nothing here
mutates terminal color state between calls. rich drops styling on its
own when the output is not a terminal or NO_COLOR is set.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.rule import Rule
from rich.text import Text

STYLES = {
    "success": "bold green",
    "info": "cyan",
    "warning": "yellow",
    "error": "bold red",
    "header": "bold magenta",
    "command": "bold white",
}


class Reporter:
    """
    Write categorized status lines to rich consoles.

    Error lines go to err_console (stderr by default) so scripted callers
    can separate them from the instructions on stdout.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
    ) -> None:
        self.console = console or Console(highlight=False)
        self.err_console = err_console or Console(stderr=True, highlight=False)

    def _write(self, style: str, lines: tuple[str, ...], console: Optional[Console] = None) -> None:
        target = console or self.console
        for line in lines:
            # Text() keeps square brackets in URLs and commands literal.
            target.print(Text(line, style=STYLES[style]))

    def success(self, *lines: str) -> None:
        self._write("success", lines)

    def info(self, *lines: str) -> None:
        self._write("info", lines)

    def warning(self, *lines: str) -> None:
        self._write("warning", lines)

    def error(self, *lines: str) -> None:
        self._write("error", lines, self.err_console)

    def command(self, *lines: str) -> None:
        """Print shell commands the operator is expected to copy."""
        self._write("command", tuple(f"    {line}" for line in lines))

    def plain(self, *lines: str) -> None:
        for line in lines:
            self.console.print(Text(line))

    def blank(self) -> None:
        self.console.print()

    def header(self, title: str) -> None:
        self.blank()
        self.console.print(Rule(Text(title, style=STYLES["header"]), style=STYLES["header"]))
        self.blank()

    def section(self, title: str) -> None:
        self.blank()
        self.console.print(Text(title, style=STYLES["header"]))
