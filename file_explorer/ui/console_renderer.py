"""
Rich rendering of command outcomes.
"""

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from file_explorer.entities.file import FileEntry
from file_explorer.entities.outcome import CommandResult, OutcomeStatus, SearchOutcome
from file_explorer.use_cases.files.permissions import PermissionReport
from file_explorer.use_cases.shell.help import HelpReference

_STATUS_STYLES = {
    OutcomeStatus.SUCCESS: "green",
    OutcomeStatus.INFO: "cyan",
    OutcomeStatus.WARNING: "yellow",
    OutcomeStatus.ERROR: "bold red",
}


def printable(text: str) -> str:
    """
    Make a path or message safe to write to any UTF-8 stream.

    Undecodable bytes in file names arrive as surrogate escapes; they are
    shown as ``\\xNN`` instead.
    """
    try:
        return text.encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")
    except UnicodeEncodeError:
        return text.encode("utf-8", "backslashreplace").decode("utf-8")


def _text(text: str, style: str = "") -> Text:
    # Text keeps user-supplied paths from being parsed as markup
    return Text(printable(text), style=style)


class ConsoleRenderer:
    """Prints one outcome block per command."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False)

    def render(self, result: Optional[CommandResult]) -> None:
        if result is None:
            return
        if result.status is OutcomeStatus.ERROR:
            self._render_error(result)
            return

        payload = result.payload
        if isinstance(payload, HelpReference):
            self._render_help(payload)
        elif isinstance(payload, SearchOutcome):
            self._render_search(result, payload)
        elif isinstance(payload, PermissionReport):
            self._render_permissions(payload)
        elif isinstance(payload, list):
            self._render_listing(result.message, payload)
        else:
            self._render_warnings(result.warnings)
            self._print(result.message, _STATUS_STYLES[result.status])

    def render_banner(self, title: str, hint: str) -> None:
        self._print(f"=== {title} ===", "bold")
        self._print(hint, "dim")

    def _print(self, text: str, style: str = "") -> None:
        self.console.print(_text(text, style))

    def _render_error(self, result: CommandResult) -> None:
        self._print(f"Error: {result.message}", _STATUS_STYLES[OutcomeStatus.ERROR])
        for line in result.lines:
            self._print(line)

    def _render_warnings(self, warnings: tuple[str, ...]) -> None:
        for warning in warnings:
            self._print(f"Warning: {warning}", _STATUS_STYLES[OutcomeStatus.WARNING])

    def _render_listing(self, title: str, entries: list[FileEntry]) -> None:
        table = Table(
            title=_text(title),
            box=box.SIMPLE_HEAD,
            title_justify="left",
            expand=False,
        )
        table.add_column("NAME", min_width=30)
        table.add_column("TYPE", min_width=8)
        table.add_column("SIZE", justify="right", min_width=10)
        for entry in entries:
            size = f"{entry.size} B" if entry.size is not None else "-"
            table.add_row(
                _text(entry.name, "bold blue" if entry.is_dir else ""),
                _text(entry.kind.upper()),
                _text(size),
            )
        self.console.print(table)

    def _render_search(self, result: CommandResult, outcome: SearchOutcome) -> None:
        self.console.rule(_text(result.message), align="left")
        for path in outcome.matches:
            self._print(path)
        self._render_warnings(result.warnings)
        self.console.rule()
        self._print(f"Found: {outcome.count} match(es)", "bold")

    def _render_permissions(self, report: PermissionReport) -> None:
        classes = report.triad.classes()
        grid = Table.grid(padding=(0, 2))
        grid.add_column(style="bold")
        grid.add_column()
        grid.add_row("Owner (User):", Text(classes["owner"]))
        grid.add_row("Group:", Text(classes["group"]))
        grid.add_row("Other:", Text(classes["other"]))
        grid.add_row("Mode:", Text(f"{report.triad.symbolic} ({report.triad})"))
        grid.add_row("Type:", Text(report.kind))
        self.console.rule(_text(f"Permissions for: {report.path}"), align="left")
        self.console.print(grid)
        self.console.rule()

    def _render_help(self, reference: HelpReference) -> None:
        self._print(f"=== {reference.title} ===", "bold")
        for heading, commands in reference.sections:
            self._print(f"{heading}:", "bold cyan")
            grid = Table.grid(padding=(0, 2))
            grid.add_column(min_width=22)
            grid.add_column()
            for usage, description in commands:
                grid.add_row(_text(f"  {usage}"), _text(description))
            self.console.print(grid)
            self.console.print()
