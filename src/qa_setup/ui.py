"""Console output for the setup command."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

console = Console(highlight=False)

COLOR_SUCCESS = "green"
COLOR_ERROR = "red"
COLOR_WARNING = "yellow"
COLOR_INFO = "cyan"


def print_success(message: str) -> None:
    console.print(f"[bold {COLOR_SUCCESS}]✓[/bold {COLOR_SUCCESS}] {escape(message)}")


def print_error(message: str) -> None:
    console.print(f"[bold {COLOR_ERROR}]✗[/bold {COLOR_ERROR}] {escape(message)}")


def print_warning(message: str) -> None:
    console.print(f"[bold {COLOR_WARNING}]⚠[/bold {COLOR_WARNING}] {escape(message)}")


def print_info(message: str) -> None:
    console.print(f"[{COLOR_INFO}]i[/{COLOR_INFO}] {escape(message)}")


def print_line(message: str) -> None:
    console.print(escape(message))


def show_panel(title: str, content: str, border_style: str = COLOR_INFO) -> None:
    panel = Panel(
        escape(content), title=f"[bold]{escape(title)}[/bold]", border_style=border_style, box=box.ROUNDED
    )
    console.print(panel)
