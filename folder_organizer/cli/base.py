"""
Shared CLI helpers: common options, logging setup and rich output.
"""

from functools import wraps
from pathlib import Path
from typing import Callable, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from ..core.types import TransferMode
from ..core.utils import setup_logging
from ..organization import OrganizationResult


def common_options(f: Callable) -> Callable:
    """Apply standard CLI options (verbose, quiet)."""
    decorators = [
        click.option(
            "-v",
            "--verbose",
            is_flag=True,
            help="Enable verbose logging",
        ),
        click.option(
            "-q",
            "--quiet",
            is_flag=True,
            help="Suppress all output except errors",
        ),
    ]
    for decorator in reversed(decorators):
        f = decorator(f)
    return f


def init_logging(f: Callable) -> Callable:
    """Decorator to setup logging from verbose/quiet flags."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        setup_logging(
            verbose=kwargs.get("verbose", False),
            quiet=kwargs.get("quiet", False),
        )
        return f(*args, **kwargs)

    return wrapper


class CLIDisplay:
    """Rich output for the organizer commands."""

    def __init__(self, console: Optional[Console] = None, quiet: bool = False):
        self.console = console or Console()
        self.quiet = quiet

    def print_banner(self, version: str) -> None:
        if self.quiet:
            return

        self.console.print("\n[bold cyan]Folder Organizer[/bold cyan]")
        self.console.print(f"[dim]v{version}[/dim]")
        self.console.print()

    def print_run_settings(self, root: Path, mode: TransferMode, verify: bool) -> None:
        """Show what is about to be organized and how."""
        if self.quiet:
            return

        table = Table(show_header=False, box=None)
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="green")

        table.add_row("Root", escape(str(root)))
        table.add_row("Mode", mode.value)
        table.add_row("Verify copies", "YES" if verify else "NO")

        self.console.print(table)
        self.console.print()

    def print_result(self, result: OrganizationResult) -> None:
        """
        Show the counters of a run followed by its terminal status.

        The status line is printed even in quiet mode when the run failed.
        """
        if not self.quiet:
            table = Table(title="Results")
            table.add_column("Metric", style="cyan")
            table.add_column("Count", style="green", justify="right")

            table.add_row("Files moved", f"{result.files_moved:,}")
            table.add_row("Already in place", f"{result.files_skipped:,}")
            table.add_row("Folders renamed", f"{result.folders_renamed:,}")
            table.add_row("Directories visited", f"{result.directories_visited:,}")

            self.console.print(table)

        if result.succeeded:
            self.print_success(f"\n✓ {result.status.description}")
            return

        self.print_error(f"\n✗ {result.status.description} ({result.status.value})")
        if result.failed_path is not None:
            self.print_error(f"  at {escape(str(result.failed_path))}")

    def print_info(self, message: str) -> None:
        if not self.quiet:
            self.console.print(message)

    def print_success(self, message: str) -> None:
        if not self.quiet:
            self.console.print(f"[green]{message}[/green]")

    def print_warning(self, message: str) -> None:
        """Print warning message (shown even in quiet mode)."""
        self.console.print(f"[yellow]{message}[/yellow]")

    def print_error(self, message: str) -> None:
        """Print error message (shown even in quiet mode)."""
        self.console.print(f"[red]{message}[/red]")

    def spinner_progress(self) -> Progress:
        """Indeterminate spinner for a single blocking call."""
        return Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            transient=True,
            disable=self.quiet,
        )
