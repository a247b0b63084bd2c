"""
Command line entry point for folder-organizer.

    folder-organizer organize ROOT      sort ROOT into category folders
    folder-organizer classify PATH...   show the category of files
    folder-organizer categories         list known categories
"""

import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.markup import escape
from rich.table import Table

from ..core.classifier import classify
from ..core.config import OrganizerSettings, default_config
from ..core.types import TransferMode
from ..organization import DirectoryOrganizer, OrganizationResult
from ..version import __version__
from .base import CLIDisplay, common_options, init_logging


@click.group()
@click.version_option(__version__, prog_name="folder-organizer")
def cli() -> None:
    """Sort files into category folders by file extension."""


@cli.command()
@click.argument("root", type=click.Path(path_type=Path))
@click.option(
    "--mode",
    type=click.Choice([m.value for m in TransferMode], case_sensitive=False),
    default=None,
    help="atomic: rename (same device only); fallback: copy, verify, delete",
)
@click.option(
    "--auto-fallback",
    is_flag=True,
    default=False,
    help="Retry in fallback mode without asking if an atomic move fails",
)
@click.option(
    "--no-verify",
    is_flag=True,
    default=False,
    help="Skip checksum verification of fallback copies",
)
@click.option(
    "-y",
    "--yes",
    is_flag=True,
    default=False,
    help="Answer yes to all prompts",
)
@common_options
@init_logging
def organize(
    root: Path,
    mode: Optional[str],
    auto_fallback: bool,
    no_verify: bool,
    yes: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """
    Organize ROOT in place.

    Every file is moved into a category folder ("Image Files", "PDF Files",
    ...) at the level where it was found. Existing alias folders such as
    "pics" or "Music" are reused, and no file is ever overwritten.

    \b
    Examples:
        folder-organizer organize ~/Downloads
        folder-organizer organize /mnt/usb/photos --mode fallback
        folder-organizer organize ~/Desktop --yes --auto-fallback
    """
    display = CLIDisplay(quiet=quiet)
    settings = OrganizerSettings()

    transfer_mode = TransferMode(mode.lower()) if mode else settings.transfer_mode
    verify = settings.verify_copies and not no_verify
    auto_fallback = auto_fallback or settings.auto_fallback

    display.print_banner(__version__)
    display.print_run_settings(root, transfer_mode, verify)

    if not yes and not click.confirm(f"Move files under {root} into category folders?"):
        display.print_warning("Cancelled")
        return

    organizer = DirectoryOrganizer(verify_copies=verify)
    result = _run(organizer, root, transfer_mode, display)

    if result.status.is_retryable_in_fallback:
        display.print_warning(
            "Atomic move failed, the files may live on different devices."
        )
        if (
            auto_fallback
            or yes
            or click.confirm("Retry using copy + delete (fallback) mode?")
        ):
            result = _run(organizer, root, TransferMode.FALLBACK, display)

    display.print_result(result)

    if not result.succeeded:
        sys.exit(1)


def _run(
    organizer: DirectoryOrganizer,
    root: Path,
    mode: TransferMode,
    display: CLIDisplay,
) -> OrganizationResult:
    with display.spinner_progress() as progress:
        progress.add_task(f"Organizing ({mode.value} mode)...", total=None)
        return organizer.run(root, mode)


@cli.command(name="classify")
@click.argument("paths", nargs=-1, required=True)
def classify_command(paths: Tuple[str, ...]) -> None:
    """Show which category folder each of PATHS belongs in."""
    display = CLIDisplay()
    config = default_config()

    table = Table(title="Classification")
    table.add_column("File", style="cyan")
    table.add_column("Category", style="green")

    for path in paths:
        table.add_row(escape(path), classify(path, config))

    display.console.print(table)


@cli.command()
@click.option("--aliases", is_flag=True, help="Also list recognized folder aliases")
def categories(aliases: bool) -> None:
    """List the known categories and their extensions."""
    display = CLIDisplay()
    config = default_config()

    table = Table(title="Categories")
    table.add_column("Category", style="cyan", no_wrap=True)
    table.add_column("Extensions", style="green")
    if aliases:
        table.add_column("Aliases")

    for category in sorted(config.canonical_names):
        row = [category, ", ".join(sorted(config.category_extensions[category]))]
        if aliases:
            row.append(", ".join(sorted(config.category_aliases.get(category, ()))))
        table.add_row(*row)

    display.console.print(table)
    display.print_info(
        f"Files with any other extension go to [bold]{config.others_category}[/bold]"
    )


if __name__ == "__main__":
    cli()
