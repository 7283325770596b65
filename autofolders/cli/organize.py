"""
CLI commands for organizing a vault.

``organize`` sweeps the base journal folder once; ``run`` does the same and
then keeps watching the vault for new notes.
"""

import asyncio
import sys
from typing import Optional

import click
from rich.table import Table

from ..core.config import JournalSettings
from ..core.types import OrganizationResult
from ..runtime.service import AutoFolderService
from ..storage.local import LocalVault
from .common import console, resolve_vault, setup_logging


def _show_configuration(vault_path, settings: JournalSettings) -> None:
    console.print("\n[cyan]Organization Configuration:[/cyan]")
    console.print(f"  Vault: {vault_path}")
    console.print(f"  Base folder: {settings.base_journal_folder}")
    console.print(f"  Daily note format: {settings.daily_note_format}")
    console.print(
        f"  Folders: {settings.yearly_folder_format}/{settings.monthly_folder_format}"
    )

    for name, pattern in settings.invalid_formats().items():
        console.print(f"[yellow]⚠ Invalid date format for {name}: {pattern!r}[/yellow]")


@click.command()
@click.argument("vault", required=False, type=click.Path(file_okay=False))
@click.option(
    "--settings",
    "settings_file",
    type=click.Path(dir_okay=False),
    help="Settings file (default: .autofolders.json inside the vault)",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Preview changes without executing",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Verbose output",
)
def organize(
    vault: Optional[str], settings_file: Optional[str], dry_run: bool, verbose: bool
) -> None:
    """
    File dated notes in VAULT into year/month folders, once.

    Creates this year's and this month's folders, then moves every dated
    note found directly in the base journal folder into
    base/<year>/<month>. Today's note and notes already in place are left
    alone.

    \b
    Examples:
        autofolders organize ~/notes --dry-run
        autofolders organize ~/notes
    """
    setup_logging(verbose=verbose)
    vault_path, store = resolve_vault(vault, settings_file)
    settings = store.load()

    _show_configuration(vault_path, settings)
    if dry_run:
        console.print("\n[yellow]⚠ DRY RUN MODE - No files will be modified[/yellow]")
    console.print()

    service = AutoFolderService(LocalVault(vault_path), settings, dry_run=dry_run)

    try:
        result = asyncio.run(service.start(watch=False))
    except Exception as e:
        console.print(f"\n[red]✗ Error: {e}[/red]")
        if verbose:
            console.print_exception()
        sys.exit(1)

    _display_result(result)


@click.command()
@click.argument("vault", required=False, type=click.Path(file_okay=False))
@click.option(
    "--settings",
    "settings_file",
    type=click.Path(dir_okay=False),
    help="Settings file (default: .autofolders.json inside the vault)",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Verbose output",
)
def run(vault: Optional[str], settings_file: Optional[str], verbose: bool) -> None:
    """
    Organize VAULT and keep watching it for new notes.

    Runs the same sweep as ``organize`` and then files every dated note
    created below the base journal folder. Settings changes made with
    ``autofolders config set`` are picked up while running. Stop with Ctrl+C.
    """
    setup_logging(verbose=verbose)
    vault_path, store = resolve_vault(vault, settings_file)
    settings = store.load()

    _show_configuration(vault_path, settings)
    console.print("\n[dim]Press Ctrl+C to stop[/dim]\n")

    service = AutoFolderService(LocalVault(vault_path), settings, store=store)

    try:
        asyncio.run(service.run_forever())
    except KeyboardInterrupt:
        console.print("\n[yellow]Stopped[/yellow]")
    except Exception as e:
        console.print(f"\n[red]✗ Error: {e}[/red]")
        if verbose:
            console.print_exception()
        sys.exit(1)


def _display_result(result: OrganizationResult) -> None:
    """Display organization result."""
    console.print("\n[green]✓ Organization complete![/green]\n")

    table = Table(title="Results")
    table.add_column("Metric", style="cyan")
    table.add_column("Count", style="green", justify="right")

    table.add_row("Total files", str(result.total_files))
    table.add_row("Organized", str(result.organized))
    table.add_row("Skipped", str(result.skipped))
    table.add_row("Failed", str(result.failed))
    table.add_row("No date", str(result.no_date))

    console.print(table)

    if result.dry_run:
        console.print("\n[yellow]This was a DRY RUN - no files were modified[/yellow]")
        console.print("Run without --dry-run to execute the organization.")

    if result.errors:
        console.print("\n[red]Errors:[/red]")
        for error in result.errors[:10]:
            console.print(f"  [red]• {error}[/red]")
        if len(result.errors) > 10:
            console.print(f"  [dim]... and {len(result.errors) - 10} more[/dim]")
