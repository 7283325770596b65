"""
CLI for viewing and editing organizer settings.

Every change is validated, written to the settings file immediately and
confirmed with a one-line notice.
"""

from enum import Enum
from typing import Optional

import click
from rich.table import Table

from ..core.config import ConfigurationError, JournalSettings, describe_change, resolve_field
from .common import console, resolve_vault

vault_option = click.option(
    "--vault",
    type=click.Path(file_okay=False),
    help="Vault directory (default: $AUTOFOLDERS_VAULT_PATH or current directory)",
)
settings_option = click.option(
    "--settings",
    "settings_file",
    type=click.Path(dir_okay=False),
    help="Settings file (default: .autofolders.json inside the vault)",
)


@click.group(name="config")
def config() -> None:
    """Show or change organizer settings."""


@config.command(name="show")
@vault_option
@settings_option
def show(vault: Optional[str], settings_file: Optional[str]) -> None:
    """Show the current settings."""
    _, store = resolve_vault(vault, settings_file)
    settings = store.load()
    invalid = settings.invalid_formats()

    table = Table(title=f"Settings ({store.path})")
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Description")

    for name, field in JournalSettings.model_fields.items():
        value = getattr(settings, name)
        if isinstance(value, Enum):
            value = value.value
        shown = f"[red]{value}[/red]" if name in invalid else str(value)
        table.add_row(field.alias, shown, field.description or "")

    console.print(table)


@config.command(name="set")
@vault_option
@settings_option
@click.argument("key")
@click.argument("value")
def set_value(
    vault: Optional[str], settings_file: Optional[str], key: str, value: str
) -> None:
    """
    Change setting KEY to VALUE.

    KEY may be given as in the settings file (baseJournalFolder) or in
    snake_case (base_journal_folder).

    \b
    Examples:
        autofolders config set baseJournalFolder "1 - journal"
        autofolders config set monthlyFolderFormat MM
        autofolders config set createYearFolders false
    """
    _, store = resolve_vault(vault, settings_file)
    settings = store.load()

    try:
        updated = store.update(settings, key, value)
    except ConfigurationError as e:
        raise click.BadParameter(str(e), param_hint="KEY/VALUE") from e

    name = resolve_field(key)
    console.print(f"[green]{describe_change(name, getattr(updated, name))}[/green]")
