"""Helpers shared by the CLI commands."""

import logging
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.logging import RichHandler

from ..core.config import AppSettings, SettingsStore

console = Console()


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure logging with a rich handler.

    Args:
        verbose: If True, set logging level to DEBUG
        quiet: If True, set logging level to WARNING
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(AppSettings().log_level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, console=console)],
    )


def resolve_vault(
    vault: Optional[str], settings_file: Optional[str]
) -> Tuple[Path, SettingsStore]:
    """
    Work out the vault directory and its settings store.

    Command line values win over ``AUTOFOLDERS_*`` environment settings.

    Raises:
        click.BadParameter: If the vault is not a directory
    """
    app_settings = AppSettings()
    vault_path = Path(vault) if vault else app_settings.vault_path
    vault_path = vault_path.expanduser().resolve()

    if not vault_path.is_dir():
        raise click.BadParameter(
            f"Vault '{vault_path}' is not a directory", param_hint="VAULT"
        )

    if settings_file:
        settings_path = Path(settings_file).expanduser()
    else:
        settings_path = app_settings.settings_path(vault_path)

    return vault_path, SettingsStore(settings_path)
