"""Flask CLI commands for inspecting and resetting the JSON datastore."""

from __future__ import annotations

import logging

import click
from flask import current_app
from flask.cli import with_appcontext

from chirpy.core.extensions import get_datastore
from chirpy.services._shared.errors import StorageError

LOGGER = logging.getLogger(__name__)


def _ensure_non_production() -> None:
    """Abort destructive commands outside debug/testing setups."""
    config = current_app.config
    if not (config.get("DEBUG") or config.get("TESTING")):
        raise click.UsageError(
            "The 'flask store reset' command is restricted to non-production environments."
        )


@click.group("store")
def store_cli() -> None:
    """Datastore maintenance commands."""


@store_cli.command("stats")
@with_appcontext
def stats_command() -> None:
    """Print entity counts of the datastore."""
    datastore = get_datastore()
    try:
        counts = datastore.stats()
    except StorageError as exc:
        raise click.ClickException(f"Cannot read datastore: {exc}") from exc
    click.echo(f"Datastore: {datastore.store.path}")
    width = max(len(name) for name in counts)
    for name, value in counts.items():
        click.echo(f"  {name.ljust(width)}  {value}")


@store_cli.command("reset")
@click.option("--yes", is_flag=True, help="Skip the destructive confirmation prompt.")
@with_appcontext
def reset_command(yes: bool) -> None:
    """Replace the datastore with an empty document."""
    _ensure_non_production()
    if not yes:
        click.confirm("This will DELETE all users, chirps and revoked tokens. Continue?", abort=True)
    LOGGER.info("Resetting datastore...")
    try:
        get_datastore().reset()
    except StorageError as exc:
        raise click.ClickException(f"Reset failed: {exc}") from exc
    click.echo("Datastore reset.")
