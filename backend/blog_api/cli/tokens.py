"""Maintenance commands for the issued-token table."""

from __future__ import annotations

import click
from flask import current_app
from flask.cli import with_appcontext

from blog_api.container import get_services


@click.group("tokens")
def tokens_cli() -> None:
    """Issued-token maintenance."""


@tokens_cli.command("purge")
@with_appcontext
def purge_command() -> None:
    """Delete rows of tokens whose expiry has passed."""
    removed = get_services(current_app).token_store.purge_expired()
    click.echo(f"Purged {removed} expired token(s).")
