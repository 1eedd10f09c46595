"""``plq config``: print the effective settings."""

from __future__ import annotations
import json

import click

from .helpers import cli


@cli.command(name="config")
@click.option("--section", "-s", help="Print one section only (library, playlists, input, streaming, queue).")
@click.pass_context
def show_config(ctx: click.Context, section: str | None):
    """Print the merged configuration (defaults, .env, PLQ__* variables) as JSON."""
    settings = ctx.obj
    if section:
        key = section.lower()
        if key not in settings:
            known = ", ".join(sorted(settings))
            raise click.UsageError(f"No configuration section '{key}' (known: {known})")
        settings = {key: settings[key]}
    click.echo(json.dumps(settings, indent=2, sort_keys=True))


__all__ = ["show_config"]
