from __future__ import annotations
import click

from ..config import load_typed_config
from ..config_types import AppConfig
from ..version import __version__


@click.group()
@click.version_option(version=__version__, prog_name="playlist-queue-loader")
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default=None, help='Override the configured log level')
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """Load playlists into a song queue.

    \b
    An IDENTIFIER is resolved in this order:
      1. Remote URI         plq load http://radio.example/stream.pls
      2. Stored playlist    plq load favourites
      3. Library path       plq load radio/stations.m3u

    \b
    Configuration comes from PLQ__SECTION__KEY environment variables
    (or a .env file), for example:
      PLQ__LIBRARY__MUSIC_DIRECTORY=~/Music
      PLQ__PLAYLISTS__DIRECTORY=~/.local/share/plq/playlists
    """
    if isinstance(ctx.obj, dict):
        return
    overrides = {'log_level': log_level.upper()} if log_level else None
    ctx.obj = load_typed_config(overrides).to_dict()


def get_app_config(ctx: click.Context) -> AppConfig:
    """Typed view of the configuration stored on the click context."""
    return AppConfig.from_dict(ctx.obj)


__all__ = ["cli", "get_app_config"]
