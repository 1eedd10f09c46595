"""Core CLI commands: load a playlist and list decoders."""

from __future__ import annotations
import click
import logging

from .helpers import cli, get_app_config
from ..playlist import default_registry
from ..queue import SongQueue
from ..results import PlaylistResult
from ..services.queue_service import LoadContext, OpenFailureNote, load_playlist_into_queue

logger = logging.getLogger(__name__)


def _format_note(note: OpenFailureNote) -> str:
    detail = f" ({note.detail})" if note.detail else ""
    return f"  {note.target}: {note.reason.value}{detail}"


@cli.command(name="load")
@click.argument("identifier")
@click.option("--max-length", type=int, default=None, help="Queue capacity (overrides config)")
@click.option("--trace", is_flag=True, help="Show why resolution attempts failed")
@click.pass_context
def load(ctx: click.Context, identifier: str, max_length: int | None, trace: bool):
    """Resolve IDENTIFIER and queue its streamable songs.

    Prints each queued URI followed by the result code. Exits with status 1
    unless the result is success.
    """
    config = get_app_config(ctx)
    queue = SongQueue(max_length or config.queue.max_length)
    notes: list[OpenFailureNote] = []

    result = load_playlist_into_queue(identifier, queue, LoadContext.from_config(config),
                                      trace=notes if trace else None)

    for song in queue:
        label = f"  # {song.title}" if song.title else ""
        click.echo(f"{song.uri}{label}")
    logger.info(f"Queued {len(queue)} song(s) from {identifier}")

    if trace and notes:
        click.echo("Failed attempts:", err=True)
        for note in notes:
            click.echo(_format_note(note), err=True)

    color = "green" if result is PlaylistResult.SUCCESS else "red"
    click.echo(click.style(f"Result: {result.value}", fg=color), err=True)
    queue.clear()
    if result is not PlaylistResult.SUCCESS:
        ctx.exit(1)


@cli.command(name="plugins")
def plugins():
    """List registered playlist decoders."""
    click.echo(f"{'Name':<8} {'Mode':<12} {'Schemes':<10} {'Suffixes':<16} {'MIME types'}")
    click.echo("-" * 80)
    for plugin in default_registry():
        modes = [m for m, on in (("uri", plugin.handles_uri), ("stream", plugin.handles_stream)) if on]
        click.echo(
            f"{plugin.name:<8} {'+'.join(modes):<12} {', '.join(plugin.schemes) or '-':<10} "
            f"{', '.join(plugin.suffixes):<16} {', '.join(plugin.mime_types) or '-'}"
        )


__all__ = ["load", "plugins"]
