"""Service layer: playlist resolution and queue loading."""

from .queue_service import (
    LoadContext,
    OpenFailure,
    OpenFailureNote,
    accept_song,
    load_playlist_into_queue,
    load_source_into_queue,
)

__all__ = [
    "LoadContext",
    "OpenFailure",
    "OpenFailureNote",
    "accept_song",
    "load_playlist_into_queue",
    "load_source_into_queue",
]
