"""Destination song queue.

The resolution core only needs ``append``; :class:`DestinationQueue`
captures that contract. :class:`SongQueue` is the in-memory implementation
used by the CLI and tests.
"""
from __future__ import annotations
import logging
from typing import Iterator, List, Optional, Protocol

from .results import PlaylistResult
from .song import Song

logger = logging.getLogger(__name__)

DEFAULT_MAX_LENGTH = 16384


class DestinationQueue(Protocol):
    """Append-only sink of accepted songs.

    On SUCCESS the queue takes ownership of the song; on any other result it
    does not and the caller must free it.
    """

    def append(self, song: Song, position: Optional[int] = None) -> PlaylistResult:
        ...  # pragma: no cover


class SongQueue:
    """Bounded in-memory queue of songs."""

    def __init__(self, max_length: int = DEFAULT_MAX_LENGTH):
        if max_length < 1:
            raise ValueError(f"max_length must be positive, got {max_length}")
        self.max_length = max_length
        self._songs: List[Song] = []

    def append(self, song: Song, position: Optional[int] = None) -> PlaylistResult:
        if len(self._songs) >= self.max_length:
            logger.debug(f"Queue full ({self.max_length}), refusing {song.uri}")
            return PlaylistResult.TOO_LARGE
        if position is None:
            self._songs.append(song)
            return PlaylistResult.SUCCESS
        if position < 0 or position > len(self._songs):
            return PlaylistResult.BAD_RANGE
        self._songs.insert(position, song)
        return PlaylistResult.SUCCESS

    def clear(self) -> None:
        """Drop all queued songs, releasing each one."""
        songs, self._songs = self._songs, []
        for song in songs:
            song.free()

    @property
    def uris(self) -> List[str]:
        return [s.uri for s in self._songs]

    def __len__(self) -> int:
        return len(self._songs)

    def __iter__(self) -> Iterator[Song]:
        return iter(self._songs)

    def __getitem__(self, index: int) -> Song:
        return self._songs[index]


__all__ = ["DestinationQueue", "SongQueue", "DEFAULT_MAX_LENGTH"]
