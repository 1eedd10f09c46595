"""Song records produced by playlist decoders.

A :class:`Song` is owned by whoever holds it until it is either freed or
transferred into a destination queue. :class:`OwnedSong` scopes that
ownership so the song is released automatically unless it was handed over.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Optional

from .uri import get_scheme


@dataclass(eq=False)
class Song:
    uri: str
    title: str | None = None
    duration: float | None = None  # seconds
    start_ms: int = 0
    end_ms: int = 0  # 0 = until end of resource
    in_library: bool = False
    on_release: Optional[Callable[["Song"], None]] = field(default=None, repr=False)
    released: bool = field(default=False, init=False, repr=False)

    @property
    def is_file(self) -> bool:
        """True if the song denotes a local file rather than a remote stream."""
        if self.in_library or self.uri.startswith("/"):
            return True
        return get_scheme(self.uri) == "file"

    def free(self) -> None:
        if self.released:
            raise RuntimeError(f"song already released: {self.uri}")
        self.released = True
        if self.on_release is not None:
            self.on_release(self)


class OwnedSong:
    """Scoped ownership of a :class:`Song`.

    Used as a context manager. On exit the song is freed unless
    :meth:`transfer` was called, in which case the receiver owns it.

    Example:
        with OwnedSong(song) as owned:
            if queue.append(owned.song) is PlaylistResult.SUCCESS:
                owned.transfer()
    """

    def __init__(self, song: Song):
        self.song = song
        self._transferred = False

    @property
    def transferred(self) -> bool:
        return self._transferred

    def transfer(self) -> Song:
        if self._transferred:
            raise RuntimeError(f"song already transferred: {self.song.uri}")
        self._transferred = True
        return self.song

    def __enter__(self) -> "OwnedSong":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._transferred:
            self.song.free()


__all__ = ["Song", "OwnedSong"]
