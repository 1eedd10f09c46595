"""Resolve a playlist identifier and load its songs into a queue.

An identifier is tried, in this order, as:
  * a remote URI (anything with ``scheme://``)
  * the name of a stored playlist in the configured playlist directory
  * a path relative to the music directory

Each candidate is opened by the first opener strategy that succeeds:
a format-aware open of the URI/path itself, then a generic byte stream
with decoder selection by MIME type, suffix or content. The playlist's
songs pass through :func:`accept_song` before being appended to the
destination queue.

Outcomes are always returned as :class:`PlaylistResult`; open failures
collapse to NO_SUCH_LIST. Callers wanting to know *why* can pass a
``trace`` list which receives :class:`OpenFailureNote` entries.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Callable, List, Optional, Sequence, Tuple

from ..config_types import AppConfig, DEFAULT_STREAMING_SCHEMES
from ..input import InputError, InputOpener, InputStream, open_input_stream
from ..mapper import PathMapper
from ..playlist import PlaylistProvider, PlaylistRegistry, default_registry
from ..queue import DestinationQueue
from ..results import PlaylistResult
from ..song import OwnedSong, Song
from .. import uri as uri_util

logger = logging.getLogger(__name__)


class OpenFailure(Enum):
    """Internal reason behind a NO_SUCH_LIST / DISABLED outcome."""
    UNCLASSIFIED = "unclassified"
    DISABLED = "disabled"
    UNMAPPED = "unmapped"
    NO_DECODER = "no_decoder"
    STREAM_ERROR = "stream_error"


@dataclass(frozen=True)
class OpenFailureNote:
    target: str
    reason: OpenFailure
    detail: str | None = None


Trace = Optional[List[OpenFailureNote]]


def _note(trace: Trace, target: str, reason: OpenFailure, detail: str | None = None) -> None:
    if trace is not None:
        trace.append(OpenFailureNote(target, reason, detail))


@dataclass(frozen=True)
class LoadContext:
    """Everything a resolution needs, passed explicitly.

    Attributes:
        registry: Playlist decoders
        mapper: Library and stored playlist roots
        open_stream: Byte stream opener, raises InputError on failure
        streaming_schemes: Schemes a song must use to be queued
    """
    registry: PlaylistRegistry = field(default_factory=default_registry)
    mapper: PathMapper = field(default_factory=PathMapper)
    open_stream: Callable[[str], InputStream] = open_input_stream
    streaming_schemes: Tuple[str, ...] = tuple(DEFAULT_STREAMING_SCHEMES)
    has_scheme: Callable[[str], bool] = uri_util.has_scheme
    is_valid_stored_playlist_name: Callable[[str], bool] = uri_util.is_valid_stored_playlist_name
    is_safe_local: Callable[[str], bool] = uri_util.is_safe_local

    @classmethod
    def from_config(cls, config: AppConfig, registry: PlaylistRegistry | None = None) -> "LoadContext":
        return cls(
            registry=registry if registry is not None else default_registry(),
            mapper=PathMapper.from_config(config),
            open_stream=InputOpener.from_config(config.input),
            streaming_schemes=tuple(config.streaming.schemes),
        )


# ---------------- Acceptance filter and load loop -----------------

def accept_song(song: Song, streaming_schemes: Sequence[str] = DEFAULT_STREAMING_SCHEMES) -> bool:
    """Decide whether ``song`` may be added to the queue.

    Local files are never accepted this way, so playlist content cannot
    inject arbitrary local paths. The song URI must carry a scheme and the
    scheme must be streamable.
    """
    return (not song.is_file
            and uri_util.has_scheme(song.uri)
            and uri_util.supported_scheme(song.uri, streaming_schemes))


def load_source_into_queue(source: PlaylistProvider, dest: DestinationQueue,
                           streaming_schemes: Sequence[str] = DEFAULT_STREAMING_SCHEMES) -> PlaylistResult:
    """Append every acceptable song of ``source`` to ``dest``.

    Rejected songs are dropped silently. The first append failure stops the
    loop and is returned unchanged; songs already appended stay queued.
    The source is not closed here.
    """
    while True:
        song = source.read()
        if song is None:
            return PlaylistResult.SUCCESS
        with OwnedSong(song) as owned:
            if not accept_song(song, streaming_schemes):
                logger.debug(f"Skipping {song.uri}: not a streamable remote song")
                continue
            result = dest.append(song)
            if result is not PlaylistResult.SUCCESS:
                logger.warning(f"Could not queue {song.uri}: {result.value}")
                return result
            owned.transfer()


# ---------------- Opener strategies -----------------

@dataclass
class OpenedSource:
    """A provider plus the byte stream it was opened on, if this call opened one."""
    provider: PlaylistProvider
    stream: InputStream | None = None

    def close(self) -> None:
        try:
            self.provider.close()
        finally:
            if self.stream is not None:
                self.stream.close()


Opener = Callable[[str, LoadContext, Trace], Optional[OpenedSource]]


def open_by_uri(target: str, ctx: LoadContext, trace: Trace) -> Optional[OpenedSource]:
    """Let a format-aware decoder open ``target`` on its own."""
    provider = ctx.registry.open_uri(target)
    if provider is None:
        return None
    return OpenedSource(provider)


def _stream_opener(log_level: int) -> Opener:
    def open_by_stream(target: str, ctx: LoadContext, trace: Trace) -> Optional[OpenedSource]:
        """Open a byte stream on ``target`` and detect the playlist format."""
        try:
            stream = ctx.open_stream(target)
        except InputError as e:
            logger.log(log_level, f"Failed to open {target}: {e.reason}")
            _note(trace, target, OpenFailure.STREAM_ERROR, e.reason)
            return None
        try:
            provider = ctx.registry.open_stream(stream, target)
        except InputError as e:
            stream.close()
            logger.log(log_level, f"Failed to read {target}: {e.reason}")
            _note(trace, target, OpenFailure.STREAM_ERROR, e.reason)
            return None
        except Exception:
            stream.close()
            raise
        if provider is None:
            stream.close()
            _note(trace, target, OpenFailure.NO_DECODER)
            return None
        return OpenedSource(provider, stream)

    return open_by_stream


REMOTE_OPENERS: Tuple[Opener, ...] = (open_by_uri, _stream_opener(logging.WARNING))
PATH_OPENERS: Tuple[Opener, ...] = (open_by_uri, _stream_opener(logging.DEBUG))


def _open_into_queue(target: str, dest: DestinationQueue, ctx: LoadContext,
                     openers: Sequence[Opener], trace: Trace) -> PlaylistResult:
    opened = None
    for opener in openers:
        opened = opener(target, ctx, trace)
        if opened is not None:
            break
    if opened is None:
        return PlaylistResult.NO_SUCH_LIST

    try:
        return load_source_into_queue(opened.provider, dest, ctx.streaming_schemes)
    finally:
        opened.close()


def open_remote_into_queue(uri: str, dest: DestinationQueue, ctx: LoadContext,
                           trace: Trace = None) -> PlaylistResult:
    """Load a playlist from a URI with an explicit scheme."""
    assert ctx.has_scheme(uri), uri
    return _open_into_queue(uri, dest, ctx, REMOTE_OPENERS, trace)


def open_path_into_queue(path: str, dest: DestinationQueue, ctx: LoadContext,
                         trace: Trace = None) -> PlaylistResult:
    """Load a playlist from a local filesystem path."""
    return _open_into_queue(path, dest, ctx, PATH_OPENERS, trace)


# ---------------- Local contexts -----------------

def open_stored_into_queue(name: str, dest: DestinationQueue, ctx: LoadContext,
                           trace: Trace = None) -> PlaylistResult:
    """Load a playlist from the configured playlist directory."""
    assert ctx.is_valid_stored_playlist_name(name), name
    path = ctx.mapper.stored_playlist_path(name)
    if path is None:
        _note(trace, name, OpenFailure.DISABLED, "no playlist directory configured")
        return PlaylistResult.DISABLED
    return open_path_into_queue(str(path), dest, ctx, trace)


def open_library_into_queue(uri: str, dest: DestinationQueue, ctx: LoadContext,
                            trace: Trace = None) -> PlaylistResult:
    """Load a playlist from the configured music directory."""
    assert ctx.is_safe_local(uri), uri
    path = ctx.mapper.map_library_path(uri)
    if path is None:
        _note(trace, uri, OpenFailure.UNMAPPED, "no music directory configured")
        return PlaylistResult.NO_SUCH_LIST
    return open_path_into_queue(str(path), dest, ctx, trace)


# ---------------- Entry point -----------------

def load_playlist_into_queue(identifier: str, dest: DestinationQueue, ctx: LoadContext | None = None,
                             trace: Trace = None) -> PlaylistResult:
    """Resolve ``identifier`` and append its acceptable songs to ``dest``.

    Args:
        identifier: Remote URI, stored playlist name or library-relative path
        dest: Destination queue
        ctx: Resolution context (defaults to an unconfigured one)
        trace: Optional list receiving the reasons behind failed attempts

    Returns:
        SUCCESS, NO_SUCH_LIST, DISABLED or the queue's append failure
    """
    if ctx is None:
        ctx = LoadContext()

    if ctx.has_scheme(identifier):
        return open_remote_into_queue(identifier, dest, ctx, trace)

    if ctx.is_valid_stored_playlist_name(identifier):
        result = open_stored_into_queue(identifier, dest, ctx, trace)
        if result is not PlaylistResult.NO_SUCH_LIST:
            return result

    if ctx.is_safe_local(identifier):
        return open_library_into_queue(identifier, dest, ctx, trace)

    _note(trace, identifier, OpenFailure.UNCLASSIFIED)
    return PlaylistResult.NO_SUCH_LIST


__all__ = [
    "LoadContext",
    "OpenFailure",
    "OpenFailureNote",
    "OpenedSource",
    "accept_song",
    "load_source_into_queue",
    "open_by_uri",
    "open_remote_into_queue",
    "open_path_into_queue",
    "open_stored_into_queue",
    "open_library_into_queue",
    "load_playlist_into_queue",
    "REMOTE_OPENERS",
    "PATH_OPENERS",
]
