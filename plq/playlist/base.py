"""Playlist decoder abstraction layer.

This module defines the interfaces a playlist format decoder implements and
the registry used to pick one for a given URI or byte stream. Decoders turn
a resource into a :class:`PlaylistProvider`, which hands out songs one at a
time.

Key abstractions:
- PlaylistProvider: open, stateful song source (read/close)
- PlaylistPlugin: format decoder factory (by URI or by stream)
- PlaylistRegistry: ordered plugin registry with lookup by scheme, MIME
  type, suffix and content sniffing
"""
from __future__ import annotations
from abc import ABC, abstractmethod
import logging
from pathlib import PurePosixPath
from typing import Iterable, Iterator, List, Optional, Sequence
from urllib.parse import urlparse

from ..input import InputStream
from ..song import Song
from ..uri import get_scheme

logger = logging.getLogger(__name__)

# Bytes inspected when sniffing stream content
SNIFF_SIZE = 512
# Upper bound for text playlists read into memory
MAX_PLAYLIST_BYTES = 4 * 1024 * 1024

# ---------------- Song source -----------------


class PlaylistProvider(ABC):
    """Open playlist source.

    The opener owns the provider and must close it exactly once. Every song
    returned by :meth:`read` belongs to the caller.
    """

    def __init__(self) -> None:
        self._closed = False

    @abstractmethod
    def read(self) -> Optional[Song]:
        """Return the next song, or None once the playlist is exhausted."""

    def _release(self) -> None:
        """Hook for subclasses holding resources."""

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            raise RuntimeError(f"playlist provider already closed: {self!r}")
        self._closed = True
        self._release()

    def __iter__(self) -> Iterator[Song]:
        while True:
            song = self.read()
            if song is None:
                return
            yield song

    def __enter__(self) -> "PlaylistProvider":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._closed:
            self.close()


class SongListProvider(PlaylistProvider):
    """Provider over entries parsed up front.

    Songs are created on demand, so entries never read are never owned by
    anybody.
    """

    def __init__(self, entries: Iterable[dict]):
        super().__init__()
        self._entries: List[dict] = list(entries)
        self._pos = 0

    def read(self) -> Optional[Song]:
        if self._pos >= len(self._entries):
            return None
        entry = self._entries[self._pos]
        self._pos += 1
        return Song(**entry)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"SongListProvider({len(self._entries)} entries)"


# ---------------- Decoder plugin -----------------


class PlaylistPlugin(ABC):
    """Playlist format decoder.

    A plugin opens playlists either directly from a URI (handling its own
    I/O) or from an already opened :class:`InputStream`. Either method may
    return None when the resource is not something it can decode.
    """

    #: URI schemes handled by open_uri()
    schemes: Sequence[str] = ()
    #: File suffixes (without dot, lower-case)
    suffixes: Sequence[str] = ()
    #: MIME types accepted by open_stream()
    mime_types: Sequence[str] = ()

    @property
    @abstractmethod
    def name(self) -> str:
        """Plugin identifier (e.g., 'm3u', 'pls')."""

    def open_uri(self, uri: str) -> Optional[PlaylistProvider]:
        return None

    def open_stream(self, stream: InputStream) -> Optional[PlaylistProvider]:
        return None

    def sniff(self, head: bytes) -> bool:
        """Return True if the leading bytes look like this plugin's format."""
        return False

    @property
    def handles_uri(self) -> bool:
        return type(self).open_uri is not PlaylistPlugin.open_uri

    @property
    def handles_stream(self) -> bool:
        return type(self).open_stream is not PlaylistPlugin.open_stream


def uri_suffix(uri: str) -> str | None:
    """Return the lower-case suffix (without dot) of the path part of ``uri``."""
    path = urlparse(uri).path if get_scheme(uri) else uri
    suffix = PurePosixPath(path).suffix
    return suffix[1:].lower() if suffix else None


def read_playlist_text(stream: InputStream, encoding: str = "utf-8") -> Optional[str]:
    """Read a whole text playlist from ``stream``.

    Returns None when the content exceeds MAX_PLAYLIST_BYTES.
    """
    data = stream.read(MAX_PLAYLIST_BYTES + 1)
    if len(data) > MAX_PLAYLIST_BYTES:
        logger.warning(f"Playlist too large, ignoring: {stream.uri}")
        return None
    return data.decode(encoding, errors="replace").lstrip("\ufeff")


# ---------------- Plugin registry -----------------


class PlaylistRegistry:
    """Ordered collection of playlist plugins.

    Lookup order follows registration order within each strategy.
    """

    def __init__(self, plugins: Iterable[PlaylistPlugin] = ()):
        self._plugins: dict[str, PlaylistPlugin] = {}
        for plugin in plugins:
            self.register(plugin)

    def register(self, plugin: PlaylistPlugin) -> None:
        self._plugins[plugin.name] = plugin

    def get(self, name: str) -> PlaylistPlugin:
        """Raises KeyError if no plugin with that name is registered."""
        return self._plugins[name]

    def names(self) -> list[str]:
        return list(self._plugins.keys())

    def __iter__(self) -> Iterator[PlaylistPlugin]:
        return iter(list(self._plugins.values()))

    def open_uri(self, uri: str) -> Optional[PlaylistProvider]:
        """Format-aware open of ``uri`` without a generic byte stream.

        Plugins are matched by scheme; for local paths and ``file://`` URIs,
        plugins doing their own file I/O are matched by suffix.
        """
        scheme = get_scheme(uri)
        if scheme is not None and scheme != "file":
            candidates = [p for p in self if p.handles_uri and scheme in p.schemes]
        else:
            suffix = uri_suffix(uri)
            candidates = [p for p in self if p.handles_uri and suffix and suffix in p.suffixes]
        for plugin in candidates:
            provider = plugin.open_uri(uri)
            if provider is not None:
                logger.debug(f"{plugin.name}: opened {uri}")
                return provider
        return None

    def open_stream(self, stream: InputStream, uri: str | None = None) -> Optional[PlaylistProvider]:
        """Pick a decoder for an open stream and open the playlist on it.

        The decoder is chosen by the stream's MIME type, then the suffix of
        ``uri`` (defaults to the stream URI), then by sniffing the leading
        bytes. Only the first matching decoder is tried since it may consume
        the stream.
        """
        plugin = self._select_for_stream(stream, uri or stream.uri)
        if plugin is None:
            logger.debug(f"No playlist decoder for {uri or stream.uri}")
            return None
        provider = plugin.open_stream(stream)
        if provider is None:
            logger.debug(f"{plugin.name}: could not decode {uri or stream.uri}")
        return provider

    def _select_for_stream(self, stream: InputStream, uri: str) -> Optional[PlaylistPlugin]:
        stream_plugins = [p for p in self if p.handles_stream]
        if stream.mime:
            for plugin in stream_plugins:
                if stream.mime in plugin.mime_types:
                    return plugin
        suffix = uri_suffix(uri)
        if suffix:
            for plugin in stream_plugins:
                if suffix in plugin.suffixes:
                    return plugin
        head = stream.peek(SNIFF_SIZE)
        for plugin in stream_plugins:
            if plugin.sniff(head):
                logger.debug(f"{plugin.name}: detected by content in {uri}")
                return plugin
        return None


# ---------------- Default registry -----------------

_default_registry = PlaylistRegistry()


def default_registry() -> PlaylistRegistry:
    return _default_registry


def register_plugin(plugin: PlaylistPlugin) -> None:
    """Register a plugin in the default registry."""
    _default_registry.register(plugin)


def get_plugin(name: str) -> PlaylistPlugin:
    """Get a registered plugin by name.

    Raises:
        KeyError: If plugin not registered
    """
    return _default_registry.get(name)


def available_plugins() -> list[str]:
    """Get names of the plugins in the default registry."""
    return sorted(_default_registry.names())


__all__ = [
    "PlaylistProvider", "SongListProvider", "PlaylistPlugin", "PlaylistRegistry",
    "read_playlist_text", "uri_suffix", "default_registry",
    "register_plugin", "get_plugin", "available_plugins",
    "SNIFF_SIZE", "MAX_PLAYLIST_BYTES",
]
