"""Byte stream transports.

``open_input_stream`` picks a transport from the URI scheme: bare paths and
``file://`` URIs read the local filesystem, ``http``/``https`` go through
``requests``. Anything else fails with :class:`InputError`.
"""
from __future__ import annotations
from dataclasses import dataclass
from urllib.parse import unquote, urlparse

from ..config_types import InputConfig
from ..uri import get_scheme, has_scheme
from .base import InputError, InputStream
from .file import FileInputStream
from .http import HTTP_SCHEMES, HttpInputStream


def file_uri_to_path(uri: str) -> str:
    """Convert a ``file://`` URI to a local path."""
    parsed = urlparse(uri)
    if parsed.netloc and parsed.netloc != "localhost":
        raise InputError(uri, f"remote file host '{parsed.netloc}' not supported")
    return unquote(parsed.path)


def open_input_stream(uri: str, timeout: float = 30.0, user_agent: str | None = None,
                      chunk_size: int = 8192) -> InputStream:
    """Open a byte stream on ``uri`` (a URI or a filesystem path).

    Raises:
        InputError: If the scheme is unsupported or the resource cannot be opened
    """
    scheme = get_scheme(uri)
    if scheme is None:
        if has_scheme(uri):
            raise InputError(uri, "empty URI scheme")
        return FileInputStream(uri)
    if scheme == "file":
        return FileInputStream(file_uri_to_path(uri))
    if scheme in HTTP_SCHEMES:
        return HttpInputStream(uri, timeout=timeout, user_agent=user_agent, chunk_size=chunk_size)
    raise InputError(uri, f"unsupported scheme '{scheme}'")


@dataclass(frozen=True)
class InputOpener:
    """Callable opener bound to transport settings from configuration."""
    timeout: float = 30.0
    user_agent: str | None = None
    chunk_size: int = 8192

    @classmethod
    def from_config(cls, config: InputConfig) -> "InputOpener":
        return cls(timeout=config.timeout, user_agent=config.user_agent, chunk_size=config.chunk_size)

    def __call__(self, uri: str) -> InputStream:
        return open_input_stream(uri, timeout=self.timeout, user_agent=self.user_agent,
                                 chunk_size=self.chunk_size)


__all__ = [
    "InputStream",
    "InputError",
    "FileInputStream",
    "HttpInputStream",
    "InputOpener",
    "open_input_stream",
    "file_uri_to_path",
]
