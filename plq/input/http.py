"""HTTP(S) byte stream.

Wraps a streaming ``requests`` response. Failures (connection errors,
timeouts, non-2xx status) surface as :class:`InputError`; there is no retry
at this layer.
"""
from __future__ import annotations
import logging
from typing import Iterator

import requests

from .base import InputError, InputStream

logger = logging.getLogger(__name__)

HTTP_SCHEMES = ("http", "https")


class HttpInputStream(InputStream):
    """Reads a remote resource over HTTP(S)."""

    def __init__(self, url: str, timeout: float = 30.0, user_agent: str | None = None,
                 chunk_size: int = 8192):
        headers = {"User-Agent": user_agent} if user_agent else {}
        try:
            response = requests.get(url, headers=headers, stream=True, timeout=timeout)
        except requests.RequestException as e:
            raise InputError(url, str(e)) from e
        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            response.close()
            raise InputError(url, f"HTTP {response.status_code}") from e

        content_type = response.headers.get("Content-Type")
        mime = content_type.split(";", 1)[0].strip().lower() if content_type else None
        length = response.headers.get("Content-Length")
        size = int(length) if length and str(length).isdigit() else None
        logger.debug(f"Opened {url} (type={mime}, size={size})")
        super().__init__(url, mime=mime, size=size)
        self._response = response
        self._chunks: Iterator[bytes] = response.iter_content(chunk_size=chunk_size)
        self._pending = b""

    def _read_raw(self, size: int) -> bytes:
        try:
            while size < 0 or len(self._pending) < size:
                chunk = next(self._chunks, None)
                if chunk is None:
                    break
                self._pending += chunk
        except requests.RequestException as e:
            raise InputError(self.uri, str(e)) from e
        if size < 0:
            data, self._pending = self._pending, b""
        else:
            data, self._pending = self._pending[:size], self._pending[size:]
        return data

    def _close_raw(self) -> None:
        self._response.close()


__all__ = ["HttpInputStream", "HTTP_SCHEMES"]
