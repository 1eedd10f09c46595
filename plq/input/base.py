"""Byte stream abstraction.

An :class:`InputStream` supplies the raw bytes of a playlist resource.
Whoever opens a stream closes it, exactly once.
"""
from __future__ import annotations
from abc import ABC, abstractmethod


class InputError(OSError):
    """Opening or reading a byte stream failed."""

    def __init__(self, uri: str, message: str):
        super().__init__(f"{uri}: {message}")
        self.uri = uri
        self.reason = message


class InputStream(ABC):
    """Readable byte stream with a small look-ahead buffer.

    Attributes:
        uri: The URI or path the stream was opened on
        mime: Content type reported by the origin, if any
        size: Total size in bytes, if known
    """

    def __init__(self, uri: str, mime: str | None = None, size: int | None = None):
        self.uri = uri
        self.mime = mime
        self.size = size
        self._buffer = b""
        self._closed = False

    @abstractmethod
    def _read_raw(self, size: int) -> bytes:
        """Read up to ``size`` bytes from the origin (-1 = everything)."""

    @abstractmethod
    def _close_raw(self) -> None:
        """Release the underlying handle."""

    @property
    def closed(self) -> bool:
        return self._closed

    def peek(self, size: int) -> bytes:
        """Return up to ``size`` leading bytes without consuming them."""
        self._check_open()
        if len(self._buffer) < size:
            self._buffer += self._read_raw(size - len(self._buffer))
        return self._buffer[:size]

    def read(self, size: int = -1) -> bytes:
        self._check_open()
        if size < 0:
            data, self._buffer = self._buffer + self._read_raw(-1), b""
            return data
        if len(self._buffer) >= size:
            data, self._buffer = self._buffer[:size], self._buffer[size:]
            return data
        data, self._buffer = self._buffer, b""
        return data + self._read_raw(size - len(data))

    def close(self) -> None:
        if self._closed:
            raise RuntimeError(f"input stream already closed: {self.uri}")
        self._closed = True
        self._close_raw()

    def _check_open(self) -> None:
        if self._closed:
            raise InputError(self.uri, "stream is closed")


__all__ = ["InputStream", "InputError"]
