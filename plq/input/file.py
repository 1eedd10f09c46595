"""Local file byte stream."""
from __future__ import annotations
import mimetypes
import os
from pathlib import Path
from typing import BinaryIO

from .base import InputError, InputStream


class FileInputStream(InputStream):
    """Reads a playlist file from the local filesystem."""

    def __init__(self, path: str | Path):
        path_str = str(path)
        try:
            fh: BinaryIO = open(path_str, "rb")
        except OSError as e:
            raise InputError(path_str, e.strerror or str(e)) from e
        except ValueError as e:
            # embedded NUL and similar unrepresentable paths
            raise InputError(path_str, str(e)) from e
        try:
            st = os.fstat(fh.fileno())
        except OSError as e:
            fh.close()
            raise InputError(path_str, e.strerror or str(e)) from e
        if not os.path.isfile(path_str):
            fh.close()
            raise InputError(path_str, "not a regular file")
        mime, _ = mimetypes.guess_type(path_str, strict=False)
        super().__init__(path_str, mime=mime, size=st.st_size)
        self._fh = fh

    def _read_raw(self, size: int) -> bytes:
        try:
            return self._fh.read(size)
        except OSError as e:
            raise InputError(self.uri, e.strerror or str(e)) from e

    def _close_raw(self) -> None:
        self._fh.close()


__all__ = ["FileInputStream"]
