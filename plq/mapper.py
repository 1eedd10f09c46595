"""Filesystem mapping for the music library and stored playlist directory.

Roots are passed in explicitly (usually from :class:`plq.config_types.AppConfig`)
so several mappers with different roots can coexist, e.g. in tests.
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Union
import sys

from .config_types import AppConfig


def normalize_fs_path(path: Union[Path, str]) -> str:
    """Normalize a filesystem path to an absolute string.

    On Windows the drive letter is uppercased and separators become
    backslashes so the same file always maps to the same string.
    """
    if not isinstance(path, Path):
        path = Path(path)

    path_str = str(path.absolute())

    if sys.platform == 'win32':
        if len(path_str) >= 2 and path_str[1] == ':':
            path_str = path_str[0].upper() + path_str[1:]
        path_str = path_str.replace('/', '\\')

    return path_str


@dataclass(frozen=True)
class PathMapper:
    """Maps identifiers to filesystem paths under the configured roots.

    Attributes:
        music_directory: Root of the media library, or None if not configured
        playlist_directory: Root of stored playlists, or None if disabled
    """
    music_directory: Path | None = None
    playlist_directory: Path | None = None

    @classmethod
    def from_config(cls, config: AppConfig) -> "PathMapper":
        music = config.library.music_directory
        playlists = config.playlists.directory
        return cls(
            music_directory=Path(music).expanduser() if music else None,
            playlist_directory=Path(playlists).expanduser() if playlists else None,
        )

    def stored_playlist_root(self) -> Path | None:
        """Return the stored playlist directory, or None when the feature is off."""
        return self.playlist_directory

    def stored_playlist_path(self, name: str) -> Path | None:
        """Return the file path of stored playlist ``name``.

        The name is expected to be validated already and is joined to the
        root unchanged. Returns None when no playlist directory is configured.
        """
        root = self.stored_playlist_root()
        if root is None:
            return None
        return root / name

    def map_library_path(self, uri: str) -> Path | None:
        """Map a library-relative ``uri`` to an absolute path.

        The caller is responsible for confining ``uri`` to the library; no
        traversal checks happen here. Returns None when no music directory
        is configured.
        """
        if self.music_directory is None:
            return None
        return Path(normalize_fs_path(self.music_directory / uri))


__all__ = ["PathMapper", "normalize_fs_path"]
