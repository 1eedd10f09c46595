"""PLS (``[playlist]`` INI style) decoder."""
from __future__ import annotations
import configparser
import logging
from typing import List, Optional

from ..input import InputStream
from .base import PlaylistPlugin, PlaylistProvider, SongListProvider, read_playlist_text

logger = logging.getLogger(__name__)

SECTION = "playlist"


def parse_pls(text: str) -> Optional[List[dict]]:
    """Return song entries from PLS text, or None if it is not valid PLS.

    Entries are ordered by their index (File1, File2, ...). A Length of -1
    means unknown.
    """
    parser = configparser.ConfigParser(strict=False, interpolation=None)
    parser.optionxform = str.lower  # type: ignore[assignment]
    try:
        parser.read_string(text)
    except configparser.Error as e:
        logger.debug(f"Invalid PLS content: {e}")
        return None
    section = next((s for s in parser.sections() if s.lower() == SECTION), None)
    if section is None:
        return None
    items = parser[section]

    indexes = []
    for key in items:
        if key.startswith("file") and key[4:].isdigit():
            indexes.append(int(key[4:]))

    entries: List[dict] = []
    for n in sorted(indexes):
        uri = items.get(f"file{n}", "").strip()
        if not uri:
            continue
        title = items.get(f"title{n}", "").strip() or None
        length = items.get(f"length{n}", "").strip()
        try:
            duration = float(length) if length else None
        except ValueError:
            duration = None
        if duration is not None and duration < 0:
            duration = None
        entries.append({"uri": uri, "title": title, "duration": duration})
    return entries


class PLSPlugin(PlaylistPlugin):
    suffixes = ("pls",)
    mime_types = ("audio/x-scpls",)

    @property
    def name(self) -> str:
        return "pls"

    def open_stream(self, stream: InputStream) -> Optional[PlaylistProvider]:
        text = read_playlist_text(stream)
        if text is None:
            return None
        entries = parse_pls(text)
        if entries is None:
            return None
        return SongListProvider(entries)

    def sniff(self, head: bytes) -> bool:
        return head.lstrip(b"\xef\xbb\xbf \t\r\n").lower().startswith(b"[playlist]")


__all__ = ["PLSPlugin", "parse_pls"]
