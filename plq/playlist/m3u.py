"""M3U / extended M3U decoder.

Keeps every non-comment line as a song URI, in order. ``#EXTINF`` lines
supply the duration and title of the entry that follows; other directives
are ignored.
"""
from __future__ import annotations
import logging
from typing import List, Optional, Tuple

from ..input import InputStream
from .base import PlaylistPlugin, PlaylistProvider, SongListProvider, read_playlist_text

logger = logging.getLogger(__name__)


def _parse_extinf(line: str) -> Tuple[float | None, str | None]:
    # #EXTINF:<seconds>,<title>
    header, _, title = line[len("#EXTINF:"):].partition(",")
    try:
        duration = float(header.split()[0]) if header.strip() else None
    except ValueError:
        duration = None
    if duration is not None and duration < 0:
        duration = None
    return duration, title.strip() or None


def parse_m3u(text: str) -> List[dict]:
    """Return song entries (dicts of Song fields) from M3U text."""
    entries: List[dict] = []
    duration: float | None = None
    title: str | None = None
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        if line.upper().startswith("#EXTINF:"):
            duration, title = _parse_extinf(line)
            continue
        if line.startswith("#"):
            continue
        entries.append({"uri": line, "title": title, "duration": duration})
        duration = None
        title = None
    return entries


class M3UPlugin(PlaylistPlugin):
    suffixes = ("m3u", "m3u8")
    mime_types = ("audio/x-mpegurl", "audio/mpegurl")

    @property
    def name(self) -> str:
        return "m3u"

    def open_stream(self, stream: InputStream) -> Optional[PlaylistProvider]:
        text = read_playlist_text(stream)
        if text is None:
            return None
        return SongListProvider(parse_m3u(text))

    def sniff(self, head: bytes) -> bool:
        return head.lstrip(b"\xef\xbb\xbf \t\r\n").upper().startswith(b"#EXTM3U")


__all__ = ["M3UPlugin", "parse_m3u"]
