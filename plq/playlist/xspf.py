"""XSPF (XML Shareable Playlist Format) decoder."""
from __future__ import annotations
import logging
from typing import List, Optional
import xml.etree.ElementTree as ET

from ..input import InputStream
from .base import MAX_PLAYLIST_BYTES, PlaylistPlugin, PlaylistProvider, SongListProvider

logger = logging.getLogger(__name__)

XSPF_NS = "http://xspf.org/ns/0/"


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _child_text(element: ET.Element, name: str) -> str | None:
    for child in element:
        if _local(child.tag) == name:
            text = (child.text or "").strip()
            return text or None
    return None


def parse_xspf(data: bytes) -> Optional[List[dict]]:
    """Return song entries from XSPF bytes, or None if the document is invalid."""
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        logger.debug(f"Invalid XSPF document: {e}")
        return None
    if _local(root.tag) != "playlist":
        return None

    entries: List[dict] = []
    for track_list in (c for c in root if _local(c.tag) == "trackList"):
        for track in (t for t in track_list if _local(t.tag) == "track"):
            location = _child_text(track, "location")
            if not location:
                continue
            duration_ms = _child_text(track, "duration")
            duration = None
            if duration_ms and duration_ms.isdigit():
                duration = int(duration_ms) / 1000.0
            entries.append({
                "uri": location,
                "title": _child_text(track, "title"),
                "duration": duration,
            })
    return entries


class XSPFPlugin(PlaylistPlugin):
    suffixes = ("xspf",)
    mime_types = ("application/xspf+xml",)

    @property
    def name(self) -> str:
        return "xspf"

    def open_stream(self, stream: InputStream) -> Optional[PlaylistProvider]:
        data = stream.read(MAX_PLAYLIST_BYTES + 1)
        if len(data) > MAX_PLAYLIST_BYTES:
            logger.warning(f"Playlist too large, ignoring: {stream.uri}")
            return None
        entries = parse_xspf(data)
        if entries is None:
            return None
        return SongListProvider(entries)

    def sniff(self, head: bytes) -> bool:
        lowered = head.lower()
        return b"<playlist" in lowered and XSPF_NS.encode() in lowered


__all__ = ["XSPFPlugin", "parse_xspf"]
