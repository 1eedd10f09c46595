"""Embedded FLAC cuesheet decoder.

Reads the CUESHEET metadata block of a local FLAC file with mutagen and
exposes each cuesheet track as a sub-range song of that file. The plugin
opens the file itself, so it is used through open_uri() on local paths.
"""
from __future__ import annotations
import logging
from typing import List, Optional

from mutagen import MutagenError
from mutagen.flac import FLAC

from ..input import file_uri_to_path
from ..input.base import InputError
from ..uri import get_scheme, has_scheme
from .base import PlaylistPlugin, PlaylistProvider, SongListProvider

logger = logging.getLogger(__name__)

# Lead-out track numbers for CD-DA and non-CD cuesheets
LEAD_OUT_TRACKS = (170, 255)


def cuesheet_entries(path: str, audio: FLAC) -> List[dict]:
    """Build song entries for the tracks of ``audio``'s cuesheet."""
    cuesheet = audio.cuesheet
    sample_rate = audio.info.sample_rate
    if cuesheet is None or not sample_rate:
        return []

    tracks = sorted(cuesheet.tracks, key=lambda t: t.start_offset)
    total_samples = audio.info.total_samples
    entries: List[dict] = []
    for i, track in enumerate(tracks):
        if track.track_number in LEAD_OUT_TRACKS:
            continue
        end_samples = tracks[i + 1].start_offset if i + 1 < len(tracks) else total_samples
        start_ms = track.start_offset * 1000 // sample_rate
        end_ms = end_samples * 1000 // sample_rate
        entries.append({
            "uri": f"{path}/track_{track.track_number:04d}",
            "duration": (end_ms - start_ms) / 1000.0,
            "start_ms": start_ms,
            "end_ms": end_ms,
        })
    return entries


class FlacCuesheetPlugin(PlaylistPlugin):
    suffixes = ("flac",)

    @property
    def name(self) -> str:
        return "flac"

    def open_uri(self, uri: str) -> Optional[PlaylistProvider]:
        scheme = get_scheme(uri)
        if scheme not in (None, "file") or (scheme is None and has_scheme(uri)):
            return None
        try:
            path = uri if scheme is None else file_uri_to_path(uri)
        except InputError:
            return None
        try:
            audio = FLAC(path)
        except (MutagenError, OSError, ValueError) as e:
            logger.debug(f"flac: cannot read {path}: {e}")
            return None
        entries = cuesheet_entries(path, audio)
        if not entries:
            return None
        return SongListProvider(entries)


__all__ = ["FlacCuesheetPlugin", "cuesheet_entries"]
