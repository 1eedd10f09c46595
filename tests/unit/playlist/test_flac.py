"""Embedded FLAC cuesheet decoder (mutagen objects stubbed)."""

from types import SimpleNamespace
from unittest.mock import patch

from mutagen import MutagenError
from plq.playlist.flac import FlacCuesheetPlugin, cuesheet_entries


def _track(number, offset):
    return SimpleNamespace(track_number=number, start_offset=offset)


def _audio(tracks, sample_rate=44100, total_samples=44100 * 300):
    cuesheet = SimpleNamespace(tracks=tracks) if tracks is not None else None
    info = SimpleNamespace(sample_rate=sample_rate, total_samples=total_samples)
    return SimpleNamespace(cuesheet=cuesheet, info=info)


def test_cuesheet_entries():
    audio = _audio([_track(1, 0), _track(2, 44100 * 100), _track(170, 44100 * 300)])
    entries = cuesheet_entries("/m/album.flac", audio)
    assert [e["uri"] for e in entries] == ["/m/album.flac/track_0001", "/m/album.flac/track_0002"]
    assert entries[0]["start_ms"] == 0
    assert entries[0]["end_ms"] == 100000
    assert entries[1]["end_ms"] == 300000
    assert entries[1]["duration"] == 200.0


def test_no_cuesheet():
    assert cuesheet_entries("/m/a.flac", _audio(None)) == []


def test_open_uri_reads_local_file():
    audio = _audio([_track(1, 0)])
    with patch("plq.playlist.flac.FLAC", return_value=audio) as flac:
        provider = FlacCuesheetPlugin().open_uri("file:///m/album.flac")
    flac.assert_called_once_with("/m/album.flac")
    song = provider.read()
    assert song.uri == "/m/album.flac/track_0001"
    assert song.is_file


def test_open_uri_unreadable_file():
    with patch("plq.playlist.flac.FLAC", side_effect=MutagenError("bad")):
        assert FlacCuesheetPlugin().open_uri("/m/broken.flac") is None


def test_open_uri_ignores_remote():
    with patch("plq.playlist.flac.FLAC") as flac:
        assert FlacCuesheetPlugin().open_uri("http://x/a.flac") is None
    flac.assert_not_called()


def test_open_uri_path_with_nul_byte():
    with patch("plq.playlist.flac.FLAC", side_effect=ValueError("embedded null byte")):
        assert FlacCuesheetPlugin().open_uri("/m/bad\x00name.flac") is None


def test_open_uri_ignores_empty_scheme():
    with patch("plq.playlist.flac.FLAC") as flac:
        assert FlacCuesheetPlugin().open_uri("://album.flac") is None
    flac.assert_not_called()
