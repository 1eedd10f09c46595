"""Path mapping for stored playlists and the music library."""

from pathlib import Path

from plq.config_types import AppConfig
from plq.mapper import PathMapper, normalize_fs_path


def test_stored_playlist_path_joins_name_unchanged(tmp_path: Path):
    mapper = PathMapper(playlist_directory=tmp_path)
    assert mapper.stored_playlist_path("favourites") == tmp_path / "favourites"
    assert mapper.stored_playlist_path("radio.pls") == tmp_path / "radio.pls"


def test_stored_playlist_disabled():
    mapper = PathMapper()
    assert mapper.stored_playlist_root() is None
    assert mapper.stored_playlist_path("favourites") is None


def test_map_library_path(tmp_path: Path):
    mapper = PathMapper(music_directory=tmp_path)
    mapped = mapper.map_library_path("radio/stations.m3u")
    assert mapped == Path(normalize_fs_path(tmp_path / "radio" / "stations.m3u"))
    assert mapped.is_absolute()


def test_map_library_path_unconfigured():
    assert PathMapper().map_library_path("radio/stations.m3u") is None


def test_from_config(tmp_path: Path):
    config = AppConfig.from_dict({
        "library": {"music_directory": str(tmp_path / "music")},
        "playlists": {"directory": str(tmp_path / "pl")},
    })
    mapper = PathMapper.from_config(config)
    assert mapper.music_directory == tmp_path / "music"
    assert mapper.stored_playlist_path("x.pls") == tmp_path / "pl" / "x.pls"


def test_mappers_with_different_roots_are_independent(tmp_path: Path):
    a = PathMapper(music_directory=tmp_path / "a")
    b = PathMapper(music_directory=tmp_path / "b")
    assert a.map_library_path("x.m3u") != b.map_library_path("x.m3u")
