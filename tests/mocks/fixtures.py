from __future__ import annotations
from pathlib import Path
import pytest

from plq.mapper import PathMapper
from .instrumented import CountingOpener, RecordingQueue, ReleaseCounter


@pytest.fixture
def release_counter():
    return ReleaseCounter()


@pytest.fixture
def counting_opener():
    return CountingOpener()


@pytest.fixture
def recording_queue():
    return RecordingQueue()


@pytest.fixture
def music_dir(tmp_path: Path) -> Path:
    path = tmp_path / "music"
    path.mkdir()
    return path


@pytest.fixture
def playlist_dir(tmp_path: Path) -> Path:
    path = tmp_path / "playlists"
    path.mkdir()
    return path


@pytest.fixture
def mapper(music_dir: Path, playlist_dir: Path) -> PathMapper:
    return PathMapper(music_directory=music_dir, playlist_directory=playlist_dir)
