"""Unit tests for typed configuration dataclasses."""

from plq.config_types import (
    AppConfig,
    DEFAULT_STREAMING_SCHEMES,
    InputConfig,
    LibraryConfig,
    PlaylistsConfig,
    QueueConfig,
    StreamingConfig,
)


def test_defaults():
    config = AppConfig()
    assert config.log_level == "INFO"
    assert config.library.music_directory is None
    assert config.playlists.directory is None
    assert config.input.timeout == 30.0
    assert config.queue.max_length == 16384
    assert config.streaming.schemes == DEFAULT_STREAMING_SCHEMES


def test_streaming_schemes_not_shared_between_instances():
    a = StreamingConfig()
    a.schemes.append("gopher")
    assert "gopher" not in StreamingConfig().schemes


def test_round_trip_through_dict():
    config = AppConfig(
        log_level="DEBUG",
        library=LibraryConfig(music_directory="/music"),
        playlists=PlaylistsConfig(directory="/pl"),
        input=InputConfig(timeout=5.0, user_agent="ua", chunk_size=1024),
        streaming=StreamingConfig(schemes=["http"]),
        queue=QueueConfig(max_length=10),
    )
    assert AppConfig.from_dict(config.to_dict()) == config


def test_from_partial_dict_uses_defaults():
    config = AppConfig.from_dict({"queue": {"max_length": 3}})
    assert config.queue.max_length == 3
