"""Typed views of the configuration dict returned by :func:`plq.config.load_config`.

Each section of the dict maps to one dataclass; :class:`AppConfig` ties them
together and converts back and forth.
"""
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any


DEFAULT_STREAMING_SCHEMES = ["http", "https", "mms", "mmsh", "mmst", "mmsu", "rtsp", "rtmp"]


@dataclass
class LibraryConfig:
    """Local music library configuration."""
    music_directory: str | None = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class PlaylistsConfig:
    """Stored playlist directory configuration (None disables stored playlists)."""
    directory: str | None = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class InputConfig:
    """Byte stream transport settings."""
    timeout: float = 30.0  # seconds, HTTP connect/read
    user_agent: str = "plq"
    chunk_size: int = 8192

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class StreamingConfig:
    """Schemes a queued song may use."""
    schemes: List[str] = field(default_factory=lambda: list(DEFAULT_STREAMING_SCHEMES))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class QueueConfig:
    """Destination queue limits."""
    max_length: int = 16384

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class AppConfig:
    """Whole configuration, one attribute per section."""
    log_level: str = "INFO"
    library: LibraryConfig = field(default_factory=LibraryConfig)
    playlists: PlaylistsConfig = field(default_factory=PlaylistsConfig)
    input: InputConfig = field(default_factory=InputConfig)
    streaming: StreamingConfig = field(default_factory=StreamingConfig)
    queue: QueueConfig = field(default_factory=QueueConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to nested dictionary matching the load_config() layout."""
        return {
            "log_level": self.log_level,
            "library": self.library.to_dict(),
            "playlists": self.playlists.to_dict(),
            "input": self.input.to_dict(),
            "streaming": self.streaming.to_dict(),
            "queue": self.queue.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AppConfig:
        """Build from a load_config() dict; missing sections take defaults.

        Args:
            data: Dictionary config (from load_config)

        Returns:
            Typed AppConfig instance
        """
        return cls(
            log_level=data.get("log_level", "INFO"),
            library=LibraryConfig(**data.get("library", {})),
            playlists=PlaylistsConfig(**data.get("playlists", {})),
            input=InputConfig(**data.get("input", {})),
            streaming=StreamingConfig(**data.get("streaming", {})),
            queue=QueueConfig(**data.get("queue", {})),
        )


__all__ = [
    "AppConfig",
    "LibraryConfig",
    "PlaylistsConfig",
    "InputConfig",
    "StreamingConfig",
    "QueueConfig",
    "DEFAULT_STREAMING_SCHEMES",
]
