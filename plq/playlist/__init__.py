"""Playlist decoder public API.

Built-in decoders are registered in the default registry on import.
Additional formats can register by using register_plugin() with a
PlaylistPlugin instance.
"""

from .base import (
    PlaylistProvider,
    SongListProvider,
    PlaylistPlugin,
    PlaylistRegistry,
    default_registry,
    register_plugin,
    get_plugin,
    available_plugins,
)
from .flac import FlacCuesheetPlugin
from .m3u import M3UPlugin
from .pls import PLSPlugin
from .xspf import XSPFPlugin


def builtin_plugins() -> list[PlaylistPlugin]:
    """Fresh instances of the built-in decoders, in lookup order."""
    return [FlacCuesheetPlugin(), M3UPlugin(), PLSPlugin(), XSPFPlugin()]


for _plugin in builtin_plugins():
    register_plugin(_plugin)


__all__ = [
    "PlaylistProvider",
    "SongListProvider",
    "PlaylistPlugin",
    "PlaylistRegistry",
    "default_registry",
    "register_plugin",
    "get_plugin",
    "available_plugins",
    "builtin_plugins",
    "FlacCuesheetPlugin",
    "M3UPlugin",
    "PLSPlugin",
    "XSPFPlugin",
]
