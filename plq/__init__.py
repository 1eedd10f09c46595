"""Resolve playlist identifiers and load their streamable songs into a queue.

Entry point: :func:`plq.services.load_playlist_into_queue`.
"""

from .version import __version__

__all__ = ["__version__"]
