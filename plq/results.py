"""Result codes returned by playlist resolution and queue operations."""
from __future__ import annotations
from enum import Enum


class PlaylistResult(Enum):
    """Closed set of outcomes; never raised, always returned."""

    SUCCESS = "success"
    NO_SUCH_LIST = "no_such_list"
    DISABLED = "disabled"
    # Append-side failures, surfaced unchanged from the destination queue
    TOO_LARGE = "too_large"
    BAD_RANGE = "bad_range"
    DENIED = "denied"

    @property
    def ok(self) -> bool:
        return self is PlaylistResult.SUCCESS


__all__ = ["PlaylistResult"]
