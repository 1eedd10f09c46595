"""Identifier classification helpers.

These are the validators the resolution core consults before touching any
filesystem or network resource. All of them are pure string predicates.
"""
from __future__ import annotations
from typing import Iterable

SCHEME_SEPARATOR = "://"


def has_scheme(uri: str) -> bool:
    """Return True if ``uri`` carries an explicit transport scheme (``scheme://``)."""
    return SCHEME_SEPARATOR in uri


def get_scheme(uri: str) -> str | None:
    """Return the lower-cased scheme of ``uri`` or None when it has none."""
    scheme, sep, _ = uri.partition(SCHEME_SEPARATOR)
    if not sep or not scheme:
        return None
    return scheme.lower()


def supported_scheme(uri: str, schemes: Iterable[str]) -> bool:
    """Return True if the scheme of ``uri`` is one of ``schemes``."""
    scheme = get_scheme(uri)
    if scheme is None:
        return False
    return scheme in {s.lower() for s in schemes}


def is_safe_local(uri: str) -> bool:
    """Check that ``uri`` is a relative path which cannot escape its root.

    Rejects empty strings, absolute paths and any ``.`` or ``..`` segment.
    """
    if not uri or uri.startswith("/") or "\\" in uri:
        return False
    for segment in uri.split("/"):
        if segment in (".", ".."):
            return False
    return True


def is_valid_stored_playlist_name(name: str) -> bool:
    """Check that ``name`` can be used as a stored playlist file name."""
    if not name or name in (".", ".."):
        return False
    return not any(ch in name for ch in ("/", "\n", "\r"))


__all__ = [
    "has_scheme",
    "get_scheme",
    "supported_scheme",
    "is_safe_local",
    "is_valid_stored_playlist_name",
]
