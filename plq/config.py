"""Configuration loading.

Sources, later ones winning:

1. built-in defaults (``_DEFAULTS``)
2. ``PLQ__*`` lines of a ``.env`` file in the working directory
3. ``PLQ__*`` process environment variables
4. explicit overrides passed by the caller

``PLQ__QUEUE__MAX_LENGTH=100`` sets ``queue.max_length``; values go through
:func:`coerce_scalar`. While pytest runs, the ``.env`` file is ignored
unless ``PLQ_ENABLE_DOTENV`` is set.
"""
from __future__ import annotations
import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping

from .config_types import AppConfig, DEFAULT_STREAMING_SCHEMES

logger = logging.getLogger(__name__)

ENV_PREFIX = "PLQ__"
DOTENV_SWITCH = "PLQ_ENABLE_DOTENV"

_DEFAULTS: Dict[str, Any] = {
    "log_level": "INFO",
    "library": {"music_directory": None},
    "playlists": {"directory": None},
    "input": {"timeout": 30.0, "user_agent": "plq", "chunk_size": 8192},
    "streaming": {"schemes": list(DEFAULT_STREAMING_SCHEMES)},
    "queue": {"max_length": 16384},
}

_QUOTES = ('"', "'")


def deep_merge(base: Dict[str, Any], extra: Dict[str, Any]) -> Dict[str, Any]:
    """Return a new dict with ``extra`` layered over ``base``; sub-dicts merge."""
    merged = dict(base)
    for key, value in extra.items():
        current = merged.get(key)
        if isinstance(value, dict) and isinstance(current, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def _strip_inline_comment(raw: str) -> str:
    quote = None
    for idx, ch in enumerate(raw):
        if quote:
            if ch == quote:
                quote = None
        elif ch in _QUOTES:
            quote = ch
        elif ch == "#":
            return raw[:idx].rstrip()
    return raw


def _unquote(raw: str) -> str:
    if len(raw) >= 2 and raw[0] in _QUOTES and raw[-1] == raw[0]:
        return raw[1:-1]
    return raw


def _read_dotenv(path: Path) -> Dict[str, str]:
    """Parse KEY=VALUE lines; blank lines and ``#`` comments are skipped."""
    if not path.is_file():
        return {}
    entries: Dict[str, str] = {}
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        text = raw_line.strip()
        if text.startswith("#"):
            continue
        name, sep, raw_value = text.partition("=")
        name = name.strip()
        if not sep or not name:
            continue
        entries[name] = _unquote(_strip_inline_comment(raw_value.strip()))
    return entries


def _dotenv_enabled() -> bool:
    return bool(os.environ.get(DOTENV_SWITCH)) or "PYTEST_CURRENT_TEST" not in os.environ


def _apply_env(cfg: Dict[str, Any], env: Mapping[str, str]) -> None:
    for name, raw in env.items():
        if not name.startswith(ENV_PREFIX):
            continue
        *sections, leaf = name[len(ENV_PREFIX):].lower().split("__")
        target = cfg
        for section in sections:
            target = target.setdefault(section, {})
        target[leaf] = coerce_scalar(raw)


def load_config(overrides: Dict[str, Any] | None = None) -> Dict[str, Any]:
    """Build the configuration dict and configure logging from it.

    Args:
        overrides: Values merged last, mostly used by tests and the CLI

    Returns:
        Plain dict; see :func:`load_typed_config` for the typed form
    """
    cfg = copy.deepcopy(_DEFAULTS)
    if _dotenv_enabled():
        _apply_env(cfg, _read_dotenv(Path(".env")))
    _apply_env(cfg, os.environ)
    if overrides:
        cfg = deep_merge(cfg, overrides)

    _configure_logging(cfg.get("log_level", "INFO"))
    return cfg


def load_typed_config(overrides: Dict[str, Any] | None = None) -> AppConfig:
    return AppConfig.from_dict(load_config(overrides))


def _configure_logging(level_name: Any) -> None:
    level = logging.getLevelName(str(level_name).upper())
    if not isinstance(level, int):
        logger.warning(f"Unknown log level {level_name!r}, using INFO")
        level = logging.INFO
    logging.basicConfig(level=level, format="%(message)s", force=True)


def coerce_scalar(value: str) -> Any:
    """Turn an environment string into a config value.

    JSON arrays and objects are decoded; true/yes and false/no become bools;
    none/null/empty become None; numbers become int or float. Anything else
    stays a string.
    """
    text = value.strip()
    if text[:1] in "[{" and text[-1:] in "]}":
        try:
            return json.loads(text)
        except ValueError:
            logger.debug(f"Not JSON, keeping as text: {text}")
    word = text.lower()
    if word in ("true", "yes"):
        return True
    if word in ("false", "no"):
        return False
    if word in ("", "none", "null"):
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return text


__all__ = ["load_config", "deep_merge", "load_typed_config", "coerce_scalar"]
