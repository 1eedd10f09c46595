"""Pytest fixtures for test configuration.

Global test safety measures:
 - Strip PLQ__* variables from the environment so local settings never leak
   into configuration tests
"""
import os
import pytest

# Expose mock fixtures (release_counter, counting_opener, music_dir, ...)
from .mocks.fixtures import *  # noqa: F401,F403


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("PLQ__") or key == "PLQ_ENABLE_DOTENV":
            monkeypatch.delenv(key, raising=False)
