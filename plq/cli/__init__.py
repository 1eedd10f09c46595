"""``plq`` command line.

Importing the command modules attaches their commands to the group.
"""
from plq.cli.helpers import cli
from plq.cli import core  # noqa: F401
from plq.cli import config_cmds  # noqa: F401

__all__ = ["cli"]
