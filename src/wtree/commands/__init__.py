"""Command implementations behind the ``wtree`` CLI."""

from __future__ import annotations

from wtree.commands.add import add
from wtree.commands.analyze import analyze
from wtree.commands.clean import clean
from wtree.commands.doctor import doctor
from wtree.commands.init import init
from wtree.commands.listing import list_worktrees
from wtree.commands.remove import remove
from wtree.commands.restore import restore

__all__ = [
    "add",
    "analyze",
    "clean",
    "doctor",
    "init",
    "list_worktrees",
    "remove",
    "restore",
]
