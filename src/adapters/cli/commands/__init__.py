"""Sous-package CLI commands - re-exporte les commandes publiques."""

from src.adapters.cli.commands.search_commands import (
    detail,
    episodes,
    search,
)

__all__ = [
    "detail",
    "episodes",
    "search",
]
