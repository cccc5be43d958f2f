"""Sous-package CLI commands - re-exporte les commandes publiques."""

from src.adapters.cli.commands.catalog_commands import (
    actors,
    cast,
    filmography,
    stats,
)
from src.adapters.cli.commands.imdb_commands import (
    imdb_app,
    imdb_download,
)

__all__ = [
    # catalogue
    "cast",
    "filmography",
    "actors",
    "stats",
    # imdb
    "imdb_app",
    "imdb_download",
]
