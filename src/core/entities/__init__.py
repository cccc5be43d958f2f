"""
Entites metier du catalogue.

Exports:
- Movie: Film identifie par son tconst IMDb
- Actor: Acteur identifie par son nconst IMDb
"""

from src.core.entities.credits import Actor, Movie

__all__ = [
    "Actor",
    "Movie",
]
