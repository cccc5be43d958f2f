"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Les ports sont les frontieres de l'architecture hexagonale. Ils definissent
ce dont le domaine a besoin sans specifier comment ces besoins sont satisfaits.

Port catalogue :
- ICatalog : Index bidirectionnel films/acteurs
- MovieNotFoundError : Film absent du catalogue
"""

from src.core.ports.catalog import ICatalog, MovieNotFoundError

__all__ = [
    "ICatalog",
    "MovieNotFoundError",
]
