"""
Service de chargement des credits IMDb dans un catalogue.

Lit les datasets IMDb (title.principals, et optionnellement title.basics et
name.basics pour les libelles) et alimente un ICatalog credit par credit.
"""

from collections.abc import Collection, Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loguru import logger

from src.adapters.imdb.tsv_parser import TSVParser
from src.core.entities.credits import Actor, Movie
from src.core.ports.catalog import ICatalog


# Categories de title.principals considerees comme des roles d'acteur
DEFAULT_CREDIT_CATEGORIES = ("actor", "actress", "self")

# Types de titres retenus depuis title.basics
DEFAULT_TITLE_TYPES = ("movie", "tvMovie")


@dataclass
class CreditsLoadStats:
    """Statistiques d'un chargement de credits."""

    total: int = 0
    loaded: int = 0
    skipped: int = 0
    movies: int = 0
    actors: int = 0


class CreditsLoaderService:
    """
    Alimente un catalogue a partir des datasets IMDb.

    Le catalogue est injecte : le service ne fait que traduire les
    enregistrements TSV en appels tag_actor_in_movie / release_movie.
    """

    def __init__(self, catalog: ICatalog, parser: TSVParser) -> None:
        self._catalog = catalog
        self._parser = parser

    @property
    def catalog(self) -> ICatalog:
        return self._catalog

    def load_titles(
        self,
        file_path: Path,
        title_types: Collection[str] = DEFAULT_TITLE_TYPES,
    ) -> dict[str, str]:
        """
        Construit la table tconst -> titre depuis title.basics.

        Args:
            file_path: Chemin vers title.basics.tsv(.gz)
            title_types: Types de titres a conserver (movie, tvMovie, ...)

        Returns:
            Dictionnaire tconst -> titre principal
        """
        titles = {
            record["tconst"]: record["primary_title"]
            for record in self._parser.parse_basics(file_path)
            if record["title_type"] in title_types
        }
        logger.info(f"{len(titles)} titres charges depuis {file_path.name}")
        return titles

    def load_names(self, file_path: Path) -> dict[str, str]:
        """Construit la table nconst -> nom depuis name.basics."""
        names = {
            record["nconst"]: record["primary_name"]
            for record in self._parser.parse_names(file_path)
        }
        logger.info(f"{len(names)} noms charges depuis {file_path.name}")
        return names

    def load_principals(
        self,
        file_path: Path,
        categories: Collection[str] = DEFAULT_CREDIT_CATEGORIES,
        titles: Optional[dict[str, str]] = None,
        names: Optional[dict[str, str]] = None,
        limit: Optional[int] = None,
    ) -> CreditsLoadStats:
        """
        Ajoute au catalogue les credits d'acteur de title.principals.

        Args:
            file_path: Chemin vers title.principals.tsv(.gz)
            categories: Categories de credit retenues
            titles: Table tconst -> titre. Si fournie, seuls ces titres sont charges
            names: Table nconst -> nom pour les libelles des acteurs
            limit: Nombre maximum de credits a charger

        Returns:
            Statistiques du chargement

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
        """
        stats = CreditsLoadStats()
        names = names or {}
        skipped_categories: dict[str, int] = {}

        for record in self._parser.parse_principals(file_path):
            if limit is not None and stats.loaded >= limit:
                break
            stats.total += 1

            category = record["category"]
            if category not in categories:
                skipped_categories[category] = skipped_categories.get(category, 0) + 1
                stats.skipped += 1
                continue

            tconst = record["tconst"]
            if titles is not None and tconst not in titles:
                stats.skipped += 1
                continue

            movie = Movie(tconst, titles.get(tconst) if titles else None)
            actor = Actor(record["nconst"], names.get(record["nconst"]))
            self._catalog.tag_actor_in_movie(movie, actor)
            stats.loaded += 1

        for category, count in sorted(skipped_categories.items()):
            logger.debug(f"Categorie ignoree: {category} ({count} credits)")

        stats.movies = len(self._catalog.get_all_movies())
        stats.actors = len(self._catalog.get_all_actors())
        logger.info(
            f"{stats.loaded} credits charges depuis {file_path.name} "
            f"({stats.skipped} ignores, {stats.movies} films, {stats.actors} acteurs)"
        )
        return stats

    def release_cast(self, movie: Movie, actors: Iterable[Actor]) -> None:
        """Enregistre la distribution complete d'un film (remplace l'ancienne)."""
        cast = set(actors)
        self._catalog.release_movie(movie, cast)
        logger.debug(f"Film {movie.tconst} sorti avec {len(cast)} acteurs")
