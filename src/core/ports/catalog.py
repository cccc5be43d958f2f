"""
Interface port du catalogue de credits.

Le catalogue relie les films et les acteurs dans les deux sens. Les
implementations doivent garder les deux index coherents : un acteur est
dans la distribution d'un film si et seulement si ce film est dans la
filmographie de l'acteur.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from src.core.entities.credits import Actor, Movie


class MovieNotFoundError(ValueError):
    """Levee quand un film n'est pas (ou plus) present dans le catalogue."""

    def __init__(self, movie: Movie) -> None:
        super().__init__(f"Film non trouve dans le catalogue: {movie.tconst}")
        self.movie = movie


class ICatalog(ABC):
    """
    Interface du catalogue bidirectionnel films/acteurs.

    Toutes les lectures retournent des copies : modifier un ensemble
    retourne n'affecte jamais le catalogue.
    """

    @abstractmethod
    def release_movie(self, movie: Movie, actors: Iterable[Actor]) -> None:
        """Enregistre un film avec sa distribution complete (remplace l'ancienne)."""
        ...

    @abstractmethod
    def remove_movie(self, movie: Movie) -> bool:
        """Retire un film et ses credits. Retourne True si le film existait."""
        ...

    @abstractmethod
    def tag_actor_in_movie(self, movie: Movie, actor: Actor) -> None:
        """Ajoute un credit (film, acteur), en creant le film si besoin."""
        ...

    @abstractmethod
    def get_actors_in_movie(self, movie: Movie) -> set[Actor]:
        """
        Retourne les acteurs credites dans un film.

        Raises:
            MovieNotFoundError: Si le film n'est pas dans le catalogue
        """
        ...

    @abstractmethod
    def get_movies_for_actor(self, actor: Actor) -> set[Movie]:
        """Retourne les films d'un acteur (ensemble vide si inconnu)."""
        ...

    @abstractmethod
    def get_all_actors(self) -> set[Actor]:
        """Retourne tous les acteurs ayant au moins un credit."""
        ...

    @abstractmethod
    def get_all_movies(self) -> set[Movie]:
        """Retourne tous les films presents dans le catalogue."""
        ...

    @abstractmethod
    def get_total_num_credits(self) -> int:
        """Retourne le nombre total de paires (film, acteur)."""
        ...
