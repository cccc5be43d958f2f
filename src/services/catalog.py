"""
Catalogue bidirectionnel films/acteurs en memoire.

Maintient deux index miroirs :
- films -> ensemble d'acteurs (presence de la cle = film sorti)
- acteurs -> ensemble de films (aucun acteur sans credit)

Les lectures retournent toujours des copies. Le catalogue n'est pas
thread-safe : un appelant multi-thread doit proteger l'instance par un verrou.
"""

from collections.abc import Iterable

from loguru import logger

from src.core.entities.credits import Actor, Movie
from src.core.ports.catalog import ICatalog, MovieNotFoundError


class Catalog(ICatalog):
    """
    Implementation en memoire du catalogue de credits.

    Usage:
        catalog = Catalog()
        catalog.release_movie(Movie("tt1375666"), {Actor("nm0000138")})
        catalog.get_movies_for_actor(Actor("nm0000138"))
    """

    def __init__(self) -> None:
        self._movies_to_actors: dict[Movie, set[Actor]] = {}
        self._actors_to_movies: dict[Actor, set[Movie]] = {}

    def release_movie(self, movie: Movie, actors: Iterable[Actor]) -> None:
        """
        Enregistre un film avec sa distribution complete.

        Si le film existe deja, l'ancienne distribution est d'abord retiree
        (meme cascade que remove_movie) pour que les acteurs qui n'en font
        plus partie ne gardent pas de credit orphelin.

        Args:
            movie: Le film a enregistrer
            actors: Les acteurs de la distribution (peut etre vide)
        """
        cast = set(actors)
        if self.remove_movie(movie):
            logger.debug(f"Distribution remplacee pour {movie.tconst}")

        self._movies_to_actors[movie] = cast
        for actor in cast:
            self._actors_to_movies.setdefault(actor, set()).add(movie)

    def remove_movie(self, movie: Movie) -> bool:
        """
        Retire un film et tous ses credits.

        Les acteurs dont c'etait le dernier credit disparaissent du catalogue.

        Returns:
            True si le film a ete retire, False s'il n'etait pas present
        """
        actors = self._movies_to_actors.pop(movie, None)
        if actors is None:
            return False

        for actor in actors:
            movies = self._actors_to_movies[actor]
            movies.discard(movie)
            if not movies:
                del self._actors_to_movies[actor]
        return True

    def tag_actor_in_movie(self, movie: Movie, actor: Actor) -> None:
        """Ajoute un acteur a un film, existant ou non (idempotent)."""
        self._movies_to_actors.setdefault(movie, set()).add(actor)
        self._actors_to_movies.setdefault(actor, set()).add(movie)

    def get_actors_in_movie(self, movie: Movie) -> set[Actor]:
        """
        Retourne une copie des acteurs credites dans le film.

        Raises:
            MovieNotFoundError: Si le film n'a jamais ete sorti ou a ete retire
        """
        if movie not in self._movies_to_actors:
            raise MovieNotFoundError(movie)
        return set(self._movies_to_actors[movie])

    def get_movies_for_actor(self, actor: Actor) -> set[Movie]:
        """Retourne une copie des films de l'acteur, vide si inconnu."""
        return set(self._actors_to_movies.get(actor, ()))

    def get_all_actors(self) -> set[Actor]:
        return set(self._actors_to_movies)

    def get_all_movies(self) -> set[Movie]:
        return set(self._movies_to_actors)

    def get_total_num_credits(self) -> int:
        """
        Nombre total de paires (film, acteur).

        Ex: 2 films avec 1 et 6 acteurs -> 7 credits.
        """
        return sum(len(movies) for movies in self._actors_to_movies.values())
