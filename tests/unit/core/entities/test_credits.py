"""
Tests pour les entites du catalogue (Movie, Actor).

Verifie que l'identite repose uniquement sur l'identifiant IMDb.
"""

from dataclasses import FrozenInstanceError

import pytest

from src.core.entities.credits import Actor, Movie


class TestMovieEntity:
    """Tests pour l'entite Movie."""

    def test_equality_ignores_title(self):
        """Deux films de meme tconst sont egaux quel que soit le titre."""
        assert Movie("tt1375666", "Inception") == Movie("tt1375666")
        assert hash(Movie("tt1375666", "Inception")) == hash(Movie("tt1375666"))

    def test_different_tconst_not_equal(self):
        assert Movie("tt1375666") != Movie("tt0407887")

    def test_movie_is_immutable(self):
        """Movie est un objet valeur gele."""
        movie = Movie("tt1375666")
        with pytest.raises(FrozenInstanceError):
            movie.tconst = "tt0000001"  # type: ignore[misc]

    def test_movies_sort_by_tconst(self):
        movies = [Movie("tt2", "A"), Movie("tt1", "Z")]
        assert [m.tconst for m in sorted(movies)] == ["tt1", "tt2"]

    def test_str_prefers_title(self):
        assert str(Movie("tt1375666", "Inception")) == "Inception"
        assert str(Movie("tt1375666")) == "tt1375666"


class TestActorEntity:
    """Tests pour l'entite Actor."""

    def test_equality_ignores_name(self):
        assert Actor("nm0000138", "Leonardo DiCaprio") == Actor("nm0000138")
        assert len({Actor("nm0000138", "Leo"), Actor("nm0000138")}) == 1

    def test_actor_is_immutable(self):
        actor = Actor("nm0000138")
        with pytest.raises(FrozenInstanceError):
            actor.name = "Leo"  # type: ignore[misc]

    def test_str_prefers_name(self):
        assert str(Actor("nm0000138", "Leonardo DiCaprio")) == "Leonardo DiCaprio"
        assert str(Actor("nm0000138")) == "nm0000138"
