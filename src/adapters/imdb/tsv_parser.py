"""
Parser pour les fichiers TSV des datasets IMDb.

Les datasets IMDb sont distribues sous forme de fichiers TSV compresses (.tsv.gz).
Ce parser gere la lecture de ces fichiers en mode streaming pour minimiser
l'utilisation memoire.

Datasets supportes:
- title.principals.tsv.gz: Credits (un enregistrement par personne creditee)
- title.basics.tsv.gz: Informations de base des titres (titre, annee, genres)
- name.basics.tsv.gz: Informations de base des personnes (nom, metiers)

Documentation: https://developer.imdb.com/non-commercial-datasets/
"""

import gzip
import json
from collections.abc import Iterator
from pathlib import Path
from typing import Generator, TextIO

# Valeur nulle des datasets IMDb
NULL_VALUE = "\\N"


class TSVParser:
    """
    Parser pour les fichiers TSV des datasets IMDb.

    Lit les fichiers en mode streaming (generateur) : title.principals
    depasse largement le gigaoctet une fois decompresse.
    """

    def parse_principals(self, file_path: Path) -> Generator[dict, None, None]:
        """
        Parse le fichier title.principals.tsv(.gz).

        Format du fichier:
        tconst    ordering    nconst    category    job    characters
        tt1375666    1    nm0000138    actor    \\N    ["Cobb"]

        Args:
            file_path: Chemin vers le fichier TSV (compresse ou non)

        Yields:
            Dictionnaire avec:
            - tconst: ID IMDb du titre
            - ordering: Rang du credit (int)
            - nconst: ID IMDb de la personne
            - category: Categorie du credit (actor, actress, director, ...)
            - job: Intitule du poste (ou None)
            - characters: Liste des personnages joues

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
        """
        for parts in self._read_rows(file_path, min_columns=6):
            ordering = self._parse_int(parts[1])
            if ordering is None:
                continue
            yield {
                "tconst": parts[0],
                "ordering": ordering,
                "nconst": parts[2],
                "category": parts[3],
                "job": None if parts[4] == NULL_VALUE else parts[4],
                "characters": self._parse_characters(parts[5]),
            }

    def parse_basics(self, file_path: Path) -> Generator[dict, None, None]:
        """
        Parse le fichier title.basics.tsv(.gz).

        Format du fichier:
        tconst    titleType    primaryTitle    originalTitle    isAdult    startYear    endYear    runtimeMinutes    genres
        tt0499549    movie    Avatar    Avatar    0    2009    \\N    162    Action,Adventure,Fantasy

        Yields:
            Dictionnaire avec tconst, title_type, primary_title, original_title,
            is_adult, start_year, end_year, runtime_minutes, genres

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
        """
        for parts in self._read_rows(file_path, min_columns=9):
            yield {
                "tconst": parts[0],
                "title_type": parts[1],
                "primary_title": parts[2],
                "original_title": parts[3],
                "is_adult": parts[4] == "1",
                "start_year": self._parse_int(parts[5]),
                "end_year": self._parse_int(parts[6]),
                "runtime_minutes": self._parse_int(parts[7]),
                "genres": parts[8].split(",") if parts[8] != NULL_VALUE else [],
            }

    def parse_names(self, file_path: Path) -> Generator[dict, None, None]:
        """
        Parse le fichier name.basics.tsv(.gz).

        Format du fichier:
        nconst    primaryName    birthYear    deathYear    primaryProfession    knownForTitles
        nm0000138    Leonardo DiCaprio    1974    \\N    actor,producer,writer    tt1375666

        Yields:
            Dictionnaire avec nconst, primary_name, birth_year, death_year,
            primary_profession (liste)

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
        """
        for parts in self._read_rows(file_path, min_columns=5):
            yield {
                "nconst": parts[0],
                "primary_name": parts[1],
                "birth_year": self._parse_int(parts[2]),
                "death_year": self._parse_int(parts[3]),
                "primary_profession": (
                    parts[4].split(",") if parts[4] not in (NULL_VALUE, "") else []
                ),
            }

    def _read_rows(self, file_path: Path, min_columns: int) -> Iterator[list[str]]:
        """Lit les lignes de donnees (hors en-tete) ayant assez de colonnes."""
        if not file_path.exists():
            raise FileNotFoundError(f"Fichier non trouve: {file_path}")

        with self._open(file_path) as f:
            # Ignorer l'en-tete
            next(f, None)

            for line in f:
                parts = line.rstrip("\n").split("\t")
                if len(parts) >= min_columns:
                    yield parts

    @staticmethod
    def _open(file_path: Path) -> TextIO:
        if file_path.suffix == ".gz":
            return gzip.open(file_path, "rt", encoding="utf-8")
        return open(file_path, "r", encoding="utf-8")

    @staticmethod
    def _parse_int(value: str) -> int | None:
        """Parse une valeur entiere, retourne None pour \\N."""
        if value == NULL_VALUE:
            return None
        try:
            return int(value)
        except ValueError:
            return None

    @staticmethod
    def _parse_characters(value: str) -> list[str]:
        """Parse la colonne characters (tableau JSON ou \\N)."""
        if value in (NULL_VALUE, ""):
            return []
        try:
            characters = json.loads(value)
        except json.JSONDecodeError:
            return [value]
        if isinstance(characters, list):
            return [str(c) for c in characters]
        return [str(characters)]
