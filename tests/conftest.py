"""
Fixtures pytest partagees pour les tests Casting.

Ce module contient les fixtures communes utilisees dans les tests:
- Catalogue vide
- Fichiers de datasets IMDb de test (title.principals, title.basics, name.basics)
- Settings de test avec chemins temporaires
"""

import gzip
from pathlib import Path

import pytest

from src.config import Settings
from src.services.catalog import Catalog


PRINCIPALS_CONTENT = (
    "tconst\tordering\tnconst\tcategory\tjob\tcharacters\n"
    'tt1375666\t1\tnm0000138\tactor\t\\N\t["Cobb"]\n'
    'tt1375666\t2\tnm0680983\tactress\t\\N\t["Ariadne"]\n'
    "tt1375666\t3\tnm0634240\tdirector\t\\N\t\\N\n"
    'tt0407887\t1\tnm0000138\tactor\t\\N\t["Billy"]\n'
    'tt0407887\t2\tnm0000134\tactor\t\\N\t["Frank Costello"]\n'
    "tt0407887\t3\tnm0000217\tdirector\t\\N\t\\N\n"
    'tt0903747\t1\tnm0186505\tactor\t\\N\t["Walter White"]\n'
)

BASICS_CONTENT = (
    "tconst\ttitleType\tprimaryTitle\toriginalTitle\tisAdult\tstartYear\tendYear\truntimeMinutes\tgenres\n"
    "tt1375666\tmovie\tInception\tInception\t0\t2010\t\\N\t148\tAction,Adventure,Sci-Fi\n"
    "tt0407887\tmovie\tThe Departed\tThe Departed\t0\t2006\t\\N\t151\tCrime,Drama,Thriller\n"
    "tt0903747\ttvSeries\tBreaking Bad\tBreaking Bad\t0\t2008\t2013\t49\tCrime,Drama,Thriller\n"
)

NAMES_CONTENT = (
    "nconst\tprimaryName\tbirthYear\tdeathYear\tprimaryProfession\tknownForTitles\n"
    "nm0000138\tLeonardo DiCaprio\t1974\t\\N\tactor,producer,writer\ttt1375666,tt0407887\n"
    "nm0680983\tElliot Page\t1987\t\\N\tactor,producer\ttt1375666\n"
    "nm0000134\tRobert De Niro\t1943\t\\N\tactor,producer,director\ttt0407887\n"
)


def _write_gz(path: Path, content: str) -> Path:
    with gzip.open(path, "wt", encoding="utf-8") as f:
        f.write(content)
    return path


@pytest.fixture
def catalog() -> Catalog:
    """Catalogue vide, independant pour chaque test."""
    return Catalog()


@pytest.fixture
def principals_file(tmp_path: Path) -> Path:
    """Fichier title.principals.tsv.gz de test (3 titres, 2 realisateurs)."""
    return _write_gz(tmp_path / "title.principals.tsv.gz", PRINCIPALS_CONTENT)


@pytest.fixture
def basics_file(tmp_path: Path) -> Path:
    """Fichier title.basics.tsv.gz de test (2 films, 1 serie)."""
    return _write_gz(tmp_path / "title.basics.tsv.gz", BASICS_CONTENT)


@pytest.fixture
def names_file(tmp_path: Path) -> Path:
    """Fichier name.basics.tsv.gz de test."""
    return _write_gz(tmp_path / "name.basics.tsv.gz", NAMES_CONTENT)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler le cache des datasets
    et le fichier de log de chaque test.
    """
    return Settings(
        datasets_dir=tmp_path / "imdb",
        log_file=tmp_path / "test.log",
    )
