"""
Telechargement des datasets IMDb.

Telecharge les datasets IMDb publics dans un repertoire de cache local.
Les fichiers recents ne sont pas re-telecharges.

Datasets utilises:
- title.principals.tsv.gz: Credits des titres
- title.basics.tsv.gz: Titres (libelles des films)
- name.basics.tsv.gz: Personnes (noms des acteurs)
"""

from datetime import date
from pathlib import Path

import httpx
from loguru import logger


# URL de base des datasets IMDb
IMDB_DATASETS_BASE_URL = "https://datasets.imdbws.com"

# Datasets reconnus par le telechargeur
KNOWN_DATASETS = ("title.principals", "title.basics", "name.basics")


class IMDbDatasetDownloader:
    """
    Gestionnaire de telechargement des datasets IMDb.

    Telecharge et cache les fichiers .tsv.gz dans cache_dir.
    """

    def __init__(self, cache_dir: Path, base_url: str = IMDB_DATASETS_BASE_URL) -> None:
        """
        Initialise le telechargeur.

        Args:
            cache_dir: Repertoire pour le cache des fichiers telecharges
            base_url: URL de base des datasets
        """
        self._cache_dir = Path(cache_dir)
        self._base_url = base_url.rstrip("/")

        # Creer le repertoire de cache si necessaire
        self._cache_dir.mkdir(parents=True, exist_ok=True)

    def dataset_path(self, name: str) -> Path:
        """Chemin local du dataset dans le cache."""
        return self._cache_dir / f"{name}.tsv.gz"

    def needs_update(self, file_path: Path, max_age_days: int = 7) -> bool:
        """
        Verifie si un fichier de dataset doit etre mis a jour.

        Args:
            file_path: Chemin vers le fichier
            max_age_days: Age maximum en jours avant mise a jour

        Returns:
            True si le fichier n'existe pas ou est trop vieux
        """
        if not file_path.exists():
            return True

        # Verifier l'age du fichier
        mtime = file_path.stat().st_mtime
        file_date = date.fromtimestamp(mtime)
        age = (date.today() - file_date).days

        return age >= max_age_days

    async def download_dataset(self, name: str) -> Path:
        """
        Telecharge un dataset IMDb.

        Args:
            name: Nom du dataset (ex: "title.principals")

        Returns:
            Chemin vers le fichier telecharge

        Raises:
            httpx.HTTPStatusError: Si le telechargement echoue
        """
        url = f"{self._base_url}/{name}.tsv.gz"
        file_path = self.dataset_path(name)
        partial_path = file_path.with_name(file_path.name + ".part")

        logger.info(f"Telechargement de {url}")
        try:
            async with httpx.AsyncClient(follow_redirects=True) as client:
                async with client.stream("GET", url) as response:
                    response.raise_for_status()

                    # Telecharger en streaming pour gerer les gros fichiers
                    with open(partial_path, "wb") as f:
                        async for chunk in response.aiter_bytes():
                            f.write(chunk)
        except httpx.HTTPError:
            partial_path.unlink(missing_ok=True)
            raise

        partial_path.replace(file_path)
        logger.debug(f"Dataset {name} ecrit dans {file_path}")
        return file_path
