"""
Configuration de l'application via pydantic-settings.

La configuration est chargee depuis les variables d'environnement avec le prefixe CASTING_,
et peut optionnellement etre fournie via un fichier .env.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env a la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Parametres de l'application avec support des variables d'environnement.

    Tous les parametres peuvent etre surcharges via des variables d'environnement
    avec le prefixe CASTING_.
    Exemple : CASTING_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement etendus (~ -> repertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="CASTING_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Datasets IMDb
    datasets_dir: Path = Field(default=Path("~/.cache/casting/imdb"))
    principals_file: Optional[Path] = Field(default=None)
    dataset_max_age_days: int = Field(default=7, ge=1)

    # Filtrage des credits
    credit_categories: list[str] = Field(default=["actor", "actress", "self"])
    title_types: list[str] = Field(default=["movie", "tvMovie"])

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de retention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/casting.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("datasets_dir", "principals_file", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Etend ~ vers le repertoire home dans les chemins."""
        if v is None:
            return None
        return Path(v).expanduser()

    @property
    def principals_path(self) -> Path:
        """Fichier title.principals a charger (explicite ou dans le cache)."""
        if self.principals_file is not None:
            return self.principals_file
        return self.datasets_dir / "title.principals.tsv.gz"
