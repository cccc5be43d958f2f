"""
Configuration du logging de l'application via loguru.

Fournit un logging structure avec :
- Sortie console : lisible par l'humain, coloree, pour la surveillance en temps reel
- Sortie fichier : serialisee en JSON, avec rotation, pour l'analyse historique
"""

import sys
from pathlib import Path

from loguru import logger

# Niveaux console selon le nombre de -v passes a la CLI
_VERBOSITY_LEVELS = ("INFO", "DEBUG", "TRACE")


def level_from_verbosity(verbose: int, quiet: bool, default: str = "INFO") -> str:
    """Traduit les options --verbose/--quiet en niveau de log console."""
    if quiet:
        return "ERROR"
    if verbose <= 0:
        return default
    return _VERBOSITY_LEVELS[min(verbose, len(_VERBOSITY_LEVELS) - 1)]


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/casting.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin vers le fichier de log
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB", "1 GB")
        retention_count : Nombre de fichiers rotatifs a conserver
    """
    # Supprime le handler par defaut
    logger.remove()

    # Handler console - lisible par l'humain
    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    # Handler fichier - JSON pour l'analyse
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",  # Capture les details de chargement
        format="{message}",
        serialize=True,  # Sortie JSON
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
    )

    logger.debug("Logging configure", log_file=str(log_file), rotation=rotation_size)
