"""
Utilitaires partages pour les commandes CLI de Casting.

Ce module fournit :
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container en premier argument
- load_catalog : chargement d'un catalogue depuis les datasets IMDb
- console : instance Rich Console partagee
"""

import inspect
from contextlib import contextmanager
from functools import wraps
from pathlib import Path
from typing import Optional

import typer
from loguru import logger as loguru_logger
from rich.console import Console
from rich.status import Status

from src.container import Container
from src.core.ports.catalog import ICatalog

# Console globale pour tous les affichages
console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("src")
    try:
        yield
    finally:
        loguru_logger.enable("src")


def with_container():
    """
    Decorateur qui injecte un container en premier argument.

    Fonctionne pour les fonctions sync et async.

    Usage:
        @with_container()
        def my_command(container, ...):
            config = container.config()
    """
    def decorator(func):
        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                return await func(Container(), *args, **kwargs)
            return async_wrapper

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(Container(), *args, **kwargs)
        return wrapper
    return decorator


def load_catalog(
    container,
    principals: Optional[Path] = None,
    basics: Optional[Path] = None,
    names: Optional[Path] = None,
) -> ICatalog:
    """
    Charge les credits IMDb dans un catalogue neuf.

    Args:
        container: Container DI
        principals: Fichier title.principals (defaut: configuration)
        basics: Fichier title.basics optionnel pour les titres
        names: Fichier name.basics optionnel pour les noms

    Returns:
        Le catalogue alimente

    Raises:
        typer.Exit: Si un fichier de dataset est introuvable
    """
    config = container.config()
    loader = container.credits_loader()
    principals_path = principals or config.principals_path

    try:
        with suppress_loguru(), Status(
            f"[cyan]Chargement des credits depuis {principals_path.name}...", console=console
        ):
            titles = loader.load_titles(basics, config.title_types) if basics else None
            labels = loader.load_names(names) if names else None
            loader.load_principals(
                principals_path,
                categories=config.credit_categories,
                titles=titles,
                names=labels,
            )
    except FileNotFoundError as e:
        console.print(f"[red]Erreur:[/red] {e}")
        console.print("[dim]Utilisez 'casting imdb download' pour recuperer les datasets.[/dim]")
        raise typer.Exit(code=1) from e

    return loader.catalog
