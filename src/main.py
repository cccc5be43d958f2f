"""
Point d'entree CLI de Casting.

Configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import actors, cast, filmography, imdb_app, stats
from .config import Settings
from .container import Container
from .logging_config import configure_logging, level_from_verbosity

__version__ = "0.1.0"

app = typer.Typer(
    name="casting",
    help="Catalogue bidirectionnel films/acteurs",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """Casting - Catalogue de credits IMDb."""
    settings = get_config()
    configure_logging(
        log_level=level_from_verbosity(verbose, quiet, settings.log_level),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


# Commandes de consultation du catalogue
app.command()(cast)
app.command()(filmography)
app.command()(actors)
app.command()(stats)

# Monter imdb_app comme sous-commande
app.add_typer(imdb_app, name="imdb")


def get_config() -> Settings:
    """Recupere les parametres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration Casting")
    typer.echo(f"Datasets : {config.datasets_dir}")
    typer.echo(f"Credits : {config.principals_path}")
    typer.echo(f"Categories : {', '.join(config.credit_categories)}")
    typer.echo(f"Types de titres : {', '.join(config.title_types)}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Casting v{__version__}")


def main() -> None:
    """Point d'entree de l'application."""
    app()


if __name__ == "__main__":
    main()
