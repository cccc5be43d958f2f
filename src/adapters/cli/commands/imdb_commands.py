"""
Commandes CLI pour la gestion des datasets IMDb (download).
"""

import asyncio
from typing import Annotated, Optional

import httpx
import typer
from rich.status import Status

from src.adapters.cli.helpers import console, suppress_loguru, with_container
from src.adapters.imdb.dataset_downloader import KNOWN_DATASETS


# Application Typer pour les commandes IMDb
imdb_app = typer.Typer(
    name="imdb",
    help="Commandes de gestion des datasets IMDb",
    rich_markup_mode="rich",
)


@imdb_app.command("download")
def imdb_download(
    force: Annotated[
        bool,
        typer.Option(
            "--force", "-f",
            help="Force le re-telechargement meme si le fichier est recent",
        ),
    ] = False,
    datasets: Annotated[
        Optional[list[str]],
        typer.Option(
            "--dataset", "-d",
            help="Dataset a telecharger (title.principals, title.basics, name.basics)",
        ),
    ] = None,
) -> None:
    """Telecharge les datasets IMDb necessaires au catalogue."""
    names = datasets or ["title.principals"]
    unknown = [name for name in names if name not in KNOWN_DATASETS]
    if unknown:
        console.print(f"[red]Dataset(s) inconnu(s):[/red] {', '.join(unknown)}")
        raise typer.Exit(code=1)

    asyncio.run(_imdb_download_async(force, names))


@with_container()
async def _imdb_download_async(container, force: bool, names: list[str]) -> None:
    """Implementation async de la commande imdb download."""
    config = container.config()
    downloader = container.dataset_downloader()

    with suppress_loguru():
        for name in names:
            file_path = downloader.dataset_path(name)

            # Verifier si un telechargement est necessaire
            if not force and not downloader.needs_update(
                file_path, max_age_days=config.dataset_max_age_days
            ):
                console.print(f"[yellow]{name}: dataset recent, pas de telechargement.[/yellow]")
                continue

            try:
                with Status(f"[cyan]Telechargement du dataset {name}...", console=console):
                    file_path = await downloader.download_dataset(name)
            except httpx.HTTPError as e:
                console.print(f"[red]Echec du telechargement de {name}:[/red] {e}")
                raise typer.Exit(code=1) from e

            console.print(f"[green]{name}: telecharge dans {file_path}[/green]")
