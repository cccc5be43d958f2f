"""
Commandes CLI de consultation du catalogue (cast, filmography, actors, stats).

Chaque commande charge les credits IMDb dans un catalogue neuf puis
l'interroge : rien n'est persiste entre deux appels.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.table import Table

from src.adapters.cli.helpers import console, load_catalog, with_container
from src.core.entities.credits import Actor, Movie
from src.core.ports.catalog import MovieNotFoundError


PrincipalsOption = Annotated[
    Optional[Path],
    typer.Option("--principals", "-p", help="Fichier title.principals.tsv(.gz)"),
]
BasicsOption = Annotated[
    Optional[Path],
    typer.Option("--basics", help="Fichier title.basics.tsv(.gz) pour les titres"),
]
NamesOption = Annotated[
    Optional[Path],
    typer.Option("--names", help="Fichier name.basics.tsv(.gz) pour les noms"),
]


def cast(
    tconst: Annotated[str, typer.Argument(help="ID IMDb du film (ex: tt1375666)")],
    principals: PrincipalsOption = None,
    basics: BasicsOption = None,
    names: NamesOption = None,
) -> None:
    """Affiche les acteurs credites dans un film."""
    _cast(tconst, principals, basics, names)


@with_container()
def _cast(
    container,
    tconst: str,
    principals: Optional[Path],
    basics: Optional[Path],
    names: Optional[Path],
) -> None:
    """Implementation de la commande cast."""
    catalog = load_catalog(container, principals, basics, names)

    try:
        cast_members = catalog.get_actors_in_movie(Movie(tconst))
    except MovieNotFoundError:
        console.print(f"[red]Film non trouve dans le catalogue:[/red] {tconst}")
        raise typer.Exit(code=1)

    table = Table(title=f"Distribution de {tconst}")
    table.add_column("nconst", style="cyan")
    table.add_column("Nom")
    for actor in sorted(cast_members):
        table.add_row(actor.nconst, actor.name or "")
    console.print(table)
    console.print(f"[bold]{len(cast_members)}[/bold] acteur(s)")


def filmography(
    nconst: Annotated[str, typer.Argument(help="ID IMDb de l'acteur (ex: nm0000138)")],
    principals: PrincipalsOption = None,
    basics: BasicsOption = None,
    names: NamesOption = None,
) -> None:
    """Affiche les films dans lesquels un acteur est credite."""
    _filmography(nconst, principals, basics, names)


@with_container()
def _filmography(
    container,
    nconst: str,
    principals: Optional[Path],
    basics: Optional[Path],
    names: Optional[Path],
) -> None:
    """Implementation de la commande filmography."""
    catalog = load_catalog(container, principals, basics, names)
    movies = catalog.get_movies_for_actor(Actor(nconst))

    # Acteur inconnu : pas une erreur, juste une filmographie vide
    if not movies:
        console.print(f"[yellow]Aucun film pour l'acteur {nconst}.[/yellow]")
        return

    table = Table(title=f"Filmographie de {nconst}")
    table.add_column("tconst", style="cyan")
    table.add_column("Titre")
    for movie in sorted(movies):
        table.add_row(movie.tconst, movie.title or "")
    console.print(table)
    console.print(f"[bold]{len(movies)}[/bold] film(s)")


def actors(
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-l", min=1, help="Nombre maximum d'acteurs affiches"),
    ] = None,
    principals: PrincipalsOption = None,
    names: NamesOption = None,
) -> None:
    """Liste les acteurs ayant au moins un credit."""
    _actors(limit, principals, names)


@with_container()
def _actors(
    container,
    limit: Optional[int],
    principals: Optional[Path],
    names: Optional[Path],
) -> None:
    """Implementation de la commande actors."""
    catalog = load_catalog(container, principals, names=names)
    all_actors = sorted(catalog.get_all_actors())
    shown = all_actors[:limit] if limit else all_actors

    for actor in shown:
        label = f" - {actor.name}" if actor.name else ""
        console.print(f"[cyan]{actor.nconst}[/cyan]{label}")

    if len(shown) < len(all_actors):
        console.print(f"[dim]... {len(all_actors) - len(shown)} autre(s)[/dim]")
    console.print(f"[bold]{len(all_actors)}[/bold] acteur(s) au total")


def stats(principals: PrincipalsOption = None) -> None:
    """Affiche les statistiques du catalogue charge."""
    _stats(principals)


@with_container()
def _stats(container, principals: Optional[Path]) -> None:
    """Implementation de la commande stats."""
    catalog = load_catalog(container, principals)

    console.print("[bold cyan]Statistiques du catalogue[/bold cyan]\n")
    console.print(f"  Films: [bold]{len(catalog.get_all_movies()):,}[/bold]")
    console.print(f"  Acteurs: [bold]{len(catalog.get_all_actors()):,}[/bold]")
    console.print(f"  Credits: [bold]{catalog.get_total_num_credits():,}[/bold]")
