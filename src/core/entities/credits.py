"""
Entites du catalogue de credits.

Movie et Actor sont des identifiants opaques et immutables : l'egalite,
le hash et l'ordre reposent uniquement sur l'identifiant IMDb. Le libelle
d'affichage (titre, nom) est ignore par les comparaisons.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True, order=True)
class Movie:
    """
    Film reference dans le catalogue.

    Attributes:
        tconst: Identifiant IMDb du titre (ex: "tt1375666")
        title: Titre d'affichage, hors comparaison
    """

    tconst: str
    title: Optional[str] = field(default=None, compare=False)

    def __str__(self) -> str:
        return self.title or self.tconst


@dataclass(frozen=True, order=True)
class Actor:
    """
    Acteur credite dans au moins un film.

    Attributes:
        nconst: Identifiant IMDb de la personne (ex: "nm0000138")
        name: Nom d'affichage, hors comparaison
    """

    nconst: str
    name: Optional[str] = field(default=None, compare=False)

    def __str__(self) -> str:
        return self.name or self.nconst
