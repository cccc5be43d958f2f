"""
Casting - Catalogue bidirectionnel films/acteurs.

Ce package relie films et acteurs dans les deux sens, alimente a partir
des datasets publics IMDb (title.principals).

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports)
- services/ : Couche application (catalogue, chargement des credits)
- adapters/ : Couche infrastructure (CLI, datasets IMDb)
"""
