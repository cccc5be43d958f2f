"""
Couche adaptateurs (infrastructure).

Les adaptateurs fournissent les implementations concretes pour les systemes
externes et les points d'entree de l'application.

Sous-packages :
- cli/ : Interface ligne de commande (Typer + Rich)
- imdb/ : Lecture et telechargement des datasets IMDb

Chaque adaptateur depend de core/ mais core/ ne depend jamais des adaptateurs.
"""
