"""
Couche application (cas d'utilisation).

Services :
- Catalog : Catalogue bidirectionnel films/acteurs en memoire
- CreditsLoaderService : Chargement des credits IMDb dans un catalogue

Les services dependent des ports (interfaces) de core/, jamais des
implementations concretes des adapters/ (hors parser TSV).
"""
