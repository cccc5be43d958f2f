"""
Couche domaine (core).

Contient les entites metier et les ports (interfaces abstraites).
Cette couche n'a AUCUNE dependance vers l'infrastructure (adapters, frameworks).

Sous-packages :
- entities/ : Entites metier (Movie, Actor)
- ports/ : Interfaces abstraites definissant les contrats (ICatalog)
"""
