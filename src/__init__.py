"""
CineQuery - Couche d'accès aux données d'un moteur de recherche de films.

Ce package interroge la base de films OMDb (recherche, fiches détaillées,
épisodes) avec retry, cache borné et filtrage par genre en parallèle.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (ports, objets valeur)
- services/ : Couche application (comptage d'épisodes, filtre de genre, recherche)
- adapters/ : Couche infrastructure (client API OMDb, cache, CLI)
"""
