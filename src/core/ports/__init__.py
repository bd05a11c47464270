"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports client API : Contrats pour la base de films distante
- IMovieDataClient : Interface du client de métadonnées
- SearchResultItem / SearchResponse : Résultats de recherche paginés
- DetailRecord : Fiche détaillée d'un titre
- EpisodeSummary / SeasonEpisodeList : Épisodes d'une saison
- GenreMatch : Titre retenu par le filtre de genre
"""

from src.core.ports.api_clients import (
    DetailRecord,
    EpisodeSummary,
    GenreMatch,
    IMovieDataClient,
    SearchResponse,
    SearchResultItem,
    SeasonEpisodeList,
    parse_positive_int,
)

__all__ = [
    "DetailRecord",
    "EpisodeSummary",
    "GenreMatch",
    "IMovieDataClient",
    "SearchResponse",
    "SearchResultItem",
    "SeasonEpisodeList",
    "parse_positive_int",
]
