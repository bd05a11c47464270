"""
Service de recherche paginee pour la couche de presentation.

Compose une page de resultats a partir des parametres de recherche:
requete par defaut, appel au client, filtre de genre optionnel, totaux
et pagination. Tout echec devient une page vide portant un message,
jamais une exception.
"""

import math
from dataclasses import dataclass, field
from typing import Optional

from loguru import logger

from src.core.ports.api_clients import (
    DetailRecord,
    IMovieDataClient,
    SearchResultItem,
)
from src.core.value_objects import ContentKind
from src.services.genre_filter import GenreFilterService

# Requete utilisee quand l'utilisateur n'a rien saisi
DEFAULT_QUERY = "movie"

# Nombre de resultats par page renvoyes par OMDb
RESULTS_PER_PAGE = 10

NO_RESULTS_MESSAGE = "No results found"
SEARCH_ERROR_MESSAGE = "Failed to search movies. Please try again."


@dataclass(frozen=True)
class SearchQuery:
    """
    Parametres d'une recherche saisis par l'utilisateur.

    Attributs:
        query: Texte recherche (DEFAULT_QUERY si vide)
        page: Numero de page, a partir de 1
        content_type: Filtre par type de contenu
        year: Filtre par annee
        genre: Filtre par genre (applique cote client)
    """

    query: Optional[str] = None
    page: int = 1
    content_type: Optional[ContentKind] = None
    year: Optional[str] = None
    genre: Optional[str] = None

    @property
    def effective_query(self) -> str:
        if self.query and self.query.strip():
            return self.query.strip()
        return DEFAULT_QUERY


@dataclass
class SearchPage:
    """
    Page de resultats prete a afficher.

    Attributs:
        items: Titres a afficher
        details: Fiches detaillees deja recuperees (filtre de genre), par identifiant
        total_results: Nombre total de resultats cote API
        current_page: Page courante
        query: Parametres de la recherche
        error: Message a afficher a la place des resultats
    """

    items: list[SearchResultItem] = field(default_factory=list)
    details: dict[str, DetailRecord] = field(default_factory=dict)
    total_results: int = 0
    current_page: int = 1
    query: SearchQuery = field(default_factory=SearchQuery)
    error: Optional[str] = None

    @property
    def total_pages(self) -> int:
        """Nombre de pages (10 resultats par page)."""
        return math.ceil(self.total_results / RESULTS_PER_PAGE)

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1


class SearchService:
    """
    Service de composition des pages de recherche.

    Combine le client API et le filtre de genre.
    """

    def __init__(
        self,
        client: IMovieDataClient,
        genre_filter: GenreFilterService,
    ) -> None:
        """
        Initialise le service.

        Args:
            client: Client API de la base de films
            genre_filter: Service de filtrage par genre
        """
        self._client = client
        self._genre_filter = genre_filter

    async def search_page(self, query: SearchQuery) -> SearchPage:
        """
        Construit la page de resultats d'une recherche.

        Args:
            query: Parametres de la recherche

        Returns:
            SearchPage, vide avec un message d'erreur en cas d'echec
        """
        page_number = max(query.page, 1)

        try:
            response = await self._client.search(
                query.effective_query,
                page=page_number,
                content_type=query.content_type,
                year=query.year,
            )

            if not response.success:
                return SearchPage(
                    current_page=page_number,
                    query=query,
                    error=response.error or NO_RESULTS_MESSAGE,
                )

            items = list(response.items)
            details: dict[str, DetailRecord] = {}

            if query.genre and items:
                matches = await self._genre_filter.filter_by_genre(items, query.genre)
                items = [match.detail.to_search_item() for match in matches]
                details = {match.imdb_id: match.detail for match in matches}

            return SearchPage(
                items=items,
                details=details,
                total_results=response.total_results,
                current_page=page_number,
                query=query,
            )
        except Exception as e:
            logger.error(f"Erreur de recherche pour {query!r}: {e!r}")
            return SearchPage(query=query, error=SEARCH_ERROR_MESSAGE)
