"""
Service de filtrage par genre des resultats de recherche.

La recherche OMDb ne filtre pas par genre: la fiche detaillee de chaque
resultat est recuperee en parallele, puis seuls les titres dont le genre
contient le genre cible sont conserves.

Contrairement au comptage d'episodes, le filtrage se degrade sans echouer:
une fiche indisponible retire seulement le titre concerne.
"""

import asyncio
from typing import Iterable

from loguru import logger

from src.core.ports.api_clients import (
    DetailRecord,
    GenreMatch,
    IMovieDataClient,
    SearchResultItem,
)


class GenreFilterService:
    """Filtre une liste de resultats de recherche par genre."""

    def __init__(self, client: IMovieDataClient) -> None:
        """
        Initialise le service.

        Args:
            client: Client API de la base de films (son cache evite les doublons)
        """
        self._client = client

    async def filter_by_genre(
        self,
        items: Iterable[SearchResultItem],
        target_genre: str,
    ) -> list[GenreMatch]:
        """
        Conserve les titres dont le genre contient target_genre.

        Toutes les fiches sont demandees simultanement. La comparaison est une
        recherche de sous-chaine insensible a la casse ("sci-fi" correspond a
        "Action, Sci-Fi, Adventure").

        Args:
            items: Resultats de recherche a filtrer
            target_genre: Genre recherche

        Returns:
            Les titres correspondants avec leur fiche detaillee
        """
        items = list(items)
        if not items:
            return []

        results = await asyncio.gather(
            *(self._client.get_details(item.imdb_id) for item in items),
            return_exceptions=True,
        )

        matches: list[GenreMatch] = []
        for item, result in zip(items, results):
            if isinstance(result, BaseException):
                logger.warning(f"Fiche de {item.imdb_id} ignoree: {result!r}")
                continue
            if not isinstance(result, DetailRecord):
                continue
            if result.matches_genre(target_genre):
                matches.append(GenreMatch(imdb_id=item.imdb_id, detail=result))

        logger.debug(
            f"Filtre genre '{target_genre}': {len(matches)}/{len(items)} titre(s) retenu(s)"
        )
        return matches
