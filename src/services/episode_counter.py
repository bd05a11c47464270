"""
Service de comptage du nombre total d'episodes d'une serie.

Additionne le nombre d'episodes de chaque saison. Le nombre de saisons est
fourni par l'appelant ou lu dans la fiche detaillee de la serie.

L'agregation est tout-ou-rien: si une seule saison echoue apres retry,
le total est None. Une somme partielle serait fausse sans pouvoir etre
distinguee d'un total complet.
"""

from typing import Optional, Union

from loguru import logger

from src.core.ports.api_clients import IMovieDataClient, parse_positive_int


class EpisodeCounterService:
    """
    Service de calcul du nombre total d'episodes d'une serie.

    Le total n'est pas mis en cache: il est recalcule a chaque appel.
    Seule la fiche de la serie (nombre de saisons) profite du cache du client.
    """

    def __init__(self, client: IMovieDataClient) -> None:
        """
        Initialise le service.

        Args:
            client: Client API de la base de films
        """
        self._client = client

    async def get_total_episodes(
        self,
        imdb_id: str,
        known_season_count: Union[int, str, None] = None,
    ) -> Optional[int]:
        """
        Calcule le nombre total d'episodes d'une serie.

        Args:
            imdb_id: Identifiant IMDb de la serie
            known_season_count: Nombre de saisons deja connu (ex: "5"),
                ignore s'il n'est pas un entier positif

        Returns:
            Total des episodes de toutes les saisons, ou None en cas d'echec
        """
        season_count = parse_positive_int(known_season_count)
        if season_count is None:
            season_count = await self._fetch_season_count(imdb_id)
            if season_count is None:
                return None

        total = 0
        for season in range(1, season_count + 1):
            try:
                episodes = await self._client.get_season(imdb_id, season)
            except Exception as e:
                logger.error(
                    f"Echec du comptage des episodes de {imdb_id} "
                    f"(saison {season}/{season_count}): {e!r}"
                )
                return None
            total += len(episodes)

        return total

    async def _fetch_season_count(self, imdb_id: str) -> Optional[int]:
        """Lit le nombre de saisons dans la fiche de la serie."""
        detail = await self._client.get_details(imdb_id)
        if detail is None:
            logger.warning(f"Fiche de la serie {imdb_id} indisponible")
            return None

        season_count = detail.season_count
        if season_count is None:
            logger.warning(
                f"Nombre de saisons inconnu pour {imdb_id}: {detail.total_seasons!r}"
            )
        return season_count
