"""
Client OMDb pour la recherche et la recuperation de metadonnees.

Implemente l'interface IMovieDataClient pour OMDb (Open Movie Database).
Chaque appel HTTP a son propre timeout (10s) et passe par le mecanisme
de retry avec backoff exponentiel. Les fiches detaillees sont conservees
dans un DetailCache borne, injecte par l'appelant.

Usage:
    cache = DetailCache()
    client = OMDbClient(api_key="your_key", cache=cache)
    response = await client.search("Inception", content_type=ContentKind.MOVIE)
    detail = await client.get_details("tt1375666")
    await client.close()
"""

import asyncio
from typing import Any, Optional

import httpx
from loguru import logger

from src.adapters.api.cache import DetailCache
from src.adapters.api.retry import request_with_retry
from src.core.ports.api_clients import (
    DetailRecord,
    EpisodeSummary,
    IMovieDataClient,
    SearchResponse,
    SearchResultItem,
    SeasonEpisodeList,
)
from src.core.value_objects import NOT_AVAILABLE, ContentKind, FailureKind

# Message generique expose apres epuisement des tentatives de recherche
SEARCH_FAILED_MESSAGE = "Failed to search movies. Please try again."

# Erreurs levees par les fonctions parse_* sur un payload mal forme
PARSE_ERRORS = (KeyError, TypeError, AttributeError)


class NotFoundError(Exception):
    """
    Echec semantique: l'API a repondu correctement mais ne connait pas la ressource.

    Jamais relance par le mecanisme de retry.
    """


def _text(data: dict[str, Any], key: str) -> str:
    """Valeur texte d'un champ OMDb, "N/A" si absente."""
    value = data.get(key)
    return str(value) if value is not None else NOT_AVAILABLE


def _parse_total_results(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def parse_search_item(item: dict[str, Any]) -> SearchResultItem:
    """Convertit un element de la liste "Search" en SearchResultItem."""
    return SearchResultItem(
        imdb_id=item["imdbID"],
        title=item.get("Title", ""),
        year=item.get("Year", ""),
        kind=ContentKind.parse(item.get("Type")),
        poster=_text(item, "Poster"),
    )


def parse_detail(data: dict[str, Any]) -> DetailRecord:
    """Convertit la reponse d'une recherche par identifiant en DetailRecord."""
    ratings = tuple(
        (rating.get("Source", ""), rating.get("Value", ""))
        for rating in data.get("Ratings") or []
    )
    total_seasons = data.get("totalSeasons")

    return DetailRecord(
        imdb_id=data["imdbID"],
        title=data.get("Title", ""),
        year=data.get("Year", ""),
        kind=ContentKind.parse(data.get("Type")),
        poster=_text(data, "Poster"),
        rated=_text(data, "Rated"),
        released=_text(data, "Released"),
        runtime=_text(data, "Runtime"),
        genre=_text(data, "Genre"),
        director=_text(data, "Director"),
        writer=_text(data, "Writer"),
        actors=_text(data, "Actors"),
        plot=_text(data, "Plot"),
        language=_text(data, "Language"),
        country=_text(data, "Country"),
        awards=_text(data, "Awards"),
        metascore=_text(data, "Metascore"),
        imdb_rating=_text(data, "imdbRating"),
        imdb_votes=_text(data, "imdbVotes"),
        ratings=ratings,
        box_office=_text(data, "BoxOffice"),
        production=_text(data, "Production"),
        website=_text(data, "Website"),
        dvd=_text(data, "DVD"),
        total_seasons=str(total_seasons) if total_seasons is not None else None,
    )


def parse_episode(item: dict[str, Any]) -> EpisodeSummary:
    """Convertit un element de la liste "Episodes" en EpisodeSummary."""
    return EpisodeSummary(
        title=item.get("Title", ""),
        episode=str(item.get("Episode", "")),
        released=_text(item, "Released"),
        imdb_rating=_text(item, "imdbRating"),
        imdb_id=item.get("imdbID", ""),
    )


def _is_success(payload: Any) -> bool:
    """Vrai si la reponse OMDb porte Response == "True"."""
    return isinstance(payload, dict) and str(payload.get("Response", "")).lower() == "true"


class OMDbClient(IMovieDataClient):
    """
    Client API OMDb pour la recherche et les fiches detaillees.

    Implemente IMovieDataClient avec:
    - Recherche paginee avec filtres type et annee
    - Fiche detaillee cache-first (DetailCache, 10 minutes)
    - Liste des episodes d'une saison
    - Retry avec backoff exponentiel sur les echecs de transport
    - Coalescence des appels get_details concurrents pour un meme identifiant

    Attributes:
        OMDB_BASE_URL: URL de base de l'API OMDb
        DEFAULT_TIMEOUT: Timeout par tentative en secondes

    Example:
        client = OMDbClient(api_key="xxx", cache=DetailCache())

        response = await client.search("Matrix", year="1999")
        if response.success:
            detail = await client.get_details(response.items[0].imdb_id)
            print(f"{detail.title} ({detail.year}) - {detail.genre}")

        await client.close()
    """

    OMDB_BASE_URL = "https://www.omdbapi.com/"
    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        api_key: str,
        cache: DetailCache,
        timeout: float = DEFAULT_TIMEOUT,
        max_attempts: int = 3,
        base_delay: float = 1.0,
        base_url: str = OMDB_BASE_URL,
    ) -> None:
        """
        Initialise le client OMDb.

        Args:
            api_key: Cle API OMDb
            cache: Instance DetailCache pour les fiches detaillees
            timeout: Timeout de chaque tentative en secondes
            max_attempts: Nombre maximum de tentatives par appel
            base_delay: Delai de base du backoff en secondes
            base_url: URL de base de l'API
        """
        if not api_key:
            raise ValueError("Une cle API OMDb est requise")

        self._api_key = api_key
        self._cache = cache
        self._timeout = timeout
        self._max_attempts = max_attempts
        self._base_delay = base_delay
        self._base_url = base_url
        self._client: Optional[httpx.AsyncClient] = None
        self._inflight: dict[str, asyncio.Future] = {}

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        La cle API est passee en parametre de requete par defaut.

        Returns:
            httpx.AsyncClient configure pour l'API OMDb
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers={"Accept": "application/json"},
                params={"apikey": self._api_key},
                timeout=self._timeout,
            )
        return self._client

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "omdb"

    @property
    def cache(self) -> DetailCache:
        """Cache des fiches detaillees utilise par ce client."""
        return self._cache

    async def _get(self, params: dict[str, str]) -> Any:
        """GET sur la racine de l'API, avec retry, retourne le JSON decode."""
        return await request_with_retry(
            self._get_client(),
            "GET",
            "/",
            max_attempts=self._max_attempts,
            base_delay=self._base_delay,
            params=params,
        )

    async def search(
        self,
        query: str,
        page: int = 1,
        content_type: Optional[ContentKind] = None,
        year: Optional[str] = None,
    ) -> SearchResponse:
        """
        Recherche des titres par texte libre.

        Les echecs de transport sont relances puis convertis en reponse
        d'echec (failure=TRANSPORT). Une reponse "Response": "False" de l'API
        est un echec semantique renvoye tel quel, sans nouvelle tentative.

        Args:
            query: Texte recherche (l'appelant fournit un defaut si vide)
            page: Numero de page, a partir de 1
            content_type: Filtre optionnel par type de contenu
            year: Filtre optionnel par annee

        Returns:
            SearchResponse (succes ou echec structure)

        Raises:
            ValueError: Si query est vide ou page < 1
        """
        if not query or not query.strip():
            raise ValueError("La requete de recherche ne peut pas etre vide")
        if page < 1:
            raise ValueError(f"Le numero de page commence a 1 (recu: {page})")

        params = {"s": query.strip(), "page": str(page)}
        if content_type is not None:
            params["type"] = content_type.value
        if year:
            params["y"] = str(year)

        try:
            data = await self._get(params)
        except Exception as e:
            logger.error(f"Echec de la recherche '{query}' (page {page}): {e!r}")
            return SearchResponse.failed(SEARCH_FAILED_MESSAGE, FailureKind.TRANSPORT)

        if not _is_success(data):
            error = data.get("Error") if isinstance(data, dict) else None
            logger.debug(f"Aucun resultat pour '{query}': {error}")
            return SearchResponse.failed(error or "No results found", FailureKind.SEMANTIC)

        raw_items = data.get("Search") or []
        if not isinstance(raw_items, list):
            logger.warning(f"Reponse de recherche illisible pour '{query}': {raw_items!r}")
            return SearchResponse.failed(SEARCH_FAILED_MESSAGE, FailureKind.TRANSPORT)

        items: list[SearchResultItem] = []
        for raw_item in raw_items:
            try:
                items.append(parse_search_item(raw_item))
            except PARSE_ERRORS as e:
                logger.warning(f"Resultat illisible ignore pour '{query}': {e!r}")

        return SearchResponse(
            items=tuple(items),
            total_results=_parse_total_results(data.get("totalResults")),
        )

    async def get_details(self, imdb_id: str) -> Optional[DetailRecord]:
        """
        Recupere la fiche detaillee d'un titre.

        Utilise le pattern cache-first: un hit ne declenche aucun appel reseau.
        Les appels concurrents pour un meme identifiant partagent une seule
        requete en vol.

        Args:
            imdb_id: Identifiant IMDb du titre

        Returns:
            DetailRecord, ou None si introuvable ou en cas d'echec
        """
        cached = self._cache.get(imdb_id)
        if cached is not None:
            return cached

        task = self._inflight.get(imdb_id)
        if task is None:
            task = asyncio.ensure_future(self._fetch_detail(imdb_id))
            self._inflight[imdb_id] = task
            task.add_done_callback(lambda done: self._forget_inflight(imdb_id, done))

        # shield: l'annulation d'un appelant n'interrompt pas la requete partagee
        return await asyncio.shield(task)

    def _forget_inflight(self, imdb_id: str, task: "asyncio.Future") -> None:
        if self._inflight.get(imdb_id) is task:
            del self._inflight[imdb_id]

    async def _fetch_detail(self, imdb_id: str) -> Optional[DetailRecord]:
        """Appel reseau d'une fiche detaillee, stockee en cache si trouvee."""
        try:
            data = await self._get({"i": imdb_id, "plot": "short"})
        except Exception as e:
            logger.warning(f"Echec de recuperation de la fiche {imdb_id}: {e!r}")
            return None

        if not _is_success(data):
            error = data.get("Error") if isinstance(data, dict) else None
            logger.debug(f"Fiche {imdb_id} introuvable: {error}")
            return None

        try:
            detail = parse_detail(data)
        except PARSE_ERRORS as e:
            logger.warning(f"Fiche {imdb_id} illisible: {e!r}")
            return None

        self._cache.set(imdb_id, detail)
        return detail

    async def get_season(self, imdb_id: str, season: int) -> SeasonEpisodeList:
        """
        Liste les episodes d'une saison d'une serie.

        Args:
            imdb_id: Identifiant IMDb de la serie
            season: Numero de saison, a partir de 1

        Returns:
            Tuple ordonne des episodes de la saison

        Raises:
            NotFoundError: Si l'API ne connait pas la saison
            TransientAPIError: Si l'API repond en erreur apres epuisement
            httpx.TransportError: Si le reseau echoue a chaque tentative
        """
        data = await self._get({"i": imdb_id, "Season": str(season)})

        if not _is_success(data):
            error = data.get("Error") if isinstance(data, dict) else None
            raise NotFoundError(f"Saison {season} de {imdb_id} introuvable: {error}")

        episodes = data.get("Episodes")
        if not isinstance(episodes, list):
            raise NotFoundError(f"Saison {season} de {imdb_id} sans liste d'episodes")

        return tuple(parse_episode(item) for item in episodes)

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "OMDbClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
