"""
Interfaces ports pour le client API de metadonnees.

Interfaces abstraites (ports) définissant le contrat du client de la base
de films distante, et les objets retournés à la couche de présentation.
L'implémentation concrète (adaptateur OMDb) se trouve dans adapters/api/.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from src.core.value_objects import NOT_AVAILABLE, ContentKind, FailureKind


@dataclass(frozen=True)
class SearchResultItem:
    """
    Résultat unique d'une requête de recherche.

    Attributs :
        imdb_id : Identifiant externe (ttXXXXXXX), unique par titre
        title : Titre
        year : Année ou plage d'années (ex: "2008–2013" pour une série)
        kind : Type de contenu (film, série, épisode)
        poster : URL du poster, ou "N/A"
    """

    imdb_id: str
    title: str
    year: str = ""
    kind: Optional[ContentKind] = None
    poster: str = NOT_AVAILABLE

    @property
    def has_poster(self) -> bool:
        return bool(self.poster) and self.poster != NOT_AVAILABLE


@dataclass(frozen=True)
class SearchResponse:
    """
    Réponse d'une recherche paginée.

    Un échec sémantique (aucun résultat) et un échec de transport
    (HTTP, timeout, réseau) ont tous deux success=False, mais se
    distinguent par failure.

    Attributs :
        items : Résultats de la page demandée
        total_results : Nombre total de résultats côté API (toutes pages)
        success : True si l'API a renvoyé des résultats
        error : Message d'erreur (fourni par l'API pour un échec sémantique)
        failure : Nature de l'échec, None en cas de succès
    """

    items: tuple[SearchResultItem, ...] = ()
    total_results: int = 0
    success: bool = True
    error: Optional[str] = None
    failure: Optional[FailureKind] = None

    @classmethod
    def failed(cls, error: str, failure: FailureKind) -> "SearchResponse":
        """Construit une réponse d'échec sans résultats."""
        return cls(success=False, error=error, failure=failure)


@dataclass(frozen=True)
class DetailRecord:
    """
    Fiche détaillée d'un titre, retournée par une recherche par identifiant.

    Sur-ensemble de SearchResultItem. Les champs texte conservent la forme
    brute de l'API, y compris la sentinelle "N/A".

    Attributs :
        genre : Genres joints par des virgules (ex: "Action, Sci-Fi")
        ratings : Paires (source, valeur) des notes agrégées
        total_seasons : Nombre de saisons (séries uniquement)
    """

    imdb_id: str
    title: str
    year: str = ""
    kind: Optional[ContentKind] = None
    poster: str = NOT_AVAILABLE
    rated: str = NOT_AVAILABLE
    released: str = NOT_AVAILABLE
    runtime: str = NOT_AVAILABLE
    genre: str = NOT_AVAILABLE
    director: str = NOT_AVAILABLE
    writer: str = NOT_AVAILABLE
    actors: str = NOT_AVAILABLE
    plot: str = NOT_AVAILABLE
    language: str = NOT_AVAILABLE
    country: str = NOT_AVAILABLE
    awards: str = NOT_AVAILABLE
    metascore: str = NOT_AVAILABLE
    imdb_rating: str = NOT_AVAILABLE
    imdb_votes: str = NOT_AVAILABLE
    ratings: tuple[tuple[str, str], ...] = ()
    box_office: str = NOT_AVAILABLE
    production: str = NOT_AVAILABLE
    website: str = NOT_AVAILABLE
    dvd: str = NOT_AVAILABLE
    total_seasons: Optional[str] = None

    @property
    def genres(self) -> tuple[str, ...]:
        """Genres sous forme de tuple (vide si "N/A")."""
        if not self.genre or self.genre == NOT_AVAILABLE:
            return ()
        return tuple(g.strip() for g in self.genre.split(",") if g.strip())

    @property
    def season_count(self) -> Optional[int]:
        """Nombre de saisons en entier positif, ou None si inconnu."""
        return parse_positive_int(self.total_seasons)

    def matches_genre(self, target_genre: str) -> bool:
        """Vrai si le champ genre contient target_genre (insensible à la casse)."""
        return target_genre.lower() in (self.genre or "").lower()

    def to_search_item(self) -> SearchResultItem:
        """Projection vers la forme courte d'un résultat de recherche."""
        return SearchResultItem(
            imdb_id=self.imdb_id,
            title=self.title,
            year=self.year,
            kind=self.kind,
            poster=self.poster,
        )


@dataclass(frozen=True)
class EpisodeSummary:
    """Episode d'une saison, tel que listé par l'API."""

    title: str
    episode: str = ""
    released: str = NOT_AVAILABLE
    imdb_rating: str = NOT_AVAILABLE
    imdb_id: str = ""


# Liste ordonnée des épisodes d'une saison, utilisée uniquement pour un comptage
SeasonEpisodeList = tuple[EpisodeSummary, ...]


@dataclass(frozen=True)
class GenreMatch:
    """Titre retenu par le filtre de genre, avec sa fiche détaillée."""

    imdb_id: str
    detail: DetailRecord


def parse_positive_int(value: object) -> Optional[int]:
    """
    Convertit une valeur brute en entier strictement positif.

    Accepte un int ou une chaîne numérique. Retourne None pour None, "N/A",
    une chaîne non numérique, zéro ou un nombre négatif.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    else:
        text = str(value).strip()
        if not text or text == NOT_AVAILABLE:
            return None
        try:
            number = int(text)
        except ValueError:
            return None
    return number if number > 0 else None


class IMovieDataClient(ABC):
    """
    Interface du client de la base de films distante.

    Les échecs attendus (timeout, titre introuvable) ne sont jamais levés
    par search et get_details : ils sont convertis en SearchResponse d'échec
    ou en None. get_season lève une exception, la politique de repli
    appartenant à l'appelant (agrégation tout-ou-rien).
    """

    @abstractmethod
    async def search(
        self,
        query: str,
        page: int = 1,
        content_type: Optional[ContentKind] = None,
        year: Optional[str] = None,
    ) -> SearchResponse:
        """
        Recherche des titres par texte libre.

        Args :
            query : Texte recherché (non vide)
            page : Numéro de page, à partir de 1
            content_type : Filtre optionnel par type de contenu
            year : Filtre optionnel par année

        Retourne :
            SearchResponse (succès ou échec structuré)
        """
        ...

    @abstractmethod
    async def get_details(self, imdb_id: str) -> Optional[DetailRecord]:
        """
        Récupère la fiche détaillée d'un titre.

        Args :
            imdb_id : Identifiant externe du titre

        Retourne :
            DetailRecord, ou None si indisponible
        """
        ...

    @abstractmethod
    async def get_season(self, imdb_id: str, season: int) -> SeasonEpisodeList:
        """
        Liste les épisodes d'une saison.

        Lève une exception si la saison est introuvable ou si le transport
        échoue après épuisement des tentatives.
        """
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API (ex: 'omdb')."""
        ...

    async def close(self) -> None:
        """Libère les ressources réseau (aucune par défaut)."""
