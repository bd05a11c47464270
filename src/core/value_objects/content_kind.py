"""
Objets valeur pour la classification des titres OMDb.

Types enumeres partages entre le client API et les services:
le type de contenu d'un titre et la nature d'un echec de recherche.
"""

from enum import Enum
from typing import Optional

# Valeur sentinelle renvoyee par OMDb pour un champ non renseigne
NOT_AVAILABLE = "N/A"


class ContentKind(Enum):
    """Type de contenu d'un titre OMDb.

    Valeurs:
        MOVIE: Film
        SERIES: Serie TV
        EPISODE: Episode d'une serie
    """

    MOVIE = "movie"
    SERIES = "series"
    EPISODE = "episode"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["ContentKind"]:
        """Convertit la valeur brute de l'API (insensible a la casse), None si inconnue."""
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class FailureKind(Enum):
    """Nature d'un echec de recherche.

    Valeurs:
        SEMANTIC: L'API a repondu mais n'a rien trouve (pas de retry)
        TRANSPORT: Echec HTTP, timeout ou reseau apres epuisement des tentatives
    """

    SEMANTIC = "semantic"
    TRANSPORT = "transport"
