"""
Objets du domaine pre-construits pour les tests.

- FakeClock : horloge manuelle injectable dans DetailCache
- make_detail / make_item : fiches et resultats de recherche minimaux
"""

from typing import Optional

from src.core.ports.api_clients import DetailRecord, SearchResultItem
from src.core.value_objects import ContentKind


class FakeClock:
    """Horloge manuelle pour simuler l'ecoulement du temps."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_detail(
    imdb_id: str,
    genre: str = "Drama",
    title: str = "Some Title",
    kind: ContentKind = ContentKind.MOVIE,
    total_seasons: Optional[str] = None,
) -> DetailRecord:
    """Fiche detaillee minimale pour les tests."""
    return DetailRecord(
        imdb_id=imdb_id,
        title=title,
        year="2010",
        kind=kind,
        genre=genre,
        total_seasons=total_seasons,
    )


def make_item(imdb_id: str, title: str = "Some Title") -> SearchResultItem:
    """Resultat de recherche minimal pour les tests."""
    return SearchResultItem(imdb_id=imdb_id, title=title, year="2010", kind=ContentKind.MOVIE)
