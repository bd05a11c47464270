"""
Fixtures pytest partagees pour les tests CineQuery.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec chemins temporaires
- Horloge simulee pour le cache
- Fiches detaillees types (film, serie)
"""

from pathlib import Path

import pytest

from src.config import Settings
from src.core.ports.api_clients import DetailRecord
from src.core.value_objects import ContentKind
from tests.fixtures.records import FakeClock, make_detail


@pytest.fixture
def fake_clock() -> FakeClock:
    """Horloge simulee injectable dans DetailCache."""
    return FakeClock()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Retry sans delai pour que les tests restent rapides.
    """
    return Settings(
        omdb_api_key="test_api_key",
        retry_base_delay=0,
        log_file=tmp_path / "test.log",
        _env_file=None,
    )


@pytest.fixture
def shawshank() -> DetailRecord:
    """Fiche detaillee d'un film type."""
    return make_detail("tt0111161", genre="Drama", title="The Shawshank Redemption")


@pytest.fixture
def breaking_bad() -> DetailRecord:
    """Fiche detaillee d'une serie type (5 saisons)."""
    return make_detail(
        "tt0903747",
        genre="Crime, Drama, Thriller",
        title="Breaking Bad",
        kind=ContentKind.SERIES,
        total_seasons="5",
    )
