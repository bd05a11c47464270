"""
Tests unitaires pour Settings.

Verifie les valeurs par defaut et l'obligation de la cle API OMDb.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from src.config import Settings


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Retire toute cle API presente dans l'environnement."""
    monkeypatch.delenv("OMDB_API_KEY", raising=False)
    monkeypatch.delenv("CINEQUERY_OMDB_API_KEY", raising=False)
    return monkeypatch


class TestSettings:
    """Tests pour la classe Settings."""

    def test_defaults(self, clean_env) -> None:
        settings = Settings(omdb_api_key="abc123", _env_file=None)

        assert settings.omdb_base_url == "https://www.omdbapi.com/"
        assert settings.request_timeout == 10.0
        assert settings.retry_max_attempts == 3
        assert settings.retry_base_delay == 1.0
        assert settings.cache_max_entries == 500
        assert settings.cache_ttl_seconds == 600

    def test_missing_api_key_fails(self, clean_env) -> None:
        """Sans cle API, la construction echoue."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank_api_key_fails(self, clean_env, value) -> None:
        with pytest.raises(ValidationError):
            Settings(omdb_api_key=value, _env_file=None)

    def test_reads_unprefixed_env_variable(self, clean_env) -> None:
        clean_env.setenv("OMDB_API_KEY", "from-env")

        assert Settings(_env_file=None).omdb_api_key == "from-env"

    def test_reads_prefixed_env_variable(self, clean_env) -> None:
        clean_env.setenv("CINEQUERY_OMDB_API_KEY", "prefixed")
        clean_env.setenv("CINEQUERY_CACHE_TTL_SECONDS", "60")

        settings = Settings(_env_file=None)

        assert settings.omdb_api_key == "prefixed"
        assert settings.cache_ttl_seconds == 60

    def test_log_file_expands_home(self, clean_env) -> None:
        settings = Settings(omdb_api_key="abc", log_file="~/cinequery.log", _env_file=None)

        assert settings.log_file == Path.home() / "cinequery.log"

    def test_rejects_zero_attempts(self, clean_env) -> None:
        with pytest.raises(ValidationError):
            Settings(omdb_api_key="abc", retry_max_attempts=0, _env_file=None)
