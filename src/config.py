"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe CINEQUERY_,
et peut optionnellement être fournie via un fichier .env.

La clé API OMDb est OBLIGATOIRE : son absence fait échouer la construction de Settings
(ValidationError) et donc le démarrage de l'application. La variable OMDB_API_KEY
sans préfixe est également acceptée.
"""

from pathlib import Path

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe CINEQUERY_.
    Exemple : CINEQUERY_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="CINEQUERY_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API OMDb (OBLIGATOIRE)
    omdb_api_key: str = Field(
        min_length=1,
        validation_alias=AliasChoices(
            "omdb_api_key", "CINEQUERY_OMDB_API_KEY", "OMDB_API_KEY"
        ),
    )
    omdb_base_url: str = Field(default="https://www.omdbapi.com/")

    # Requêtes : timeout par tentative, retry avec backoff exponentiel
    request_timeout: float = Field(default=10.0, gt=0)
    retry_max_attempts: int = Field(default=3, ge=1)
    retry_base_delay: float = Field(default=1.0, ge=0)

    # Cache des fiches détaillées (LRU + TTL en mémoire)
    cache_max_entries: int = Field(default=500, ge=1)
    cache_ttl_seconds: int = Field(default=600, ge=1)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/cinequery.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("omdb_api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        """Refuse une clé composée uniquement d'espaces."""
        v = v.strip()
        if not v:
            raise ValueError("OMDB_API_KEY is required")
        return v
