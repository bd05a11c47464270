"""
Client API externe pour la base de films OMDb.

Ce module fournit l'adaptateur pour communiquer avec l'API OMDb:
- OMDbClient: recherche, fiches detaillees, episodes d'une saison

Infrastructure partagee:
- DetailCache: Cache memoire borne (500 entrees, LRU) avec TTL de 10 minutes
- TransientAPIError / RateLimitError: Echecs de transport eligibles au retry
- execute_with_retry / request_with_retry: Backoff exponentiel (1s, 2s, 4s...)

Le client implemente IMovieDataClient defini dans core/ports/api_clients.py.
"""

from src.adapters.api.cache import CacheStats, DetailCache
from src.adapters.api.omdb_client import NotFoundError, OMDbClient
from src.adapters.api.retry import (
    RateLimitError,
    TransientAPIError,
    execute_with_retry,
    request_with_retry,
)

__all__ = [
    "CacheStats",
    "DetailCache",
    "NotFoundError",
    "OMDbClient",
    "RateLimitError",
    "TransientAPIError",
    "execute_with_retry",
    "request_with_retry",
]
