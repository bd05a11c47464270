"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour l'interface CLI
et pour toute couche de presentation consommant la couche d'acces aux donnees.
"""

from dependency_injector import containers, providers

from .adapters.api.cache import DetailCache
from .adapters.api.omdb_client import OMDbClient
from .config import Settings
from .services.episode_counter import EpisodeCounterService
from .services.genre_filter import GenreFilterService
from .services.search import SearchService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Le cache des fiches est un singleton possede par le cycle de vie du client:
    un container de test dispose de son propre cache, isole des autres.

    Utilisation :
        container = Container()
        search = container.search_service()
        page = await search.search_page(SearchQuery(query="Alien"))
        await container.omdb_client().close()
    """

    # Configuration - singleton charge une seule fois (echoue sans cle API)
    config = providers.Singleton(Settings)

    # Cache borne des fiches detaillees
    detail_cache = providers.Singleton(
        DetailCache,
        max_entries=config.provided.cache_max_entries,
        ttl_seconds=config.provided.cache_ttl_seconds,
    )

    # Client API - singleton pour partager le client HTTP et le cache
    omdb_client = providers.Singleton(
        OMDbClient,
        api_key=config.provided.omdb_api_key,
        cache=detail_cache,
        timeout=config.provided.request_timeout,
        max_attempts=config.provided.retry_max_attempts,
        base_delay=config.provided.retry_base_delay,
        base_url=config.provided.omdb_base_url,
    )

    # Services
    episode_counter = providers.Factory(
        EpisodeCounterService,
        client=omdb_client,
    )

    genre_filter = providers.Factory(
        GenreFilterService,
        client=omdb_client,
    )

    search_service = providers.Factory(
        SearchService,
        client=omdb_client,
        genre_filter=genre_filter,
    )
