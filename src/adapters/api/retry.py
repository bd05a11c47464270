"""
Mecanisme de retry avec backoff exponentiel pour l'API OMDb.

Relance une operation asynchrone quelconque avec un delai croissant
(1s, 2s, 4s... pour un delai de base d'une seconde). Aucun delai
n'est observe apres la derniere tentative; la derniere erreur est
relancee telle quelle.

Usage:
    # Avec une operation quelconque
    result = await execute_with_retry(fetch, max_attempts=3, base_delay=1.0)

    # Avec la fonction helper HTTP
    payload = await request_with_retry(client, "GET", "/", params={"i": "tt0111161"})
"""

import asyncio
from typing import Any, Awaitable, Callable, Optional, TypeVar

import httpx
from loguru import logger
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

T = TypeVar("T")


class TransientAPIError(Exception):
    """
    Echec de transport eligible au retry (statut HTTP hors 2xx, reponse illisible).

    Attributes:
        status_code: Statut HTTP recu, ou None si l'echec n'est pas lie au statut
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class RateLimitError(TransientAPIError):
    """
    Exception levee quand l'API retourne 429 Too Many Requests.

    Attributes:
        retry_after: Nombre de secondes a attendre (depuis le header Retry-After),
                     ou None si non specifie.
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s", status_code=429)


# Erreurs relancees par request_with_retry (httpx.TransportError inclut les timeouts)
RETRYABLE_ERRORS: tuple[type[BaseException], ...] = (TransientAPIError, httpx.TransportError)


def _log_retry(retry_state: RetryCallState) -> None:
    """Trace chaque nouvelle tentative planifiee."""
    exception = retry_state.outcome.exception() if retry_state.outcome else None
    delay = retry_state.next_action.sleep if retry_state.next_action else 0
    logger.warning(
        f"Tentative {retry_state.attempt_number} echouee ({exception!r}), "
        f"nouvel essai dans {delay:.1f}s"
    )


async def execute_with_retry(
    operation: Callable[[], Awaitable[T]],
    max_attempts: int = 3,
    base_delay: float = 1.0,
    retry_on: tuple[type[BaseException], ...] = (Exception,),
    sleep: Optional[Callable[[float], Awaitable[Any]]] = None,
) -> T:
    """
    Execute une operation asynchrone avec retry et backoff exponentiel.

    Le delai avant la tentative n+1 vaut base_delay * 2**(n-1). Le premier
    succes est retourne immediatement. Les exceptions hors retry_on sont
    propagees sans nouvelle tentative.

    Args:
        operation: Fabrique de coroutine, rappelee a chaque tentative
        max_attempts: Nombre maximum de tentatives (defaut: 3)
        base_delay: Delai de base en secondes (defaut: 1.0)
        retry_on: Types d'exceptions declenchant une nouvelle tentative
        sleep: Fonction d'attente asynchrone (defaut: asyncio.sleep)

    Returns:
        Le resultat de la premiere tentative reussie

    Raises:
        ValueError: Si max_attempts < 1
        Exception: La derniere erreur observee, inchangee, apres epuisement
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts doit etre >= 1 (recu: {max_attempts})")

    retrying = AsyncRetrying(
        retry=retry_if_exception_type(retry_on),
        wait=wait_exponential(multiplier=base_delay),
        stop=stop_after_attempt(max_attempts),
        before_sleep=_log_retry,
        reraise=True,
        sleep=sleep or asyncio.sleep,
    )
    return await retrying(operation)


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 3,
    base_delay: float = 1.0,
    sleep: Optional[Callable[[float], Awaitable[Any]]] = None,
    **kwargs,
) -> Any:
    """
    Execute une requete HTTP avec retry automatique et retourne le JSON decode.

    Les statuts hors 2xx deviennent TransientAPIError (RateLimitError pour 429),
    un corps non JSON devient TransientAPIError. Ces erreurs et les erreurs
    de transport httpx (timeouts, reseau) sont relancees.

    Args:
        client: Client httpx async a utiliser
        method: Methode HTTP (GET, POST, etc.)
        url: URL a appeler (relative a base_url du client)
        max_attempts: Nombre maximum de tentatives (defaut: 3)
        base_delay: Delai de base du backoff en secondes (defaut: 1.0)
        sleep: Fonction d'attente asynchrone (tests)
        **kwargs: Arguments supplementaires passes a client.request()

    Returns:
        Le corps de la reponse decode depuis JSON

    Raises:
        TransientAPIError: Si l'API repond en erreur apres epuisement des tentatives
        httpx.TransportError: Si le reseau ou le timeout echoue a chaque tentative
    """

    async def _do_request() -> Any:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            retry_after_header = response.headers.get("Retry-After", "")
            retry_after = int(retry_after_header) if retry_after_header.isdigit() else None
            raise RateLimitError(retry_after)
        if not response.is_success:
            raise TransientAPIError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as e:
            raise TransientAPIError(f"Reponse JSON invalide: {e}") from e

    return await execute_with_retry(
        _do_request,
        max_attempts=max_attempts,
        base_delay=base_delay,
        retry_on=RETRYABLE_ERRORS,
        sleep=sleep,
    )
