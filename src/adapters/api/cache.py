"""
Cache memoire borne pour les fiches detaillees OMDb.

Le cache associe un identifiant IMDb a la derniere fiche recuperee, avec:
- une capacite maximale (500 entrees par defaut), eviction LRU au-dela
- une duree de vie (10 minutes par defaut) depuis le dernier set()

L'expiration est paresseuse: une entree perimee est supprimee a la lecture,
sans balayage en arriere-plan. Un verrou protege la structure interne pour
les acces concurrents (taches asyncio ou threads).
"""

import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Optional

from loguru import logger

from src.core.ports.api_clients import DetailRecord


@dataclass
class CacheStats:
    """Compteurs d'utilisation du cache."""

    hits: int = 0
    misses: int = 0
    expirations: int = 0
    evictions: int = 0


@dataclass
class _CacheEntry:
    """Entree du cache: la fiche et son instant d'insertion."""

    record: DetailRecord
    stored_at: float


class DetailCache:
    """
    Cache LRU avec TTL des fiches detaillees, indexe par identifiant IMDb.

    Invariants:
        - au plus une entree par identifiant
        - jamais plus de max_entries entrees vivantes
        - get() ne retourne jamais une entree plus vieille que ttl_seconds

    Attributes:
        DEFAULT_MAX_ENTRIES: Capacite par defaut (500)
        DEFAULT_TTL_SECONDS: Duree de vie par defaut (10 minutes)

    Example:
        cache = DetailCache()
        cache.set("tt0111161", record)
        record = cache.get("tt0111161")
    """

    DEFAULT_MAX_ENTRIES = 500
    DEFAULT_TTL_SECONDS = 10 * 60  # 10 minutes en secondes (600)

    def __init__(
        self,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialise le cache.

        Args:
            max_entries: Nombre maximum d'entrees conservees
            ttl_seconds: Duree de vie d'une entree en secondes
            timer: Horloge monotone (injectable pour simuler le temps)
        """
        if max_entries < 1:
            raise ValueError(f"max_entries doit etre >= 1 (recu: {max_entries})")
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds doit etre > 0 (recu: {ttl_seconds})")

        self.max_entries = max_entries
        self.ttl_seconds = ttl_seconds
        self._timer = timer
        self._entries: OrderedDict[str, _CacheEntry] = OrderedDict()
        self._lock = threading.RLock()
        self._stats = CacheStats()

    def _is_expired(self, entry: _CacheEntry, now: float) -> bool:
        return now - entry.stored_at >= self.ttl_seconds

    def get(self, imdb_id: str) -> Optional[DetailRecord]:
        """
        Recupere une fiche du cache.

        Args:
            imdb_id: Identifiant IMDb du titre

        Returns:
            La fiche stockee, ou None si absente, evincee ou expiree
        """
        with self._lock:
            entry = self._entries.get(imdb_id)
            if entry is None:
                self._stats.misses += 1
                return None

            if self._is_expired(entry, self._timer()):
                del self._entries[imdb_id]
                self._stats.expirations += 1
                self._stats.misses += 1
                return None

            # Entree la plus recemment utilisee en fin de dictionnaire
            self._entries.move_to_end(imdb_id)
            self._stats.hits += 1
            return entry.record

    def set(self, imdb_id: str, record: DetailRecord) -> None:
        """
        Stocke ou remplace une fiche; son age repart de zero.

        Evince l'entree la moins recemment utilisee si la capacite est depassee.

        Args:
            imdb_id: Identifiant IMDb du titre
            record: Fiche a stocker
        """
        with self._lock:
            self._entries[imdb_id] = _CacheEntry(record=record, stored_at=self._timer())
            self._entries.move_to_end(imdb_id)

            while len(self._entries) > self.max_entries:
                evicted_id, _ = self._entries.popitem(last=False)
                self._stats.evictions += 1
                logger.debug(f"Cache plein, eviction de {evicted_id}")

    def __contains__(self, imdb_id: str) -> bool:
        """Presence d'une entree non expiree (sans modifier l'ordre LRU)."""
        with self._lock:
            entry = self._entries.get(imdb_id)
            return entry is not None and not self._is_expired(entry, self._timer())

    def __len__(self) -> int:
        """Nombre d'entrees stockees (les entrees expirees non lues incluses)."""
        with self._lock:
            return len(self._entries)

    @property
    def stats(self) -> CacheStats:
        """Copie des compteurs d'utilisation."""
        with self._lock:
            return CacheStats(**vars(self._stats))

    def clear(self) -> None:
        """Supprime toutes les entrees du cache."""
        with self._lock:
            self._entries.clear()
