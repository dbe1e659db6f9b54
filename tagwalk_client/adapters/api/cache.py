"""
Cache persistant pour les reponses de l'API avec TTL.

Le cache utilise diskcache pour la persistence sur disque, ce qui permet
de conserver les donnees entre les redemarrages de l'application.
Chaque famille de ressources a son propre namespace (sous-repertoire),
par exemple "cities".

TTL par defaut: 1 heure, fixe a la construction du cache.
"""

import asyncio
from functools import partial
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional, TypeVar

from diskcache import Cache

from tagwalk_client.utils.constants import DEFAULT_CACHE_TTL

T = TypeVar("T")

# Distingue une cle absente d'une valeur stockee falsy (liste vide, None)
_MISSING = object()


class APICache:
    """
    Cache asynchrone avec TTL pour les appels API.

    Utilise diskcache pour la persistence et run_in_executor pour
    les operations asynchrones non-bloquantes.

    Pas de deduplication des calculs concurrents: deux appelants qui
    manquent la meme cle calculent chacun la valeur, la derniere
    ecriture l'emporte.

    Example:
        cache = APICache("cities", default_ttl=3600, cache_dir=".cache/tagwalk")
        cities = await cache.get_or_compute(key, 3600, fetch_cities)
    """

    def __init__(
        self,
        namespace: str,
        default_ttl: int = DEFAULT_CACHE_TTL,
        cache_dir: str | Path = ".cache/tagwalk",
    ) -> None:
        """
        Initialise le cache avec un repertoire de stockage.

        Args:
            namespace: Nom de la famille de ressources (sous-repertoire)
            default_ttl: Duree de vie des entrees en secondes
            cache_dir: Repertoire racine du cache (cree si inexistant)
        """
        self.namespace = namespace
        self.default_ttl = default_ttl
        self._cache = Cache(str(Path(cache_dir) / namespace))

    async def get(self, key: str) -> Optional[Any]:
        """
        Recupere une valeur du cache.

        Args:
            key: Cle unique identifiant la donnee

        Returns:
            La valeur stockee ou None si absente ou expiree
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._cache.get, key)

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        """
        Stocke une valeur dans le cache avec un TTL.

        Args:
            key: Cle unique identifiant la donnee
            value: Valeur a stocker (doit etre serializable)
            ttl: Duree de vie en secondes (default_ttl si None)
        """
        expire = self.default_ttl if ttl is None else ttl
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(
            None, partial(self._cache.set, key, value, expire=expire)
        )

    async def get_or_compute(
        self,
        key: str,
        ttl: Optional[int],
        compute: Callable[[], Awaitable[T]],
    ) -> T:
        """
        Retourne la valeur en cache, ou la calcule et la stocke.

        Une valeur stockee vide (liste vide) est un hit. Si compute leve
        une exception, rien n'est stocke et l'exception est propagee.

        Args:
            key: Cle unique identifiant la donnee
            ttl: Duree de vie en secondes (default_ttl si None)
            compute: Coroutine produisant la valeur sur un miss

        Returns:
            La valeur en cache ou nouvellement calculee
        """
        loop = asyncio.get_running_loop()
        cached = await loop.run_in_executor(
            None, partial(self._cache.get, key, default=_MISSING)
        )
        if cached is not _MISSING:
            return cached

        value = await compute()
        await self.set(key, value, ttl)
        return value

    async def clear(self) -> None:
        """Supprime toutes les entrees du cache."""
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._cache.clear)

    def close(self) -> None:
        """Ferme la connexion au cache (a appeler a la fin)."""
        self._cache.close()
