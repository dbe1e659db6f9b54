"""
Manager des villes de fashion week.

Toutes les listes passent par le cache (namespace "cities"): la cle est
derivee des filtres non vides, et un resultat vide (y compris apres une
erreur de l'API) est conserve jusqu'a expiration du TTL.
"""

from __future__ import annotations

from typing import Any, Optional

from tagwalk_client.adapters.api.cache import APICache
from tagwalk_client.adapters.api.query import cached_query, elide
from tagwalk_client.adapters.serializer.normalizer import Normalizer
from tagwalk_client.core.entities import City
from tagwalk_client.core.ports.api_provider import IApiProvider
from tagwalk_client.managers.base import BaseManager
from tagwalk_client.utils.constants import (
    DEFAULT_CITY_SIZE,
    DEFAULT_CITY_SORT,
    STATUS_ENABLED,
)


class CityManager(BaseManager):
    """
    Listes de villes, completes ou filtrees par medias/streetstyles.

    Example:
        manager = CityManager(provider, Normalizer(), APICache("cities"))
        cities = await manager.list(language="fr")
    """

    def __init__(
        self,
        api_provider: IApiProvider,
        normalizer: Normalizer,
        cache: APICache,
    ) -> None:
        """
        Initialise le manager.

        Args:
            api_provider: Transport authentifie vers l'API
            normalizer: Convertisseur JSON -> entites
            cache: Cache du namespace "cities" (porte le TTL)
        """
        super().__init__(api_provider, normalizer)
        self._cache = cache

    async def _cached_list(self, path: str, params: dict[str, Any], operation: str) -> list[City]:
        query = elide(params)

        async def fetch() -> list[City]:
            response = await self._get(path, query)
            data = self._interpret(response, operation)
            return self._normalizer.denormalize_many(data, City)

        return await cached_query(self._cache, query, fetch, scope=path)

    async def list(
        self,
        language: Optional[str] = None,
        from_: int = 0,
        size: int = DEFAULT_CITY_SIZE,
        sort: str = DEFAULT_CITY_SORT,
        status: str = STATUS_ENABLED,
    ) -> list[City]:
        """
        Liste les villes.

        Args:
            language: Code langue des libelles
            from_: Index du premier resultat
            size: Nombre de resultats
            sort: Tri ("champ:ordre")
            status: Statut des villes

        Returns:
            Liste de City (vide si aucun resultat ou en cas d'erreur)
        """
        params = {
            "from": from_,
            "size": size,
            "sort": sort,
            "status": status,
            "language": language,
        }
        return await self._cached_list("/api/cities", params, "list")

    async def list_filters(
        self,
        type: Optional[str],
        season: Optional[str],
        designer: Optional[str],
        tags: Optional[str],
        models: Optional[str],
        language: Optional[str] = None,
    ) -> list[City]:
        """
        Liste les villes ayant des medias correspondant aux filtres.

        Returns:
            Liste de City (vide si aucun resultat ou en cas d'erreur)
        """
        params = {
            "type": type,
            "season": season,
            "designer": designer,
            "tags": tags,
            "models": models,
            "language": language,
        }
        return await self._cached_list("/api/cities/filter-media", params, "list_filters")

    async def list_filters_street(
        self,
        season: Optional[str],
        designers: Optional[str],
        tags: Optional[str],
        language: Optional[str] = None,
    ) -> list[City]:
        """Liste les villes ayant des streetstyles correspondant aux filtres."""
        params = {
            "season": season,
            "designers": designers,
            "tags": tags,
            "language": language,
        }
        return await self._cached_list(
            "/api/cities/filter-streetstyle", params, "list_filters_street"
        )
