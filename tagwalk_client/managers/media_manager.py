"""
Manager des medias (looks de defile).

Les listes retournent leurs compteurs avec les resultats (Page,
ModelMediaPage). Une pagination hors limites (416) leve OutOfRangeError.
"""

from __future__ import annotations

from typing import Any, Optional

from tagwalk_client.core.entities import Media
from tagwalk_client.core.value_objects import ModelMediaPage, Page
from tagwalk_client.managers.base import BaseManager
from tagwalk_client.utils.constants import (
    DEFAULT_MEDIA_SIZE,
    DEFAULT_MEDIAS_MODEL_SORT,
    HEADER_NEWS_COUNT,
    HEADER_STREETSTYLES_COUNT,
    HEADER_TALKS_COUNT,
    HEADER_TOTAL_COUNT,
    RELATED_MEDIA_SIZE,
    STATUS_ENABLED,
)


class MediaManager(BaseManager):
    """
    Recherche et listes de medias.

    Attributes:
        DEFAULT_SIZE: Taille de page par defaut
        DEFAULT_MEDIAS_MODEL_SORT: Tri des medias d'un mannequin
    """

    DEFAULT_SIZE = DEFAULT_MEDIA_SIZE
    DEFAULT_MEDIAS_MODEL_SORT = DEFAULT_MEDIAS_MODEL_SORT

    async def get(self, slug: str) -> Optional[Media]:
        """
        Recupere un media par son slug.

        Returns:
            Media, ou None si absent ou en cas d'erreur
        """
        response = await self._get(f"/api/medias/{slug}")
        data = self._interpret(response, "get")
        return self._normalizer.denormalize(data, Media) if data else None

    async def find_by_type_season_designer_look(
        self,
        type: str,
        season: str,
        designer: str,
        look: str,
    ) -> Optional[Media]:
        """
        Recupere un media par son chemin type/saison/createur/look.

        Aucun appel n'est emis si l'un des elements est vide.

        Returns:
            Media, ou None si absent, incomplet ou en cas d'erreur
        """
        if not (type and season and designer and look):
            return None

        response = await self._get(f"/api/medias/{type}/{season}/{designer}/{look}")
        data = self._interpret(response, "find_by_type_season_designer_look")
        return self._normalizer.denormalize(data, Media) if data else None

    async def list_related(
        self,
        type: str,
        season: str,
        designer: str,
        city: Optional[str] = None,
    ) -> list[Media]:
        """
        Liste les medias du meme defile (6 premiers, sans analytics).

        Returns:
            Liste de Media (vide si aucun resultat ou en cas d'erreur)
        """
        query = {
            "analytics": 0,
            "from": 0,
            "size": RELATED_MEDIA_SIZE,
            "type": type,
            "season": season,
            "designer": designer,
        }
        if city:
            query["city"] = city

        response = await self._get("/api/medias", query)
        data = self._interpret(response, "list_related")
        return self._normalizer.denormalize_many(data, Media)

    async def list(
        self,
        query: Optional[dict[str, Any]] = None,
        from_: int = 0,
        size: int = DEFAULT_MEDIA_SIZE,
        status: str = STATUS_ENABLED,
    ) -> Page[Media]:
        """
        Liste les medias correspondant aux filtres.

        Args:
            query: Filtres (type, season, designer, city, tags...)
            from_: Index du premier resultat
            size: Nombre de resultats
            status: Statut des medias

        Returns:
            Page de Media avec le total (vide en cas d'erreur)

        Raises:
            OutOfRangeError: Si from_/size depassent le nombre de resultats
        """
        params = {**(query or {}), "from": from_, "size": size, "status": status}
        response = await self._get("/api/medias", params)
        data = self._interpret(response, "list")
        if data is None:
            return Page()

        return Page(
            items=self._normalizer.denormalize_many(data, Media),
            total=response.int_header(HEADER_TOTAL_COUNT),
        )

    async def list_by_model(
        self,
        slug: str,
        query: Optional[dict[str, Any]] = None,
    ) -> ModelMediaPage:
        """
        Liste les looks d'un mannequin, du plus recent au plus ancien.

        Args:
            slug: Slug du mannequin
            query: Filtres et pagination

        Returns:
            ModelMediaPage avec les compteurs par categorie
            (vide en cas d'erreur)
        """
        params = {**(query or {}), "sort": self.DEFAULT_MEDIAS_MODEL_SORT}
        response = await self._get(f"/api/individuals/{slug}/medias", params)
        data = self._interpret(response, "list_by_model")
        if data is None:
            return ModelMediaPage()

        return ModelMediaPage(
            medias=self._normalizer.denormalize_many(data, Media),
            total=response.int_header(HEADER_TOTAL_COUNT),
            streetstyles_count=response.int_header(HEADER_STREETSTYLES_COUNT),
            news_count=response.int_header(HEADER_NEWS_COUNT),
            talks_count=response.int_header(HEADER_TALKS_COUNT),
        )
