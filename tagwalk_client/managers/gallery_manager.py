"""Manager des galeries editoriales."""

from typing import Any, Optional

from tagwalk_client.core.entities import Gallery
from tagwalk_client.core.value_objects import GalleryPage
from tagwalk_client.managers.base import BaseManager
from tagwalk_client.utils.constants import HEADER_TOTAL_COUNT


class GalleryManager(BaseManager):
    """Acces aux galeries par slug."""

    async def get(self, slug: str, query: Optional[dict[str, Any]] = None) -> Optional[GalleryPage]:
        """
        Recupere une galerie.

        Args:
            slug: Slug de la galerie
            query: Parametres transmis tels quels (pagination des elements)

        Returns:
            GalleryPage avec le total d'elements, ou None si absente
            ou en cas d'erreur
        """
        response = await self._get(f"/api/galleries/{slug}", query or {})
        data = self._interpret(response, "get")
        if not data:
            return None

        return GalleryPage(
            gallery=self._normalizer.denormalize(data, Gallery),
            total=response.int_header(HEADER_TOTAL_COUNT),
        )
