"""
Managers de ressources (couche application).

Chaque manager compose le transport, le normaliseur et, pour les villes,
le cache, en operations propres a sa famille de ressources:
- CityManager : listes de villes (avec cache)
- GalleryManager : galeries par slug
- MediaManager : medias par slug, chemin, filtres ou mannequin
"""

from tagwalk_client.managers.city_manager import CityManager
from tagwalk_client.managers.gallery_manager import GalleryManager
from tagwalk_client.managers.media_manager import MediaManager

__all__ = [
    "CityManager",
    "GalleryManager",
    "MediaManager",
]
