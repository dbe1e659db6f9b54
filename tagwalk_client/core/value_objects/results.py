"""
Resultats des managers accompagnes de leurs compteurs.

Les compteurs des headers (X-Total-Count, ...) sont retournes avec les
donnees plutot que conserves dans un etat mutable du manager.
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from tagwalk_client.core.entities import Gallery, Media

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """
    Page de resultats d'une liste.

    Attributs :
        items : Entites de la page, dans l'ordre de l'API
        total : Nombre total de resultats (header X-Total-Count)
    """

    items: list[T] = field(default_factory=list)
    total: int = 0

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


@dataclass(frozen=True)
class GalleryPage:
    """Galerie et nombre total d'elements pour la pagination demandee."""

    gallery: Gallery
    total: int = 0


@dataclass(frozen=True)
class ModelMediaPage:
    """
    Medias d'un mannequin avec les compteurs par categorie.

    Attributs :
        medias : Looks du mannequin
        total : Nombre total de medias (X-Total-Count)
        streetstyles_count : Nombre de streetstyles (X-Streetstyles-Count)
        news_count : Nombre d'actualites (X-News-Count)
        talks_count : Nombre d'interviews (X-Talks-Count)
    """

    medias: list[Media] = field(default_factory=list)
    total: int = 0
    streetstyles_count: int = 0
    news_count: int = 0
    talks_count: int = 0
