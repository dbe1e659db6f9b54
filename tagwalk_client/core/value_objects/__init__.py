"""
Objets valeur immutables retournes par les managers.

Exports :
- Page : Liste d'entites avec le nombre total de resultats
- GalleryPage : Galerie avec le nombre total d'elements
- ModelMediaPage : Medias d'un mannequin avec compteurs par categorie
"""

from tagwalk_client.core.value_objects.results import GalleryPage, ModelMediaPage, Page

__all__ = [
    "GalleryPage",
    "ModelMediaPage",
    "Page",
]
