"""
Serialisation des entites de l'API.

- Normalizer : denormalisation recursive JSON -> entites (et inverse)
- DEFAULT_RULES : table des champs imbriques par type d'entite
"""

from tagwalk_client.adapters.serializer.normalizer import DEFAULT_RULES, Normalizer

__all__ = [
    "DEFAULT_RULES",
    "Normalizer",
]
