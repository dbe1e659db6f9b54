"""
Tagwalk Client - SDK Python pour l'API de contenus mode Tagwalk.

Ce package fournit des managers types pour interroger les villes, galeries,
medias et streetstyles exposes par l'API, avec cache persistant et
normalisation des reponses JSON en entites.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur)
- managers/ : Couche application (une facade par famille de ressources)
- adapters/ : Couche infrastructure (client HTTP, cache, normaliseur)

Le logging loguru est desactive par defaut pour ce package (comportement
de bibliotheque) ; configure_logging() le reactive.
"""

from tagwalk_client.logging_config import disable_library_logging

disable_library_logging()

__version__ = "0.1.0"
