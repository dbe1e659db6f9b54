"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports transport :
- IApiProvider : Requêtes authentifiées vers l'API Tagwalk
- ApiResponse : Code HTTP, headers et corps brut d'une réponse
"""

from tagwalk_client.core.ports.api_provider import ApiResponse, IApiProvider

__all__ = [
    "ApiResponse",
    "IApiProvider",
]
