"""
Acces a l'API Tagwalk.

Ce module fournit l'infrastructure partagee par les managers:
- HttpApiProvider: Transport httpx authentifie (OAuth2 client credentials)
- APICache: Cache persistant diskcache, un namespace par ressource
- cache_key / cached_query: Cle canonique des filtres et pattern cache-through

HttpApiProvider implemente IApiProvider defini dans core/ports/api_provider.py.
"""

from tagwalk_client.adapters.api.api_provider import HttpApiProvider
from tagwalk_client.adapters.api.cache import APICache
from tagwalk_client.adapters.api.query import cache_key, cached_query, elide

__all__ = [
    "APICache",
    "HttpApiProvider",
    "cache_key",
    "cached_query",
    "elide",
]
