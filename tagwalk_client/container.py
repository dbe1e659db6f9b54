"""
Container d'injection de dependances via dependency-injector.

Assemble le transport, le normaliseur, les caches par namespace et les
managers a partir des Settings.
"""

from dependency_injector import containers, providers

from .adapters.api.api_provider import HttpApiProvider
from .adapters.api.cache import APICache
from .adapters.serializer.normalizer import Normalizer
from .config import Settings
from .managers import CityManager, GalleryManager, MediaManager
from .utils.constants import CITY_CACHE_NAMESPACE


class Container(containers.DeclarativeContainer):
    """Container DI du client.

    Utilisation :
        container = Container()
        cities = await container.city_manager().list()
        await container.api_provider().close()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Transport - Singleton pour partager le token et le pool de connexions
    api_provider = providers.Singleton(
        HttpApiProvider,
        base_url=config.provided.api_base_url,
        client_id=config.provided.client_id,
        client_secret=config.provided.client_secret,
        timeout=config.provided.api_timeout,
        language=config.provided.language,
    )

    normalizer = providers.Singleton(Normalizer)

    # Cache des villes - namespace dedie, TTL depuis la config
    city_cache = providers.Singleton(
        APICache,
        namespace=CITY_CACHE_NAMESPACE,
        default_ttl=config.provided.cache_ttl,
        cache_dir=config.provided.cache_dir,
    )

    # Managers - Singletons sans etat (les compteurs sont retournes)
    city_manager = providers.Singleton(
        CityManager,
        api_provider=api_provider,
        normalizer=normalizer,
        cache=city_cache,
    )
    gallery_manager = providers.Singleton(
        GalleryManager,
        api_provider=api_provider,
        normalizer=normalizer,
    )
    media_manager = providers.Singleton(
        MediaManager,
        api_provider=api_provider,
        normalizer=normalizer,
    )
