"""
Cles de cache des requetes de liste.

Seuls les filtres significatifs participent a l'identite d'une requete:
les valeurs vides (None, "", 0, False, collection vide) sont retirees
avant le calcul de la cle. La cle est un hash XXH3-128 de la
serialisation JSON triee, donc independante de l'ordre des parametres.
"""

import json
from typing import Any, Awaitable, Callable, Mapping, TypeVar

import xxhash

from tagwalk_client.adapters.api.cache import APICache

T = TypeVar("T")


def elide(params: Mapping[str, Any]) -> dict[str, Any]:
    """
    Retire les parametres sans valeur significative.

    Args:
        params: Parametres de la requete

    Returns:
        Nouveau dictionnaire ne contenant que les valeurs non vides
    """
    return {name: value for name, value in params.items() if value}


def cache_key(params: Mapping[str, Any], scope: str = "") -> str:
    """
    Calcule la cle de cache d'une requete.

    Deux requetes avec les memes filtres non vides, construites dans
    n'importe quel ordre, ont la meme cle.

    Args:
        params: Parametres de la requete (valeurs vides incluses ou non)
        scope: Prefixe distinguant les endpoints d'un meme namespace

    Returns:
        Hash hexadecimal de 32 caracteres (xxh3_128)
    """
    canonical = json.dumps(
        elide(params), sort_keys=True, separators=(",", ":"), default=str
    )
    return xxhash.xxh3_128_hexdigest(f"{scope}|{canonical}".encode("utf-8"))


async def cached_query(
    cache: APICache,
    params: Mapping[str, Any],
    compute: Callable[[], Awaitable[T]],
    scope: str = "",
) -> T:
    """
    Pattern cache-through sur les filtres d'une requete.

    Retourne le resultat en cache s'il existe et n'est pas expire,
    sinon appelle compute, stocke son resultat avec le TTL du cache
    et le retourne. Un resultat vide est stocke comme les autres.

    Args:
        cache: Cache du namespace de la ressource
        params: Filtres de la requete
        compute: Coroutine effectuant l'appel API sur un miss
        scope: Prefixe de cle (chemin de l'endpoint)

    Returns:
        Le resultat en cache ou calcule
    """
    return await cache.get_or_compute(cache_key(params, scope), cache.default_ttl, compute)
