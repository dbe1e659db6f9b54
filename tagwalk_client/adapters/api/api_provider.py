"""
Fournisseur HTTP authentifie pour l'API Tagwalk.

Implemente IApiProvider avec httpx. L'authentification OAuth2
(client credentials) est geree automatiquement: le token est obtenu a la
premiere requete et renouvele avant son expiration.

Aucune relance n'est effectuee: chaque appel donne lieu a une seule
requete HTTP. Les erreurs reseau httpx sont propagees telles quelles.

Usage:
    provider = HttpApiProvider(
        base_url="https://api.tag-walk.com",
        client_id="id",
        client_secret="secret",
    )
    response = await provider.request("GET", "/api/cities", http_errors=False)
    await provider.close()
"""

from datetime import datetime, timedelta
from typing import Any, Optional

import httpx
from loguru import logger

from tagwalk_client.core.ports.api_provider import ApiResponse, IApiProvider


class HttpApiProvider(IApiProvider):
    """
    Transport httpx avec authentification OAuth2 client credentials.

    Attributes:
        TOKEN_PATH: Chemin de l'endpoint d'obtention du token
        TOKEN_REFRESH_MARGIN: Marge avant expiration pour renouveler le token

    Example:
        provider = HttpApiProvider(base_url, client_id, client_secret)
        response = await provider.request("GET", "/api/medias/look-1")
        if response.status_code == 200:
            data = response.json()
    """

    TOKEN_PATH = "/oauth/v2/token"
    TOKEN_REFRESH_MARGIN = timedelta(seconds=60)

    def __init__(
        self,
        base_url: str,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        timeout: float = 30.0,
        language: Optional[str] = None,
    ) -> None:
        """
        Initialise le fournisseur.

        Args:
            base_url: URL de base de l'API
            client_id: Identifiant client OAuth2 (requetes anonymes si None)
            client_secret: Secret client OAuth2
            timeout: Timeout des requetes en secondes
            language: Code langue envoye en Accept-Language (optionnel)
        """
        self._base_url = base_url
        self._client_id = client_id
        self._client_secret = client_secret
        self._timeout = timeout
        self._language = language
        self._token: Optional[str] = None
        self._token_expiry: Optional[datetime] = None
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Utilise un client unique pour beneficier du connection pooling.
        """
        if self._client is None or self._client.is_closed:
            headers = {"Accept": "application/json"}
            if self._language:
                headers["Accept-Language"] = self._language
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=headers,
                timeout=httpx.Timeout(self._timeout, connect=10.0),
            )
        return self._client

    async def _ensure_token(self) -> Optional[str]:
        """
        S'assure qu'un token d'acces valide est disponible.

        Obtient un nouveau token si aucun n'existe ou s'il expire
        dans moins de TOKEN_REFRESH_MARGIN.

        Returns:
            Token d'acces, ou None si aucun identifiant n'est configure

        Raises:
            httpx.HTTPStatusError: Si l'API refuse les identifiants
        """
        if not self._client_id:
            return None
        if self._token and self._token_expiry and datetime.now() < self._token_expiry:
            return self._token

        client = self._get_client()
        response = await client.post(
            self.TOKEN_PATH,
            data={
                "grant_type": "client_credentials",
                "client_id": self._client_id,
                "client_secret": self._client_secret or "",
            },
        )
        response.raise_for_status()
        data = response.json()

        self._token = data["access_token"]
        expires_in = int(data.get("expires_in", 3600))
        self._token_expiry = (
            datetime.now() + timedelta(seconds=expires_in) - self.TOKEN_REFRESH_MARGIN
        )
        logger.debug("Token API obtenu", expires_in=expires_in)
        return self._token

    async def request(
        self,
        method: str,
        path: str,
        query: Optional[dict[str, Any]] = None,
        http_errors: bool = True,
    ) -> ApiResponse:
        """
        Emet une requete authentifiee vers l'API.

        Args:
            method: Methode HTTP (GET, POST, ...)
            path: Chemin de la ressource (ex: "/api/cities")
            query: Parametres de requete optionnels
            http_errors: Si True, leve httpx.HTTPStatusError sur un code non-2xx

        Returns:
            ApiResponse avec code, headers (cles en minuscules) et corps brut

        Raises:
            httpx.HTTPStatusError: Code non-2xx avec http_errors=True
            httpx.HTTPError: Erreur reseau ou timeout
        """
        client = self._get_client()
        headers = {}
        token = await self._ensure_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"

        response = await client.request(method, path, params=query, headers=headers)
        logger.debug(
            "Requete API",
            method=method,
            path=path,
            status=response.status_code,
        )
        if http_errors:
            response.raise_for_status()

        return ApiResponse(
            status_code=response.status_code,
            headers={name.lower(): value for name, value in response.headers.items()},
            body=response.text,
        )

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
