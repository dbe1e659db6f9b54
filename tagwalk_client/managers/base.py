"""
Base commune des managers de ressources.

Centralise l'interpretation des codes HTTP:
- 200: succes, le corps JSON est decode
- 404: absent, resultat vide sans erreur journalisee
- 416: pagination hors limites, OutOfRangeError levee
- autre: erreur journalisee (code et corps), resultat vide

Aucune relance n'est tentee.
"""

from http import HTTPStatus
from typing import Any, Optional

from loguru import logger

from tagwalk_client.adapters.serializer.normalizer import Normalizer
from tagwalk_client.core.exceptions import OutOfRangeError
from tagwalk_client.core.ports.api_provider import ApiResponse, IApiProvider


class BaseManager:
    """
    Facade de base sur le transport et le normaliseur.

    Les sous-classes composent les requetes propres a leur ressource
    et s'appuient sur _interpret pour traduire la reponse.
    """

    def __init__(self, api_provider: IApiProvider, normalizer: Normalizer) -> None:
        """
        Initialise le manager.

        Args:
            api_provider: Transport authentifie vers l'API
            normalizer: Convertisseur JSON -> entites
        """
        self._api_provider = api_provider
        self._normalizer = normalizer
        self._logger = logger.bind(manager=type(self).__name__)

    async def _get(self, path: str, query: Optional[dict[str, Any]] = None) -> ApiResponse:
        """GET sans levee d'exception sur les codes d'erreur HTTP."""
        return await self._api_provider.request("GET", path, query=query, http_errors=False)

    def _interpret(self, response: ApiResponse, operation: str) -> Any:
        """
        Traduit une reponse en donnees decodees.

        Args:
            response: Reponse brute de l'API
            operation: Nom de l'operation (pour le message d'erreur)

        Returns:
            Le corps JSON decode sur 200, None sinon (y compris sur un
            corps 200 qui n'est pas du JSON, journalise)

        Raises:
            OutOfRangeError: Sur une reponse 416
        """
        status = response.status_code
        if status == HTTPStatus.OK:
            try:
                return response.json()
            except ValueError:
                self._logger.error(
                    f"{type(self).__name__}.{operation} invalid JSON body",
                    code=status,
                    message=response.body,
                )
                return None
        if status == HTTPStatus.NOT_FOUND:
            return None
        if status == HTTPStatus.REQUESTED_RANGE_NOT_SATISFIABLE:
            raise OutOfRangeError()

        self._logger.error(
            f"{type(self).__name__}.{operation} unexpected status code",
            code=status,
            message=response.body,
        )
        return None
