"""
Interface port pour le fournisseur d'acces a l'API.

Le fournisseur emet des requetes authentifiees et retourne le code HTTP,
les headers et le corps brut. Les managers interpretent eux-memes le code.
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class ApiResponse:
    """
    Reponse brute d'un appel a l'API.

    Attributs :
        status_code : Code HTTP de la reponse
        headers : Headers de la reponse (cles en minuscules)
        body : Corps brut de la reponse
    """

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""

    def header(self, name: str, default: str = "") -> str:
        """Retourne un header sans tenir compte de la casse."""
        return self.headers.get(name.lower(), default)

    def int_header(self, name: str) -> int:
        """Retourne un header numerique, 0 si absent ou invalide."""
        try:
            return int(self.header(name, "0"))
        except ValueError:
            return 0

    def json(self) -> Any:
        """Decode le corps JSON."""
        return json.loads(self.body) if self.body else None


class IApiProvider(ABC):
    """
    Interface du transport HTTP authentifie.

    Les implementations gerent l'URL de base, l'authentification
    et les timeouts. Aucune relance n'est effectuee.
    """

    @abstractmethod
    async def request(
        self,
        method: str,
        path: str,
        query: Optional[dict[str, Any]] = None,
        http_errors: bool = True,
    ) -> ApiResponse:
        """
        Emet une requete vers l'API.

        Args :
            method : Methode HTTP (GET, POST, ...)
            path : Chemin de la ressource (ex: "/api/cities")
            query : Parametres de requete optionnels
            http_errors : Si False, les reponses non-2xx sont retournees
                          au lieu de lever une exception

        Retourne :
            La reponse brute de l'API
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Libere les ressources reseau."""
        ...
