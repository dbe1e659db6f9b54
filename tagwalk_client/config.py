"""
Configuration du client via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe TAGWALK_,
et peut optionnellement être fournie via un fichier .env.

Les identifiants OAuth2 sont optionnels - les requêtes partent sans token si non fournis.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tagwalk_client.utils.constants import DEFAULT_CACHE_TTL

# Trouver le fichier .env à la racine du projet (parent de tagwalk_client/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres du client avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe TAGWALK_.
    Exemple : TAGWALK_CACHE_TTL=600

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="TAGWALK_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # API
    api_base_url: str = Field(default="https://api.tag-walk.com")
    client_id: Optional[str] = Field(default=None)
    client_secret: Optional[str] = Field(default=None)
    api_timeout: float = Field(default=30.0, gt=0)
    language: Optional[str] = Field(default=None)

    # Cache
    cache_dir: Path = Field(default=Path("~/.cache/tagwalk"))
    cache_ttl: int = Field(default=DEFAULT_CACHE_TTL, ge=0)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/tagwalk.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("cache_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def credentials_configured(self) -> bool:
        """Vérifie si les identifiants OAuth2 sont fournis."""
        return bool(self.client_id and self.client_secret)
