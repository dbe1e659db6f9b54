"""
Fixtures pytest partagees pour les tests Tagwalk Client.

Ce module contient les fixtures communes utilisees dans les tests:
- Mock du port IApiProvider
- Normaliseur et cache sur repertoire temporaire
- Capture des logs loguru du package
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from typing import Iterator
from unittest.mock import AsyncMock

import pytest
from loguru import logger

from tagwalk_client.adapters.api.cache import APICache
from tagwalk_client.adapters.serializer.normalizer import Normalizer
from tagwalk_client.config import Settings
from tagwalk_client.logging_config import LOGGER_NAMESPACE
from tagwalk_client.core.ports.api_provider import IApiProvider


@pytest.fixture
def mock_api_provider() -> AsyncMock:
    """
    Mock de IApiProvider pour les tests.

    Configurer request.return_value (ou side_effect) dans chaque test.
    """
    return AsyncMock(spec=IApiProvider)


@pytest.fixture
def normalizer() -> Normalizer:
    """Normaliseur avec la table par defaut."""
    return Normalizer()


@pytest.fixture
def city_cache(tmp_path: Path) -> Iterator[APICache]:
    """Cache "cities" dans un repertoire temporaire."""
    cache = APICache("cities", default_ttl=3600, cache_dir=tmp_path / "cache")
    yield cache
    cache.close()


@pytest.fixture
def log_records() -> Iterator[list[dict]]:
    """
    Capture les records loguru emis par tagwalk_client.

    Le package desactive ses logs a l'import; la fixture les reactive
    le temps du test.
    """
    records: list[dict] = []
    logger.enable(LOGGER_NAMESPACE)
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
    logger.disable(LOGGER_NAMESPACE)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test avec chemins temporaires."""
    return Settings(
        api_base_url="https://api.test.local",
        client_id="test-client",
        client_secret="test-secret",
        cache_dir=tmp_path / "cache",
        cache_ttl=600,
        log_file=tmp_path / "logs" / "test.log",
    )
