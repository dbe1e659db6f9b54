"""
Tests pour CityManager.

Verifie:
- Les villes sont denormalisees depuis les trois endpoints
- Le cache evite un second appel API pour des filtres equivalents
- Les valeurs vides sont retirees de la requete
- Une erreur API donne une liste vide, journalisee et mise en cache
"""

from unittest.mock import AsyncMock

import pytest

from tagwalk_client.adapters.api.cache import APICache
from tagwalk_client.adapters.serializer.normalizer import Normalizer
from tagwalk_client.core.entities import City
from tagwalk_client.core.exceptions import OutOfRangeError
from tagwalk_client.managers.city_manager import CityManager
from tests.fixtures.api_responses import CITIES_RESPONSE, make_response


@pytest.fixture
def manager(
    mock_api_provider: AsyncMock, normalizer: Normalizer, city_cache: APICache
) -> CityManager:
    """CityManager avec transport mocke et cache temporaire."""
    return CityManager(api_provider=mock_api_provider, normalizer=normalizer, cache=city_cache)


class TestCityManagerList:
    """Tests pour CityManager.list()."""

    @pytest.mark.asyncio
    async def test_list_returns_cities(self, manager: CityManager, mock_api_provider: AsyncMock):
        mock_api_provider.request.return_value = make_response(200, CITIES_RESPONSE)

        cities = await manager.list()

        assert [c.slug for c in cities] == ["london", "milan", "paris"]
        assert all(isinstance(c, City) for c in cities)
        assert cities[0].created_at is not None

    @pytest.mark.asyncio
    async def test_list_sends_elided_query(self, manager: CityManager, mock_api_provider: AsyncMock):
        """from=0 et language=None ne sont pas envoyes."""
        mock_api_provider.request.return_value = make_response(200, [])

        await manager.list()

        mock_api_provider.request.assert_awaited_once_with(
            "GET",
            "/api/cities",
            query={"size": 100, "sort": "name:asc", "status": "enabled"},
            http_errors=False,
        )

    @pytest.mark.asyncio
    async def test_list_uses_cache_on_second_call(
        self, manager: CityManager, mock_api_provider: AsyncMock
    ):
        mock_api_provider.request.return_value = make_response(200, CITIES_RESPONSE)

        first = await manager.list(language="fr")
        second = await manager.list(language="fr")

        assert first == second
        assert mock_api_provider.request.await_count == 1

    @pytest.mark.asyncio
    async def test_different_language_is_a_distinct_entry(
        self, manager: CityManager, mock_api_provider: AsyncMock
    ):
        mock_api_provider.request.return_value = make_response(200, CITIES_RESPONSE)

        await manager.list(language="fr")
        await manager.list(language="en")

        assert mock_api_provider.request.await_count == 2

    @pytest.mark.asyncio
    async def test_server_error_returns_empty_and_is_cached(
        self, manager: CityManager, mock_api_provider: AsyncMock, log_records: list
    ):
        """Un 500 donne une liste vide, conservee jusqu'a expiration."""
        mock_api_provider.request.return_value = make_response(500, body="oops")

        first = await manager.list()
        second = await manager.list()

        assert first == second == []
        assert mock_api_provider.request.await_count == 1
        errors = [r for r in log_records if r["level"].name == "ERROR"]
        assert len(errors) == 1
        assert errors[0]["extra"]["code"] == 500
        assert errors[0]["extra"]["message"] == "oops"

    @pytest.mark.asyncio
    async def test_not_found_returns_empty_without_log(
        self, manager: CityManager, mock_api_provider: AsyncMock, log_records: list
    ):
        mock_api_provider.request.return_value = make_response(404)

        assert await manager.list() == []
        assert not [r for r in log_records if r["level"].name == "ERROR"]

    @pytest.mark.asyncio
    async def test_range_error_raises_and_is_not_cached(
        self, manager: CityManager, mock_api_provider: AsyncMock
    ):
        mock_api_provider.request.side_effect = [
            make_response(416),
            make_response(200, CITIES_RESPONSE),
        ]

        with pytest.raises(OutOfRangeError):
            await manager.list(from_=1000)
        cities = await manager.list(from_=1000)

        assert len(cities) == 3


class TestCityManagerFilters:
    """Tests pour list_filters() et list_filters_street()."""

    @pytest.mark.asyncio
    async def test_list_filters_calls_filter_media(
        self, manager: CityManager, mock_api_provider: AsyncMock
    ):
        mock_api_provider.request.return_value = make_response(200, CITIES_RESPONSE[:1])

        cities = await manager.list_filters("woman", "fw19", None, "", None)

        assert cities[0].slug == "london"
        mock_api_provider.request.assert_awaited_once_with(
            "GET",
            "/api/cities/filter-media",
            query={"type": "woman", "season": "fw19"},
            http_errors=False,
        )

    @pytest.mark.asyncio
    async def test_list_filters_street_calls_filter_streetstyle(
        self, manager: CityManager, mock_api_provider: AsyncMock
    ):
        mock_api_provider.request.return_value = make_response(200, CITIES_RESPONSE)

        await manager.list_filters_street("fw19", "chanel", None, language="fr")

        mock_api_provider.request.assert_awaited_once_with(
            "GET",
            "/api/cities/filter-streetstyle",
            query={"season": "fw19", "designers": "chanel", "language": "fr"},
            http_errors=False,
        )

    @pytest.mark.asyncio
    async def test_permuted_filters_hit_cache(
        self, manager: CityManager, mock_api_provider: AsyncMock
    ):
        """Les memes filtres passes par mots-cles dans un autre ordre partagent le cache."""
        mock_api_provider.request.return_value = make_response(200, CITIES_RESPONSE)

        await manager.list_filters(type="woman", season="fw19", designer=None, tags=None, models=None)
        await manager.list_filters(models="", tags=None, designer=None, season="fw19", type="woman")

        assert mock_api_provider.request.await_count == 1

    @pytest.mark.asyncio
    async def test_same_filters_on_both_endpoints_do_not_collide(
        self, manager: CityManager, mock_api_provider: AsyncMock
    ):
        mock_api_provider.request.side_effect = [
            make_response(200, CITIES_RESPONSE[:1]),
            make_response(200, CITIES_RESPONSE[1:]),
        ]

        media_cities = await manager.list_filters(None, "fw19", None, None, None)
        street_cities = await manager.list_filters_street("fw19", None, None)

        assert [c.slug for c in media_cities] == ["london"]
        assert [c.slug for c in street_cities] == ["milan", "paris"]

    @pytest.mark.asyncio
    async def test_invalid_json_body_returns_empty_list(
        self, manager: CityManager, mock_api_provider: AsyncMock, log_records: list
    ):
        mock_api_provider.request.return_value = make_response(200, body="<html>oops</html>")

        assert await manager.list_filters_street("fw19", None, None) == []
        assert len([r for r in log_records if r["level"].name == "ERROR"]) == 1
