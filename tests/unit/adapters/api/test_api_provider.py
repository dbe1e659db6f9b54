"""
Tests for HttpApiProvider - authenticated httpx transport.

Uses respx to mock httpx calls and verifies:
- OAuth2 token is fetched once and sent as Bearer header
- Non-2xx responses are returned when http_errors=False
- Non-2xx responses raise when http_errors=True
- Headers are exposed case-insensitively
- No retry is attempted
"""

import httpx
import pytest
import respx

from tagwalk_client.adapters.api.api_provider import HttpApiProvider
from tagwalk_client.core.ports.api_provider import ApiResponse, IApiProvider

BASE_URL = "https://api.test.local"
TOKEN_RESPONSE = {"access_token": "token-123", "expires_in": 3600, "token_type": "bearer"}


@pytest.fixture
def provider() -> HttpApiProvider:
    """HttpApiProvider avec identifiants de test."""
    return HttpApiProvider(
        base_url=BASE_URL,
        client_id="client",
        client_secret="secret",
        language="fr",
    )


class TestHttpApiProviderInterface:
    """HttpApiProvider implements IApiProvider."""

    def test_implements_interface(self, provider: HttpApiProvider):
        assert isinstance(provider, IApiProvider)


class TestHttpApiProviderRequest:
    """Tests for HttpApiProvider.request()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_request_sends_bearer_token(self, provider: HttpApiProvider):
        """request() should authenticate then send the token."""
        token_route = respx.post(f"{BASE_URL}/oauth/v2/token").mock(
            return_value=httpx.Response(200, json=TOKEN_RESPONSE)
        )
        cities_route = respx.get(f"{BASE_URL}/api/cities").mock(
            return_value=httpx.Response(200, json=[], headers={"X-Total-Count": "0"})
        )

        response = await provider.request("GET", "/api/cities", query={"size": 100})

        assert isinstance(response, ApiResponse)
        assert response.status_code == 200
        assert token_route.call_count == 1
        request = cities_route.calls.last.request
        assert request.headers["Authorization"] == "Bearer token-123"
        assert request.headers["Accept-Language"] == "fr"
        assert request.url.params["size"] == "100"
        await provider.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_token_is_reused(self, provider: HttpApiProvider):
        """The token should be fetched only once while valid."""
        token_route = respx.post(f"{BASE_URL}/oauth/v2/token").mock(
            return_value=httpx.Response(200, json=TOKEN_RESPONSE)
        )
        respx.get(f"{BASE_URL}/api/cities").mock(return_value=httpx.Response(200, json=[]))

        await provider.request("GET", "/api/cities")
        await provider.request("GET", "/api/cities")

        assert token_route.call_count == 1
        await provider.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_anonymous_request_without_credentials(self):
        """Without client_id no token is requested."""
        provider = HttpApiProvider(base_url=BASE_URL)
        token_route = respx.post(f"{BASE_URL}/oauth/v2/token")
        route = respx.get(f"{BASE_URL}/api/cities").mock(
            return_value=httpx.Response(200, json=[])
        )

        await provider.request("GET", "/api/cities")

        assert not token_route.called
        assert "Authorization" not in route.calls.last.request.headers
        await provider.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_error_status_returned_without_http_errors(self, provider: HttpApiProvider):
        """http_errors=False should return 5xx responses as-is, without retry."""
        respx.post(f"{BASE_URL}/oauth/v2/token").mock(
            return_value=httpx.Response(200, json=TOKEN_RESPONSE)
        )
        route = respx.get(f"{BASE_URL}/api/medias").mock(
            return_value=httpx.Response(500, text="Internal error")
        )

        response = await provider.request("GET", "/api/medias", http_errors=False)

        assert response.status_code == 500
        assert response.body == "Internal error"
        assert route.call_count == 1
        await provider.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_error_status_raises_with_http_errors(self, provider: HttpApiProvider):
        """http_errors=True should raise HTTPStatusError."""
        respx.post(f"{BASE_URL}/oauth/v2/token").mock(
            return_value=httpx.Response(200, json=TOKEN_RESPONSE)
        )
        respx.get(f"{BASE_URL}/api/medias/unknown").mock(return_value=httpx.Response(404))

        with pytest.raises(httpx.HTTPStatusError):
            await provider.request("GET", "/api/medias/unknown")
        await provider.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_rejected_credentials_raise(self, provider: HttpApiProvider):
        """A refused token request should raise HTTPStatusError."""
        respx.post(f"{BASE_URL}/oauth/v2/token").mock(
            return_value=httpx.Response(401, json={"error": "invalid_client"})
        )

        with pytest.raises(httpx.HTTPStatusError):
            await provider.request("GET", "/api/cities", http_errors=False)
        await provider.close()

    @pytest.mark.asyncio
    @respx.mock
    async def test_headers_are_case_insensitive(self, provider: HttpApiProvider):
        """Count headers should be readable whatever their case."""
        respx.post(f"{BASE_URL}/oauth/v2/token").mock(
            return_value=httpx.Response(200, json=TOKEN_RESPONSE)
        )
        respx.get(f"{BASE_URL}/api/medias").mock(
            return_value=httpx.Response(200, json=[], headers={"X-Total-Count": "42"})
        )

        response = await provider.request("GET", "/api/medias")

        assert response.header("x-total-count") == "42"
        assert response.int_header("X-Total-Count") == 42
        await provider.close()
