from __future__ import annotations

from typing import Callable
from urllib.parse import parse_qs

import httpx
import pytest

from multi_oauth import OAuthManager, ProviderConfig


@pytest.fixture()
def provider_config() -> ProviderConfig:
    return ProviderConfig(client_id="client-123", client_secret="secret-456")


@pytest.fixture()
def redirect_uri() -> str:
    return "https://host.example/cb"


@pytest.fixture()
def manager() -> OAuthManager:
    return OAuthManager()


@pytest.fixture()
def recorded_requests() -> list[httpx.Request]:
    return []


@pytest.fixture()
def make_client(recorded_requests) -> Callable[[dict[str, httpx.Response]], httpx.AsyncClient]:
    """Build an AsyncClient whose responses are keyed by "METHOD host/path"."""

    def _make(routes: dict[str, httpx.Response]) -> httpx.AsyncClient:
        def handler(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            key = f"{request.method} {request.url.host}{request.url.path}"
            if key not in routes:
                return httpx.Response(404, text=f"no route for {key}")
            return routes[key]

        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture()
def form_data() -> Callable[[httpx.Request], dict[str, str]]:
    """Decode a form-encoded request body into a flat dict."""

    def _decode(request: httpx.Request) -> dict[str, str]:
        parsed = parse_qs(request.content.decode())
        return {key: values[0] for key, values in parsed.items()}

    return _decode
