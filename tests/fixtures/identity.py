"""Identity provider fixtures: config, a mocked provider and token minting."""

import json
import time
from collections.abc import AsyncGenerator, Callable
from uuid import UUID

import httpx
import pytest
from authlib.jose import jwt

from src.jobtracker.core.services import AuthService
from src.jobtracker.runtime.config.config_data import IdentityProviderConfig

__all__ = [
    "PROVIDER_URL",
    "identity_config",
    "provider_requests",
    "provider_responses",
    "provider_transport",
    "auth_service",
    "token_payload",
    "mint_token",
]

PROVIDER_URL = "https://idp.test"


@pytest.fixture
def identity_config() -> IdentityProviderConfig:
    return IdentityProviderConfig(
        url=PROVIDER_URL,
        api_key="anon-key",
        jwt_secret="test-jwt-secret",
        jwt_audience="authenticated",
        timeout_seconds=5.0,
    )


@pytest.fixture
def provider_requests() -> list[httpx.Request]:
    """Every request the mocked provider received, in order."""
    return []


@pytest.fixture
def provider_responses() -> dict[str, httpx.Response]:
    """Canned responses keyed by request path; tests overwrite entries."""
    return {}


@pytest.fixture
def provider_transport(
    provider_requests: list[httpx.Request],
    provider_responses: dict[str, httpx.Response],
) -> httpx.MockTransport:
    """In-process stand-in for the identity provider."""

    def handler(request: httpx.Request) -> httpx.Response:
        provider_requests.append(request)
        response = provider_responses.get(request.url.path)
        if response is None:
            return httpx.Response(404, json={"msg": "not mocked"})
        return response

    return httpx.MockTransport(handler)


@pytest.fixture
async def auth_service(
    identity_config: IdentityProviderConfig, provider_transport: httpx.MockTransport
) -> AsyncGenerator[AuthService]:
    client = httpx.AsyncClient(transport=provider_transport)
    service = AuthService(identity_config, client=client)
    yield service
    await service.aclose()


@pytest.fixture
def token_payload() -> Callable[..., dict]:
    def _token_payload(
        user_id: UUID, email: str = "a@b.com", created_at: str = "2024-01-01T00:00:00Z"
    ) -> dict:
        return {
            "access_token": "t",
            "token_type": "bearer",
            "expires_in": 3600,
            "refresh_token": "r",
            "user": {"id": str(user_id), "email": email, "created_at": created_at},
        }

    return _token_payload


@pytest.fixture
def mint_token(identity_config: IdentityProviderConfig) -> Callable[..., str]:
    """Mint an HS256 access token shaped like the provider's."""

    def _mint_token(
        subject: UUID | str,
        *,
        expires_in: int = 3600,
        audience: str | None = None,
        secret: str | None = None,
    ) -> str:
        now = int(time.time())
        payload = {
            "sub": str(subject),
            "aud": audience or identity_config.jwt_audience,
            "role": "authenticated",
            "iat": now,
            "exp": now + expires_in,
        }
        key = (secret or identity_config.jwt_secret).encode("utf-8")
        return jwt.encode({"alg": "HS256", "typ": "JWT"}, payload, key).decode("utf-8")

    return _mint_token


def request_json(request: httpx.Request) -> dict:
    return json.loads(request.content)
