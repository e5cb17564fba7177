"""Auth bridge to the external identity provider.

Translates register/login/logout into calls against a Supabase-compatible
auth API and normalises responses and failures so nothing past this module
depends on the provider's wire format.
"""

from datetime import datetime
from types import TracebackType
from typing import Any, Self
from uuid import UUID

import httpx
from loguru import logger
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from src.jobtracker.core.errors import (
    ConfigurationError,
    ProviderHTTPError,
    ProviderResponseError,
    ValidationError,
)
from src.jobtracker.runtime.config.config_data import IdentityProviderConfig
from src.jobtracker.runtime.context import get_config

MIN_PASSWORD_LENGTH = 6


class AuthResult(BaseModel):
    """Tokens and user details of a successful login."""

    model_config = ConfigDict(frozen=True)

    access_token: str
    refresh_token: str
    expires_in: int  # Lifetime in seconds of the access token
    token_type: str
    user_id: UUID
    email: str
    created_at: datetime


class ProviderUser(BaseModel):
    """User record embedded in the provider's token response."""

    id: UUID
    email: str
    created_at: datetime


class ProviderTokenResponse(BaseModel):
    """Provider token response, as sent on the wire."""

    access_token: str
    token_type: str
    expires_in: int
    refresh_token: str
    user: ProviderUser

    def to_auth_result(self) -> AuthResult:
        return AuthResult(
            access_token=self.access_token,
            refresh_token=self.refresh_token,
            expires_in=self.expires_in,
            token_type=self.token_type,
            user_id=self.user.id,
            email=self.user.email,
            created_at=self.user.created_at,
        )


def _validate_email(email: str | None) -> None:
    if email is None or not email.strip():
        raise ValidationError("Email cannot be null or empty")
    if "@" not in email:
        raise ValidationError("Email must be a valid email address")


def _validate_password(password: str | None) -> None:
    if password is None or not password.strip():
        raise ValidationError("Password cannot be null or empty")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )


class AuthService:
    """Register, log in and log out users through the identity provider.

    One instance (and its pooled HTTP client) is shared by the whole process;
    it keeps no per-request state. Calls are not retried: any failure surfaces
    immediately as a ``ProviderError``.
    """

    SIGNUP_PATH = "/auth/v1/signup"
    TOKEN_PATH = "/auth/v1/token"
    LOGOUT_PATH = "/auth/v1/logout"

    def __init__(
        self,
        config: IdentityProviderConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        config = config or get_config().identity
        if not config.url:
            raise ConfigurationError("Identity provider URL is not configured")
        if not config.api_key:
            raise ConfigurationError("Identity provider API key is not configured")

        self._base_url = config.url.rstrip("/")
        self._headers = {"apikey": config.api_key, "Accept": "application/json"}
        # Headers are also sent per request so an injected client needs no setup
        self._client = client or httpx.AsyncClient(
            base_url=self._base_url,
            headers=self._headers,
            timeout=config.timeout_seconds,
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def register(
        self, email: str, password: str, full_name: str | None = None
    ) -> None:
        """Create an account with the provider.

        Raises:
            ValidationError: Malformed email or password; no request is sent.
            ProviderHTTPError: The provider rejected the signup or was unreachable.
        """
        _validate_email(email)
        _validate_password(password)

        body: dict[str, Any] = {"email": email, "password": password}
        if full_name is not None:
            body["data"] = {"full_name": full_name}

        await self._post(self.SIGNUP_PATH, action="Registration", json=body)
        logger.info("Registered account with identity provider")

    async def login(self, email: str, password: str) -> AuthResult:
        """Exchange email and password for tokens.

        Raises:
            ValidationError: Malformed email or password; no request is sent.
            ProviderHTTPError: The provider rejected the credentials or was unreachable.
            ProviderResponseError: The provider answered 2xx with an unusable payload.
        """
        _validate_email(email)
        _validate_password(password)

        response = await self._post(
            self.TOKEN_PATH,
            action="Login",
            params={"grant_type": "password"},
            json={"email": email, "password": password},
        )

        try:
            token_response = ProviderTokenResponse.model_validate_json(response.content)
        except PydanticValidationError as exc:
            logger.error(
                "Identity provider returned an unusable token response",
                error_count=exc.error_count(),
            )
            raise ProviderResponseError(
                "Invalid authentication response from identity provider",
                body=response.text,
                status_code=response.status_code,
            ) from exc

        result = token_response.to_auth_result()
        logger.info("User {} logged in", result.user_id)
        return result

    async def logout(self, access_token: str) -> None:
        """Revoke the session behind ``access_token``.

        Raises:
            ValidationError: The token is empty; no request is sent.
            ProviderHTTPError: The provider rejected the logout or was unreachable.
        """
        if access_token is None or not access_token.strip():
            raise ValidationError("Access token cannot be null or empty")

        await self._post(
            self.LOGOUT_PATH,
            action="Logout",
            headers={"Authorization": f"Bearer {access_token}"},
        )
        logger.info("Logged out session with identity provider")

    async def _post(
        self,
        path: str,
        *,
        action: str,
        headers: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        url = f"{self._base_url}{path}"
        try:
            response = await self._client.post(
                url, headers={**self._headers, **(headers or {})}, **kwargs
            )
        except httpx.HTTPError as exc:
            logger.warning(
                "{} request to identity provider failed",
                action,
                error_type=type(exc).__name__,
            )
            raise ProviderHTTPError(f"{action} failed: {exc}") from exc

        if not response.is_success:
            logger.warning(
                "{} rejected by identity provider",
                action,
                status_code=response.status_code,
            )
            raise ProviderHTTPError(
                f"{action} failed: {response.text}",
                body=response.text,
                status_code=response.status_code,
            )

        return response
