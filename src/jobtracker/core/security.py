"""Verification of provider-issued access tokens."""

from typing import Any
from uuid import UUID

from authlib.jose import JoseError, jwt

from src.jobtracker.core.errors import ConfigurationError
from src.jobtracker.runtime.config.config_data import IdentityProviderConfig


class InvalidTokenError(Exception):
    """The bearer token is malformed, expired, or not signed by the provider."""


def verify_access_token(token: str, cfg: IdentityProviderConfig) -> UUID:
    """Verify an HS256 access token and return its subject as the user id.

    Raises:
        ConfigurationError: No JWT secret is configured.
        InvalidTokenError: The token fails signature or claim validation.
    """
    if not cfg.jwt_secret:
        raise ConfigurationError("Identity provider JWT secret is not configured")

    claims_options: dict[str, Any] = {
        "sub": {"essential": True},
        "exp": {"essential": True},
        "aud": {"essential": True, "values": [cfg.jwt_audience]},
    }
    try:
        claims = jwt.decode(
            token, cfg.jwt_secret.encode("utf-8"), claims_options=claims_options
        )
        claims.validate(leeway=cfg.clock_skew)
    except (JoseError, ValueError) as exc:
        raise InvalidTokenError(f"JWT error: {exc}") from exc

    if claims.header.get("alg") != "HS256":
        raise InvalidTokenError(f"Unexpected signing algorithm {claims.header.get('alg')}")

    try:
        return UUID(str(claims["sub"]))
    except ValueError as exc:
        raise InvalidTokenError("Token subject is not a user id") from exc
