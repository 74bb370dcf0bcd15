"""
JWT verification for the privileged catalog routes.

Tokens are issued by the authentication service; this module only decodes
and validates them.
"""
from typing import Any

from jose import JWTError, jwt

from catalog.config import get_settings


def decode_token(token: str) -> dict[str, Any]:
    """
    Decode and validate a JWT token.

    Args:
        token: The JWT token string to decode

    Returns:
        Decoded payload dictionary with keys: sub, roles, exp, iat

    Raises:
        JWTError: If token is invalid or expired
    """
    settings = get_settings()
    return jwt.decode(
        token,
        settings.jwt_secret_key,
        algorithms=[settings.jwt_algorithm],
    )


__all__ = ["JWTError", "decode_token"]
