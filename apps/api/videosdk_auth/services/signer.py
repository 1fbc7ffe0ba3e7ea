"""HS256 signing of session token claims."""
from __future__ import annotations

import logging

import jwt

from .claims import TokenClaims

ALGORITHM = "HS256"

logger = logging.getLogger(__name__)


class SigningFailure(RuntimeError):
    """Raised when a token cannot be signed; no partial token is produced."""


def sign_token(claims: TokenClaims, secret: str | None) -> str:
    """Return the compact JWT for ``claims``.

    PyJWT writes the ``{"alg": "HS256", "typ": "JWT"}`` header and the payload
    as compact JSON before signing.
    """

    if not secret or not secret.strip():
        raise SigningFailure("ZOOM_VIDEO_SDK_SECRET is missing")

    try:
        return jwt.encode(claims.to_payload(), secret, algorithm=ALGORITHM)
    except (jwt.PyJWTError, TypeError, ValueError) as exc:
        logger.exception("Failed to sign session token for topic %s", claims.tpc)
        raise SigningFailure("Unable to sign session token") from exc
