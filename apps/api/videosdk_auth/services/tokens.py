"""Session token issuance.

Runs one request through coercion, validation, claim construction and signing.
Every step is pure apart from reading the clock, so requests share no state.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Mapping

from ..core.config import SigningIdentity
from ..validation.engine import FieldSchema, ValidationError, validate_request
from ..validation.schema import SESSION_TOKEN_SCHEMA
from .claims import TokenClaims, build_claims
from .coercion import coerce_request_body
from .signer import sign_token

logger = logging.getLogger(__name__)


class ValidationFailure(ValueError):
    """Raised when a request breaks one or more field rules."""

    def __init__(self, errors: list[ValidationError]) -> None:
        self.errors = errors
        fields = ", ".join(dict.fromkeys(error.field for error in errors))
        super().__init__(f"Invalid session token request: {fields}")


@dataclass(frozen=True, slots=True)
class IssuedToken:
    """Signed token together with the claims it carries."""

    signature: str
    claims: TokenClaims


def issue_signature(
    body: Mapping[str, Any],
    identity: SigningIdentity,
    now: int | None = None,
    schema: FieldSchema = SESSION_TOKEN_SCHEMA,
) -> IssuedToken:
    """Validate ``body`` and return a signed session token.

    Raises ``ValidationFailure`` before anything is signed when the body is
    invalid, and ``SigningFailure`` when the token cannot be signed.
    """

    record = coerce_request_body(body)
    errors = validate_request(record, schema)
    if errors:
        failure = ValidationFailure(errors)
        logger.info("%s", failure)
        raise failure

    issued_at = int(time.time()) if now is None else now
    claims = build_claims(record, identity, issued_at)
    signature = sign_token(claims, identity.secret)
    logger.info("Issued session token for topic %s (role %s, exp %s)", claims.tpc, claims.role_type, claims.exp)
    return IssuedToken(signature=signature, claims=claims)
