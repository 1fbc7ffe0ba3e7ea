"""Session token issuance endpoint."""
from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, HTTPException, status
from fastapi.responses import JSONResponse

from ..core.config import SigningIdentity, settings
from ..schemas.tokens import FieldError, SignatureResponse, ValidationErrorResponse
from ..services import tokens as tokens_service
from ..services.signer import SigningFailure

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/",
    response_model=SignatureResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse}},
)
async def create_signature(payload: dict[str, Any] | None = Body(default=None)) -> Any:
    """Validate the session descriptor and return a signed Video SDK token."""

    identity = SigningIdentity.from_settings(settings)
    try:
        issued = tokens_service.issue_signature(payload or {}, identity)
    except tokens_service.ValidationFailure as exc:
        body = ValidationErrorResponse(
            errors=[FieldError(field=error.field, message=error.message) for error in exc.errors]
        )
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())
    except SigningFailure as exc:
        logger.error("Session token signing failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to sign session token",
        ) from exc

    return SignatureResponse(signature=issued.signature)
