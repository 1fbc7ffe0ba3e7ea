"""Data contracts for the session token endpoint."""
from __future__ import annotations

from pydantic import BaseModel, Field


class SignatureResponse(BaseModel):
    signature: str = Field(..., description="HS256 JWT for the Video SDK")


class FieldError(BaseModel):
    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    errors: list[FieldError] = Field(..., min_length=1, description="Every rule the request broke")
