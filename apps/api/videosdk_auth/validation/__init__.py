"""Expose the validation engine and rule primitives."""
from .engine import FieldSchema, ValidationError, validate_request
from .rules import (
    VALID,
    Invalid,
    Valid,
    ValidationOutcome,
    ValidatorRule,
    in_number_array,
    is_absent,
    is_between,
    is_length_less_than,
    is_required,
    matches_string_array,
    to_string_array,
)
from .schema import NUMERIC_FIELDS, SESSION_TOKEN_SCHEMA

__all__ = [
    "FieldSchema",
    "Invalid",
    "NUMERIC_FIELDS",
    "SESSION_TOKEN_SCHEMA",
    "VALID",
    "Valid",
    "ValidationError",
    "ValidationOutcome",
    "ValidatorRule",
    "in_number_array",
    "is_absent",
    "is_between",
    "is_length_less_than",
    "is_required",
    "matches_string_array",
    "to_string_array",
    "validate_request",
]
