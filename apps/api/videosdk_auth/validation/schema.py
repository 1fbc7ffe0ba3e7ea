"""Rule table for session token requests.

Limits follow the Video SDK JWT payload documentation:
https://developers.zoom.us/docs/video-sdk/auth/#payload
"""
from __future__ import annotations

from .engine import FieldSchema
from .rules import (
    in_number_array,
    is_between,
    is_length_less_than,
    is_required,
    matches_string_array,
)

GEO_REGIONS = ("AU", "BR", "CA", "CN", "DE", "HK", "IN", "JP", "MX", "NL", "SG", "US")

DEFAULT_EXPIRATION_SECONDS = 60 * 60 * 2
MIN_EXPIRATION_SECONDS = 1800
MAX_EXPIRATION_SECONDS = 172800

# String values of these fields are parsed as integers before validation.
NUMERIC_FIELDS = (
    "role",
    "expirationSeconds",
    "cloudRecordingOption",
    "cloudRecordingElection",
    "audioCompatibleMode",
)

SESSION_TOKEN_SCHEMA: FieldSchema = {
    "role": [is_required, in_number_array([0, 1])],
    "sessionName": [is_required, is_length_less_than(200)],
    "expirationSeconds": is_between(MIN_EXPIRATION_SECONDS, MAX_EXPIRATION_SECONDS),
    "userIdentity": is_length_less_than(35),
    "sessionKey": is_length_less_than(36),
    "geoRegions": matches_string_array(GEO_REGIONS),
    "cloudRecordingOption": in_number_array([0, 1]),
    "cloudRecordingElection": in_number_array([0, 1]),
    "audioCompatibleMode": in_number_array([0, 1]),
}
