"""Tests for claim construction."""
from __future__ import annotations

import dataclasses

import pytest

from videosdk_auth.core.config import SigningIdentity
from videosdk_auth.services.claims import build_claims

NOW = 1_760_000_000
IDENTITY = SigningIdentity(app_key="sdk-key", secret="sdk-secret-for-tests-0123456789abcdef")


def test_default_expiry_is_two_hours() -> None:
    claims = build_claims({"role": 1, "sessionName": "demo"}, IDENTITY, NOW)

    assert claims.iat == NOW
    assert claims.exp - claims.iat == 7200
    assert claims.to_payload() == {
        "app_key": "sdk-key",
        "role_type": 1,
        "tpc": "demo",
        "version": 1,
        "iat": NOW,
        "exp": NOW + 7200,
    }


def test_explicit_expiry() -> None:
    claims = build_claims({"role": 0, "sessionName": "demo", "expirationSeconds": 3600}, IDENTITY, NOW)

    assert claims.exp - claims.iat == 3600


def test_optional_claims_follow_sdk_key_order() -> None:
    record = {
        "audioCompatibleMode": 1,
        "role": 1.0,
        "sessionName": "demo",
        "userIdentity": "alice",
        "sessionKey": "k-1",
        "geoRegions": ["US", "JP"],
        "cloudRecordingOption": 0,
        "cloudRecordingElection": 1,
        "ignored": "value",
    }

    payload = build_claims(record, IDENTITY, NOW).to_payload()

    assert list(payload) == [
        "app_key",
        "role_type",
        "tpc",
        "version",
        "iat",
        "exp",
        "user_identity",
        "session_key",
        "geo_regions",
        "cloud_recording_option",
        "cloud_recording_election",
        "audio_compatible_mode",
    ]
    assert payload["role_type"] == 1 and isinstance(payload["role_type"], int)
    assert payload["geo_regions"] == "US,JP"
    assert payload["cloud_recording_option"] == 0


def test_absent_optional_values_are_omitted() -> None:
    record = {"role": 1, "sessionName": "demo", "userIdentity": "", "geoRegions": [], "sessionKey": None}

    payload = build_claims(record, IDENTITY, NOW).to_payload()

    assert "user_identity" not in payload
    assert "geo_regions" not in payload
    assert "session_key" not in payload


def test_app_key_comes_from_identity() -> None:
    claims = build_claims({"role": 1, "sessionName": "demo", "app_key": "other"}, IDENTITY, NOW)

    assert claims.app_key == "sdk-key"


def test_claims_are_immutable() -> None:
    claims = build_claims({"role": 1, "sessionName": "demo"}, IDENTITY, NOW)

    with pytest.raises(dataclasses.FrozenInstanceError):
        claims.tpc = "other"  # type: ignore[misc]
