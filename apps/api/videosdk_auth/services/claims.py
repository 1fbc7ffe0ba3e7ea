"""Build the Video SDK JWT claim set from a validated request."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.config import SigningIdentity
from ..validation.rules import is_absent
from ..validation.schema import DEFAULT_EXPIRATION_SECONDS
from .coercion import join_geo_regions

TOKEN_VERSION = 1

# Request field -> claim name for the optional claims, in payload order.
OPTIONAL_CLAIMS = (
    ("userIdentity", "user_identity"),
    ("sessionKey", "session_key"),
    ("geoRegions", "geo_regions"),
    ("cloudRecordingOption", "cloud_recording_option"),
    ("cloudRecordingElection", "cloud_recording_election"),
    ("audioCompatibleMode", "audio_compatible_mode"),
)


@dataclass(frozen=True, slots=True)
class TokenClaims:
    app_key: str
    role_type: int
    tpc: str
    iat: int
    exp: int | float
    version: int = TOKEN_VERSION
    user_identity: str | None = None
    session_key: str | None = None
    geo_regions: str | None = None
    cloud_recording_option: int | None = None
    cloud_recording_election: int | None = None
    audio_compatible_mode: int | None = None

    def to_payload(self) -> dict[str, Any]:
        """Return the claim dict in SDK key order, leaving out unset optional claims."""

        payload: dict[str, Any] = {
            "app_key": self.app_key,
            "role_type": self.role_type,
            "tpc": self.tpc,
            "version": self.version,
            "iat": self.iat,
            "exp": self.exp,
        }
        for _, claim in OPTIONAL_CLAIMS:
            value = getattr(self, claim)
            if value is not None:
                payload[claim] = value
        return payload


def _integral(value: Any) -> Any:
    """Render whole floats such as ``1.0`` as ints so the JSON reads ``1``."""

    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def build_claims(
    record: Mapping[str, Any],
    identity: SigningIdentity,
    now: int,
) -> TokenClaims:
    """Map a validated request record onto ``TokenClaims``.

    ``now`` is the issue time in epoch seconds. Without ``expirationSeconds``
    the token lives for two hours.
    """

    iat = int(now)
    expiration = record.get("expirationSeconds")
    if is_absent(expiration):
        exp = iat + DEFAULT_EXPIRATION_SECONDS
    else:
        exp = _integral(iat + expiration)

    optional: dict[str, Any] = {}
    for field, claim in OPTIONAL_CLAIMS:
        value = record.get(field)
        if is_absent(value):
            continue
        if field == "geoRegions":
            value = join_geo_regions(value)
            if value is None:
                continue
        optional[claim] = _integral(value)

    return TokenClaims(
        app_key=identity.app_key,
        role_type=_integral(record["role"]),
        tpc=record["sessionName"],
        iat=iat,
        exp=exp,
        **optional,
    )
