"""Normalize loosely typed request bodies before validation."""
from __future__ import annotations

import re
from typing import Any, Iterable, Mapping

from ..validation.rules import to_string_array
from ..validation.schema import NUMERIC_FIELDS

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_int(value: str) -> int | float:
    """Parse the leading base-10 integer of ``value``.

    Trailing characters are ignored (``"30px"`` -> ``30``). Strings without a
    leading integer give NaN so that numeric rules reject them later. Digit
    runs too long to convert become a signed infinity, which no rule accepts.
    """

    match = _LEADING_INT.match(value)
    if match is None:
        return float("nan")
    digits = match.group(1)
    try:
        return int(digits)
    except ValueError:
        return float("-inf") if digits.startswith("-") else float("inf")


def coerce_request_body(
    body: Mapping[str, Any],
    numeric_fields: Iterable[str] = NUMERIC_FIELDS,
) -> dict[str, Any]:
    """Return a copy of ``body`` with numeric-as-string fields parsed."""

    record = dict(body)
    for field in numeric_fields:
        value = record.get(field)
        if isinstance(value, str):
            record[field] = parse_int(value)
    return record


def join_geo_regions(geo_regions: Any) -> str | None:
    """Collapse a region string or list into the comma-joined claim value."""

    regions = to_string_array(geo_regions)
    if not regions:
        return None
    return ",".join(regions)
