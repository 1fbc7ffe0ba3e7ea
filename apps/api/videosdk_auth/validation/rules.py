"""Reusable single-field validator primitives.

Every rule is a callable taking one field value and returning either ``VALID``
or an ``Invalid`` carrying a stable message. Rules pass on absent values unless
the field also lists ``is_required``.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable, Iterable, Union


@dataclass(frozen=True, slots=True)
class Valid:
    """Outcome of a rule that accepted its value."""

    ok: bool = True


@dataclass(frozen=True, slots=True)
class Invalid:
    """Outcome of a rule that rejected its value."""

    message: str
    ok: bool = False


VALID = Valid()

ValidationOutcome = Union[Valid, Invalid]
ValidatorRule = Callable[[Any], ValidationOutcome]


def is_absent(value: Any) -> bool:
    """Only ``None`` and the empty string count as unset; ``0`` and ``False`` are present."""

    return value is None or (isinstance(value, str) and value == "")


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _describe(values: Iterable[Any]) -> str:
    return ", ".join(str(value) for value in values)


def is_required(value: Any) -> ValidationOutcome:
    if is_absent(value):
        return Invalid("is required")
    return VALID


def in_number_array(allowed: Iterable[int | float]) -> ValidatorRule:
    """Accept values strictly equal to one of ``allowed``."""

    options = tuple(allowed)
    message = f"must be one of {_describe(options)}"

    def rule(value: Any) -> ValidationOutcome:
        if is_absent(value):
            return VALID
        if _is_number(value) and any(value == option for option in options):
            return VALID
        return Invalid(message)

    return rule


def is_between(minimum: int | float, maximum: int | float) -> ValidatorRule:
    """Accept numbers inside the inclusive ``[minimum, maximum]`` range."""

    message = f"must be between {minimum} and {maximum}"

    def rule(value: Any) -> ValidationOutcome:
        if is_absent(value):
            return VALID
        if _is_number(value) and not math.isnan(value) and minimum <= value <= maximum:
            return VALID
        return Invalid(message)

    return rule


def is_length_less_than(limit: int) -> ValidatorRule:
    """Accept strings strictly shorter than ``limit`` characters."""

    message = f"must be shorter than {limit} characters"

    def rule(value: Any) -> ValidationOutcome:
        if is_absent(value):
            return VALID
        if isinstance(value, str) and len(value) < limit:
            return VALID
        return Invalid(message)

    return rule


def _clean(item: Any) -> Any:
    return item.strip() if isinstance(item, str) else item


def to_string_array(value: Any) -> list[Any] | None:
    """Read a comma-separated string or a sequence as a list of items.

    String items are stripped and blank ones dropped in both forms, so
    ``"US, JP"`` and ``["US", " JP"]`` read the same. Returns ``None`` for
    absent values and for types that cannot hold a list.
    """

    if is_absent(value):
        return None
    if isinstance(value, str):
        value = value.split(",")
    if isinstance(value, (list, tuple)):
        return [_clean(item) for item in value if _clean(item) != ""]
    return None


def matches_string_array(allowed: Iterable[str]) -> ValidatorRule:
    """Accept sequences whose every element is a member of ``allowed`` (case-sensitive)."""

    options = tuple(dict.fromkeys(allowed))
    message = f"must only contain {_describe(options)}"

    def rule(value: Any) -> ValidationOutcome:
        items = to_string_array(value)
        if is_absent(value) or items == []:
            return VALID
        if items is not None and all(isinstance(item, str) and item in options for item in items):
            return VALID
        return Invalid(message)

    return rule
