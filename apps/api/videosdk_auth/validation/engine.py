"""Apply a field rule table to a request record."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence, Union

from .rules import Invalid, ValidatorRule

FieldRules = Union[ValidatorRule, Sequence[ValidatorRule]]
FieldSchema = Mapping[str, FieldRules]


@dataclass(frozen=True, slots=True)
class ValidationError:
    field: str
    message: str

    def as_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


def _rules_for(rules: FieldRules) -> Sequence[ValidatorRule]:
    if callable(rules):
        return (rules,)
    return tuple(rules)


def validate_request(record: Mapping[str, Any], schema: FieldSchema) -> list[ValidationError]:
    """Return every rule violation in ``record``.

    Fields are visited in schema order and every rule of a field runs, so one
    field can report several errors. An empty list means the record is valid.
    """

    errors: list[ValidationError] = []
    for field, rules in schema.items():
        value = record.get(field)
        for rule in _rules_for(rules):
            outcome = rule(value)
            if isinstance(outcome, Invalid):
                errors.append(ValidationError(field=field, message=outcome.message))
    return errors
