"""Validation evaluator: run every field through its effective constraint."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Union

import structlog

from .schema import Record, SchemaModel

_logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class FieldValueError:
    """A single field rejected by its effective constraint."""

    field: str
    message: str


@dataclass(frozen=True, slots=True)
class Success:
    """Every field satisfied its effective constraint."""

    record: Mapping[str, Any]

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    """One or more fields were rejected; ``errors`` maps field to message."""

    errors: Mapping[str, str]

    @property
    def ok(self) -> bool:
        return False

    @property
    def violations(self) -> tuple[FieldValueError, ...]:
        return tuple(
            FieldValueError(field=name, message=message)
            for name, message in self.errors.items()
        )


ValidationResult = Union[Success, Failure]


def collect_errors(record: Record, schema: SchemaModel) -> dict[str, str]:
    """Return the message of every rejected field, in schema order."""
    errors: dict[str, str] = {}
    for name in schema.field_names():
        effective = schema.resolve_constraint(name, record)
        message = effective.check(record.get(name))
        if message is not None:
            errors[name] = message
    return errors


def validate(record: Record, schema: SchemaModel) -> ValidationResult:
    errors = collect_errors(record, schema)
    if errors:
        _logger.info("validation.failed", fields=list(errors))
        return Failure(errors=MappingProxyType(errors))

    _logger.debug("validation.passed", field_count=len(schema))
    return Success(record=MappingProxyType(dict(record)))


__all__ = [
    "Failure",
    "FieldValueError",
    "Success",
    "ValidationResult",
    "collect_errors",
    "validate",
]
