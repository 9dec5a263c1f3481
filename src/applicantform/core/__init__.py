"""Conditional validation engine."""

from __future__ import annotations

# NOTE: keep imports explicit for export clarity.
from .constraints import ALWAYS_PASS, Check, Constraint
from .schema import (
    ConditionalRule,
    FieldDefinition,
    FieldPredicate,
    SchemaModel,
    SchemaResolutionError,
    field_in,
)
from .validation import (
    Failure,
    FieldValueError,
    Success,
    ValidationResult,
    validate,
)
from .application import build_application_schema

__all__ = [
    "ALWAYS_PASS",
    "Check",
    "ConditionalRule",
    "Constraint",
    "Failure",
    "FieldDefinition",
    "FieldPredicate",
    "FieldValueError",
    "SchemaModel",
    "SchemaResolutionError",
    "Success",
    "ValidationResult",
    "build_application_schema",
    "field_in",
    "validate",
]
