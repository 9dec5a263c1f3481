"""Submission summary rendering."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from .core import SchemaModel, build_application_schema
from .core.application import SKILLS_FIELD
from .schemas import SubmittedApplication

EXPERIENCE_FIELD = "relevantExperience"


def _format_years(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:g}"


def _format_value(name: str, value: Any) -> str:
    if name == EXPERIENCE_FIELD:
        return f"{_format_years(value)} years"
    if name == SKILLS_FIELD:
        return ", ".join(value)
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def render_summary(
    submitted: SubmittedApplication,
    schema: SchemaModel | None = None,
) -> list[str]:
    """Return display lines for a submitted application.

    Lines follow the schema's field order and labels; optional fields
    without a value are left out.
    """
    schema = schema or build_application_schema()
    values = submitted.model_dump(by_alias=True)

    lines: list[str] = []
    for name in schema.field_names():
        if name not in values:
            continue
        value = values[name]
        if value is None or (isinstance(value, str) and not value):
            continue
        label = schema.field(name).label or name
        lines.append(f"{label}: {_format_value(name, value)}")
    return lines


def summary_payload(submitted: SubmittedApplication) -> dict:
    """JSON-ready view of the submission, keyed by form field names."""
    return submitted.model_dump(mode="json", by_alias=True)
