"""Form state holder driving the validation engine."""

from __future__ import annotations

from collections.abc import Collection
from typing import Any, Callable, Mapping

import pendulum
import structlog

from .core import SchemaModel, Success, ValidationResult, validate
from .core.application import INTERVIEW_TIME_FIELD, SKILLS_FIELD
from .schemas import SubmittedApplication


class ApplicationForm:
    """Mutable draft of one applicant's answers.

    The draft is owned here and only ever handed to the evaluator as a
    snapshot, so repeated submits see independent copies.
    """

    def __init__(
        self,
        *,
        schema: SchemaModel,
        initial: Mapping[str, Any] | None = None,
        now_provider: Callable[[], pendulum.DateTime] | None = None,
    ) -> None:
        self._schema = schema
        self._now_provider = now_provider or pendulum.now
        self._draft: dict[str, Any] = self._blank_draft()
        self._errors: dict[str, str] = {}
        self._submitted: SubmittedApplication | None = None
        self._logger = structlog.get_logger(__name__)
        for name, value in (initial or {}).items():
            self.set_value(name, value)

    @property
    def schema(self) -> SchemaModel:
        return self._schema

    @property
    def draft(self) -> dict[str, Any]:
        return {
            name: list(value) if isinstance(value, list) else value
            for name, value in self._draft.items()
        }

    @property
    def errors(self) -> dict[str, str]:
        return dict(self._errors)

    @property
    def submitted(self) -> SubmittedApplication | None:
        return self._submitted

    def set_value(self, name: str, value: Any) -> None:
        self._require_field(name)
        if name == SKILLS_FIELD and isinstance(value, Collection) and not isinstance(value, str):
            value = list(value)
        self._draft[name] = value

    def toggle_option(self, name: str, option: str, checked: bool) -> None:
        self._require_field(name)
        current = self._draft.get(name)
        selected = list(current) if isinstance(current, list) else []
        if checked and option not in selected:
            selected.append(option)
        elif not checked:
            selected = [item for item in selected if item != option]
        self._draft[name] = selected

    def set_interview_time(self, value: Any) -> None:
        self.set_value(INTERVIEW_TIME_FIELD, value)

    def visible_fields(self) -> list[str]:
        return [
            name
            for name in self._schema.field_names()
            if self._schema.is_relevant(name, self._draft)
        ]

    def submit(self) -> ValidationResult:
        snapshot = self.draft
        result = validate(snapshot, self._schema)
        if isinstance(result, Success):
            relevant = {
                name: self._schema.is_relevant(name, result.record)
                for name in self._schema.field_names()
            }
            self._submitted = SubmittedApplication.from_record(result.record, relevant=relevant)
            self._errors = {}
            self._logger.info(
                "form.submitted",
                position=self._submitted.position,
                skills=list(self._submitted.additional_skills),
            )
        else:
            self._errors = dict(result.errors)
            self._logger.info("form.rejected", error_count=len(self._errors))
        return result

    def _blank_draft(self) -> dict[str, Any]:
        draft: dict[str, Any] = {name: "" for name in self._schema.field_names()}
        if SKILLS_FIELD in draft:
            draft[SKILLS_FIELD] = []
        if INTERVIEW_TIME_FIELD in draft:
            draft[INTERVIEW_TIME_FIELD] = self._now_provider()
        return draft

    def _require_field(self, name: str) -> None:
        if name not in self._schema:
            raise KeyError(f"Unknown field: {name!r}")
