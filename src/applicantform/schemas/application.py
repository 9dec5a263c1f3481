"""Submitted application record promoted from a validated draft."""

from __future__ import annotations

from collections.abc import Collection
from datetime import datetime
from typing import Any, Mapping

import pendulum
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.constraints import to_datetime, to_number


class SubmittedApplication(BaseModel):
    """Immutable applicant record produced by a successful submission."""

    full_name: str = Field(alias="fullName")
    email: str
    phone_number: str = Field(alias="phoneNumber")
    position: str
    relevant_experience: float | None = Field(default=None, alias="relevantExperience")
    portfolio_url: str | None = Field(default=None, alias="portfolioURL")
    management_experience: str | None = Field(default=None, alias="managementExperience")
    additional_skills: tuple[str, ...] = Field(default=(), alias="additionalSkills")
    interview_time: datetime = Field(alias="interviewTime")
    submitted_at: datetime = Field(default_factory=pendulum.now)

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    @field_validator(
        "full_name", "email", "phone_number", "position", "management_experience", mode="before"
    )
    @classmethod
    def _as_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value.strip() if isinstance(value, str) else value

    @field_validator("relevant_experience", mode="before")
    @classmethod
    def _parse_experience(cls, value: Any) -> Any:
        number = to_number(value)
        return value if number is None else number

    @field_validator("additional_skills", mode="before")
    @classmethod
    def _skills_as_tuple(cls, value: Any) -> Any:
        if isinstance(value, Collection) and not isinstance(value, (str, bytes)):
            return tuple(value)
        return value

    @field_validator("interview_time", mode="before")
    @classmethod
    def _parse_interview_time(cls, value: Any) -> Any:
        return to_datetime(value) or value

    @classmethod
    def from_record(
        cls,
        record: Mapping[str, Any],
        *,
        relevant: Mapping[str, bool] | None = None,
    ) -> "SubmittedApplication":
        """Build from a validated record.

        Keys that ``relevant`` omits or flags false are dropped, so values typed
        under another position never reach the submission.
        """
        payload: dict[str, Any] = {}
        for key, value in record.items():
            if relevant is not None and not relevant.get(key, False):
                continue
            if isinstance(value, str) and not value.strip():
                continue
            payload[key] = value
        return cls.model_validate(payload)
