"""Pydantic configuration schema for YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator


class FormConfig(BaseModel):
    """Positions, options and thresholds driving the application schema."""

    positions: list[str] = Field(
        default_factory=lambda: ["Developer", "Designer", "Manager"]
    )
    experience_positions: list[str] = Field(
        default_factory=lambda: ["Developer", "Designer"]
    )
    portfolio_positions: list[str] = Field(default_factory=lambda: ["Designer"])
    management_positions: list[str] = Field(default_factory=lambda: ["Manager"])
    skill_options: list[str] = Field(
        default_factory=lambda: ["JavaScript", "CSS", "Python"]
    )
    min_relevant_experience: float = 1.0

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _conditional_positions_are_declared(self) -> "FormConfig":
        declared = set(self.positions)
        for name in ("experience_positions", "portfolio_positions", "management_positions"):
            unknown = [p for p in getattr(self, name) if p not in declared]
            if unknown:
                raise ValueError(f"{name} references undeclared positions: {unknown}")
        return self


class LoggingConfig(BaseModel):
    level: str = "INFO"
    json_output: bool = True

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    form: FormConfig | None = None
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        if self.form is not None:
            settings["form"] = self.form.model_dump()
        settings["logging"] = self.logging.model_dump()
        return settings


def load_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
