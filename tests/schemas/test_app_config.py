from __future__ import annotations

import pytest
from pydantic import ValidationError

from applicantform.schemas import FormConfig, load_config


def test_form_config_default_positions_and_skills():
    config = FormConfig()

    assert config.positions == ["Developer", "Designer", "Manager"]
    assert config.experience_positions == ["Developer", "Designer"]
    assert config.portfolio_positions == ["Designer"]
    assert config.management_positions == ["Manager"]
    assert config.skill_options == ["JavaScript", "CSS", "Python"]
    assert config.min_relevant_experience == pytest.approx(1.0)


def test_form_config_rejects_undeclared_conditional_positions():
    with pytest.raises(ValidationError) as exc:
        FormConfig(positions=["Developer"])

    assert "undeclared positions" in str(exc.value)


def test_form_config_forbids_unknown_keys():
    with pytest.raises(ValidationError):
        FormConfig(colour="blue")  # type: ignore[call-arg]


def test_load_config_requires_mapping():
    with pytest.raises(ValidationError):
        load_config(["not", "a", "mapping"])
