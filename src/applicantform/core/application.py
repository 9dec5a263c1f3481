"""Job application form schema."""

from __future__ import annotations

from ..schemas.config import FormConfig
from .constraints import (
    constraint,
    datetime_value,
    email,
    min_value,
    non_empty_set,
    numeric,
    one_of,
    required,
    subset_of,
    text,
    url,
)
from .schema import ConditionalRule, FieldDefinition, SchemaModel, field_in

POSITION_FIELD = "position"
SKILLS_FIELD = "additionalSkills"
INTERVIEW_TIME_FIELD = "interviewTime"


def build_application_schema(config: FormConfig | None = None) -> SchemaModel:
    """Return the applicant form schema for the configured positions."""
    config = config or FormConfig()

    position_message = f"Position must be one of: {', '.join(config.positions)}"
    skills_message = f"Skills must be chosen from: {', '.join(config.skill_options)}"

    return SchemaModel(
        [
            FieldDefinition(
                name="fullName",
                label="Full Name",
                base_rule=constraint(
                    "required_text",
                    required("Full Name is required"),
                    text("Full Name must be text"),
                ),
            ),
            FieldDefinition(
                name="email",
                label="Email",
                base_rule=constraint(
                    "required_email",
                    required("Email is required"),
                    email("Invalid email format"),
                ),
            ),
            FieldDefinition(
                name="phoneNumber",
                label="Phone Number",
                base_rule=constraint(
                    "required_number",
                    required("Phone Number is required"),
                    numeric("Phone Number must be a valid number"),
                ),
            ),
            FieldDefinition(
                name=POSITION_FIELD,
                label="Position",
                base_rule=constraint(
                    "required_position",
                    required("Position is required"),
                    one_of(config.positions, position_message),
                ),
            ),
            FieldDefinition(
                name="relevantExperience",
                label="Relevant Experience",
                conditional_rules=(
                    ConditionalRule(
                        predicate=field_in(POSITION_FIELD, *config.experience_positions),
                        override=constraint(
                            "required_experience",
                            required("Relevant Experience is required"),
                            numeric("Relevant Experience must be a valid number"),
                            min_value(
                                config.min_relevant_experience,
                                "Experience must be greater than 0",
                            ),
                        ),
                    ),
                ),
            ),
            FieldDefinition(
                name="portfolioURL",
                label="Portfolio URL",
                conditional_rules=(
                    ConditionalRule(
                        predicate=field_in(POSITION_FIELD, *config.portfolio_positions),
                        override=constraint(
                            "required_url",
                            required("Portfolio URL is required"),
                            url("Invalid URL"),
                        ),
                    ),
                ),
            ),
            FieldDefinition(
                name="managementExperience",
                label="Management Experience",
                conditional_rules=(
                    ConditionalRule(
                        predicate=field_in(POSITION_FIELD, *config.management_positions),
                        override=constraint(
                            "required_management",
                            required("Management Experience is required"),
                            text("Management Experience must be text"),
                        ),
                    ),
                ),
            ),
            FieldDefinition(
                name=SKILLS_FIELD,
                label="Additional Skills",
                base_rule=constraint(
                    "non_empty_skills",
                    non_empty_set("At least one skill must be selected"),
                    subset_of(config.skill_options, skills_message),
                ),
            ),
            FieldDefinition(
                name=INTERVIEW_TIME_FIELD,
                label="Preferred Interview Time",
                base_rule=constraint(
                    "required_datetime",
                    required("Preferred Interview Time is required"),
                    datetime_value("Preferred Interview Time must be a valid date"),
                ),
            ),
        ]
    )
