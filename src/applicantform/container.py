"""Dependency injection container for the applicant form."""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import build_application_schema
from .form import ApplicationForm
from .schemas import FormConfig


class FormContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    form_config = providers.Singleton(FormConfig)

    schema = providers.Singleton(build_application_schema, config=form_config)

    form = providers.Factory(ApplicationForm, schema=schema)


def create_container(*, settings: dict | None = None) -> FormContainer:
    """Instantiate container with optional overrides."""

    container = FormContainer()

    if not settings:
        return container

    container.config.from_dict(settings if isinstance(settings, dict) else {})

    form_settings = settings.get("form") if isinstance(settings, dict) else None
    if form_settings:
        form_config = FormConfig(**form_settings)
        container.form_config.override(providers.Object(form_config))

    return container
