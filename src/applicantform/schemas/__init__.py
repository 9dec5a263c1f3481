"""Pydantic schema definitions for submitted records and configuration."""

from __future__ import annotations

from .application import SubmittedApplication
from .config import AppConfig, FormConfig, LoggingConfig, load_config

__all__ = [
    "AppConfig",
    "FormConfig",
    "LoggingConfig",
    "SubmittedApplication",
    "load_config",
]
