"""Typer CLI entrypoint for validating applicant records."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import pendulum
import typer
import yaml
from pydantic import ValidationError

from . import __version__
from .container import create_container
from .core import Success
from .logging import configure_logging
from .schemas import load_config
from .summary import render_summary, summary_payload

app = typer.Typer(help="Applicant form validation CLI.")


def _load_settings(config: Path) -> dict[str, Any]:
    with config.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, dict):
        raise typer.BadParameter("Config file must be a YAML object", param_hint="'--config'")
    try:
        return load_config(loaded).to_settings()
    except ValidationError as exc:
        raise typer.BadParameter(f"Invalid config: {exc}", param_hint="'--config'") from exc


def _load_record(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = json.load(handle)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise typer.BadParameter(f"Invalid record JSON: {exc}", param_hint="'--record'") from exc
    if not isinstance(data, dict):
        raise typer.BadParameter("Record must be a JSON object", param_hint="'--record'")
    return data


@app.command()
def run(
    record: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Applicant record JSON path."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    output: Optional[Path] = typer.Option(
        None,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Write the validation result as JSON.",
    ),
    log_level: Optional[str] = typer.Option(None, help="Log level for structured logging."),
) -> None:
    """Validate an applicant record and print the submission summary."""
    settings = _load_settings(config) if config else {}
    container = create_container(settings=settings)

    json_output = container.config.logging.json_output()
    configure_logging(
        log_level or container.config.logging.level() or "INFO",
        json_output=True if json_output is None else json_output,
    )

    form = container.form()
    for name, value in _load_record(record).items():
        try:
            form.set_value(name, value)
        except KeyError as exc:
            raise typer.BadParameter(f"Unknown field in record: {name!r}", param_hint="'--record'") from exc

    result = form.submit()
    submitted = form.submitted if isinstance(result, Success) else None

    if output:
        payload = {
            "metadata": {
                "record": str(record),
                "timestamp": pendulum.now().to_iso8601_string(),
                "app_version": __version__,
            },
            "result": {
                "status": "submitted" if submitted else "rejected",
                "errors": form.errors,
                "submission": summary_payload(submitted) if submitted else None,
            },
        }
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")

    if submitted is None:
        typer.echo(json.dumps(form.errors, ensure_ascii=False, indent=2))
        raise typer.Exit(code=1)

    typer.echo("Submission Summary")
    for line in render_summary(submitted, container.schema()):
        typer.echo(line)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
