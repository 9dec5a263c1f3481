from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from applicantform.cli import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def write_json(path: Path, payload: object) -> None:
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")


def designer_record(**overrides) -> dict:
    record = {
        "fullName": "Ada Lovelace",
        "email": "ada@example.com",
        "phoneNumber": "5551234",
        "position": "Designer",
        "relevantExperience": "4",
        "portfolioURL": "https://x.com",
        "additionalSkills": ["CSS"],
        "interviewTime": "2026-11-02T10:00:00",
    }
    record.update(overrides)
    return record


def test_cli_prints_summary_and_writes_output(tmp_path: Path, runner: CliRunner) -> None:
    record_path = tmp_path / "record.json"
    output_path = tmp_path / "out" / "result.json"
    write_json(record_path, designer_record())

    result = runner.invoke(
        app,
        ["--record", str(record_path), "--output", str(output_path)],
    )

    assert result.exit_code == 0, result.stdout
    assert "Submission Summary" in result.stdout
    assert "Position: Designer" in result.stdout
    assert "Portfolio URL: https://x.com" in result.stdout

    rendered = json.loads(output_path.read_text(encoding="utf-8"))
    assert rendered["result"]["status"] == "submitted"
    assert rendered["result"]["errors"] == {}
    assert rendered["result"]["submission"]["relevantExperience"] == 4.0
    assert rendered["metadata"]["app_version"]


def test_cli_reports_errors_and_exits_nonzero(tmp_path: Path, runner: CliRunner) -> None:
    record_path = tmp_path / "record.json"
    output_path = tmp_path / "result.json"
    write_json(record_path, designer_record(portfolioURL="", additionalSkills=[]))

    result = runner.invoke(
        app,
        ["--record", str(record_path), "--output", str(output_path)],
    )

    assert result.exit_code == 1
    rendered = json.loads(output_path.read_text(encoding="utf-8"))
    assert rendered["result"]["status"] == "rejected"
    assert rendered["result"]["submission"] is None
    assert rendered["result"]["errors"] == {
        "portfolioURL": "Portfolio URL is required",
        "additionalSkills": "At least one skill must be selected",
    }


def test_cli_applies_yaml_config(tmp_path: Path, runner: CliRunner) -> None:
    record_path = tmp_path / "record.json"
    config_path = tmp_path / "config.yaml"
    write_json(record_path, designer_record(position="Intern", portfolioURL=""))
    config_path.write_text(
        "form:\n"
        "  positions: [Developer, Designer, Manager, Intern]\n"
        "logging:\n"
        "  level: WARNING\n"
        "  json_output: false\n",
        encoding="utf-8",
    )

    result = runner.invoke(
        app,
        ["--record", str(record_path), "--config", str(config_path)],
    )

    assert result.exit_code == 0, result.stdout
    assert "Position: Intern" in result.stdout
    assert "Relevant Experience" not in result.stdout


def test_cli_rejects_invalid_config(tmp_path: Path, runner: CliRunner) -> None:
    record_path = tmp_path / "record.json"
    config_path = tmp_path / "config.yaml"
    write_json(record_path, designer_record())
    config_path.write_text("form:\n  positions: [Developer]\n", encoding="utf-8")

    result = runner.invoke(
        app,
        ["--record", str(record_path), "--config", str(config_path)],
    )

    assert result.exit_code == 2


def test_cli_rejects_malformed_record(tmp_path: Path, runner: CliRunner) -> None:
    record_path = tmp_path / "record.json"
    record_path.write_text("{invalid", encoding="utf-8")

    result = runner.invoke(app, ["--record", str(record_path)])

    assert result.exit_code == 2


def test_cli_rejects_unknown_fields(tmp_path: Path, runner: CliRunner) -> None:
    record_path = tmp_path / "record.json"
    write_json(record_path, designer_record(nickname="Ada"))

    result = runner.invoke(app, ["--record", str(record_path)])

    assert result.exit_code == 2


def test_cli_rejects_undecodable_record(tmp_path: Path, runner: CliRunner) -> None:
    record_path = tmp_path / "record.json"
    record_path.write_bytes(b"\xff{")

    result = runner.invoke(app, ["--record", str(record_path)])

    assert result.exit_code == 2


def test_cli_reports_non_text_name_as_field_error(tmp_path: Path, runner: CliRunner) -> None:
    record_path = tmp_path / "record.json"
    output_path = tmp_path / "result.json"
    write_json(record_path, designer_record(fullName=["Ada"]))

    result = runner.invoke(
        app,
        ["--record", str(record_path), "--output", str(output_path)],
    )

    assert result.exit_code == 1
    rendered = json.loads(output_path.read_text(encoding="utf-8"))
    assert rendered["result"]["errors"] == {"fullName": "Full Name must be text"}
