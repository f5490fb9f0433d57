"""Tests for the selection-engine command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from selection_cli.analyze import (
    EXIT_BAD_INPUT,
    EXIT_INVALID_CONFIGURATION,
    EXIT_OK,
    build_parser,
    main,
)


def _write(tmp_path: Path, name: str, payload: object) -> str:
    path = tmp_path / name
    path.write_text(json.dumps(payload))
    return str(path)


class TestCli:
    def test_parser_requires_command(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_analyze(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        selections = _write(
            tmp_path, "sel.json", {"duration": 60, "focus": "strength", "energy": 2}
        )
        assert main(["analyze", "--selections", selections]) == EXIT_OK
        output = json.loads(capsys.readouterr().out)
        assert [c["id"] for c in output["conflicts"]] == ["energy_focus", "energy_duration"]

    def test_validate_blocking(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        selections = _write(
            tmp_path,
            "sel.json",
            {
                "injury": {"knee": {"selected": True, "severity": "severe"}},
                "areas": ["knee"],
            },
        )
        assert main(["validate", "--selections", selections]) == EXIT_INVALID_CONFIGURATION
        output = json.loads(capsys.readouterr().out)
        assert output["is_valid"] is False
        assert output["critical_issues"][0]["severity"] == "critical"

    def test_validate_with_context(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        selections = _write(tmp_path, "sel.json", {"focus": "power"})
        context = _write(tmp_path, "ctx.json", {"userProfile": {"fitnessLevel": "new to exercise"}})
        args = ["validate", "--selections", selections, "--context", context, "--all"]
        assert main(args) == EXIT_OK
        output = json.loads(capsys.readouterr().out)
        assert [c["id"] for c in output["conflicts"]] == ["experience_focus"]

    def test_change(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        selections = _write(tmp_path, "sel.json", {"duration": 60, "focus": "strength", "energy": 2})
        assert main(["change", "--selections", selections, "--field", "energy", "--value", "4"]) == EXIT_OK
        output = json.loads(capsys.readouterr().out)
        assert {i["impact_type"] for i in output["impacts"]} == {"positive"}

    def test_change_bare_word_value(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        selections = _write(tmp_path, "sel.json", {"energy": 2, "focus": "strength"})
        args = ["change", "--selections", selections, "--field", "focus", "--value", "recovery"]
        assert main(args) == EXIT_OK
        output = json.loads(capsys.readouterr().out)
        assert output["impacts"][0]["description"].startswith("Resolves conflict")

    def test_duration(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["duration", "--duration", "22"]) == EXIT_OK
        output = json.loads(capsys.readouterr().out)
        assert output["strategy"]["adjusted_duration"] == 20
        assert output["valid"] is True
        assert output["optimization"]["is_optimal"] is False

    def test_duration_from_params_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        params = _write(tmp_path, "params.json", {"duration": 45, "fitnessLevel": "beginner"})
        assert main(["duration", "--params", params]) == EXIT_OK
        output = json.loads(capsys.readouterr().out)
        assert output["strategy"]["adjusted_duration"] == 30

    def test_confidence(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        plan = _write(tmp_path, "plan.json", {"title": "Empty"})
        assert main(["confidence", "--plan", plan, "--breakdown"]) == EXIT_OK
        output = json.loads(capsys.readouterr().out)
        assert output["confidence"]["level"] == "good"
        assert len(output["breakdown"]) == 5

    def test_confidence_with_profile(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        plan = _write(tmp_path, "plan.json", {"title": "Empty"})
        profile = _write(
            tmp_path,
            "profile.json",
            {
                "fitnessLevel": "beginner",
                "goals": ["strength"],
                "availableEquipment": ["Mat"],
                "intensityPreference": "low",
            },
        )
        assert main(["confidence", "--plan", plan, "--profile", profile]) == EXIT_OK
        output = json.loads(capsys.readouterr().out)
        # four profile inputs present, no plan inputs
        assert output["confidence"]["metadata"]["data_quality"] == pytest.approx(4 / 7)

    def test_missing_file(self, tmp_path: Path) -> None:
        assert main(["analyze", "--selections", str(tmp_path / "nope.json")]) == EXIT_BAD_INPUT

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        assert main(["analyze", "--selections", str(path)]) == EXIT_BAD_INPUT

    def test_unknown_selection_field(self, tmp_path: Path) -> None:
        selections = _write(tmp_path, "sel.json", {"mood": "great"})
        assert main(["analyze", "--selections", selections]) == EXIT_BAD_INPUT
