import importlib.util
import json
import sys
from pathlib import Path

import pytest

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "assess_fatigue.py"


@pytest.fixture
def cli():
    spec = importlib.util.spec_from_file_location("assess_fatigue", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def run(cli, monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["assess_fatigue.py", *args])
    cli.main()


NIGHT_SHIFT_ARGS = ("--sleep-last-24", "4", "--sleep-previous-24", "4", "--wake", "20:00", "--start", "02:00")


def test_cli_prints_report_table(cli, monkeypatch, capsys):
    run(cli, monkeypatch, *NIGHT_SHIFT_ARGS)
    out = capsys.readouterr().out

    assert "Fatigue score : 10/10 (Extreme)" in out
    assert "Sleep (48h)   : 8 h" in out
    assert "Hours awake   : 6.0 h" in out
    assert "Stop Work (or do not commence)." in out
    assert "Extreme  02:00-01:00  (24 h)" in out
    assert "02:00     10  Extreme" in out


def test_cli_json_output(cli, monkeypatch, capsys):
    run(cli, monkeypatch, *NIGHT_SHIFT_ARGS, "--json")
    data = json.loads(capsys.readouterr().out)

    assert data["score"] == 10
    assert data["level"] == "Extreme"
    assert data["totalSleep48"] == 8.0
    assert data["hoursAwake"] == 6.0
    assert len(data["projections"]) == 24
    assert data["projections"][0] == {"time": "02:00", "level": "Extreme", "score": 10}
    assert len(data["segments"]) == 1
    assert "assessmentId" not in data


def test_cli_rejects_malformed_time(cli, monkeypatch, capsys):
    with pytest.raises(SystemExit) as exc:
        run(cli, monkeypatch, "--sleep-last-24", "8", "--sleep-previous-24", "8", "--wake", "24:00", "--start", "07:00")

    assert exc.value.code == 2
    assert "Invalid input" in capsys.readouterr().err
