"""generate_schedule.py CLI tests."""

from __future__ import annotations

import csv
import subprocess
import sys
from pathlib import Path


ROOT_DIR = Path(__file__).resolve().parent.parent
SCRIPT_PATH = ROOT_DIR / "scripts" / "generate_schedule.py"


def _run(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, str(SCRIPT_PATH), *args],
        cwd=ROOT_DIR,
        capture_output=True,
        text=True,
        timeout=60,
    )


def _teams_csv(tmp_path: Path) -> Path:
    path = tmp_path / "teams.csv"
    path.write_text(
        "id,name,stadium\n"
        "A,Anchors,Anchor Park\n"
        "B,Bears,Bear Dome\n"
        "C,Comets,Comet Field\n"
        "D,Dolphins,Dolphin Bay\n"
    )
    return path


def test_cli_writes_valid_schedule(tmp_path: Path):
    output = tmp_path / "schedule.csv"
    result = _run(
        str(_teams_csv(tmp_path)),
        "--start-date", "2025-01-06",
        "--time-slot", "18:00", "--time-slot", "20:00",
        "--output", str(output),
    )

    assert result.returncode == 0, f"stdout:\n{result.stdout}\nstderr:\n{result.stderr}"
    assert "DOUBLE ROUND-ROBIN" in result.stdout
    assert "Schedule looks good" in result.stdout

    with output.open() as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 12
    assert rows[0]["date"] == "2025-01-06"
    assert rows[0]["time"] == "18:00"
    assert rows[1]["time"] == "20:00"
    assert {r["date"] for r in rows if r["round"] == "2"} == {"2025-01-13"}


def test_cli_single_format_quiet(tmp_path: Path):
    result = _run(
        str(_teams_csv(tmp_path)), "--start-date", "2025-01-06", "--format", "single", "-q",
    )
    assert result.returncode == 0, result.stderr
    assert "ROUND-ROBIN" not in result.stdout


def test_cli_missing_start_date_fails(tmp_path: Path):
    result = _run(str(_teams_csv(tmp_path)))
    assert result.returncode == 1
    assert "start_date" in result.stderr


def test_cli_missing_team_file_fails(tmp_path: Path):
    result = _run(str(tmp_path / "missing.csv"), "--start-date", "2025-01-06")
    assert result.returncode == 1
