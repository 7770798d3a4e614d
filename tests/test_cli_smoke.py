import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

pytest.importorskip("typer")

PYTHONPATH = str(Path(__file__).resolve().parents[1] / "src")


def _run(args, tmp_path):
    env = {
        **os.environ,
        "DB_DSN": f"sqlite:///{tmp_path / 'cli.sqlite'}",
        "PYTHONPATH": PYTHONPATH,
    }
    return subprocess.run(
        [sys.executable, "-m", "patterncraft.cli.main", *args],
        capture_output=True,
        text=True,
        env=env,
    )


def test_cli_classify_and_history(tmp_path: Path) -> None:
    dataset = tmp_path / "population.csv"
    dataset.write_text("n\n" + "\n".join(str(v) for v in [1, 1, 2, 3, 5, 8, 13, 21]) + "\n")

    result = _run(["classify", str(dataset), "--save", "--owner", "cli-user"], tmp_path)
    assert result.returncode == 0, result.stderr
    payload = json.loads(result.stdout)
    assert payload["patternType"] == "fibonacci"
    assert payload["rowCount"] == 8
    assert payload["id"] >= 1

    history = _run(["patterns", "--owner", "cli-user"], tmp_path)
    assert history.returncode == 0, history.stderr
    records = json.loads(history.stdout)
    assert records[0]["originalName"] == "population.csv"


def test_cli_reports_ingestion_failure(tmp_path: Path) -> None:
    dataset = tmp_path / "broken.csv"
    dataset.write_bytes(b"value\n\xff\xfe\n")
    result = _run(["classify", str(dataset)], tmp_path)
    assert result.returncode == 1
    assert "Classification failed" in result.stderr


def test_cli_patterns_without_records_prints_empty_list(tmp_path: Path) -> None:
    result = _run(["patterns", "--owner", "nobody"], tmp_path)
    assert result.returncode == 0, result.stderr
    assert json.loads(result.stdout) == []
