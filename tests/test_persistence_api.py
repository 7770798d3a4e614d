from __future__ import annotations

import pytest

from patterncraft import classify_rows
from patterncraft.api import app, schemas
from patterncraft.config import reset_settings_cache
from patterncraft.io.uploads import UploadRejected
from patterncraft.persistence import PatternRecord, PatternResultsRepository, session


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    monkeypatch.setenv("DB_DSN", f"sqlite:///{tmp_path / 'patterns.sqlite'}")
    monkeypatch.setenv("PATTERNCRAFT_UPLOAD_DIR", str(tmp_path / "uploads"))
    reset_settings_cache()
    yield tmp_path
    reset_settings_cache()


def test_repository_round_trip(workspace):
    result = classify_rows([{"v": "42"} for _ in range(50)], "flat.csv")
    record = PatternRecord.from_result(
        result, owner_id="user-1", filename="1-flat.csv", original_name="flat.csv"
    )
    with session() as conn:
        record_id = PatternResultsRepository(conn).insert(record)

    with session() as conn:
        loaded = PatternResultsRepository(conn).get(record_id)
    assert loaded is not None
    assert loaded.pattern_type == "unknown"
    assert loaded.confidence == 0.5
    assert loaded.row_count == 50
    assert loaded.summary == result.summary
    assert loaded.created_at


def test_empty_summary_persists_as_null(workspace):
    result = classify_rows([{"name": "x"}], "names.csv")
    record = PatternRecord.from_result(result, owner_id="u", filename="f", original_name="names.csv")
    with session() as conn:
        repo = PatternResultsRepository(conn)
        loaded = repo.get(repo.insert(record))
    assert loaded.summary.is_empty
    assert loaded.to_dict()["summary"] == {"min": None, "max": None, "avg": None}


def test_list_recent_newest_first_and_limited(workspace):
    with session() as conn:
        repo = PatternResultsRepository(conn)
        for i in range(12):
            result = classify_rows([{"v": str(i)}], f"file{i}.csv")
            repo.insert(
                PatternRecord.from_result(
                    result, owner_id="owner", filename=f"{i}.csv", original_name=f"file{i}.csv"
                )
            )
        repo.insert(
            PatternRecord.from_result(
                classify_rows([], "other.csv"), owner_id="someone-else", filename="x", original_name="x"
            )
        )

    rows = app.list_patterns("owner")
    assert len(rows) == 10
    assert rows[0]["originalName"] == "file11.csv"
    assert all(r["ownerId"] == "owner" for r in rows)
    assert len(app.list_patterns("owner", limit=3)) == 3


def test_analyze_upload_stores_file_and_result(workspace):
    payload = "\n".join(["t,level"] + [f"t{i},{100 if i % 2 else 110}" for i in range(40)]).encode()
    record = app.analyze_upload("harbour.csv", "text/csv", payload, owner_id="alice")

    assert record["patternType"] == "sine_wave"
    assert record["confidence"] == 0.90
    assert record["dataPoints"] == 40
    assert record["mainColumn"] == "level"
    assert (workspace / "uploads" / record["filename"]).exists()
    assert record["filename"].endswith("-harbour.csv")

    assert app.get_pattern(record["id"])["originalName"] == "harbour.csv"
    assert app.get_pattern(9999) is None
    brief = schemas.brief_from_payload(record)
    assert brief.confidence == "90%"


def test_analyze_upload_rejects_non_csv(workspace):
    with pytest.raises(UploadRejected, match="Only CSV"):
        app.analyze_upload("notes.txt", "text/plain", b"hello")


def test_classify_payload_inline_rows():
    request = schemas.ClassifyRequest(
        source_name="numbers", rows=[{"n": v} for v in [1, 1, 2, 3, 5, 8, 13]]
    )
    payload = app.classify_payload(request)
    assert payload["patternType"] == "fibonacci"
    assert payload["rowCount"] == 7
