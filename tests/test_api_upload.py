from __future__ import annotations

import pytest

pytest.importorskip("httpx")

from fastapi.testclient import TestClient

from patterncraft.api.app import fastapi_app
from patterncraft.config import reset_settings_cache


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("DB_DSN", f"sqlite:///{tmp_path / 'api.sqlite'}")
    monkeypatch.setenv("PATTERNCRAFT_UPLOAD_DIR", str(tmp_path / "uploads"))
    reset_settings_cache()
    yield TestClient(fastapi_app)
    reset_settings_cache()


def _growth_csv() -> bytes:
    lines = ["day,users"] + [f"d{k},{100 * 1.5 ** k!r}" for k in range(20)]
    return "\n".join(lines).encode()


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "PatternCraft API is running!"}


def test_upload_and_history(client, tmp_path):
    files = {"file": ("signups.csv", _growth_csv(), "text/csv")}
    response = client.post("/upload/csv", files=files, data={"owner_id": "bob"})
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "File uploaded and analyzed successfully!"
    assert body["pattern"]["type"] == "exponential"
    assert body["pattern"]["confidence"] == "88%"
    assert body["pattern"]["dataPoints"] == 20
    assert len(list((tmp_path / "uploads").iterdir())) == 1

    history = client.get("/upload/patterns", params={"owner_id": "bob"})
    assert history.status_code == 200
    records = history.json()
    assert len(records) == 1
    assert records[0]["originalName"] == "signups.csv"

    detail = client.get(f"/patterns/{records[0]['id']}")
    assert detail.status_code == 200
    assert detail.json()["summaryColumn"] == "users"


def test_filename_hint_applies_to_uploads(client):
    files = {"file": ("ocean_tides.csv", _growth_csv(), "text/csv")}
    body = client.post("/upload/csv", files=files).json()
    assert body["pattern"]["type"] == "sine_wave"
    assert body["pattern"]["confidence"] == "90%"


def test_csv_suffix_accepted_without_csv_content_type(client):
    files = {"file": ("plain.csv", b"x\n1\n", "application/octet-stream")}
    response = client.post("/upload/csv", files=files)
    assert response.status_code == 200
    assert response.json()["pattern"]["type"] == "unknown"
    assert response.json()["pattern"]["confidence"] == "50%"


def test_rejects_non_csv(client):
    files = {"file": ("notes.txt", b"hello", "text/plain")}
    response = client.post("/upload/csv", files=files)
    assert response.status_code == 400
    assert response.json()["detail"] == "Only CSV files are allowed!"


def test_rejects_oversized_upload(client, monkeypatch):
    monkeypatch.setenv("PATTERNCRAFT_MAX_UPLOAD_BYTES", "8")
    reset_settings_cache()
    files = {"file": ("big.csv", b"value\n1\n2\n3\n", "text/csv")}
    response = client.post("/upload/csv", files=files)
    assert response.status_code == 413


def test_unparseable_upload_fails(client):
    files = {"file": ("broken.csv", b"value\n\xff\xfe\xfd\n", "text/csv")}
    response = client.post("/upload/csv", files=files)
    assert response.status_code == 422
    assert response.json()["detail"].startswith("Upload failed")


def test_missing_pattern_is_404(client):
    assert client.get("/patterns/12345").status_code == 404


def test_classify_inline_rows(client):
    rows = [{"v": v} for v in [1, 2, 4, 8, 16, 32, 64, 128]]
    response = client.post("/classify", json={"source_name": "viral.csv", "rows": rows})
    assert response.status_code == 200
    body = response.json()
    assert body["patternType"] == "exponential"
    assert body["summary"] == {"min": 1.0, "max": 128.0, "avg": 31.875}
