"""Synchronous helpers and their FastAPI wrappers.

The helpers keep the test suite light-weight while the FastAPI application
exposes the same capabilities over HTTP.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, File, Form, HTTPException, Query, UploadFile

from ..config import get_settings
from ..detect.engine import classify_file, classify_rows
from ..errors import IngestionFailure
from ..io import uploads
from ..persistence import PatternRecord, PatternResultsRepository, db
from . import schemas

logger = logging.getLogger(__name__)

DEFAULT_OWNER = "anonymous"
_READ_CHUNK = 1024 * 1024


def analyze_upload(
    filename: Optional[str],
    content_type: Optional[str],
    payload: bytes,
    owner_id: str = DEFAULT_OWNER,
) -> Dict[str, Any]:
    """Store an uploaded CSV, classify it and persist the result.

    Raises :class:`~patterncraft.io.uploads.UploadRejected` for invalid
    uploads and :class:`~patterncraft.errors.IngestionFailure` when the file
    cannot be parsed.  The stored file is kept in both cases.
    """

    original_name = uploads.validate_upload(filename, content_type, len(payload))
    path = uploads.store_upload(original_name, payload)
    logger.info("Stored upload %s as %s", original_name, path.name)

    result = classify_file(path, source_name=original_name)
    record = PatternRecord.from_result(
        result,
        owner_id=owner_id,
        filename=path.name,
        original_name=original_name,
    )
    with db.session() as conn:
        PatternResultsRepository(conn).insert(record)
    return record.to_dict()


def classify_payload(request: schemas.ClassifyRequest) -> Dict[str, Any]:
    """Classify inline rows without storing anything."""

    return classify_rows(request.as_rows(), request.source_name).to_dict()


def list_patterns(owner_id: str = DEFAULT_OWNER, limit: int | None = None) -> List[Dict[str, Any]]:
    """Return the owner's most recent results, newest first."""

    if limit is None:
        limit = get_settings().recent_limit
    with db.session() as conn:
        records = PatternResultsRepository(conn).list_recent(owner_id, limit=limit)
    return [r.to_dict() for r in records]


def get_pattern(record_id: int) -> Dict[str, Any] | None:
    with db.session() as conn:
        record = PatternResultsRepository(conn).get(record_id)
    return record.to_dict() if record else None


async def _read_capped(file: UploadFile, limit: int) -> bytes:
    chunks: List[bytes] = []
    total = 0
    while True:
        chunk = await file.read(_READ_CHUNK)
        if not chunk:
            break
        total += len(chunk)
        if total > limit:
            raise uploads.UploadRejected(
                f"File exceeds the {limit} byte upload limit", status_code=413
            )
        chunks.append(chunk)
    return b"".join(chunks)


fastapi_app = FastAPI(title="PatternCraft API", version="0.1.0")


@fastapi_app.get('/', response_model=schemas.MessageResponse)
def root_endpoint() -> schemas.MessageResponse:
    return schemas.MessageResponse(message="PatternCraft API is running!")


@fastapi_app.post('/upload/csv', response_model=schemas.UploadResponse)
async def upload_csv_endpoint(
    file: UploadFile = File(...),
    owner_id: str = Form(DEFAULT_OWNER),
) -> schemas.UploadResponse:
    """Upload a CSV file, detect its pattern and persist the result."""

    try:
        try:
            uploads.validate_upload(file.filename, file.content_type, 0)
            payload = await _read_capped(file, get_settings().max_upload_bytes)
        finally:
            await file.close()
        record = analyze_upload(file.filename, file.content_type, payload, owner_id=owner_id)
    except uploads.UploadRejected as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
    except IngestionFailure as exc:
        logger.warning("Upload of %s failed: %s", file.filename, exc)
        raise HTTPException(status_code=422, detail=f"Upload failed: {exc}") from exc

    return schemas.UploadResponse(
        message="File uploaded and analyzed successfully!",
        pattern=schemas.brief_from_payload(record),
    )


@fastapi_app.get('/upload/patterns', response_model=List[Dict[str, Any]])
def patterns_list_endpoint(
    owner_id: str = Query(DEFAULT_OWNER),
    limit: Optional[int] = Query(None, ge=1, le=100),
) -> List[Dict[str, Any]]:
    """List the owner's most recent classification results."""

    return list_patterns(owner_id=owner_id, limit=limit)


@fastapi_app.get('/patterns/{record_id}', response_model=Dict[str, Any])
def pattern_detail_endpoint(record_id: int) -> Dict[str, Any]:
    """Return one persisted classification result."""

    payload = get_pattern(record_id)
    if payload is None:
        raise HTTPException(status_code=404, detail='Pattern not found')
    return payload


@fastapi_app.post('/classify', response_model=schemas.ClassificationModel)
def classify_endpoint(request: schemas.ClassifyRequest) -> Dict[str, Any]:
    """Classify rows posted as JSON."""

    return classify_payload(request)


app = fastapi_app
