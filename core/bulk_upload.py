"""
Bulk Upload Module

Validates spreadsheet uploads (policies, claims, customers, leads) and
produces the processing report shown after an import. Row-level parsing is
not wired up yet: every accepted file gets the canned report for its type
after a fixed processing delay.
"""

from __future__ import annotations

import asyncio
import copy
import json
import logging
import os
import uuid
from datetime import datetime, timezone
from typing import Optional

from dotenv import load_dotenv
from sqlalchemy import text

from core.db import get_conn

load_dotenv()

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = (".xlsx", ".xls", ".csv")
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
PROCESSING_DELAY_SECONDS = float(os.getenv("BULK_UPLOAD_DELAY_SECONDS", "2.0"))

UPLOAD_TYPES = ("policies", "claims", "customers", "leads")

MOCK_RESULTS = {
    "policies": {
        "recordsProcessed": 150,
        "recordsSuccessful": 148,
        "recordsFailed": 2,
        "errors": [
            "Row 45: Invalid policy number format",
            "Row 78: Missing required field",
        ],
    },
    "claims": {
        "recordsProcessed": 75,
        "recordsSuccessful": 73,
        "recordsFailed": 2,
        "errors": [
            "Row 23: Invalid claim number format",
            "Row 45: Missing required field",
        ],
    },
    "customers": {
        "recordsProcessed": 200,
        "recordsSuccessful": 195,
        "recordsFailed": 5,
        "errors": [
            "Row 12: Invalid email format",
            "Row 45: Missing required field",
            "Row 78: Duplicate customer",
        ],
    },
    "leads": {
        "recordsProcessed": 300,
        "recordsSuccessful": 285,
        "recordsFailed": 15,
        "errors": [
            "Row 12: Invalid phone number format",
            "Row 45: Missing required field",
            "Row 78: Duplicate lead",
        ],
    },
}

EMPTY_RESULT = {
    "recordsProcessed": 0,
    "recordsSuccessful": 0,
    "recordsFailed": 0,
    "errors": [],
}


class BulkUploadError(ValueError):
    """An upload rejected before processing."""


def file_extension(filename: str) -> str:
    """Lower-cased text after the last dot, with the dot ('.csv')."""
    return "." + filename.rsplit(".", 1)[-1].lower()


def validate_upload(filename: Optional[str], size: int, upload_type: Optional[str]):
    """
    Check an upload before it is processed.

    Checks run in a fixed order and the first failure wins: file present,
    type present, extension allowed, size within MAX_FILE_SIZE.
    """
    if not filename:
        raise BulkUploadError("No file provided")
    if not upload_type:
        raise BulkUploadError("No type specified")
    if file_extension(filename) not in ALLOWED_EXTENSIONS:
        raise BulkUploadError("Invalid file type. Only Excel and CSV files are allowed.")
    if size > MAX_FILE_SIZE:
        raise BulkUploadError("File size exceeds 10MB limit")


async def process_bulk_upload(upload_type: str) -> dict:
    """
    Process an accepted upload and return its report.

    Returns:
        {"recordsProcessed", "recordsSuccessful", "recordsFailed", "errors"};
        all zero for an unrecognised type.
    """
    await asyncio.sleep(PROCESSING_DELAY_SECONDS)
    return copy.deepcopy(MOCK_RESULTS.get(upload_type, EMPTY_RESULT))


def record_upload(upload_type: str, filename: str, file_size: int, result: dict) -> str:
    """Store an audit row for a processed upload. Returns its id."""
    upload_id = str(uuid.uuid4())
    with get_conn() as conn:
        conn.execute(text("""
            INSERT INTO bulk_uploads (
                id, upload_type, filename, file_size, records_processed,
                records_successful, records_failed, errors, created_at
            ) VALUES (
                :id, :upload_type, :filename, :file_size, :records_processed,
                :records_successful, :records_failed, :errors, :created_at
            )
        """), {
            "id": upload_id,
            "upload_type": upload_type,
            "filename": filename,
            "file_size": file_size,
            "records_processed": result["recordsProcessed"],
            "records_successful": result["recordsSuccessful"],
            "records_failed": result["recordsFailed"],
            "errors": json.dumps(result["errors"]),
            "created_at": datetime.now(timezone.utc).isoformat(),
        })

    logger.info("Bulk upload %s: %s (%s rows, %s failed)",
                upload_type, filename, result["recordsProcessed"], result["recordsFailed"])
    return upload_id


def list_uploads(limit: int = 20) -> list[dict]:
    """Most recent uploads first."""
    with get_conn() as conn:
        result = conn.execute(text("""
            SELECT id, upload_type, filename, file_size, records_processed,
                   records_successful, records_failed, errors, created_at
            FROM bulk_uploads
            ORDER BY created_at DESC
            LIMIT :limit
        """), {"limit": limit})

        uploads = []
        for row in result.fetchall():
            upload = dict(row._mapping)
            upload["errors"] = json.loads(upload["errors"] or "[]")
            uploads.append(upload)
        return uploads
