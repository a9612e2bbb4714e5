"""
Tests for the bulk upload endpoint and its validation rules
"""
import time

import pytest

from core import bulk_upload
from api import bulk_upload as bulk_upload_api

CSV = b"policy_number,customer\nPOL-001,Rajesh Kumar\n"


def _upload(client, filename="policies.csv", content=CSV, upload_type="policies"):
    files = {"file": (filename, content, "text/csv")} if filename else None
    data = {"type": upload_type} if upload_type else None
    return client.post("/api/bulk-upload", files=files, data=data)


def test_missing_file(client):
    response = client.post("/api/bulk-upload", data={"type": "policies"})
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "No file provided"}


def test_missing_type(client):
    response = _upload(client, upload_type=None)
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "No type specified"}


def test_invalid_extension(client):
    response = _upload(client, filename="data.txt")
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "Invalid file type. Only Excel and CSV files are allowed."


def test_file_too_large(client):
    content = b"x" * (11 * 1024 * 1024)
    response = _upload(client, filename="big.xlsx", content=content)
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "File size exceeds 10MB limit"}


def test_policies_upload_waits_and_returns_report(client, monkeypatch):
    monkeypatch.setattr(bulk_upload, "PROCESSING_DELAY_SECONDS", 2.0)

    started = time.monotonic()
    response = _upload(client)
    elapsed = time.monotonic() - started

    assert elapsed >= 2.0
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "policies bulk upload completed successfully"
    assert body["data"]["recordsProcessed"] == 150
    assert body["data"]["recordsSuccessful"] == 148
    assert body["data"]["recordsFailed"] == 2
    assert len(body["data"]["errors"]) == 2


def test_unknown_type_gets_zeroed_report(client):
    response = _upload(client, upload_type="unknown_value")
    assert response.status_code == 200
    assert response.json()["data"] == {
        "recordsProcessed": 0,
        "recordsSuccessful": 0,
        "recordsFailed": 0,
        "errors": [],
    }


@pytest.mark.parametrize("upload_type, processed, failed", [
    ("claims", 75, 2),
    ("customers", 200, 5),
    ("leads", 300, 15),
])
def test_report_per_type(client, upload_type, processed, failed):
    response = _upload(client, filename="import.xlsx", upload_type=upload_type)
    data = response.json()["data"]
    assert data["recordsProcessed"] == processed
    assert data["recordsFailed"] == failed
    assert data["recordsSuccessful"] == processed - failed


def test_extension_check_is_case_insensitive(client):
    response = _upload(client, filename="LEADS.XLS", upload_type="leads")
    assert response.status_code == 200


def test_checks_run_in_order():
    # no file beats everything else
    with pytest.raises(bulk_upload.BulkUploadError, match="No file provided"):
        bulk_upload.validate_upload(None, 0, None)
    # missing type is reported before a bad extension
    with pytest.raises(bulk_upload.BulkUploadError, match="No type specified"):
        bulk_upload.validate_upload("notes.txt", 0, "")
    # bad extension is reported before size
    with pytest.raises(bulk_upload.BulkUploadError, match="Invalid file type"):
        bulk_upload.validate_upload("notes.txt", bulk_upload.MAX_FILE_SIZE + 1, "leads")


def test_exactly_max_size_is_accepted():
    bulk_upload.validate_upload("ok.csv", bulk_upload.MAX_FILE_SIZE, "policies")


def test_unexpected_failure_returns_500(client, monkeypatch):
    async def broken(upload_type):
        raise RuntimeError("disk full")

    monkeypatch.setattr(bulk_upload_api, "process_bulk_upload", broken)
    response = _upload(client)
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Failed to process bulk upload"}


def test_reports_are_not_shared_between_calls(client):
    first = _upload(client).json()["data"]
    first["errors"].append("mutated")
    second = _upload(client).json()["data"]
    assert len(second["errors"]) == 2


def test_upload_history(client):
    _upload(client, filename="claims.csv", upload_type="claims")
    _upload(client, filename="bad.txt")

    response = client.get("/api/bulk-upload/history")
    assert response.status_code == 200
    history = response.json()["data"]
    # rejected uploads are not recorded
    assert len(history) == 1
    assert history[0]["upload_type"] == "claims"
    assert history[0]["filename"] == "claims.csv"
    assert history[0]["records_processed"] == 75
    assert history[0]["errors"] == [
        "Row 23: Invalid claim number format",
        "Row 45: Missing required field",
    ]


def test_oversized_file_rejected_without_reading(client, monkeypatch):
    from starlette.datastructures import UploadFile

    reads = []
    original_read = UploadFile.read

    async def tracking_read(self, size=-1):
        reads.append(self.filename)
        return await original_read(self, size)

    monkeypatch.setattr(UploadFile, "read", tracking_read)

    response = _upload(client, filename="big.csv", content=b"x" * (bulk_upload.MAX_FILE_SIZE + 1))
    assert response.status_code == 400
    assert response.json()["error"] == "File size exceeds 10MB limit"
    assert reads == []


def test_recorded_size_matches_upload(client):
    _upload(client)
    assert client.get("/api/bulk-upload/history").json()["data"][0]["file_size"] == len(CSV)
