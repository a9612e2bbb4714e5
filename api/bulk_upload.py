"""
Bulk upload API endpoints
"""
import logging
from typing import Optional

from fastapi import APIRouter, File, Form, UploadFile
from fastapi.responses import JSONResponse

from api.models import BulkUploadResponse, ErrorResponse
from core.bulk_upload import (
    BulkUploadError,
    list_uploads,
    process_bulk_upload,
    record_upload,
    validate_upload,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=BulkUploadResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def upload_bulk_file(
    file: Optional[UploadFile] = File(None),
    type: Optional[str] = Form(None),
):
    """
    Import a spreadsheet of policies, claims, customers or leads.

    Accepts .xlsx, .xls and .csv files up to 10MB and returns the
    processing report for the upload type.
    """
    try:
        filename = file.filename if file is not None else None
        size = file.size if file is not None else 0
        if file is not None and size is None:
            size = len(await file.read())
        # size comes from the parsed upload, so oversized files are never read into memory
        validate_upload(filename, size, type)

        result = await process_bulk_upload(type)
        record_upload(type, filename, size, result)

        return {
            "success": True,
            "message": f"{type} bulk upload completed successfully",
            "data": result,
        }
    except BulkUploadError as e:
        return JSONResponse(status_code=400, content={"success": False, "error": str(e)})
    except Exception:
        logger.exception("Bulk upload error")
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Failed to process bulk upload"},
        )


@router.get("/history")
def upload_history(limit: int = 20):
    """Most recent uploads and their processing reports."""
    return {"success": True, "data": list_uploads(limit=limit)}
