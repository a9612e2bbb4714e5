"""
Master data API endpoints
"""
from typing import Optional

from fastapi import APIRouter, Body, HTTPException, Query, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from core import master_data, reference_data
from api.models import MASTER_MODELS

router = APIRouter()


def _require_table(table: str):
    if table not in master_data.MASTER_TABLES:
        raise HTTPException(status_code=404, detail=f"Unknown master table: {table}")


def _parse_body(table: str, payload: dict, partial: bool) -> dict:
    model = MASTER_MODELS[table][1 if partial else 0]
    try:
        parsed = model.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationError(e.errors())
    return parsed.model_dump(exclude_unset=partial)


@router.get("/tables")
def list_tables():
    """Master tables available to the console."""
    return {
        "success": True,
        "data": [
            {"key": key, "label": config["label"], "filters": config["filters"]}
            for key, config in master_data.MASTER_TABLES.items()
        ],
    }


@router.get("/lookups/{kind}")
def list_lookup(
    kind: str,
    country_id: Optional[str] = None,
    state_id: Optional[str] = None,
    search: Optional[str] = None,
):
    """Lookup values (motor segments, countries, cities, ...) that master rows reference by id."""
    try:
        data = reference_data.list_lookup(kind, country_id=country_id, state_id=state_id, search=search)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"success": True, "data": data, "total": len(data)}


@router.get("/{table}")
def list_entries(
    table: str,
    request: Request,
    search: Optional[str] = None,
    status: str = "ALL",
    page: int = Query(1, ge=1),
    page_size: int = Query(master_data.DEFAULT_PAGE_SIZE, ge=1, le=master_data.MAX_PAGE_SIZE),
):
    """
    Search / filter / paginate a master table.
    Any other query parameter that names a filter column (e.g. country_id) is applied as an exact match.
    """
    _require_table(table)
    reserved = {"search", "status", "page", "page_size"}
    filters = {k: v for k, v in request.query_params.items() if k not in reserved}
    try:
        result = master_data.list_entries(
            table, search=search, status=status, filters=filters, page=page, page_size=page_size
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"success": True, **result}


@router.get("/{table}/summary")
def get_summary(table: str):
    _require_table(table)
    return {"success": True, "data": master_data.get_summary(table)}


@router.get("/{table}/{entry_id}")
def get_entry(table: str, entry_id: str):
    _require_table(table)
    entry = master_data.get_entry(table, entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"{master_data.MASTER_TABLES[table]['label']} not found")
    return {"success": True, "data": entry}


@router.post("/{table}", status_code=201)
def create_entry(table: str, payload: dict = Body(...)):
    _require_table(table)
    data = _parse_body(table, payload, partial=False)
    try:
        entry = master_data.create_entry(table, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    label = master_data.MASTER_TABLES[table]["label"]
    return {"success": True, "data": entry, "message": f"{label} created successfully"}


@router.put("/{table}/{entry_id}")
def update_entry(table: str, entry_id: str, payload: dict = Body(...)):
    _require_table(table)
    data = _parse_body(table, payload, partial=True)
    label = master_data.MASTER_TABLES[table]["label"]
    try:
        entry = master_data.update_entry(table, entry_id, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if entry is None:
        raise HTTPException(status_code=404, detail=f"{label} not found")
    return {"success": True, "data": entry, "message": f"{label} updated successfully"}


@router.delete("/{table}/{entry_id}")
def delete_entry(table: str, entry_id: str):
    _require_table(table)
    label = master_data.MASTER_TABLES[table]["label"]
    if not master_data.delete_entry(table, entry_id):
        raise HTTPException(status_code=404, detail=f"{label} not found")
    return {"success": True, "message": f"{label} deleted successfully"}
