"""
Business master data API endpoints
"""
from typing import Optional

from fastapi import APIRouter, HTTPException

from core import business_master
from api.models import BusinessEntityCreate, BusinessEntityUpdate

router = APIRouter()


@router.get("")
def list_business_data(type: str = business_master.DEFAULT_CATEGORY, search: Optional[str] = None):
    """List one business category, optionally filtered by name / code / description."""
    result = business_master.list_business_entities(type, search=search)
    return {"success": True, **result}


@router.get("/categories")
def list_categories():
    return {
        "success": True,
        "data": [{"key": k, "label": v} for k, v in business_master.BUSINESS_CATEGORIES.items()],
    }


@router.post("")
def create_business_data(request: BusinessEntityCreate):
    try:
        entry = business_master.create_business_entity(
            category=request.type,
            name=request.name,
            code=request.code,
            description=request.description,
            is_active=request.isActive is not False,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"success": True, "data": entry, "message": f"{request.type} created successfully"}


@router.put("")
def update_business_data(request: BusinessEntityUpdate):
    try:
        entry = business_master.update_business_entity(
            request.id,
            request.type,
            name=request.name,
            code=request.code,
            description=request.description,
            is_active=request.isActive,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if entry is None:
        raise HTTPException(status_code=404, detail=f"{request.type} entry not found")
    return {"success": True, "data": entry, "message": f"{request.type} updated successfully"}


@router.delete("")
def delete_business_data(id: Optional[str] = None, type: Optional[str] = None):
    try:
        deleted = business_master.delete_business_entity(id, type)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail=f"{type} entry not found")
    return {"success": True, "message": f"{type} deleted successfully"}
