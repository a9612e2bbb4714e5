"""
LMS API endpoints
"""
from typing import Optional

from fastapi import APIRouter, HTTPException

from core import reference_data, training
from api.models import TrainingModuleIn, TrainingModuleUpdate

router = APIRouter()


@router.get("/lookups")
def lookups():
    """Agent types and policy types for the module form."""
    return {
        "success": True,
        "data": {
            "agent_types": reference_data.AGENT_TYPES,
            "policy_types": reference_data.POLICY_TYPES,
        },
    }


@router.get("/modules")
def list_modules(search: Optional[str] = None, agent_type_id: Optional[str] = None, status: str = "ALL"):
    modules = training.list_training_modules(search=search, agent_type_id=agent_type_id, status=status)
    return {"success": True, "data": modules, "total": len(modules)}


@router.get("/modules/{module_id}")
def get_module(module_id: str):
    module = training.get_training_module(module_id)
    if module is None:
        raise HTTPException(status_code=404, detail="Training module not found")
    return {"success": True, "data": module}


@router.post("/modules", status_code=201)
def create_module(request: TrainingModuleIn):
    try:
        module = training.create_training_module(request.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"success": True, "data": module, "message": "Training module created successfully"}


@router.put("/modules/{module_id}")
def update_module(module_id: str, request: TrainingModuleUpdate):
    try:
        module = training.update_training_module(module_id, request.model_dump(exclude_unset=True))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if module is None:
        raise HTTPException(status_code=404, detail="Training module not found")
    return {"success": True, "data": module, "message": "Training module updated successfully"}


@router.delete("/modules/{module_id}")
def delete_module(module_id: str):
    if not training.delete_training_module(module_id):
        raise HTTPException(status_code=404, detail="Training module not found")
    return {"success": True, "message": "Training module deleted successfully"}


@router.get("/certificates")
def list_certificates(
    search: Optional[str] = None,
    agent_type: Optional[str] = None,
    policy_type: Optional[str] = None,
    status: Optional[str] = None,
):
    rows = training.list_certificates(
        search=search, agent_type=agent_type, policy_type=policy_type, status=status
    )
    return {"success": True, "data": rows, "summary": training.certificate_summary(rows)}


@router.post("/certificates/{certificate_id}/download")
def download_certificate(certificate_id: str):
    try:
        certificate = training.record_certificate_download(certificate_id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if certificate is None:
        raise HTTPException(status_code=404, detail="Certificate not found")
    return {"success": True, "data": certificate}


@router.post("/certificates/{certificate_id}/revoke")
def revoke_certificate(certificate_id: str):
    certificate = training.revoke_certificate(certificate_id)
    if certificate is None:
        raise HTTPException(status_code=404, detail="Certificate not found")
    return {"success": True, "data": certificate, "message": "Certificate revoked"}
