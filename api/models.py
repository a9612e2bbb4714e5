"""
Pydantic models for API request/response validation
"""
from pydantic import BaseModel, Field
from typing import Optional, List


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    error_code: Optional[str] = None


# ─────────────────────────────────────────────────────────────
# Master data
# ─────────────────────────────────────────────────────────────

class ZoneIn(BaseModel):
    motor_segment_id: str = Field(min_length=1)
    zone_name: str = Field(min_length=1)
    zone_description: str = Field(min_length=1)
    is_active: bool = True
    active_from_date: str = Field(min_length=1)
    active_to_date: Optional[str] = None


class ZoneUpdate(BaseModel):
    motor_segment_id: Optional[str] = None
    zone_name: Optional[str] = None
    zone_description: Optional[str] = None
    is_active: Optional[bool] = None
    active_from_date: Optional[str] = None
    active_to_date: Optional[str] = None


class NCBSlabIn(BaseModel):
    ncb_slab_id: str = Field(min_length=1)
    ncb_slab_from: int = Field(ge=0)
    ncb_slab_to: int = Field(ge=0)
    ncb_slab_rate: float = Field(ge=0)
    ncb_slab_description: Optional[str] = None
    is_active: bool = True
    active_from_date: str = Field(min_length=1)
    active_to_date: Optional[str] = None


class NCBSlabUpdate(BaseModel):
    ncb_slab_id: Optional[str] = None
    ncb_slab_from: Optional[int] = Field(default=None, ge=0)
    ncb_slab_to: Optional[int] = Field(default=None, ge=0)
    ncb_slab_rate: Optional[float] = Field(default=None, ge=0)
    ncb_slab_description: Optional[str] = None
    is_active: Optional[bool] = None
    active_from_date: Optional[str] = None
    active_to_date: Optional[str] = None


class DepreciationSlabIn(BaseModel):
    depreciation_slab_id: str = Field(min_length=1)
    depreciation_from: int = Field(ge=0)
    depreciation_to: int = Field(ge=0)
    depreciation_rate: float = Field(ge=0)
    depreciation_slab_description: Optional[str] = None
    is_active: bool = True
    active_from_date: str = Field(min_length=1)
    active_to_date: Optional[str] = None


class DepreciationSlabUpdate(BaseModel):
    depreciation_slab_id: Optional[str] = None
    depreciation_from: Optional[int] = Field(default=None, ge=0)
    depreciation_to: Optional[int] = Field(default=None, ge=0)
    depreciation_rate: Optional[float] = Field(default=None, ge=0)
    depreciation_slab_description: Optional[str] = None
    is_active: Optional[bool] = None
    active_from_date: Optional[str] = None
    active_to_date: Optional[str] = None


class StateIn(BaseModel):
    name: str = Field(min_length=1)
    code: str = Field(min_length=2, max_length=3)
    country_id: str = Field(min_length=1)
    is_active: bool = True


class StateUpdate(BaseModel):
    name: Optional[str] = None
    code: Optional[str] = Field(default=None, min_length=2, max_length=3)
    country_id: Optional[str] = None
    is_active: Optional[bool] = None


class PincodeIn(BaseModel):
    pincode: str = Field(min_length=1)
    city_id: str = Field(min_length=1)
    area: Optional[str] = None
    is_active: bool = True


class PincodeUpdate(BaseModel):
    pincode: Optional[str] = None
    city_id: Optional[str] = None
    area: Optional[str] = None
    is_active: Optional[bool] = None


# table key -> (create model, update model)
MASTER_MODELS = {
    "zones": (ZoneIn, ZoneUpdate),
    "ncb_slabs": (NCBSlabIn, NCBSlabUpdate),
    "depreciation_slabs": (DepreciationSlabIn, DepreciationSlabUpdate),
    "states": (StateIn, StateUpdate),
    "pincodes": (PincodeIn, PincodeUpdate),
}


# ─────────────────────────────────────────────────────────────
# Business master data (camelCase payload, as sent by the console frontend)
# ─────────────────────────────────────────────────────────────

class BusinessEntityCreate(BaseModel):
    type: Optional[str] = None
    name: Optional[str] = None
    code: Optional[str] = None
    description: Optional[str] = None
    isActive: Optional[bool] = None


class BusinessEntityUpdate(BaseModel):
    id: Optional[str] = None
    type: Optional[str] = None
    name: Optional[str] = None
    code: Optional[str] = None
    description: Optional[str] = None
    isActive: Optional[bool] = None


# ─────────────────────────────────────────────────────────────
# LMS
# ─────────────────────────────────────────────────────────────

class Topic(BaseModel):
    name: str = Field(min_length=1)
    duration: float = Field(ge=0.1)


class TrainingModuleIn(BaseModel):
    agent_type_id: str = Field(min_length=1)
    policy_type_ids: List[str] = Field(min_length=1)
    module_name: str = Field(min_length=1)
    topics: List[Topic] = Field(min_length=1)
    validity_from: str = Field(min_length=1)
    validity_to: str = Field(min_length=1)
    is_active: bool = True


class TrainingModuleUpdate(BaseModel):
    agent_type_id: Optional[str] = None
    policy_type_ids: Optional[List[str]] = None
    module_name: Optional[str] = None
    topics: Optional[List[Topic]] = None
    validity_from: Optional[str] = None
    validity_to: Optional[str] = None
    is_active: Optional[bool] = None


# ─────────────────────────────────────────────────────────────
# Bulk upload
# ─────────────────────────────────────────────────────────────

class BulkUploadResult(BaseModel):
    recordsProcessed: int
    recordsSuccessful: int
    recordsFailed: int
    errors: List[str] = []


class BulkUploadResponse(BaseModel):
    success: bool
    message: str
    data: BulkUploadResult
