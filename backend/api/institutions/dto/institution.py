"""Institution Data Transfer Objects."""

from datetime import datetime

from pydantic import BaseModel, Field

from api.institutions.orm.institution_model import PlanType


class InstitutionRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    code: str | None = Field(default=None, max_length=50)
    description: str | None = Field(default=None, max_length=200)
    plan: PlanType | None = None
    max_users: int | None = Field(default=None, gt=0)
    max_storage_gb: int | None = Field(default=None, gt=0)
    expires_at: datetime | None = None
    active: bool | None = None


class InstitutionResponse(BaseModel):
    id: int
    name: str
    code: str | None = None
    description: str | None = None
    plan: PlanType
    max_users: int
    max_storage_gb: int
    expires_at: datetime | None = None
    active: bool
    expired: bool
    created_at: datetime
    updated_at: datetime
    total_users: int
    total_storage_used_gb: int


class InstitutionStatsResponse(BaseModel):
    institution_id: int
    active_users: int
    max_users: int
    active_disciplines: int
    pending_files: int
    approved_files: int
    rejected_files: int
    storage_used_bytes: int
    storage_used_gb: int
    max_storage_gb: int
    expired: bool
