"""Discipline Data Transfer Objects."""

from datetime import datetime

from pydantic import BaseModel, Field


class DisciplineRequest(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    code: str | None = Field(default=None, max_length=20)
    description: str | None = Field(default=None, max_length=500)
    institution_id: int
    active: bool | None = None


class DisciplineResponse(BaseModel):
    id: int
    name: str
    code: str | None = None
    description: str | None = None
    institution_id: int
    institution_name: str
    active: bool
    created_at: datetime
    updated_at: datetime
    total_files: int
    total_storage_used_bytes: int
