"""File Data Transfer Objects."""

from datetime import datetime

from pydantic import BaseModel, Field

from api.files.orm.file_model import FileStatus, FileType


class FileRequest(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    file_name: str = Field(min_length=1, max_length=500)
    file_type: FileType
    file_size: int = Field(gt=0)
    file_path: str | None = Field(default=None, max_length=500)
    description: str | None = Field(default=None, max_length=1000)
    discipline_id: int
    version: str | None = Field(default=None, max_length=20)


class FileResponse(BaseModel):
    id: int
    title: str
    file_name: str
    file_type: FileType
    file_extension: str
    file_size: int
    file_path: str | None = None
    description: str | None = None
    discipline_id: int
    discipline_name: str
    institution_id: int
    institution_name: str
    uploaded_by_id: int
    uploaded_by_name: str
    status: FileStatus
    download_count: int
    approved_at: datetime | None = None
    version: str | None = None
    created_at: datetime
    updated_at: datetime
    favorites_count: int
    comments_count: int
