"""Comment Data Transfer Objects."""

from datetime import datetime

from pydantic import BaseModel, Field


class CommentRequest(BaseModel):
    content: str = Field(min_length=1, max_length=2000)
    file_id: int


class CommentUpdate(BaseModel):
    content: str = Field(min_length=1, max_length=2000)


class CommentResponse(BaseModel):
    id: int
    content: str
    user_id: int
    user_name: str
    file_id: int
    file_title: str
    active: bool
    created_at: datetime
    updated_at: datetime
