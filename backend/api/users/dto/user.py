"""User Data Transfer Objects."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from api.users.orm.user_model import UserRole


class UserCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: EmailStr = Field(max_length=100)
    password: str = Field(min_length=6)
    role: UserRole = UserRole.STUDENT
    institution_id: int
    active: bool | None = None


class UserUpdate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    email: EmailStr = Field(max_length=100)
    # Empty or missing keeps the current password.
    password: str | None = None
    role: UserRole
    institution_id: int
    active: bool | None = None


class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    role: UserRole
    is_admin: bool
    is_teacher: bool
    is_student: bool
    institution_id: int
    institution_name: str
    active: bool
    last_login: datetime | None = None
    created_at: datetime
    updated_at: datetime


class PasswordResetRequest(BaseModel):
    email: EmailStr


class PasswordResetConfirm(BaseModel):
    token: str = Field(min_length=1)
    new_password: str = Field(min_length=6)


class MessageResponse(BaseModel):
    message: str
