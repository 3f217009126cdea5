"""Users controller: API routes for users and password recovery."""

from fastapi import APIRouter, status

from api.favorites.services import favorites_service
from api.files.dto.file import FileResponse
from api.users.dto.user import (
    MessageResponse,
    PasswordResetConfirm,
    PasswordResetRequest,
    UserCreate,
    UserResponse,
    UserUpdate,
)
from api.users.services import users_service

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(data: UserCreate):
    return users_service.create_user(data)


@router.get("/by-email", response_model=UserResponse)
async def get_user_by_email(email: str):
    return users_service.get_user_by_email(email)


@router.post("/password-reset", response_model=MessageResponse, status_code=status.HTTP_202_ACCEPTED)
async def request_password_reset(data: PasswordResetRequest):
    # The token is handed to the delivery channel, never echoed to the caller.
    users_service.request_password_reset(data.email)
    return MessageResponse(message="Password reset requested")


@router.post("/password-reset/confirm", response_model=MessageResponse)
async def confirm_password_reset(data: PasswordResetConfirm):
    users_service.confirm_password_reset(data.token, data.new_password)
    return MessageResponse(message="Password updated")


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int):
    return users_service.get_user(user_id)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(user_id: int, data: UserUpdate):
    return users_service.update_user(user_id, data)


@router.get("/{user_id}/favorites", response_model=list[FileResponse])
async def list_user_favorites(user_id: int):
    return favorites_service.list_favorites_of_user(user_id)
