"""Files controller: API routes for file metadata and moderation."""

from fastapi import APIRouter, Header, status

from api.comments.dto.comment import CommentResponse
from api.comments.services import comments_service
from api.favorites.services import favorites_service
from api.files.dto.file import FileRequest, FileResponse
from api.files.services import files_service

router = APIRouter(prefix="/api/files", tags=["Files"])


@router.post("", response_model=FileResponse, status_code=status.HTTP_201_CREATED)
async def create_file(data: FileRequest, x_user_id: int = Header()):
    return files_service.create_file(data, x_user_id)


@router.get("/{file_id}", response_model=FileResponse)
async def get_file(file_id: int):
    return files_service.get_file(file_id)


@router.put("/{file_id}", response_model=FileResponse)
async def update_file(file_id: int, data: FileRequest):
    return files_service.update_file(file_id, data)


@router.delete("/{file_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_file(file_id: int):
    files_service.delete_file(file_id)


@router.post("/{file_id}/approve", response_model=FileResponse)
async def approve_file(file_id: int):
    return files_service.approve_file(file_id)


@router.post("/{file_id}/reject", response_model=FileResponse)
async def reject_file(file_id: int):
    return files_service.reject_file(file_id)


@router.post("/{file_id}/downloads", status_code=status.HTTP_204_NO_CONTENT)
async def record_download(file_id: int):
    files_service.increment_download_count(file_id)


@router.get("/{file_id}/comments", response_model=list[CommentResponse])
async def list_file_comments(file_id: int):
    return comments_service.list_comments_of_file(file_id)


@router.get("/{file_id}/favorite")
async def is_favorite(file_id: int, x_user_id: int = Header()):
    return {"favorite": favorites_service.is_favorite(file_id, x_user_id)}


@router.put("/{file_id}/favorite", status_code=status.HTTP_204_NO_CONTENT)
async def add_favorite(file_id: int, x_user_id: int = Header()):
    favorites_service.add_favorite(file_id, x_user_id)


@router.delete("/{file_id}/favorite", status_code=status.HTTP_204_NO_CONTENT)
async def remove_favorite(file_id: int, x_user_id: int = Header()):
    favorites_service.remove_favorite(file_id, x_user_id)
