"""Comments controller: API routes for file comments."""

from fastapi import APIRouter, Header, status

from api.comments.dto.comment import CommentRequest, CommentResponse, CommentUpdate
from api.comments.services import comments_service

router = APIRouter(prefix="/api/comments", tags=["Comments"])


@router.post("", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def add_comment(data: CommentRequest, x_user_id: int = Header()):
    return comments_service.add_comment(data, x_user_id)


@router.get("/{comment_id}", response_model=CommentResponse)
async def get_comment(comment_id: int):
    return comments_service.get_comment(comment_id)


@router.put("/{comment_id}", response_model=CommentResponse)
async def update_comment(comment_id: int, data: CommentUpdate):
    return comments_service.update_comment(comment_id, data.content)


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(comment_id: int):
    comments_service.delete_comment(comment_id)
