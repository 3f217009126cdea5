"""Comments service. Deleting a comment only deactivates it."""

import logging

from database import transaction
from api import lookups
from api.comments.dto.comment import CommentRequest, CommentResponse
from api.comments.orm.comment_model import CommentModel
from api.comments.repositories import comments_repository

logger = logging.getLogger(__name__)


def _to_response(model: CommentModel) -> CommentResponse:
    return CommentResponse(
        id=model.id,
        content=model.content,
        user_id=model.user_id,
        user_name=model.user.name,
        file_id=model.file_id,
        file_title=model.file.title,
        active=model.active,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def add_comment(data: CommentRequest, user_id: int) -> CommentResponse:
    with transaction() as session:
        file = lookups.file_or_raise(session, data.file_id)
        user = lookups.user_or_raise(session, user_id)
        model = CommentModel(content=data.content, file=file, user=user, active=True)
        comments_repository.save(session, model)
        logger.info("Comment created: %s", model.id)
        return _to_response(model)


def get_comment(comment_id: int) -> CommentResponse:
    """Direct lookup; inactive comments are returned too."""
    with transaction() as session:
        return _to_response(lookups.comment_or_raise(session, comment_id))


def list_comments_of_file(file_id: int) -> list[CommentResponse]:
    with transaction() as session:
        file = lookups.file_or_raise(session, file_id)
        return [_to_response(m) for m in comments_repository.list_active_by_file(session, file.id)]


def update_comment(comment_id: int, content: str) -> CommentResponse:
    with transaction() as session:
        model = lookups.comment_or_raise(session, comment_id)
        model.content = content
        comments_repository.save(session, model)
        logger.info("Comment updated: %s", model.id)
        return _to_response(model)


def delete_comment(comment_id: int) -> None:
    with transaction() as session:
        model = lookups.comment_or_raise(session, comment_id)
        model.active = False
        comments_repository.save(session, model)
        logger.info("Comment deactivated: %s", comment_id)
