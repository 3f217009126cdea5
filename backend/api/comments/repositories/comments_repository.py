"""Comments repository: data access layer."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from api.comments.orm.comment_model import CommentModel


def get(session: Session, comment_id: int) -> CommentModel | None:
    return session.get(CommentModel, comment_id)


def list_active_by_file(session: Session, file_id: int) -> list[CommentModel]:
    """Oldest first, so threads read top to bottom."""
    stmt = (
        select(CommentModel)
        .where(CommentModel.file_id == file_id, CommentModel.active.is_(True))
        .order_by(CommentModel.created_at.asc(), CommentModel.id.asc())
    )
    return list(session.scalars(stmt))


def count_active_by_file(session: Session, file_id: int) -> int:
    stmt = select(func.count(CommentModel.id)).where(
        CommentModel.file_id == file_id,
        CommentModel.active.is_(True),
    )
    return session.scalar(stmt) or 0


def save(session: Session, model: CommentModel) -> CommentModel:
    session.add(model)
    session.flush()
    return model
