"""Favorites repository: data access layer."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from api.favorites.orm.favorite_model import FavoriteModel


def get_by_user_and_file(session: Session, user_id: int, file_id: int) -> FavoriteModel | None:
    stmt = select(FavoriteModel).where(
        FavoriteModel.user_id == user_id,
        FavoriteModel.file_id == file_id,
    )
    return session.scalars(stmt).first()


def exists(session: Session, user_id: int, file_id: int) -> bool:
    return get_by_user_and_file(session, user_id, file_id) is not None


def list_by_user(session: Session, user_id: int) -> list[FavoriteModel]:
    stmt = (
        select(FavoriteModel)
        .where(FavoriteModel.user_id == user_id)
        .order_by(FavoriteModel.created_at.desc(), FavoriteModel.id.desc())
    )
    return list(session.scalars(stmt))


def count_by_file(session: Session, file_id: int) -> int:
    stmt = select(func.count(FavoriteModel.id)).where(FavoriteModel.file_id == file_id)
    return session.scalar(stmt) or 0


def save(session: Session, model: FavoriteModel) -> FavoriteModel:
    session.add(model)
    session.flush()
    return model


def delete(session: Session, model: FavoriteModel) -> None:
    session.delete(model)
    session.flush()
