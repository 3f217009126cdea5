"""Users repository: data access layer."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from api.users.orm.user_model import UserModel


def get(session: Session, user_id: int) -> UserModel | None:
    return session.get(UserModel, user_id)


def get_by_email(session: Session, email: str) -> UserModel | None:
    return session.scalars(select(UserModel).where(UserModel.email == email)).first()


def get_by_reset_token(session: Session, token: str) -> UserModel | None:
    return session.scalars(select(UserModel).where(UserModel.reset_token == token)).first()


def email_exists(session: Session, email: str) -> bool:
    return get_by_email(session, email) is not None


def list_by_institution(session: Session, institution_id: int) -> list[UserModel]:
    stmt = (
        select(UserModel)
        .where(UserModel.institution_id == institution_id)
        .order_by(UserModel.name, UserModel.id)
    )
    return list(session.scalars(stmt))


def count_active_by_institution(session: Session, institution_id: int) -> int:
    stmt = select(func.count(UserModel.id)).where(
        UserModel.institution_id == institution_id,
        UserModel.active.is_(True),
    )
    return session.scalar(stmt) or 0


def save(session: Session, model: UserModel) -> UserModel:
    session.add(model)
    session.flush()
    return model
