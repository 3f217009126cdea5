"""Disciplines repository: data access layer."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from api.disciplines.orm.discipline_model import DisciplineModel


def get(session: Session, discipline_id: int) -> DisciplineModel | None:
    return session.get(DisciplineModel, discipline_id)


def code_exists_in_institution(session: Session, code: str, institution_id: int) -> bool:
    stmt = select(DisciplineModel.id).where(
        DisciplineModel.code == code,
        DisciplineModel.institution_id == institution_id,
    )
    return session.scalars(stmt).first() is not None


def list_active_by_institution(session: Session, institution_id: int) -> list[DisciplineModel]:
    stmt = (
        select(DisciplineModel)
        .where(
            DisciplineModel.institution_id == institution_id,
            DisciplineModel.active.is_(True),
        )
        .order_by(DisciplineModel.name, DisciplineModel.id)
    )
    return list(session.scalars(stmt))


def count_active_by_institution(session: Session, institution_id: int) -> int:
    stmt = select(func.count(DisciplineModel.id)).where(
        DisciplineModel.institution_id == institution_id,
        DisciplineModel.active.is_(True),
    )
    return session.scalar(stmt) or 0


def save(session: Session, model: DisciplineModel) -> DisciplineModel:
    session.add(model)
    session.flush()
    return model
