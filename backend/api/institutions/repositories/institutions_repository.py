"""Institutions repository: data access layer."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from database import utcnow
from api.institutions.orm.institution_model import InstitutionModel


def get(session: Session, institution_id: int, for_update: bool = False) -> InstitutionModel | None:
    return session.get(InstitutionModel, institution_id, with_for_update=for_update)


def list_active(session: Session) -> list[InstitutionModel]:
    stmt = (
        select(InstitutionModel)
        .where(InstitutionModel.active.is_(True))
        .order_by(InstitutionModel.name)
    )
    return list(session.scalars(stmt))


def list_expired(session: Session) -> list[InstitutionModel]:
    stmt = (
        select(InstitutionModel)
        .where(InstitutionModel.expires_at.isnot(None), InstitutionModel.expires_at < utcnow())
        .order_by(InstitutionModel.expires_at)
    )
    return list(session.scalars(stmt))


def name_exists(session: Session, name: str) -> bool:
    stmt = select(InstitutionModel.id).where(InstitutionModel.name == name)
    return session.scalars(stmt).first() is not None


def code_exists(session: Session, code: str) -> bool:
    stmt = select(InstitutionModel.id).where(InstitutionModel.code == code)
    return session.scalars(stmt).first() is not None


def save(session: Session, model: InstitutionModel) -> InstitutionModel:
    session.add(model)
    session.flush()
    return model
