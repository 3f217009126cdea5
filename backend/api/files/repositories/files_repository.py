"""Files repository: data access layer."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from api.disciplines.orm.discipline_model import DisciplineModel
from api.files.orm.file_model import FileModel, FileStatus


def get(session: Session, file_id: int) -> FileModel | None:
    return session.get(FileModel, file_id)


def list_by_discipline_and_status(
    session: Session, discipline_id: int, status: FileStatus
) -> list[FileModel]:
    stmt = (
        select(FileModel)
        .where(FileModel.discipline_id == discipline_id, FileModel.status == status)
        .order_by(FileModel.created_at.desc(), FileModel.id.desc())
    )
    return list(session.scalars(stmt))


def list_by_institution_and_status(
    session: Session, institution_id: int, status: FileStatus
) -> list[FileModel]:
    stmt = (
        select(FileModel)
        .where(FileModel.institution_id == institution_id, FileModel.status == status)
        .order_by(FileModel.created_at.desc(), FileModel.id.desc())
    )
    return list(session.scalars(stmt))


def list_most_downloaded(session: Session, institution_id: int, limit: int) -> list[FileModel]:
    stmt = (
        select(FileModel)
        .where(
            FileModel.institution_id == institution_id,
            FileModel.status == FileStatus.APPROVED,
        )
        .order_by(FileModel.download_count.desc(), FileModel.id)
        .limit(limit)
    )
    return list(session.scalars(stmt))


def count_by_institution_and_status(session: Session, institution_id: int, status: FileStatus) -> int:
    stmt = select(func.count(FileModel.id)).where(
        FileModel.institution_id == institution_id,
        FileModel.status == status,
    )
    return session.scalar(stmt) or 0


def count_by_discipline(session: Session, discipline_id: int) -> int:
    stmt = select(func.count(FileModel.id)).where(FileModel.discipline_id == discipline_id)
    return session.scalar(stmt) or 0


def total_size_by_discipline(session: Session, discipline_id: int) -> int:
    stmt = select(func.sum(FileModel.file_size)).where(FileModel.discipline_id == discipline_id)
    return session.scalar(stmt) or 0


def total_size_by_institution(session: Session, institution_id: int) -> int:
    """Sum of file sizes reached through the institution's disciplines."""
    stmt = (
        select(func.sum(FileModel.file_size))
        .join(DisciplineModel, FileModel.discipline_id == DisciplineModel.id)
        .where(DisciplineModel.institution_id == institution_id)
    )
    return session.scalar(stmt) or 0


def save(session: Session, model: FileModel) -> FileModel:
    session.add(model)
    session.flush()
    return model


def delete(session: Session, model: FileModel) -> None:
    session.delete(model)
    session.flush()
