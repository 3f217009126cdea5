"""Disciplines service: catalog workflow."""

import logging

from sqlalchemy.orm import Session

from database import transaction
from exceptions import DuplicateEntity
from api import lookups
from api.disciplines.dto.discipline import DisciplineRequest, DisciplineResponse
from api.disciplines.orm.discipline_model import DisciplineModel
from api.disciplines.repositories import disciplines_repository
from api.quota.services import quota_service

logger = logging.getLogger(__name__)


def _to_response(session: Session, model: DisciplineModel) -> DisciplineResponse:
    return DisciplineResponse(
        id=model.id,
        name=model.name,
        code=model.code,
        description=model.description,
        institution_id=model.institution_id,
        institution_name=model.institution.name,
        active=model.active,
        created_at=model.created_at,
        updated_at=model.updated_at,
        total_files=quota_service.discipline_file_count(session, model.id),
        total_storage_used_bytes=quota_service.discipline_storage_bytes(session, model.id),
    )


def _duplicate_code(code: str) -> DuplicateEntity:
    return DuplicateEntity(f"Discipline with code '{code}' already exists in this institution")


def create_discipline(data: DisciplineRequest) -> DisciplineResponse:
    code = data.code or None
    with transaction() as session:
        institution = lookups.institution_or_raise(session, data.institution_id)
        if code and disciplines_repository.code_exists_in_institution(session, code, institution.id):
            raise _duplicate_code(code)

        model = DisciplineModel(
            name=data.name,
            code=code,
            description=data.description,
            institution=institution,
            active=True if data.active is None else data.active,
        )
        disciplines_repository.save(session, model)
        logger.info("Discipline created: %s", model.id)
        return _to_response(session, model)


def update_discipline(discipline_id: int, data: DisciplineRequest) -> DisciplineResponse:
    """Overwrite a discipline, possibly moving it to another institution.

    A move takes the discipline's files along: each file is re-parented so its
    institution keeps matching its discipline's.
    """
    code = data.code or None
    with transaction() as session:
        model = lookups.discipline_or_raise(session, discipline_id)
        institution = lookups.institution_or_raise(session, data.institution_id, for_update=True)
        moving = institution.id != model.institution_id
        code_changes = code != model.code or moving
        if (
            code
            and code_changes
            and disciplines_repository.code_exists_in_institution(session, code, institution.id)
        ):
            raise _duplicate_code(code)
        if moving:
            quota_service.ensure_storage_capacity(session, institution, model.total_storage_used())

        model.name = data.name
        model.code = code
        model.description = data.description
        model.institution = institution
        if data.active is not None:
            model.active = data.active
        if moving:
            for file in model.files:
                file.assign_discipline(model)
            logger.info(
                "Discipline %s moved to institution %s with %s file(s)",
                model.id, institution.id, len(model.files),
            )
        disciplines_repository.save(session, model)
        logger.info("Discipline updated: %s", model.id)
        return _to_response(session, model)


def get_discipline(discipline_id: int) -> DisciplineResponse:
    with transaction() as session:
        return _to_response(session, lookups.discipline_or_raise(session, discipline_id))


def list_disciplines_by_institution(institution_id: int) -> list[DisciplineResponse]:
    with transaction() as session:
        institution = lookups.institution_or_raise(session, institution_id)
        return [
            _to_response(session, m)
            for m in disciplines_repository.list_active_by_institution(session, institution.id)
        ]
