"""Institutions service: tenant registry workflow."""

import logging

from sqlalchemy.orm import Session

from database import as_utc, transaction
from exceptions import DuplicateEntity
from api import lookups
from api.institutions.dto.institution import (
    InstitutionRequest,
    InstitutionResponse,
    InstitutionStatsResponse,
)
from api.institutions.orm.institution_model import (
    DEFAULT_MAX_STORAGE_GB,
    DEFAULT_MAX_USERS,
    InstitutionModel,
    PlanType,
)
from api.institutions.repositories import institutions_repository
from api.quota.services import quota_service

logger = logging.getLogger(__name__)


def _to_response(session: Session, model: InstitutionModel) -> InstitutionResponse:
    return InstitutionResponse(
        id=model.id,
        name=model.name,
        code=model.code,
        description=model.description,
        plan=model.plan,
        max_users=model.max_users,
        max_storage_gb=model.max_storage_gb,
        expires_at=model.expires_at,
        active=model.active,
        expired=model.is_expired(),
        created_at=model.created_at,
        updated_at=model.updated_at,
        total_users=quota_service.active_user_count(session, model.id),
        total_storage_used_gb=quota_service.institution_storage_gb(session, model.id),
    )


def _normalize_code(code: str | None) -> str | None:
    return code or None


def create_institution(data: InstitutionRequest) -> InstitutionResponse:
    code = _normalize_code(data.code)
    with transaction() as session:
        if institutions_repository.name_exists(session, data.name):
            raise DuplicateEntity(f"Institution with name '{data.name}' already exists")
        if code and institutions_repository.code_exists(session, code):
            raise DuplicateEntity(f"Institution with code '{code}' already exists")

        model = InstitutionModel(
            name=data.name,
            code=code,
            description=data.description,
            plan=data.plan or PlanType.FREE,
            max_users=data.max_users or DEFAULT_MAX_USERS,
            max_storage_gb=data.max_storage_gb or DEFAULT_MAX_STORAGE_GB,
            expires_at=as_utc(data.expires_at),
            active=True if data.active is None else data.active,
        )
        institutions_repository.save(session, model)
        logger.info("Institution created: %s", model.id)
        return _to_response(session, model)


def update_institution(institution_id: int, data: InstitutionRequest) -> InstitutionResponse:
    code = _normalize_code(data.code)
    with transaction() as session:
        model = lookups.institution_or_raise(session, institution_id)
        if data.name != model.name and institutions_repository.name_exists(session, data.name):
            raise DuplicateEntity(f"Institution with name '{data.name}' already exists")
        if code and code != model.code and institutions_repository.code_exists(session, code):
            raise DuplicateEntity(f"Institution with code '{code}' already exists")

        model.name = data.name
        model.code = code
        model.description = data.description
        if data.plan is not None:
            model.plan = data.plan
        if data.max_users is not None:
            model.max_users = data.max_users
        if data.max_storage_gb is not None:
            model.max_storage_gb = data.max_storage_gb
        model.expires_at = as_utc(data.expires_at)
        if data.active is not None:
            model.active = data.active
        institutions_repository.save(session, model)
        logger.info("Institution updated: %s", model.id)
        return _to_response(session, model)


def get_institution(institution_id: int) -> InstitutionResponse:
    with transaction() as session:
        return _to_response(session, lookups.institution_or_raise(session, institution_id))


def list_active_institutions() -> list[InstitutionResponse]:
    with transaction() as session:
        return [_to_response(session, m) for m in institutions_repository.list_active(session)]


def list_expired_institutions() -> list[InstitutionResponse]:
    with transaction() as session:
        return [_to_response(session, m) for m in institutions_repository.list_expired(session)]


def get_institution_stats(institution_id: int) -> InstitutionStatsResponse:
    with transaction() as session:
        model = lookups.institution_or_raise(session, institution_id)
        return InstitutionStatsResponse(**quota_service.institution_stats(session, model))
