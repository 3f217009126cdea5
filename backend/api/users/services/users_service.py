"""Users service: identity directory workflow and password recovery."""

import logging
from datetime import timedelta

from email_validator import EmailNotValidError, validate_email
from sqlalchemy.orm import Session

from config import RESET_TOKEN_TTL_MINUTES
from database import transaction, utcnow
from exceptions import BusinessRule, DuplicateEntity, EntityNotFound
from security import generate_reset_token, hash_password
from api import lookups
from api.quota.services import quota_service
from api.users.dto.user import UserCreate, UserResponse, UserUpdate
from api.users.orm.user_model import UserModel
from api.users.repositories import users_repository

logger = logging.getLogger(__name__)


def _to_response(model: UserModel) -> UserResponse:
    return UserResponse(
        id=model.id,
        name=model.name,
        email=model.email,
        role=model.role,
        is_admin=model.is_admin(),
        is_teacher=model.is_teacher(),
        is_student=model.is_student(),
        institution_id=model.institution_id,
        institution_name=model.institution.name,
        active=model.active,
        last_login=model.last_login,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def _normalize_email(email: str) -> str:
    """Canonical form of an address, as EmailStr stores it on write."""
    try:
        return validate_email(email, check_deliverability=False).normalized
    except EmailNotValidError:
        raise EntityNotFound("User", message=f"User not found with email: {email}")


def _find_by_email_or_raise(session: Session, email: str) -> UserModel:
    model = users_repository.get_by_email(session, _normalize_email(email))
    if model is None:
        raise EntityNotFound("User", message=f"User not found with email: {email}")
    return model


def create_user(data: UserCreate) -> UserResponse:
    with transaction() as session:
        if users_repository.email_exists(session, data.email):
            raise DuplicateEntity(f"User with email '{data.email}' already exists")
        institution = lookups.institution_or_raise(session, data.institution_id, for_update=True)
        quota_service.ensure_user_capacity(session, institution)
        active = True if data.active is None else data.active

        model = UserModel(
            name=data.name,
            email=data.email,
            password_hash=hash_password(data.password),
            role=data.role,
            institution=institution,
            active=active,
        )
        users_repository.save(session, model)
        logger.info("User created: %s", model.id)
        return _to_response(model)


def update_user(user_id: int, data: UserUpdate) -> UserResponse:
    with transaction() as session:
        model = lookups.user_or_raise(session, user_id)
        if data.email != model.email and users_repository.email_exists(session, data.email):
            raise DuplicateEntity(f"User with email '{data.email}' already exists")
        institution = lookups.institution_or_raise(session, data.institution_id, for_update=True)

        active = model.active if data.active is None else data.active
        joins_quota = active and (not model.active or institution.id != model.institution_id)
        if joins_quota:
            quota_service.ensure_user_capacity(session, institution)

        model.name = data.name
        model.email = data.email
        model.role = data.role
        model.institution = institution
        model.active = active
        if data.password:
            model.password_hash = hash_password(data.password)
        users_repository.save(session, model)
        logger.info("User updated: %s", model.id)
        return _to_response(model)


def get_user(user_id: int) -> UserResponse:
    with transaction() as session:
        return _to_response(lookups.user_or_raise(session, user_id))


def get_user_by_email(email: str) -> UserResponse:
    with transaction() as session:
        return _to_response(_find_by_email_or_raise(session, email))


def list_users_by_institution(institution_id: int) -> list[UserResponse]:
    with transaction() as session:
        institution = lookups.institution_or_raise(session, institution_id)
        return [_to_response(m) for m in users_repository.list_by_institution(session, institution.id)]


def record_login(user_id: int) -> UserResponse:
    with transaction() as session:
        model = lookups.user_or_raise(session, user_id)
        model.update_last_login()
        users_repository.save(session, model)
        logger.debug("Login recorded for user %s", user_id)
        return _to_response(model)


def request_password_reset(email: str) -> str:
    """Issue a fresh reset token for ``email`` and return it for delivery.

    A new request replaces any token issued before it.
    """
    with transaction() as session:
        model = _find_by_email_or_raise(session, email)
        model.reset_token = generate_reset_token()
        model.reset_token_expires = utcnow() + timedelta(minutes=RESET_TOKEN_TTL_MINUTES)
        users_repository.save(session, model)
        logger.info("Password reset requested for user %s", model.id)
        return model.reset_token


def confirm_password_reset(token: str, new_password: str) -> None:
    """Set a new password and burn the token so it cannot be used twice."""
    with transaction() as session:
        model = users_repository.get_by_reset_token(session, token)
        if model is None or not model.has_valid_reset_token():
            raise BusinessRule("Invalid or expired password reset token")

        model.password_hash = hash_password(new_password)
        model.clear_reset_token()
        users_repository.save(session, model)
        logger.info("Password reset completed for user %s", model.id)
