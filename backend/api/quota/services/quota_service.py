"""Quota & aggregation engine.

Every figure here is recomputed from the current rows on each call; nothing is
cached, so a response can never disagree with the children it summarises.
The ``ensure_*`` checks run before the write they guard and raise
BusinessRule. Callers lock the institution row (``for_update=True``) first so
that the check and the following insert are serialised per tenant on
databases with row locks.
"""

import logging

from sqlalchemy.orm import Session

from exceptions import BusinessRule
from api.comments.repositories import comments_repository
from api.disciplines.repositories import disciplines_repository
from api.favorites.repositories import favorites_repository
from api.files.orm.file_model import FileStatus
from api.files.repositories import files_repository
from api.institutions.orm.institution_model import BYTES_PER_GB, InstitutionModel
from api.users.repositories import users_repository

logger = logging.getLogger(__name__)


def bytes_to_gb(size: int) -> int:
    return size // BYTES_PER_GB


def active_user_count(session: Session, institution_id: int) -> int:
    return users_repository.count_active_by_institution(session, institution_id)


def institution_storage_bytes(session: Session, institution_id: int) -> int:
    return files_repository.total_size_by_institution(session, institution_id)


def institution_storage_gb(session: Session, institution_id: int) -> int:
    return bytes_to_gb(institution_storage_bytes(session, institution_id))


def discipline_file_count(session: Session, discipline_id: int) -> int:
    return files_repository.count_by_discipline(session, discipline_id)


def discipline_storage_bytes(session: Session, discipline_id: int) -> int:
    return files_repository.total_size_by_discipline(session, discipline_id)


def favorites_count(session: Session, file_id: int) -> int:
    return favorites_repository.count_by_file(session, file_id)


def active_comments_count(session: Session, file_id: int) -> int:
    return comments_repository.count_active_by_file(session, file_id)


def institution_stats(session: Session, institution: InstitutionModel) -> dict:
    storage = institution_storage_bytes(session, institution.id)
    return {
        "institution_id": institution.id,
        "active_users": active_user_count(session, institution.id),
        "max_users": institution.max_users,
        "active_disciplines": disciplines_repository.count_active_by_institution(session, institution.id),
        "pending_files": files_repository.count_by_institution_and_status(
            session, institution.id, FileStatus.PENDING
        ),
        "approved_files": files_repository.count_by_institution_and_status(
            session, institution.id, FileStatus.APPROVED
        ),
        "rejected_files": files_repository.count_by_institution_and_status(
            session, institution.id, FileStatus.REJECTED
        ),
        "storage_used_bytes": storage,
        "storage_used_gb": bytes_to_gb(storage),
        "max_storage_gb": institution.max_storage_gb,
        "expired": institution.is_expired(),
    }


def ensure_user_capacity(session: Session, institution: InstitutionModel) -> None:
    """Raise when one more active user would exceed ``max_users``."""
    current = active_user_count(session, institution.id)
    if current >= institution.max_users:
        logger.info(
            "User limit reached for institution %s (%s/%s)",
            institution.id, current, institution.max_users,
        )
        raise BusinessRule(f"Institution '{institution.name}' has reached its maximum number of users")


def ensure_storage_capacity(
    session: Session,
    institution: InstitutionModel,
    additional_bytes: int,
    released_bytes: int = 0,
) -> None:
    """Raise when storing ``additional_bytes`` more would exceed ``max_storage_gb``.

    ``released_bytes`` is subtracted first, for a file being replaced within
    the same institution.
    """
    used = institution_storage_bytes(session, institution.id) - released_bytes
    limit = institution.max_storage_gb * BYTES_PER_GB
    if used + additional_bytes > limit:
        logger.info(
            "Storage limit reached for institution %s (%s + %s > %s bytes)",
            institution.id, used, additional_bytes, limit,
        )
        raise BusinessRule(f"Institution '{institution.name}' has reached its storage limit")
