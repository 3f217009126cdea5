"""Files service: upload metadata and the moderation workflow.

A file is created PENDING and moves to APPROVED or REJECTED only through
``approve_file`` / ``reject_file``. Its institution is never taken from the
request; it is always derived from the discipline.
"""

import logging

from sqlalchemy.orm import Session

from database import transaction
from api import lookups
from api.files.dto.file import FileRequest, FileResponse
from api.files.orm.file_model import FileModel, FileStatus
from api.files.repositories import files_repository
from api.quota.services import quota_service

logger = logging.getLogger(__name__)

MOST_DOWNLOADED_LIMIT = 10


def to_response(session: Session, model: FileModel) -> FileResponse:
    return FileResponse(
        id=model.id,
        title=model.title,
        file_name=model.file_name,
        file_type=model.file_type,
        file_extension=model.file_extension(),
        file_size=model.file_size,
        file_path=model.file_path,
        description=model.description,
        discipline_id=model.discipline_id,
        discipline_name=model.discipline.name,
        institution_id=model.institution_id,
        institution_name=model.institution.name,
        uploaded_by_id=model.uploaded_by_id,
        uploaded_by_name=model.uploaded_by.name,
        status=model.status,
        download_count=model.download_count or 0,
        approved_at=model.approved_at,
        version=model.version,
        created_at=model.created_at,
        updated_at=model.updated_at,
        favorites_count=quota_service.favorites_count(session, model.id),
        comments_count=quota_service.active_comments_count(session, model.id),
    )


def create_file(data: FileRequest, uploaded_by_id: int) -> FileResponse:
    with transaction() as session:
        discipline = lookups.discipline_or_raise(session, data.discipline_id)
        uploaded_by = lookups.user_or_raise(session, uploaded_by_id)
        institution = lookups.institution_or_raise(session, discipline.institution_id, for_update=True)
        quota_service.ensure_storage_capacity(session, institution, data.file_size)

        model = FileModel(
            title=data.title,
            file_name=data.file_name,
            file_type=data.file_type,
            file_size=data.file_size,
            file_path=data.file_path,
            description=data.description,
            uploaded_by=uploaded_by,
            status=FileStatus.PENDING,
            download_count=0,
            version=data.version,
        )
        model.assign_discipline(discipline)
        files_repository.save(session, model)
        logger.info("File created: %s (discipline %s)", model.id, discipline.id)
        return to_response(session, model)


def update_file(file_id: int, data: FileRequest) -> FileResponse:
    """Overwrite a file's metadata. The moderation status is left as it is."""
    with transaction() as session:
        model = lookups.file_or_raise(session, file_id)
        discipline = lookups.discipline_or_raise(session, data.discipline_id)
        institution = lookups.institution_or_raise(session, discipline.institution_id, for_update=True)
        released = model.file_size if model.institution_id == institution.id else 0
        quota_service.ensure_storage_capacity(session, institution, data.file_size, released)

        model.title = data.title
        model.file_name = data.file_name
        model.file_type = data.file_type
        model.file_size = data.file_size
        model.file_path = data.file_path
        model.description = data.description
        model.version = data.version
        model.assign_discipline(discipline)
        files_repository.save(session, model)
        logger.info("File updated: %s", model.id)
        return to_response(session, model)


def approve_file(file_id: int) -> FileResponse:
    with transaction() as session:
        model = lookups.file_or_raise(session, file_id)
        model.approve()
        files_repository.save(session, model)
        logger.info("File approved: %s", model.id)
        return to_response(session, model)


def reject_file(file_id: int) -> FileResponse:
    with transaction() as session:
        model = lookups.file_or_raise(session, file_id)
        model.reject()
        files_repository.save(session, model)
        logger.info("File rejected: %s", model.id)
        return to_response(session, model)


def increment_download_count(file_id: int) -> None:
    """Count a download. Visibility is the caller's concern."""
    with transaction() as session:
        model = lookups.file_or_raise(session, file_id)
        model.increment_download_count()
        files_repository.save(session, model)
        logger.debug("Download counted for file %s", file_id)


def delete_file(file_id: int) -> None:
    """Delete the file record; its favorites and comments go with it."""
    with transaction() as session:
        model = lookups.file_or_raise(session, file_id)
        files_repository.delete(session, model)
        logger.info("File deleted: %s", file_id)


def get_file(file_id: int) -> FileResponse:
    with transaction() as session:
        return to_response(session, lookups.file_or_raise(session, file_id))


def list_approved_by_discipline(discipline_id: int) -> list[FileResponse]:
    with transaction() as session:
        discipline = lookups.discipline_or_raise(session, discipline_id)
        models = files_repository.list_by_discipline_and_status(session, discipline.id, FileStatus.APPROVED)
        return [to_response(session, m) for m in models]


def list_pending_by_institution(institution_id: int) -> list[FileResponse]:
    with transaction() as session:
        institution = lookups.institution_or_raise(session, institution_id)
        models = files_repository.list_by_institution_and_status(session, institution.id, FileStatus.PENDING)
        return [to_response(session, m) for m in models]


def list_most_downloaded_by_institution(
    institution_id: int, limit: int = MOST_DOWNLOADED_LIMIT
) -> list[FileResponse]:
    with transaction() as session:
        institution = lookups.institution_or_raise(session, institution_id)
        models = files_repository.list_most_downloaded(session, institution.id, limit)
        return [to_response(session, m) for m in models]
