"""
Tests for the file lifecycle and moderation workflow.
"""
from datetime import datetime, timezone

import pytest

from database import as_utc, transaction
from exceptions import BusinessRule, EntityNotFound
from api import lookups
from api.comments.dto.comment import CommentRequest
from api.comments.services import comments_service
from api.favorites.services import favorites_service
from api.files.orm import FileModel, FileStatus, FileType
from api.files.services import files_service
from api.institutions.orm.institution_model import BYTES_PER_GB

GB = BYTES_PER_GB


class TestCreateFile:

    def test_starts_pending(self, tenant, make_file):
        institution, teacher, discipline = tenant
        created = make_file(discipline.id, teacher.id)
        assert created.status == FileStatus.PENDING
        assert created.approved_at is None
        assert created.download_count == 0
        assert created.institution_id == institution.id
        assert created.uploaded_by_id == teacher.id
        assert created.favorites_count == 0
        assert created.comments_count == 0

    def test_unknown_discipline(self, tenant, file_request):
        _, teacher, _ = tenant
        with pytest.raises(EntityNotFound):
            files_service.create_file(file_request(999), teacher.id)

    def test_unknown_uploader(self, tenant, file_request):
        _, _, discipline = tenant
        with pytest.raises(EntityNotFound):
            files_service.create_file(file_request(discipline.id), 999)

    def test_institution_comes_from_discipline(self, tenant, make_institution, make_user, make_discipline, make_file):
        _, teacher, _ = tenant
        elsewhere = make_institution("Elsewhere")
        foreign_discipline = make_discipline(elsewhere.id)
        created = make_file(foreign_discipline.id, teacher.id)
        assert created.institution_id == elsewhere.id


class TestFileExtension:

    @pytest.mark.parametrize(
        "file_name, file_type, expected",
        [
            ("Notes.PDF", FileType.PDF, "pdf"),
            ("archive.tar.gz", FileType.DOC, "gz"),
            ("README", FileType.TXT, "txt"),
        ],
    )
    def test_extension(self, file_name, file_type, expected):
        assert FileModel(file_name=file_name, file_type=file_type).file_extension() == expected


class TestModeration:

    def test_approve_stamps_time(self, tenant, make_file):
        _, teacher, discipline = tenant
        created = make_file(discipline.id, teacher.id)
        before = datetime.now(timezone.utc)
        approved = files_service.approve_file(created.id)
        assert approved.status == FileStatus.APPROVED
        assert as_utc(approved.approved_at) >= before

    def test_reapproval_restamps(self, tenant, make_file):
        _, teacher, discipline = tenant
        created = make_file(discipline.id, teacher.id)
        first = files_service.approve_file(created.id).approved_at
        second = files_service.approve_file(created.id).approved_at
        assert as_utc(second) >= as_utc(first)

    def test_reject_after_approve_keeps_timestamp(self, tenant, make_file):
        _, teacher, discipline = tenant
        created = make_file(discipline.id, teacher.id)
        approved_at = as_utc(files_service.approve_file(created.id).approved_at)
        rejected = files_service.reject_file(created.id)
        assert rejected.status == FileStatus.REJECTED
        assert as_utc(rejected.approved_at) == approved_at

    def test_reject_pending(self, tenant, make_file):
        _, teacher, discipline = tenant
        created = make_file(discipline.id, teacher.id)
        rejected = files_service.reject_file(created.id)
        assert rejected.status == FileStatus.REJECTED
        assert rejected.approved_at is None

    def test_unknown_file(self):
        with pytest.raises(EntityNotFound):
            files_service.approve_file(404)
        with pytest.raises(EntityNotFound):
            files_service.reject_file(404)


class TestDownloads:

    def test_increment_regardless_of_status(self, tenant, make_file):
        _, teacher, discipline = tenant
        created = make_file(discipline.id, teacher.id)
        files_service.increment_download_count(created.id)
        files_service.increment_download_count(created.id)
        assert files_service.get_file(created.id).download_count == 2

    def test_most_downloaded(self, tenant, make_file):
        institution, teacher, discipline = tenant
        popular = make_file(discipline.id, teacher.id, title="Popular")
        quiet = make_file(discipline.id, teacher.id, title="Quiet")
        hidden = make_file(discipline.id, teacher.id, title="Hidden")
        for f in (popular, quiet):
            files_service.approve_file(f.id)
        for _ in range(3):
            files_service.increment_download_count(popular.id)
            files_service.increment_download_count(hidden.id)
        files_service.increment_download_count(quiet.id)

        titles = [f.title for f in files_service.list_most_downloaded_by_institution(institution.id)]
        assert titles == ["Popular", "Quiet"]


class TestUpdateFile:

    def test_overwrite_and_reparent(self, tenant, make_institution, make_discipline, make_file, file_request):
        _, teacher, discipline = tenant
        other_institution = make_institution("Other")
        other_discipline = make_discipline(other_institution.id)
        created = make_file(discipline.id, teacher.id)
        files_service.approve_file(created.id)

        updated = files_service.update_file(
            created.id,
            file_request(other_discipline.id, title="Revised notes", file_name="notes-v2.docx",
                         file_type=FileType.DOCX, file_size=4096, version="2.0"),
        )
        assert updated.title == "Revised notes"
        assert updated.file_extension == "docx"
        assert updated.discipline_id == other_discipline.id
        assert updated.institution_id == other_institution.id
        assert updated.status == FileStatus.APPROVED

        with transaction() as session:
            model = lookups.file_or_raise(session, created.id)
            assert model.institution_id == model.discipline.institution_id

    def test_uploader_is_unchanged(self, tenant, make_file, file_request):
        _, teacher, discipline = tenant
        created = make_file(discipline.id, teacher.id)
        updated = files_service.update_file(created.id, file_request(discipline.id, title="Other"))
        assert updated.uploaded_by_id == teacher.id

    def test_resize_does_not_count_own_previous_size(self, make_institution, make_user, make_discipline, make_file,
                                                     file_request):
        institution = make_institution(max_storage_gb=1)
        user = make_user(institution.id)
        discipline = make_discipline(institution.id)
        created = make_file(discipline.id, user.id, file_size=GB - 10)

        updated = files_service.update_file(created.id, file_request(discipline.id, file_size=GB))
        assert updated.file_size == GB

    def test_move_into_full_institution_rejected(self, tenant, make_institution, make_user, make_discipline,
                                                 make_file, file_request):
        _, teacher, discipline = tenant
        small = make_institution("Small College", max_storage_gb=1)
        small_discipline = make_discipline(small.id)
        make_file(small_discipline.id, make_user(small.id).id, file_size=GB - 10)
        created = make_file(discipline.id, teacher.id, file_size=100)

        with pytest.raises(BusinessRule):
            files_service.update_file(created.id, file_request(small_discipline.id, file_size=100))
        assert files_service.get_file(created.id).discipline_id == discipline.id


class TestListings:

    def test_approved_by_discipline_newest_first(self, tenant, make_file):
        _, teacher, discipline = tenant
        first = make_file(discipline.id, teacher.id, title="First")
        make_file(discipline.id, teacher.id, title="Still pending")
        second = make_file(discipline.id, teacher.id, title="Second")
        files_service.approve_file(first.id)
        files_service.approve_file(second.id)

        titles = [f.title for f in files_service.list_approved_by_discipline(discipline.id)]
        assert titles == ["Second", "First"]

    def test_pending_by_institution(self, tenant, make_institution, make_user, make_discipline, make_file):
        institution, teacher, discipline = tenant
        older = make_file(discipline.id, teacher.id, title="Older")
        newer = make_file(discipline.id, teacher.id, title="Newer")
        done = make_file(discipline.id, teacher.id, title="Done")
        files_service.approve_file(done.id)

        other = make_institution("Other")
        make_file(make_discipline(other.id).id, make_user(other.id).id, title="Foreign")

        listed = files_service.list_pending_by_institution(institution.id)
        assert [f.id for f in listed] == [newer.id, older.id]


class TestDeleteFile:

    def test_delete_cascades_engagement(self, tenant, make_file):
        _, teacher, discipline = tenant
        created = make_file(discipline.id, teacher.id)
        favorites_service.add_favorite(created.id, teacher.id)
        comment = comments_service.add_comment(CommentRequest(content="Great", file_id=created.id), teacher.id)

        files_service.delete_file(created.id)

        with pytest.raises(EntityNotFound):
            files_service.get_file(created.id)
        with pytest.raises(EntityNotFound):
            comments_service.get_comment(comment.id)
        assert favorites_service.list_favorites_of_user(teacher.id) == []
