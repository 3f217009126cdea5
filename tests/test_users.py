"""
Tests for the identity directory and password recovery.
"""
from datetime import timedelta

import pytest

from database import transaction, utcnow
from exceptions import BusinessRule, DuplicateEntity, EntityNotFound
from security import verify_password
from api import lookups
from api.users.dto.user import UserCreate, UserUpdate
from api.users.orm import UserRole
from api.users.services import users_service


def _update(user, **changes):
    data = {
        "name": user.name,
        "email": user.email,
        "role": user.role,
        "institution_id": user.institution_id,
    }
    data.update(changes)
    return users_service.update_user(user.id, UserUpdate(**data))


def _password_hash(user_id):
    with transaction() as session:
        return lookups.user_or_raise(session, user_id).password_hash


class TestCreateUser:

    def test_password_is_hashed(self, make_institution, make_user):
        institution = make_institution()
        user = make_user(institution.id, password="plaintext-pw")
        stored = _password_hash(user.id)
        assert stored != "plaintext-pw"
        assert verify_password("plaintext-pw", stored)

    def test_duplicate_email(self, make_institution, make_user):
        institution = make_institution()
        make_user(institution.id, email="ana@campus.edu")
        with pytest.raises(DuplicateEntity):
            make_user(institution.id, email="ana@campus.edu")

    def test_unknown_institution(self):
        with pytest.raises(EntityNotFound):
            users_service.create_user(
                UserCreate(name="Ana", email="ana@campus.edu", password="secret123", institution_id=77)
            )

    def test_inactive_user_still_needs_a_free_seat(self, make_institution, make_user):
        institution = make_institution(max_users=1)
        make_user(institution.id)
        with pytest.raises(BusinessRule):
            make_user(institution.id, email="dormant@campus.edu", active=False)
        with transaction() as session:
            assert len(lookups.institution_or_raise(session, institution.id).users) == 1

    def test_defaults(self, make_institution, make_user):
        institution = make_institution()
        user = make_user(institution.id)
        assert user.role == UserRole.STUDENT
        assert user.active is True
        assert user.last_login is None
        assert user.institution_name == institution.name


class TestRoles:

    @pytest.mark.parametrize(
        "role, admin, teacher, student",
        [
            (UserRole.SUPER_ADMIN, True, False, False),
            (UserRole.ADMIN, True, False, False),
            (UserRole.TEACHER, False, True, False),
            (UserRole.STUDENT, False, False, True),
        ],
    )
    def test_capability_predicates(self, make_institution, make_user, role, admin, teacher, student):
        institution = make_institution()
        user = make_user(institution.id, role=role)
        assert (user.is_admin, user.is_teacher, user.is_student) == (admin, teacher, student)


class TestUpdateUser:

    def test_keep_own_email(self, make_institution, make_user):
        institution = make_institution()
        user = make_user(institution.id, email="ana@campus.edu")
        updated = _update(user, name="Ana Maria", role=UserRole.TEACHER)
        assert updated.name == "Ana Maria"
        assert updated.role == UserRole.TEACHER

    def test_email_taken_by_other_user(self, make_institution, make_user):
        institution = make_institution()
        make_user(institution.id, email="ana@campus.edu")
        bob = make_user(institution.id, email="bob@campus.edu")
        with pytest.raises(DuplicateEntity):
            _update(bob, email="ana@campus.edu")

    def test_password_only_rehashed_when_given(self, make_institution, make_user):
        institution = make_institution()
        user = make_user(institution.id, password="first-pass")
        before = _password_hash(user.id)

        _update(user, password="")
        assert _password_hash(user.id) == before

        _update(user, password="second-pass")
        after = _password_hash(user.id)
        assert after != before
        assert verify_password("second-pass", after)

    def test_unknown_user(self, make_institution):
        institution = make_institution()
        with pytest.raises(EntityNotFound):
            users_service.update_user(
                123,
                UserUpdate(name="x", email="x@campus.edu", role=UserRole.STUDENT, institution_id=institution.id),
            )

    def test_unknown_target_institution(self, make_institution, make_user):
        institution = make_institution()
        user = make_user(institution.id)
        with pytest.raises(EntityNotFound):
            _update(user, institution_id=999)

    def test_move_into_full_institution(self, make_institution, make_user):
        source = make_institution()
        full = make_institution(max_users=1)
        make_user(full.id)
        user = make_user(source.id)
        with pytest.raises(BusinessRule):
            _update(user, institution_id=full.id)

    def test_reactivation_counts_against_limit(self, make_institution, make_user):
        institution = make_institution(max_users=1)
        dormant = make_user(institution.id, active=False)
        make_user(institution.id)
        with pytest.raises(BusinessRule):
            _update(dormant, active=True)


class TestLookups:

    def test_by_email(self, make_institution, make_user):
        institution = make_institution()
        user = make_user(institution.id, email="ana@campus.edu")
        assert users_service.get_user_by_email("ana@campus.edu").id == user.id
        with pytest.raises(EntityNotFound):
            users_service.get_user_by_email("nobody@campus.edu")

    def test_by_email_as_entered(self, make_institution, make_user):
        institution = make_institution()
        user = make_user(institution.id, email="Ana@Campus.EDU")
        assert user.email == "Ana@campus.edu"
        assert users_service.get_user_by_email("Ana@Campus.EDU").id == user.id
        assert users_service.get_user_by_email("Ana@campus.edu").id == user.id

    def test_by_malformed_email(self):
        with pytest.raises(EntityNotFound):
            users_service.get_user_by_email("not-an-address")

    def test_by_institution(self, make_institution, make_user):
        first = make_institution()
        second = make_institution()
        make_user(first.id, name="Ana")
        make_user(first.id, name="Bruno")
        make_user(second.id, name="Carla")
        names = [u.name for u in users_service.list_users_by_institution(first.id)]
        assert names == ["Ana", "Bruno"]

    def test_record_login(self, make_institution, make_user):
        institution = make_institution()
        user = make_user(institution.id)
        assert users_service.record_login(user.id).last_login is not None


class TestPasswordReset:

    def test_token_is_single_use(self, make_institution, make_user):
        institution = make_institution()
        user = make_user(institution.id, email="ana@campus.edu", password="old-password")

        token = users_service.request_password_reset("ana@campus.edu")
        users_service.confirm_password_reset(token, "new-password")

        stored = _password_hash(user.id)
        assert verify_password("new-password", stored)
        with transaction() as session:
            model = lookups.user_or_raise(session, user.id)
            assert model.reset_token is None
            assert model.reset_token_expires is None

        with pytest.raises(BusinessRule):
            users_service.confirm_password_reset(token, "another-password")
        assert _password_hash(user.id) == stored

    def test_expired_token(self, make_institution, make_user):
        institution = make_institution()
        user = make_user(institution.id, email="ana@campus.edu", password="old-password")
        token = users_service.request_password_reset("ana@campus.edu")

        with transaction() as session:
            lookups.user_or_raise(session, user.id).reset_token_expires = utcnow() - timedelta(minutes=1)

        with pytest.raises(BusinessRule):
            users_service.confirm_password_reset(token, "new-password")
        assert verify_password("old-password", _password_hash(user.id))

    def test_new_request_replaces_old_token(self, make_institution, make_user):
        institution = make_institution()
        make_user(institution.id, email="ana@campus.edu")
        first = users_service.request_password_reset("ana@campus.edu")
        second = users_service.request_password_reset("ana@campus.edu")
        assert first != second
        with pytest.raises(BusinessRule):
            users_service.confirm_password_reset(first, "new-password")
        users_service.confirm_password_reset(second, "new-password")

    def test_unknown_email(self):
        with pytest.raises(EntityNotFound):
            users_service.request_password_reset("nobody@campus.edu")

    def test_unknown_token(self):
        with pytest.raises(BusinessRule):
            users_service.confirm_password_reset("not-a-token", "new-password")
