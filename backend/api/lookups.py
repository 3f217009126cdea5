"""Resolve ids to rows or raise EntityNotFound."""

from sqlalchemy.orm import Session

from exceptions import EntityNotFound
from api.comments.repositories import comments_repository
from api.disciplines.repositories import disciplines_repository
from api.files.repositories import files_repository
from api.institutions.repositories import institutions_repository
from api.users.repositories import users_repository


def institution_or_raise(session: Session, institution_id: int, for_update: bool = False):
    institution = institutions_repository.get(session, institution_id, for_update=for_update)
    if institution is None:
        raise EntityNotFound("Institution", institution_id)
    return institution


def user_or_raise(session: Session, user_id: int):
    user = users_repository.get(session, user_id)
    if user is None:
        raise EntityNotFound("User", user_id)
    return user


def discipline_or_raise(session: Session, discipline_id: int):
    discipline = disciplines_repository.get(session, discipline_id)
    if discipline is None:
        raise EntityNotFound("Discipline", discipline_id)
    return discipline


def file_or_raise(session: Session, file_id: int):
    file = files_repository.get(session, file_id)
    if file is None:
        raise EntityNotFound("File", file_id)
    return file


def comment_or_raise(session: Session, comment_id: int):
    comment = comments_repository.get(session, comment_id)
    if comment is None:
        raise EntityNotFound("Comment", comment_id)
    return comment
