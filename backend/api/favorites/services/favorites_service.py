"""Favorites service."""

import logging

from database import transaction
from exceptions import EntityNotFound
from api import lookups
from api.favorites.orm.favorite_model import FavoriteModel
from api.favorites.repositories import favorites_repository
from api.files.dto.file import FileResponse
from api.files.services import files_service

logger = logging.getLogger(__name__)


def add_favorite(file_id: int, user_id: int) -> None:
    """Favorite a file. Favoriting it again is a no-op."""
    with transaction() as session:
        file = lookups.file_or_raise(session, file_id)
        user = lookups.user_or_raise(session, user_id)
        if favorites_repository.exists(session, user.id, file.id):
            logger.debug("File %s is already a favorite of user %s", file_id, user_id)
            return
        favorites_repository.save(session, FavoriteModel(user=user, file=file))
        logger.info("Favorite added: file %s for user %s", file_id, user_id)


def remove_favorite(file_id: int, user_id: int) -> None:
    with transaction() as session:
        file = lookups.file_or_raise(session, file_id)
        user = lookups.user_or_raise(session, user_id)
        favorite = favorites_repository.get_by_user_and_file(session, user.id, file.id)
        if favorite is None:
            raise EntityNotFound("Favorite", message="Favorite not found")
        favorites_repository.delete(session, favorite)
        logger.info("Favorite removed: file %s for user %s", file_id, user_id)


def list_favorites_of_user(user_id: int) -> list[FileResponse]:
    """Newest favorite first, each with the file as it is now."""
    with transaction() as session:
        user = lookups.user_or_raise(session, user_id)
        return [
            files_service.to_response(session, favorite.file)
            for favorite in favorites_repository.list_by_user(session, user.id)
        ]


def is_favorite(file_id: int, user_id: int) -> bool:
    with transaction() as session:
        file = lookups.file_or_raise(session, file_id)
        user = lookups.user_or_raise(session, user_id)
        return favorites_repository.exists(session, user.id, file.id)
