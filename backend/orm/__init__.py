"""Central ORM module: imports all models for Alembic metadata discovery."""

from api.institutions.orm import InstitutionModel
from api.users.orm import UserModel
from api.disciplines.orm import DisciplineModel
from api.files.orm import FileModel
from api.favorites.orm import FavoriteModel
from api.comments.orm import CommentModel

__all__ = [
    "InstitutionModel",
    "UserModel",
    "DisciplineModel",
    "FileModel",
    "FavoriteModel",
    "CommentModel",
]
