"""User ORM model."""

import enum

from sqlalchemy import Boolean, Column, DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from database import Base, EntityColumnsMixin, as_utc, utcnow


class UserRole(str, enum.Enum):
    """Ordered from most to least privileged."""

    SUPER_ADMIN = "SUPER_ADMIN"
    ADMIN = "ADMIN"
    TEACHER = "TEACHER"
    STUDENT = "STUDENT"

    @property
    def is_admin(self) -> bool:
        return self in (UserRole.ADMIN, UserRole.SUPER_ADMIN)

    @property
    def is_teacher(self) -> bool:
        return self is UserRole.TEACHER

    @property
    def is_student(self) -> bool:
        return self is UserRole.STUDENT


class UserModel(EntityColumnsMixin, Base):
    __tablename__ = "users"

    name = Column(String(100), nullable=False)
    email = Column(String(100), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(Enum(UserRole, native_enum=False, length=20), nullable=False, default=UserRole.STUDENT)
    institution_id = Column(Integer, ForeignKey("institutions.id"), nullable=False, index=True)
    active = Column(Boolean, nullable=False, default=True, index=True)
    last_login = Column(DateTime(timezone=True), nullable=True)
    reset_token = Column(String(255), nullable=True, index=True)
    reset_token_expires = Column(DateTime(timezone=True), nullable=True)

    institution = relationship("InstitutionModel", back_populates="users")
    uploaded_files = relationship("FileModel", back_populates="uploaded_by")
    favorites = relationship("FavoriteModel", back_populates="user", cascade="all, delete-orphan")
    comments = relationship("CommentModel", back_populates="user", cascade="all, delete-orphan")

    def is_admin(self) -> bool:
        return self.role.is_admin

    def is_teacher(self) -> bool:
        return self.role.is_teacher

    def is_student(self) -> bool:
        return self.role.is_student

    def has_valid_reset_token(self) -> bool:
        return (
            self.reset_token is not None
            and self.reset_token_expires is not None
            and as_utc(self.reset_token_expires) > utcnow()
        )

    def clear_reset_token(self) -> None:
        self.reset_token = None
        self.reset_token_expires = None

    def update_last_login(self) -> None:
        self.last_login = utcnow()
