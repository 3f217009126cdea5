"""Favorite ORM model."""

from sqlalchemy import Column, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship

from database import Base, EntityColumnsMixin


class FavoriteModel(EntityColumnsMixin, Base):
    __tablename__ = "favorites"

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    file_id = Column(Integer, ForeignKey("files.id"), nullable=False, index=True)

    user = relationship("UserModel", back_populates="favorites")
    file = relationship("FileModel", back_populates="favorites")

    __table_args__ = (
        UniqueConstraint("user_id", "file_id", name="uq_favorite_user_file"),
    )
