"""Comment ORM model. Inactive comments are hidden, never deleted."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from database import Base, EntityColumnsMixin


class CommentModel(EntityColumnsMixin, Base):
    __tablename__ = "comments"

    content = Column(String(2000), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    file_id = Column(Integer, ForeignKey("files.id"), nullable=False, index=True)
    active = Column(Boolean, nullable=False, default=True, index=True)

    user = relationship("UserModel", back_populates="comments")
    file = relationship("FileModel", back_populates="comments")
