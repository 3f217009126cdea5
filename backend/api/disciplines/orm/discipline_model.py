"""Discipline ORM model."""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from database import Base, EntityColumnsMixin


class DisciplineModel(EntityColumnsMixin, Base):
    __tablename__ = "disciplines"

    name = Column(String(100), nullable=False)
    code = Column(String(20), nullable=True, index=True)
    description = Column(String(500), nullable=True)
    institution_id = Column(Integer, ForeignKey("institutions.id"), nullable=False, index=True)
    active = Column(Boolean, nullable=False, default=True, index=True)

    institution = relationship("InstitutionModel", back_populates="disciplines")
    files = relationship("FileModel", back_populates="discipline")

    __table_args__ = (
        UniqueConstraint("institution_id", "code", name="uq_discipline_institution_code"),
    )

    def total_files(self) -> int:
        return len(self.files)

    def total_storage_used(self) -> int:
        return sum(f.file_size for f in self.files)
