"""File ORM model: metadata of an uploaded academic file."""

import enum

from sqlalchemy import BigInteger, Column, DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from database import Base, EntityColumnsMixin, utcnow


class FileStatus(str, enum.Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class FileType(str, enum.Enum):
    PDF = "PDF"
    DOC = "DOC"
    DOCX = "DOCX"
    XLS = "XLS"
    XLSX = "XLSX"
    PPT = "PPT"
    PPTX = "PPTX"
    IMG = "IMG"
    JPG = "JPG"
    JPEG = "JPEG"
    PNG = "PNG"
    GIF = "GIF"
    TXT = "TXT"


class FileModel(EntityColumnsMixin, Base):
    __tablename__ = "files"

    title = Column(String(200), nullable=False)
    file_name = Column(String(500), nullable=False)
    file_type = Column(Enum(FileType, native_enum=False, length=50), nullable=False, index=True)
    file_size = Column(BigInteger, nullable=False)
    file_path = Column(String(500), nullable=True)
    description = Column(String(1000), nullable=True)
    discipline_id = Column(Integer, ForeignKey("disciplines.id"), nullable=False, index=True)
    institution_id = Column(Integer, ForeignKey("institutions.id"), nullable=False, index=True)
    uploaded_by_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    status = Column(
        Enum(FileStatus, native_enum=False, length=20),
        nullable=False,
        default=FileStatus.PENDING,
        index=True,
    )
    download_count = Column(Integer, nullable=False, default=0)
    approved_at = Column(DateTime(timezone=True), nullable=True)
    version = Column(String(20), nullable=True)

    discipline = relationship("DisciplineModel", back_populates="files")
    institution = relationship("InstitutionModel")
    uploaded_by = relationship("UserModel", back_populates="uploaded_files")
    favorites = relationship("FavoriteModel", back_populates="file", cascade="all, delete-orphan")
    comments = relationship("CommentModel", back_populates="file", cascade="all, delete-orphan")

    def assign_discipline(self, discipline) -> None:
        """The only way a file gets its discipline; the institution always follows it."""
        self.discipline = discipline
        self.institution = discipline.institution

    def is_approved(self) -> bool:
        return self.status == FileStatus.APPROVED

    def is_pending(self) -> bool:
        return self.status == FileStatus.PENDING

    def is_rejected(self) -> bool:
        return self.status == FileStatus.REJECTED

    def approve(self) -> None:
        self.status = FileStatus.APPROVED
        self.approved_at = utcnow()

    def reject(self) -> None:
        # approved_at is kept for audit
        self.status = FileStatus.REJECTED

    def increment_download_count(self) -> None:
        self.download_count = (self.download_count or 0) + 1

    def file_extension(self) -> str:
        if self.file_name and "." in self.file_name:
            return self.file_name.rsplit(".", 1)[1].lower()
        return self.file_type.name.lower() if self.file_type else ""
