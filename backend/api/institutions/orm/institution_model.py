"""Institution ORM model: the tenant root."""

import enum

from sqlalchemy import Boolean, Column, DateTime, Enum, Integer, String
from sqlalchemy.orm import relationship

from database import Base, EntityColumnsMixin, as_utc, utcnow

BYTES_PER_GB = 1024**3

DEFAULT_MAX_USERS = 10
DEFAULT_MAX_STORAGE_GB = 5


class PlanType(str, enum.Enum):
    FREE = "FREE"
    BASIC = "BASIC"
    PREMIUM = "PREMIUM"
    ENTERPRISE = "ENTERPRISE"


class InstitutionModel(EntityColumnsMixin, Base):
    __tablename__ = "institutions"

    name = Column(String(100), unique=True, nullable=False)
    code = Column(String(50), unique=True, nullable=True)
    description = Column(String(200), nullable=True)
    plan = Column(Enum(PlanType, native_enum=False, length=20), nullable=False, default=PlanType.FREE)
    max_users = Column(Integer, nullable=False, default=DEFAULT_MAX_USERS)
    max_storage_gb = Column(Integer, nullable=False, default=DEFAULT_MAX_STORAGE_GB)
    expires_at = Column(DateTime(timezone=True), nullable=True)
    active = Column(Boolean, nullable=False, default=True, index=True)

    users = relationship("UserModel", back_populates="institution")
    disciplines = relationship("DisciplineModel", back_populates="institution")

    def is_expired(self) -> bool:
        return self.expires_at is not None and as_utc(self.expires_at) < utcnow()

    def total_storage_used(self) -> int:
        """Stored bytes across every discipline's files, in whole GB."""
        total = sum(f.file_size for d in self.disciplines for f in d.files)
        return total // BYTES_PER_GB
