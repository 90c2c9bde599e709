"""User model for hackathon participants."""
from sqlalchemy import Column, String, DateTime, Boolean, Float, func
import uuid
from shipwrecked.database import Base
from shipwrecked.constants import UserRole


class User(Base):
    """Participant account with shell balance fields."""
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String, unique=True, nullable=False, index=True)
    name = Column(String)
    role = Column(String(20), default=UserRole.USER, nullable=False)
    is_admin = Column(Boolean, default=False, nullable=False)
    hackatime_id = Column(String, nullable=True)  # Hackatime user id / slack id
    total_shells_spent = Column(Float, default=0, nullable=False)
    purchased_progress_hours = Column(Float, default=0, nullable=False)
    admin_shell_adjustment = Column(Float, default=0, nullable=False)  # Signed
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    @property
    def has_admin_access(self) -> bool:
        return self.is_admin or self.role == UserRole.ADMIN
