"""Audit log model for admin-triggered events."""
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, JSON, func
import uuid
from shipwrecked.database import Base


class AuditLog(Base):
    """Append-only audit record."""
    __tablename__ = "audit_logs"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    event_type = Column(String(50), nullable=False, index=True)
    description = Column(Text, nullable=False)
    target_user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    actor_user_id = Column(String(36), ForeignKey("users.id"), nullable=True)
    # "metadata" is reserved on declarative classes
    event_metadata = Column("metadata", JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
