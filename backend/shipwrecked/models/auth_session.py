"""Authenticated browser session model."""
from sqlalchemy import Column, String, DateTime, ForeignKey, func
import uuid
from shipwrecked.database import Base


class AuthSession(Base):
    """Session issued by the sign-in provider; only the token hash is stored."""
    __tablename__ = "auth_sessions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    token_hash = Column(String, nullable=False, unique=True, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=True, index=True)
    expires_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
