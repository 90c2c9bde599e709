"""Review model for project review requests."""
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
import uuid
from shipwrecked.database import Base


class Review(Base):
    """Review ticket attached to a project."""
    __tablename__ = "reviews"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    project_id = Column(String(36), ForeignKey("projects.project_id"), nullable=False, index=True)
    reviewer_id = Column(String(36), ForeignKey("users.id"), nullable=True)
    comment = Column(Text, nullable=False)
    review_type = Column(String(30), nullable=False)
    result = Column(String(20), nullable=True)  # approve|reject|comment once decided
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    project = relationship("Project", back_populates="reviews")
