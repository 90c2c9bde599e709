"""Link between a project and a Hackatime tracked project."""
from sqlalchemy import Column, String, Float, DateTime, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import relationship
import uuid
from shipwrecked.database import Base


class HackatimeProjectLink(Base):
    """Attributes the hours of one Hackatime project to a Project."""
    __tablename__ = "hackatime_project_links"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    project_id = Column(String(36), ForeignKey("projects.project_id"), nullable=False, index=True)
    hackatime_name = Column(String, nullable=False)
    raw_hours = Column(Float, default=0, nullable=False)
    hours_override = Column(Float, nullable=True)  # Set by reviewers, wins over raw_hours
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    project = relationship("Project", back_populates="hackatime_links")

    __table_args__ = (
        UniqueConstraint("project_id", "hackatime_name", name="uq_hackatime_link_project_name"),
    )
