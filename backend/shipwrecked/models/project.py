"""Project model for hackathon submissions."""
from sqlalchemy import Column, String, Text, DateTime, Boolean, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import relationship
from shipwrecked.database import Base


class Project(Base):
    """A user's project; always addressed together with its owner."""
    __tablename__ = "projects"

    project_id = Column(String(36), primary_key=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String, nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    code_url = Column(String, nullable=False, default="")
    playable_url = Column(String, nullable=False, default="")
    screenshot = Column(Text, nullable=False, default="")  # URL or data URI
    submitted = Column(Boolean, default=False, nullable=False)
    shipped = Column(Boolean, default=False, nullable=False)
    viral = Column(Boolean, default=False, nullable=False)
    in_review = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    user = relationship("User", backref="projects")
    hackatime_links = relationship(
        "HackatimeProjectLink",
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="HackatimeProjectLink.created_at",
    )
    reviews = relationship("Review", back_populates="project", cascade="all, delete-orphan")

    __table_args__ = (
        UniqueConstraint("project_id", "user_id", name="uq_projects_project_id_user_id"),
    )
