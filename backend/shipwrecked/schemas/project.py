"""Schemas for project management."""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from shipwrecked.services.progress import project_hours
from shipwrecked.utils.serialization import serialize_datetime

TEXT_FIELDS = ("name", "description", "codeUrl", "playableUrl", "screenshot")


class ProjectCreate(BaseModel):
    """Request schema for creating a project."""
    name: str = ""
    description: str = ""
    codeUrl: str = ""
    playableUrl: str = ""
    screenshot: str = ""
    userId: Optional[str] = Field(None, description="Owner; filled from the session by the API")
    shipped: bool = False
    viral: bool = False
    in_review: bool = False
    hackatimeName: Optional[str] = Field(None, description="Single Hackatime project (legacy)")
    hackatimeProjects: List[str] = Field(default_factory=list, description="Hackatime projects to link")

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def blank_if_missing(cls, value):
        return "" if value is None else value


class ProjectUpdate(BaseModel):
    """Request schema for a partial project update; unset fields stay untouched."""
    name: Optional[str] = None
    description: Optional[str] = None
    codeUrl: Optional[str] = None
    playableUrl: Optional[str] = None
    screenshot: Optional[str] = None
    shipped: Optional[bool] = None
    viral: Optional[bool] = None
    in_review: Optional[bool] = None


class HackatimeLinkResponse(BaseModel):
    id: str
    hackatimeName: str
    rawHours: float
    hoursOverride: Optional[float] = None

    @classmethod
    def from_orm(cls, obj) -> "HackatimeLinkResponse":
        """Convert SQLAlchemy model to response model."""
        return cls(
            id=obj.id,
            hackatimeName=obj.hackatime_name,
            rawHours=obj.raw_hours or 0,
            hoursOverride=obj.hours_override,
        )


class ProjectResponse(BaseModel):
    projectID: str
    userId: str
    name: str
    description: str
    codeUrl: str
    playableUrl: str
    screenshot: str
    submitted: bool
    shipped: bool
    viral: bool
    in_review: bool
    hackatimeLinks: List[HackatimeLinkResponse] = []
    rawHours: float = 0
    hours: float = 0
    created_at: Optional[str] = None

    class Config:
        from_attributes = True

    @classmethod
    def from_orm(cls, obj) -> "ProjectResponse":
        """Convert SQLAlchemy model to response model."""
        links = list(obj.hackatime_links or [])
        raw_hours = sum(link.raw_hours or 0 for link in links)
        return cls(
            projectID=obj.project_id,
            userId=obj.user_id,
            name=obj.name,
            description=obj.description,
            codeUrl=obj.code_url,
            playableUrl=obj.playable_url,
            screenshot=obj.screenshot,
            submitted=obj.submitted,
            shipped=obj.shipped,
            viral=obj.viral,
            in_review=obj.in_review,
            hackatimeLinks=[HackatimeLinkResponse.from_orm(link) for link in links],
            rawHours=raw_hours,
            hours=project_hours(obj),
            created_at=serialize_datetime(obj.created_at),
        )
