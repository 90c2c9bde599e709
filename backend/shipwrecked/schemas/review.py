"""Schemas for review requests."""
from pydantic import BaseModel
from typing import Optional

from shipwrecked.schemas.project import ProjectResponse
from shipwrecked.utils.serialization import serialize_datetime


class ReviewRequestCreate(BaseModel):
    """Request schema for POST /api/projects/review-request."""
    projectID: str
    comment: str = ""
    reviewType: str


class ReviewResponse(BaseModel):
    id: str
    projectID: str
    reviewerId: Optional[str] = None
    comment: str
    reviewType: str
    result: Optional[str] = None
    createdAt: Optional[str] = None

    @classmethod
    def from_orm(cls, obj) -> "ReviewResponse":
        """Convert SQLAlchemy model to response model."""
        return cls(
            id=obj.id,
            projectID=obj.project_id,
            reviewerId=obj.reviewer_id,
            comment=obj.comment,
            reviewType=obj.review_type,
            result=obj.result,
            createdAt=serialize_datetime(obj.created_at),
        )


class ReviewRequestResponse(BaseModel):
    project: ProjectResponse
    review: ReviewResponse
