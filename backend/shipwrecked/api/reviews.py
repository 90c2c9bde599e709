"""Review request endpoint."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shipwrecked.auth.session import require_user_id
from shipwrecked.database import get_db
from shipwrecked.schemas.project import ProjectResponse
from shipwrecked.schemas.review import ReviewRequestCreate, ReviewRequestResponse, ReviewResponse
from shipwrecked.services.reviews import request_review
from shipwrecked.utils.exceptions import (
    ConflictError,
    NotFoundError,
    ValidationError,
    conflict_error,
    internal_error,
    not_found_error,
    validation_error,
)
from shipwrecked.utils.logger import logger

router = APIRouter(prefix="/api/projects", tags=["reviews"])


@router.post("/review-request", response_model=ReviewRequestResponse)
async def create_review_request(
    request: ReviewRequestCreate,
    user_id: str = Depends(require_user_id),
    db: Session = Depends(get_db),
) -> ReviewRequestResponse:
    """
    Submit a project for review.

    Args:
        request: Project, comment and review type
        user_id: Session user (must own the project)
        db: Database session

    Returns:
        The project (now in review) and the created review
    """
    try:
        project, review = request_review(
            db,
            project_id=request.projectID,
            user_id=user_id,
            comment=request.comment,
            review_type=request.reviewType,
        )
        return ReviewRequestResponse(
            project=ProjectResponse.from_orm(project),
            review=ReviewResponse.from_orm(review),
        )
    except NotFoundError:
        raise not_found_error("Project")
    except ValidationError as e:
        raise validation_error(str(e))
    except ConflictError as e:
        raise conflict_error(str(e))
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to submit project {request.projectID} for review: {e}", exc_info=True)
        raise internal_error("Failed to submit project for review")
