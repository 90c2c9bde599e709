"""Review request rules shared by the API and the client-side flow."""
from typing import List, Optional, Tuple
from sqlalchemy.orm import Session

from shipwrecked.constants import ReviewType
from shipwrecked.models import Project, Review
from shipwrecked.utils.db import get_owned_project
from shipwrecked.utils.exceptions import ConflictError, ValidationError
from shipwrecked.utils.logger import logger

PLACEHOLDER_TEXT = {
    ReviewType.SHIPPED_APPROVAL: (
        "Explain why this project should be approved as 'shipped'. "
        "Include any relevant details about deployment and functionality."
    ),
    ReviewType.VIRAL_APPROVAL: (
        "Explain why this project should be considered 'viral'. "
        "Include links to social media that prove you have met one of the requirements."
    ),
    ReviewType.HOURS_APPROVAL: (
        "Provide details about the updates you've made to this project since it was "
        "approved as shipped. Please keep it short & use bullets for readability."
    ),
    ReviewType.OTHER: "Specify what you need reviewed about this project.",
}


def _filled(value: Optional[str]) -> bool:
    return bool(value and value.strip())


def has_required_metadata(
    code_url: Optional[str],
    playable_url: Optional[str],
    screenshot: Optional[str],
) -> bool:
    """A project can be reviewed only with code, playable link and screenshot set."""
    return _filled(code_url) and _filled(playable_url) and _filled(screenshot)


def default_review_type(is_shipped: bool) -> str:
    return ReviewType.HOURS_APPROVAL if is_shipped else ReviewType.SHIPPED_APPROVAL


def available_review_types(is_shipped: bool, is_viral: bool) -> List[str]:
    """Review types a project owner may pick, in display order."""
    options = []
    if not is_shipped:
        options.append(ReviewType.SHIPPED_APPROVAL)
    if not is_viral:
        options.append(ReviewType.VIRAL_APPROVAL)
    if is_shipped:
        options.append(ReviewType.HOURS_APPROVAL)
    options.append(ReviewType.OTHER)
    return options


def request_review(
    db: Session,
    project_id: str,
    user_id: str,
    comment: str,
    review_type: str,
) -> Tuple[Project, Review]:
    """
    Open a review ticket for the user's project and mark it in review.

    Raises:
        NotFoundError: If the user has no such project
        ValidationError: On a blank comment, unknown type or missing metadata
        ConflictError: If the project is already in review
    """
    project = get_owned_project(db, project_id, user_id)

    comment = (comment or "").strip()
    if not comment:
        raise ValidationError("Please specify what you need reviewed")

    if review_type not in ReviewType.ALL:
        raise ValidationError(f"Unknown review type: {review_type}")

    if not has_required_metadata(project.code_url, project.playable_url, project.screenshot):
        raise ValidationError("Project needs a code URL, playable URL and screenshot before review")

    if project.in_review:
        raise ConflictError("Project is already in review")

    review = Review(
        project_id=project.project_id,
        reviewer_id=user_id,
        comment=comment,
        review_type=review_type,
    )
    db.add(review)
    project.in_review = True
    db.commit()
    db.refresh(review)
    db.refresh(project)

    logger.info(f"Review {review.id} ({review_type}) requested for project {project_id}")
    return project, review
