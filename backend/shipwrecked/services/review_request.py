"""Client-side review request flow.

Mirrors what a project page shows: nothing while the project is in review, a
metadata warning while code URL, playable URL or screenshot is missing, and
otherwise a form that posts to ``/api/projects/review-request``.
"""
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

import httpx

from shipwrecked.services.reviews import (
    PLACEHOLDER_TEXT,
    available_review_types,
    default_review_type,
    has_required_metadata,
)
from shipwrecked.utils.exceptions import ValidationError
from shipwrecked.utils.logger import logger

REVIEW_REQUEST_PATH = "/api/projects/review-request"

SubmittedCallback = Callable[[Dict[str, Any], Dict[str, Any]], None]


class ReviewFlowState(str, Enum):
    HIDDEN = "hidden"
    METADATA_WARNING = "metadata_warning"
    REQUEST_FORM = "request_form"
    SUBMITTED = "submitted"


class ReviewRequestFlow:
    """State of the review request panel for one project."""

    def __init__(
        self,
        http: httpx.Client,
        project_id: str,
        *,
        is_in_review: bool,
        is_shipped: bool = False,
        is_viral: bool = False,
        code_url: Optional[str] = None,
        playable_url: Optional[str] = None,
        screenshot: Optional[str] = None,
        review_mode: bool = False,
        on_submitted: Optional[SubmittedCallback] = None,
    ):
        self.http = http
        self.project_id = project_id
        self.is_in_review = is_in_review
        self.is_shipped = is_shipped
        self.is_viral = is_viral
        self.code_url = code_url
        self.playable_url = playable_url
        self.screenshot = screenshot
        self.review_mode = review_mode
        self.on_submitted = on_submitted

        self.comment = ""
        self.review_type = default_review_type(is_shipped)
        self.is_submitting = False
        self.error: Optional[str] = None
        self._submitted = False

    @property
    def state(self) -> ReviewFlowState:
        if self.review_mode:
            return ReviewFlowState.HIDDEN
        # Missing metadata is reported even while a review is pending
        if not has_required_metadata(self.code_url, self.playable_url, self.screenshot):
            return ReviewFlowState.METADATA_WARNING
        if self.is_in_review:
            return ReviewFlowState.HIDDEN
        if self._submitted:
            return ReviewFlowState.SUBMITTED
        return ReviewFlowState.REQUEST_FORM

    @property
    def options(self) -> List[str]:
        return available_review_types(self.is_shipped, self.is_viral)

    @property
    def placeholder_text(self) -> str:
        return PLACEHOLDER_TEXT.get(self.review_type, "Provide details about your review request.")

    @property
    def can_submit(self) -> bool:
        return not self.is_submitting and bool(self.comment.strip())

    def set_shipped(self, is_shipped: bool) -> None:
        """Shipped status changed; reset the review type to its default."""
        self.is_shipped = is_shipped
        self.review_type = default_review_type(is_shipped)

    def select_review_type(self, review_type: str) -> None:
        if review_type not in self.options:
            raise ValidationError(f"Review type {review_type} is not available for this project")
        self.review_type = review_type

    def submit(self) -> bool:
        """
        Send the review request.

        Returns:
            True on success. On failure ``error`` is set and the comment is kept.
        """
        if self.state != ReviewFlowState.REQUEST_FORM:
            self.error = "This project cannot be submitted for review right now"
            return False

        if not self.comment.strip():
            self.error = "Please specify what you need reviewed"
            return False

        self.is_submitting = True
        self.error = None
        try:
            response = self.http.post(
                REVIEW_REQUEST_PATH,
                json={
                    "projectID": self.project_id,
                    "comment": self.comment.strip(),
                    "reviewType": self.review_type,
                },
            )
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Error submitting project {self.project_id} for review: {e}")
            self.error = "Failed to submit project for review"
            return False
        finally:
            self.is_submitting = False

        self.comment = ""
        self._submitted = True
        if self.on_submitted:
            self.on_submitted(data.get("project"), data.get("review"))
        return True
