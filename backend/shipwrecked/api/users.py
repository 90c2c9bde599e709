"""Current-user endpoints."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session, selectinload

from shipwrecked.api.deps import get_hours_to_shells
from shipwrecked.auth.session import require_user_id
from shipwrecked.config import settings
from shipwrecked.database import get_db
from shipwrecked.models import Project, User
from shipwrecked.schemas.shells import (
    EarnedProgress,
    ProgressBreakdown,
    PurchasedProgress,
    ShellBalanceResponse,
    TotalProgress,
)
from shipwrecked.services.progress import HoursToShells, calculate_progress_metrics
from shipwrecked.utils.exceptions import internal_error, not_found_error
from shipwrecked.utils.logger import logger

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/me/shells", response_model=ShellBalanceResponse)
async def get_my_shells(
    user_id: str = Depends(require_user_id),
    db: Session = Depends(get_db),
    hours_to_shells: HoursToShells = Depends(get_hours_to_shells),
) -> ShellBalanceResponse:
    """
    Shell balance and progress of the signed-in user.

    Args:
        user_id: Session user
        db: Database session
        hours_to_shells: Conversion of tracked hours to shells

    Returns:
        Balance and progress breakdown
    """
    try:
        user = db.get(User, user_id)
        if not user:
            raise not_found_error("User")

        projects = (
            db.query(Project)
            .options(selectinload(Project.hackatime_links))
            .filter(Project.user_id == user_id)
            .all()
        )

        metrics = calculate_progress_metrics(
            projects,
            user.purchased_progress_hours,
            user.total_shells_spent,
            user.admin_shell_adjustment,
            hours_to_shells=hours_to_shells,
            goal_hours=settings.progress_goal_hours,
        )

        return ShellBalanceResponse(
            shells=metrics.available_shells,
            earnedShells=metrics.available_shells,
            totalSpent=user.total_shells_spent,
            adminShellAdjustment=user.admin_shell_adjustment,
            availableShells=metrics.available_shells,
            progress=ProgressBreakdown(
                earned=EarnedProgress(
                    totalHours=metrics.total_hours,
                    totalPercentage=metrics.total_percentage,
                    shippedHours=metrics.shipped_hours,
                    viralHours=metrics.viral_hours,
                    otherHours=metrics.other_hours,
                ),
                purchased=PurchasedProgress(
                    hours=metrics.purchased_progress_hours,
                    percentage=metrics.purchased_progress_hours,
                ),
                total=TotalProgress(
                    hours=metrics.total_progress_with_purchased,
                    percentage=metrics.total_percentage_with_purchased,
                ),
            ),
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching shells for user {user_id}: {e}", exc_info=True)
        raise internal_error("Failed to fetch user shells")
