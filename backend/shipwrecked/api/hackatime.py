"""Hackatime endpoints."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from shipwrecked.api.deps import get_hackatime_client
from shipwrecked.auth.session import require_user_id
from shipwrecked.database import get_db
from shipwrecked.models import User
from shipwrecked.schemas.hackatime import HackatimeProjectListResponse, HackatimeProjectResponse
from shipwrecked.services.hackatime import HackatimeClient
from shipwrecked.utils.exceptions import HackatimeError, bad_gateway_error, internal_error, not_found_error
from shipwrecked.utils.logger import logger

router = APIRouter(prefix="/api/hackatime", tags=["hackatime"])


@router.get("/projects", response_model=HackatimeProjectListResponse)
async def get_hackatime_projects(
    user_id: str = Depends(require_user_id),
    db: Session = Depends(get_db),
    client: HackatimeClient = Depends(get_hackatime_client),
) -> HackatimeProjectListResponse:
    """
    List the signed-in user's Hackatime projects, for picking links.

    Users without a Hackatime account get an empty list.
    """
    try:
        user = db.get(User, user_id)
        if not user:
            raise not_found_error("User")

        if not user.hackatime_id:
            return HackatimeProjectListResponse(projects=[])

        projects = await client.fetch_projects(user.hackatime_id)
        return HackatimeProjectListResponse(
            projects=[HackatimeProjectResponse(name=p.name, hours=p.hours) for p in projects],
        )
    except HTTPException:
        raise
    except HackatimeError as e:
        raise bad_gateway_error(str(e))
    except Exception as e:
        logger.error(f"Failed to fetch Hackatime projects for user {user_id}: {e}", exc_info=True)
        raise internal_error("Failed to fetch Hackatime projects")
