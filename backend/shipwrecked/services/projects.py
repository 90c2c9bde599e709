"""Project lifecycle: create, update, delete and list.

Creation is the only multi-step write in the application. It probes the
database, checks the owner exists, inserts with a generated id (retrying once
with a fresh id on a primary-key collision) and then links the requested
Hackatime projects with their tracked hours. Link failures and Hackatime
outages are logged and never fail the creation.
"""
import asyncio
import uuid
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional

from sqlalchemy import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from shipwrecked.models import Project, User
from shipwrecked.schemas.project import ProjectCreate, ProjectUpdate
from shipwrecked.services.hackatime import HackatimeClient
from shipwrecked.utils.db import check_connection, get_owned_project, is_primary_key_collision
from shipwrecked.utils.exceptions import (
    HackatimeError,
    NotFoundError,
    ProjectCreationError,
    ValidationError,
)
from shipwrecked.utils.logger import logger

LinkWriter = Callable[[str, str, float], Awaitable[Any]]

# Request field -> column for partial updates
UPDATABLE_COLUMNS = {
    "name": "name",
    "description": "description",
    "codeUrl": "code_url",
    "playableUrl": "playable_url",
    "screenshot": "screenshot",
    "shipped": "shipped",
    "viral": "viral",
    "in_review": "in_review",
}


def generate_project_id() -> str:
    """Generate a new random project id."""
    return str(uuid.uuid4())


def merge_hackatime_projects(
    hackatime_name: Optional[str],
    hackatime_projects: Optional[Iterable[str]],
) -> List[str]:
    """
    Build the canonical list of Hackatime projects to link.

    The legacy single ``hackatime_name`` is appended unless already present.
    Matching is exact; "App" and "app" are different projects.
    """
    merged: List[str] = []
    for name in hackatime_projects or []:
        if name and name not in merged:
            merged.append(name)
    if hackatime_name and hackatime_name not in merged:
        merged.append(hackatime_name)
    return merged


class ProjectLifecycleManager:
    """Owner-scoped project operations on one database session."""

    def __init__(
        self,
        db: Session,
        link_writer: Optional[LinkWriter] = None,
        id_factory: Callable[[], str] = generate_project_id,
        hackatime_client: Optional[HackatimeClient] = None,
    ):
        self.db = db
        self.link_writer = link_writer
        self.id_factory = id_factory
        self.hackatime_client = hackatime_client

    async def create(self, data: ProjectCreate) -> Project:
        """
        Create a project and link its Hackatime projects.

        Args:
            data: Project fields; ``userId`` must reference an existing user

        Returns:
            The stored project

        Raises:
            ValidationError: If no owner is given
            DatabaseConnectionError: If the database does not answer
            NotFoundError: If the owner does not exist
            ProjectCreationError: If the insert fails
        """
        if not data.userId:
            raise ValidationError("userId is required")

        hackatime_projects = merge_hackatime_projects(data.hackatimeName, data.hackatimeProjects)
        logger.info(
            f"Creating project '{data.name}' for user {data.userId} "
            f"(hackatime projects: {hackatime_projects or 'none'})"
        )

        check_connection(self.db)

        owner = self.db.get(User, data.userId)
        if owner is None:
            raise NotFoundError(f"User not found: {data.userId}")
        hackatime_id = owner.hackatime_id

        payload = {
            "user_id": data.userId,
            "name": data.name,
            "description": data.description,
            "code_url": data.codeUrl,
            "playable_url": data.playableUrl,
            "screenshot": data.screenshot,
            "submitted": False,
            "shipped": data.shipped,
            "viral": data.viral,
            "in_review": data.in_review,
        }
        project = self._insert_with_retry(payload)
        logger.info(f"Created project {project.project_id} for user {project.user_id}")

        if hackatime_projects:
            tracked_hours = await self._tracked_hours(hackatime_id)
            await self._link_hackatime_projects(project.project_id, hackatime_projects, tracked_hours)
            self.db.expire(project, ["hackatime_links"])

        return project

    def _insert(self, payload: Dict[str, Any]) -> Project:
        self.db.execute(insert(Project).values(**payload))
        self.db.commit()
        project = self.db.get(Project, payload["project_id"])
        if project is None:
            raise ProjectCreationError("Project creation failed: database returned no row")
        return project

    def _insert_with_retry(self, payload: Dict[str, Any]) -> Project:
        payload["project_id"] = self.id_factory()
        try:
            return self._insert(payload)
        except SQLAlchemyError as e:
            self.db.rollback()
            if not is_primary_key_collision(e, "projects", "project_id"):
                logger.error(f"Failed to insert project for user {payload['user_id']}: {e}", exc_info=True)
                raise ProjectCreationError(f"Project creation failed: {e}") from e
            logger.warning(f"Project id collision on {payload['project_id']}, retrying with a new id")

        payload["project_id"] = self.id_factory()
        try:
            return self._insert(payload)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Project insert retry failed for user {payload['user_id']}: {e}", exc_info=True)
            raise ProjectCreationError(f"Project creation failed on retry: {e}") from e

    async def _tracked_hours(self, hackatime_id: Optional[str]) -> Dict[str, float]:
        """Hours per Hackatime project of the owner; empty when unavailable."""
        if self.hackatime_client is None or not hackatime_id:
            return {}
        try:
            projects = await self.hackatime_client.fetch_projects(hackatime_id)
        except HackatimeError as e:
            logger.warning(f"Could not fetch Hackatime hours for {hackatime_id}, linking with 0h: {e}")
            return {}
        return {p.name: p.hours for p in projects}

    async def _link_hackatime_projects(
        self,
        project_id: str,
        names: List[str],
        tracked_hours: Dict[str, float],
    ) -> None:
        if self.link_writer is None:
            logger.warning(f"No link writer configured, skipping Hackatime links for project {project_id}")
            return

        pending = []
        attempted = []
        for name in names:
            try:
                pending.append(self.link_writer(project_id, name, tracked_hours.get(name, 0.0)))
                attempted.append(name)
            except Exception as e:
                logger.warning(f"Could not start Hackatime link '{name}' for project {project_id}: {e}")

        results = await asyncio.gather(*pending, return_exceptions=True)

        created = 0
        for name, result in zip(attempted, results):
            if isinstance(result, Exception):
                logger.warning(f"Failed to link Hackatime project '{name}' to project {project_id}: {result}")
            else:
                created += 1
        logger.info(f"Linked {created}/{len(names)} Hackatime projects to project {project_id}")

    def update(self, project_id: str, user_id: str, data: ProjectUpdate) -> Project:
        """
        Apply the fields present in ``data`` to the user's project.

        Raises:
            NotFoundError: If the user has no project with this id
        """
        project = get_owned_project(self.db, project_id, user_id)

        changes = data.model_dump(exclude_unset=True)
        for field, value in changes.items():
            column = UPDATABLE_COLUMNS.get(field)
            if column is None or value is None:
                continue
            setattr(project, column, value)

        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(project)

        logger.info(f"Updated project {project_id} fields: {sorted(changes)}")
        return project

    def delete(self, project_id: str, user_id: str) -> None:
        """
        Delete the user's project together with its links and reviews.

        Raises:
            NotFoundError: If the user has no project with this id
        """
        project = get_owned_project(self.db, project_id, user_id)

        try:
            self.db.delete(project)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

        logger.info(f"Deleted project {project_id}")

    def list_for_user(self, user_id: str) -> List[Project]:
        """All projects of a user with their Hackatime links loaded."""
        return (
            self.db.query(Project)
            .options(selectinload(Project.hackatime_links))
            .filter(Project.user_id == user_id)
            .order_by(Project.created_at)
            .all()
        )
