"""Database query utility functions."""
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from shipwrecked.models import Project
from shipwrecked.utils.exceptions import DatabaseConnectionError, NotFoundError


def check_connection(db: Session) -> None:
    """
    Run a trivial query to make sure the database answers.

    Raises:
        DatabaseConnectionError: If the probe fails
    """
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        raise DatabaseConnectionError(f"Database connection failed: {e}") from e


def get_owned_project(db: Session, project_id: str, user_id: str) -> Project:
    """
    Get a project by its (project_id, user_id) key.

    A project owned by someone else is reported exactly like a missing one.

    Raises:
        NotFoundError: If no such row exists
    """
    project = db.query(Project).filter(
        Project.project_id == project_id,
        Project.user_id == user_id,
    ).first()

    if not project:
        raise NotFoundError(f"Project not found: {project_id}")

    return project


def is_primary_key_collision(error: Exception, table: str, column: str) -> bool:
    """
    Whether an insert failed because the primary key already exists.

    Matches both SQLite ("UNIQUE constraint failed: projects.project_id") and
    PostgreSQL ('duplicate key ... "projects_pkey"') messages.
    """
    if not isinstance(error, IntegrityError):
        return False

    message = str(getattr(error, "orig", None) or error).lower()
    if "unique" not in message and "duplicate" not in message:
        return False

    return f"{table}.{column}" in message or f"{table}_pkey" in message
