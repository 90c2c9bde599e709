"""Audit log writer."""
from typing import Any, Dict, Optional
from sqlalchemy.orm import Session

from shipwrecked.models import AuditLog
from shipwrecked.utils.logger import logger


def create_audit_log(
    db: Session,
    event_type: str,
    description: str,
    target_user_id: str,
    actor_user_id: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> AuditLog:
    """
    Append one audit record to the session.

    The caller commits, so the event lands together with the change it
    describes.

    Args:
        db: Database session
        event_type: One of AuditLogEventType
        description: Human readable summary
        target_user_id: User the event is about
        actor_user_id: User who triggered it
        metadata: Extra structured detail

    Returns:
        The stored AuditLog row
    """
    entry = AuditLog(
        event_type=event_type,
        description=description,
        target_user_id=target_user_id,
        actor_user_id=actor_user_id,
        event_metadata=metadata,
    )
    db.add(entry)
    db.flush()

    logger.info(f"Audit {event_type}: {description}")
    return entry
