"""Session authentication utilities.

Sessions are issued by the sign-in provider; this module only resolves a
bearer token into an ``AuthContext`` that routes pass on explicitly.
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from fastapi import Depends, Header
from sqlalchemy.orm import Session

from shipwrecked.database import get_db
from shipwrecked.models import AuthSession, User
from shipwrecked.utils.exceptions import authentication_error, forbidden_error, validation_error
from shipwrecked.utils.hashing import hash_session_token
from shipwrecked.utils.logger import logger


@dataclass(frozen=True)
class AuthContext:
    """The caller of the current request."""
    session_id: str
    user_id: Optional[str]


def _parse_bearer(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def _is_expired(expires_at: Optional[datetime]) -> bool:
    if expires_at is None:
        return False
    # SQLite hands back naive datetimes
    if expires_at.tzinfo is None:
        expires_at = expires_at.replace(tzinfo=timezone.utc)
    return expires_at <= datetime.now(timezone.utc)


def get_auth_context(
    authorization: Optional[str] = Header(None, description="Bearer session token"),
    db: Session = Depends(get_db),
) -> Optional[AuthContext]:
    """
    Resolve the session behind the Authorization header.

    Returns:
        AuthContext, or None when there is no valid session
    """
    token = _parse_bearer(authorization)
    if not token:
        return None

    auth_session = db.query(AuthSession).filter(
        AuthSession.token_hash == hash_session_token(token),
    ).first()

    if not auth_session or _is_expired(auth_session.expires_at):
        return None

    user_id = (auth_session.user_id or "").strip() or None
    return AuthContext(session_id=auth_session.id, user_id=user_id)


def require_session(
    context: Optional[AuthContext] = Depends(get_auth_context),
) -> AuthContext:
    """Dependency that rejects requests without a valid session (401)."""
    if context is None:
        raise authentication_error("Unauthorized")
    return context


def require_user_id(
    context: AuthContext = Depends(require_session),
) -> str:
    """Dependency returning the session's user id; 400 if the session has none."""
    if not context.user_id:
        raise validation_error("User ID not found in session")
    return context.user_id


def verify_shop_item_admin_access(
    context: Optional[AuthContext] = Depends(get_auth_context),
    db: Session = Depends(get_db),
) -> User:
    """
    Dependency guarding shop administration.

    Returns:
        The admin user

    Raises:
        HTTPException: 401 without a signed-in user, 403 for non-admins
    """
    if context is None or not context.user_id:
        raise authentication_error("Unauthorized")

    user = db.get(User, context.user_id)
    if user is None:
        raise authentication_error("Unauthorized")

    if not user.has_admin_access:
        logger.warning(f"User {user.id} attempted shop item administration without admin access")
        raise forbidden_error("Forbidden: admin access required")

    return user
