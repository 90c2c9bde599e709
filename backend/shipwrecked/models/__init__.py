"""Models package."""
from shipwrecked.models.user import User
from shipwrecked.models.project import Project
from shipwrecked.models.hackatime_link import HackatimeProjectLink
from shipwrecked.models.shop_item import ShopItem
from shipwrecked.models.audit_log import AuditLog
from shipwrecked.models.review import Review
from shipwrecked.models.auth_session import AuthSession

__all__ = [
    "User",
    "Project",
    "HackatimeProjectLink",
    "ShopItem",
    "AuditLog",
    "Review",
    "AuthSession",
]
