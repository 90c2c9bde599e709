"""Application-wide constants."""


class UserRole:
    """User role constants."""
    USER = "User"
    REVIEWER = "Reviewer"
    ADMIN = "Admin"


class ReviewType:
    """Kinds of review a project owner can request."""
    SHIPPED_APPROVAL = "ShippedApproval"
    VIRAL_APPROVAL = "ViralApproval"
    HOURS_APPROVAL = "HoursApproval"
    OTHER = "Other"

    ALL = (SHIPPED_APPROVAL, VIRAL_APPROVAL, HOURS_APPROVAL, OTHER)


class ShopItemCostType:
    """Shop item pricing categories."""
    FIXED = "fixed"
    CONFIG = "config"


class AuditLogEventType:
    """Audit log event type constants."""
    OTHER_EVENT = "OtherEvent"


# Progress configuration
DEFAULT_PROGRESS_GOAL_HOURS = 60.0
DEFAULT_SHELLS_PER_HOUR = 10.0
