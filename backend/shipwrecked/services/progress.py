"""Progress and shell balance calculation.

Everything here is pure: callers load projects (with their Hackatime links)
and user balance fields, and get back a ``ProgressMetrics`` snapshot.
"""
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from shipwrecked.constants import DEFAULT_PROGRESS_GOAL_HOURS, DEFAULT_SHELLS_PER_HOUR

HoursToShells = Callable[[float], float]


@dataclass(frozen=True)
class ProgressMetrics:
    """Progress breakdown and shell balance for one user."""
    available_shells: float
    total_hours: float
    total_percentage: float
    shipped_hours: float
    viral_hours: float
    other_hours: float
    purchased_progress_hours: float
    total_progress_with_purchased: float
    total_percentage_with_purchased: float


def linear_hours_to_shells(shells_per_hour: float = DEFAULT_SHELLS_PER_HOUR) -> HoursToShells:
    """
    Build a conversion paying a flat rate per tracked hour.

    Args:
        shells_per_hour: Shells earned for each hour, must not be negative

    Returns:
        Function mapping hours to shells
    """
    if shells_per_hour < 0:
        raise ValueError("shells_per_hour must not be negative")

    def convert(hours: float) -> float:
        return max(hours, 0.0) * shells_per_hour

    return convert


def project_hours(project: Any) -> float:
    """Sum of the effective hours of every Hackatime link on a project."""
    total = 0.0
    for link in getattr(project, "hackatime_links", None) or []:
        override = getattr(link, "hours_override", None)
        if override is not None:
            total += override
        else:
            total += getattr(link, "raw_hours", 0) or 0
    return total


def _percentage(hours: float, goal_hours: float) -> float:
    if goal_hours <= 0:
        return 100.0 if hours > 0 else 0.0
    return min(hours / goal_hours * 100, 100.0)


def calculate_progress_metrics(
    projects: Iterable[Any],
    purchased_progress_hours: float = 0,
    total_shells_spent: float = 0,
    admin_shell_adjustment: float = 0,
    *,
    hours_to_shells: HoursToShells = linear_hours_to_shells(),
    goal_hours: float = DEFAULT_PROGRESS_GOAL_HOURS,
) -> ProgressMetrics:
    """
    Compute a user's progress and available shells.

    Hours of each project land in exactly one bucket: viral projects count as
    viral, shipped (non-viral) projects as shipped, the rest as other.

    Args:
        projects: Projects with ``shipped``, ``viral`` and ``hackatime_links``
        purchased_progress_hours: Hours bought in the shop
        total_shells_spent: Cumulative spend
        admin_shell_adjustment: Signed correction from admins
        hours_to_shells: Monotonic conversion of tracked hours to shells
        goal_hours: Hours that make up 100% progress

    Returns:
        ProgressMetrics snapshot
    """
    shipped_hours = 0.0
    viral_hours = 0.0
    other_hours = 0.0

    for project in projects:
        hours = project_hours(project)
        if getattr(project, "viral", False):
            viral_hours += hours
        elif getattr(project, "shipped", False):
            shipped_hours += hours
        else:
            other_hours += hours

    purchased = purchased_progress_hours or 0
    total_hours = shipped_hours + viral_hours + other_hours
    total_with_purchased = total_hours + purchased

    available_shells = (
        hours_to_shells(total_hours)
        + purchased
        - (total_shells_spent or 0)
        + (admin_shell_adjustment or 0)
    )

    return ProgressMetrics(
        available_shells=available_shells,
        total_hours=total_hours,
        total_percentage=_percentage(total_hours, goal_hours),
        shipped_hours=shipped_hours,
        viral_hours=viral_hours,
        other_hours=other_hours,
        purchased_progress_hours=purchased,
        total_progress_with_purchased=total_with_purchased,
        total_percentage_with_purchased=_percentage(total_with_purchased, goal_hours),
    )
