"""Schemas for the shell balance endpoint."""
from pydantic import BaseModel


class EarnedProgress(BaseModel):
    totalHours: float
    totalPercentage: float
    shippedHours: float
    viralHours: float
    otherHours: float


class PurchasedProgress(BaseModel):
    hours: float
    percentage: float


class TotalProgress(BaseModel):
    hours: float
    percentage: float


class ProgressBreakdown(BaseModel):
    earned: EarnedProgress
    purchased: PurchasedProgress
    total: TotalProgress


class ShellBalanceResponse(BaseModel):
    """Response schema for GET /api/users/me/shells."""
    shells: float
    earnedShells: float
    totalSpent: float
    adminShellAdjustment: float
    availableShells: float
    progress: ProgressBreakdown
