"""Serialization utilities for converting models to API responses."""
from datetime import datetime
from typing import Optional


def serialize_datetime(value: Optional[datetime]) -> Optional[str]:
    """
    Serialize datetime to ISO format string.
    
    Args:
        value: Datetime value or None
        
    Returns:
        ISO format string or None
    """
    return value.isoformat() if value else None
