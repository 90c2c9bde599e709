"""Pydantic schemas for request/response validation."""
from shipwrecked.schemas.project import ProjectCreate, ProjectUpdate, ProjectResponse
from shipwrecked.schemas.shop_item import ShopItemCreate, ShopItemResponse
from shipwrecked.schemas.review import ReviewRequestCreate, ReviewRequestResponse

__all__ = [
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectResponse",
    "ShopItemCreate",
    "ShopItemResponse",
    "ReviewRequestCreate",
    "ReviewRequestResponse",
]
