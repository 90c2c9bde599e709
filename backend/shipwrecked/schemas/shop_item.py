"""Schemas for shop administration."""
from pydantic import BaseModel
from typing import Any, List, Optional

from shipwrecked.utils.serialization import serialize_datetime


class ShopItemCreate(BaseModel):
    """Request schema for POST /api/admin/shop-items.

    Required fields are optional here so that missing values produce the
    API's own 400 message instead of a schema error.
    """
    name: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    price: Optional[float] = None
    usdCost: Optional[float] = None
    costType: Optional[str] = None
    config: Optional[Any] = None
    useRandomizedPricing: Optional[bool] = None


class ShopItemResponse(BaseModel):
    id: str
    name: str
    description: str
    image: Optional[str] = None
    price: float
    usdCost: float
    costType: str
    config: Optional[Any] = None
    useRandomizedPricing: bool
    active: bool
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None

    class Config:
        from_attributes = True

    @classmethod
    def from_orm(cls, obj) -> "ShopItemResponse":
        """Convert SQLAlchemy model to response model."""
        return cls(
            id=obj.id,
            name=obj.name,
            description=obj.description,
            image=obj.image,
            price=obj.price,
            usdCost=obj.usd_cost,
            costType=obj.cost_type,
            config=obj.config,
            useRandomizedPricing=obj.use_randomized_pricing,
            active=obj.active,
            createdAt=serialize_datetime(obj.created_at),
            updatedAt=serialize_datetime(obj.updated_at),
        )


class ShopItemListResponse(BaseModel):
    items: List[ShopItemResponse]


class ShopItemCreateResponse(BaseModel):
    item: ShopItemResponse
