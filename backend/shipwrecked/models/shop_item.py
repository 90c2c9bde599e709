"""Shop item model."""
from sqlalchemy import Column, String, Text, Float, Boolean, DateTime, JSON, func
import uuid
from shipwrecked.database import Base
from shipwrecked.constants import ShopItemCostType


class ShopItem(Base):
    """Item users can buy with shells."""
    __tablename__ = "shop_items"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    image = Column(String, nullable=True)
    price = Column(Float, nullable=False)  # In shells
    usd_cost = Column(Float, default=0, nullable=False)
    cost_type = Column(String(20), default=ShopItemCostType.FIXED, nullable=False)
    config = Column(JSON, nullable=True)  # Opaque per-item settings
    use_randomized_pricing = Column(Boolean, default=True, nullable=False)
    active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
