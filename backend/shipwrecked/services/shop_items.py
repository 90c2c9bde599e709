"""Shop item administration."""
from typing import List
from sqlalchemy.orm import Session

from shipwrecked.constants import AuditLogEventType, ShopItemCostType
from shipwrecked.models import ShopItem, User
from shipwrecked.schemas.shop_item import ShopItemCreate
from shipwrecked.services.audit import create_audit_log
from shipwrecked.utils.exceptions import ValidationError


def list_shop_items(db: Session) -> List[ShopItem]:
    """All shop items, newest first."""
    return db.query(ShopItem).order_by(ShopItem.created_at.desc(), ShopItem.id.desc()).all()


def create_shop_item(db: Session, data: ShopItemCreate, actor: User) -> ShopItem:
    """
    Validate and store a shop item together with its audit event.

    Both rows are committed at once; if either write fails neither is kept.

    Args:
        db: Database session
        data: Item fields
        actor: Admin creating the item

    Returns:
        The stored item

    Raises:
        ValidationError: If name, description or price is missing, or price <= 0
    """
    if not data.name or not data.description or data.price is None:
        raise ValidationError("Name, description, and price are required")

    if data.price <= 0:
        raise ValidationError("Price must be greater than 0")

    item = ShopItem(
        name=data.name,
        description=data.description,
        image=data.image or None,
        price=data.price,
        usd_cost=data.usdCost if data.usdCost is not None else 0,
        cost_type=data.costType or ShopItemCostType.FIXED,
        config=data.config or None,
        use_randomized_pricing=(
            data.useRandomizedPricing if data.useRandomizedPricing is not None else True
        ),
    )
    try:
        db.add(item)
        db.flush()

        create_audit_log(
            db,
            event_type=AuditLogEventType.OTHER_EVENT,
            description=f"Admin created shop item: {item.name}",
            target_user_id=actor.id,
            actor_user_id=actor.id,
            metadata={
                "itemId": item.id,
                "itemName": item.name,
                "price": item.price,
            },
        )
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(item)

    return item
