"""Admin shop item endpoints."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shipwrecked.auth.session import verify_shop_item_admin_access
from shipwrecked.database import get_db
from shipwrecked.models import User
from shipwrecked.schemas.shop_item import (
    ShopItemCreate,
    ShopItemCreateResponse,
    ShopItemListResponse,
    ShopItemResponse,
)
from shipwrecked.services.shop_items import create_shop_item, list_shop_items
from shipwrecked.utils.exceptions import ValidationError, internal_error, validation_error
from shipwrecked.utils.logger import logger

router = APIRouter(prefix="/api/admin/shop-items", tags=["admin"])


@router.get("", response_model=ShopItemListResponse)
async def get_shop_items(
    admin: User = Depends(verify_shop_item_admin_access),
    db: Session = Depends(get_db),
) -> ShopItemListResponse:
    """Fetch all shop items, newest first."""
    try:
        items = list_shop_items(db)
        return ShopItemListResponse(items=[ShopItemResponse.from_orm(i) for i in items])
    except Exception as e:
        logger.error(f"Error fetching shop items: {e}", exc_info=True)
        raise internal_error()


@router.post("", response_model=ShopItemCreateResponse)
async def post_shop_item(
    request: ShopItemCreate,
    admin: User = Depends(verify_shop_item_admin_access),
    db: Session = Depends(get_db),
) -> ShopItemCreateResponse:
    """
    Create a new shop item.

    Args:
        request: Item fields
        admin: Admin performing the change
        db: Database session

    Returns:
        The created item
    """
    try:
        item = create_shop_item(db, request, actor=admin)
        logger.info(f"Admin {admin.id} created shop item {item.id}")
        return ShopItemCreateResponse(item=ShopItemResponse.from_orm(item))
    except ValidationError as e:
        raise validation_error(str(e))
    except Exception as e:
        db.rollback()
        logger.error(f"Error creating shop item: {e}", exc_info=True)
        raise internal_error()
