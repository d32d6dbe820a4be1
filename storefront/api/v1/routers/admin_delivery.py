import logging

from fastapi import APIRouter, HTTPException

from storefront.core.errors import StorefrontError
from storefront.schemas.delivery import FeeSettingsOut, FeeSettingsUpdate
from storefront.services.pricing import fee_settings_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/delivery", tags=["admin"])


@router.get("/fee-settings", response_model=FeeSettingsOut)
def get_admin_fee_settings():
    """get delivery fee config."""
    return FeeSettingsOut(**fee_settings_store.get().dict())


@router.patch("/fee-settings", response_model=FeeSettingsOut)
def update_fee_settings(payload: FeeSettingsUpdate):
    """replace delivery fee config."""
    try:
        config = fee_settings_store.update(
            fee_type=payload.fee_type,
            flat_fee=payload.flat_fee,
            per_mile_fee=payload.per_mile_fee,
            per_item_fee=payload.per_item_fee,
            free_delivery_threshold=payload.free_delivery_threshold,
        )
    except StorefrontError as e:
        logger.warning(f"Rejected fee settings update: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return FeeSettingsOut(**config.dict())


@router.post("/fee-settings/reset", response_model=FeeSettingsOut)
def reset_fee_settings():
    """restore fee config from environment defaults."""
    config = fee_settings_store.reset()
    logger.info("Delivery fee settings reset to defaults")
    return FeeSettingsOut(**config.dict())
