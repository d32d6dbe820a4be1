import logging
from dataclasses import asdict
from decimal import Decimal

from fastapi import APIRouter, HTTPException

from storefront.core.config import settings
from storefront.core.errors import StorefrontError
from storefront.schemas.delivery import (
    DeliveryQuoteRequest, DeliveryQuoteResponse, DeliveryZoneOut,
    FeeSettingsOut, FreeDeliveryProgressOut
)
from storefront.services.pricing import (
    CartLine, check_delivery_zone, fee_settings_store, free_delivery_progress, quote_checkout
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/delivery", tags=["delivery"])


@router.get("/fee-settings", response_model=FeeSettingsOut)
def get_fee_settings():
    """public fee settings so the cart page can show the free-delivery bar."""
    return FeeSettingsOut(**fee_settings_store.get().dict())


@router.post("/quote", response_model=DeliveryQuoteResponse)
def quote_delivery(payload: DeliveryQuoteRequest):
    """price a cart for delivery: subtotal, discount, delivery fee, tax and total."""
    if not payload.lines:
        raise HTTPException(status_code=400, detail="Cart is empty")

    config = fee_settings_store.get()
    lines = [
        CartLine(product_id=line.product_id, unit_price=Decimal(str(line.unit_price)), quantity=line.quantity)
        for line in payload.lines
    ]

    try:
        zone = None
        distance = payload.distance_miles
        if payload.customer_location:
            zone = check_delivery_zone(
                (payload.customer_location.lat, payload.customer_location.lng),
                (settings.STORE_LAT, settings.STORE_LNG),
                settings.DELIVERY_RADIUS_MILES,
            )
            if not zone.within_zone:
                logger.info(f"Delivery quote rejected: {zone.distance_miles} mi outside {zone.radius_miles} mi zone")
                raise HTTPException(
                    status_code=400,
                    detail=f"We only deliver within {zone.radius_miles:g} miles of our store. "
                           f"Your address is {zone.distance_miles:.1f} miles away.",
                )
            distance = zone.distance_miles

        tax_rate = settings.SALES_TAX_RATE if payload.include_tax else Decimal('0')
        quote = quote_checkout(
            lines,
            config,
            distance_miles=distance,
            discount=Decimal(str(payload.discount)),
            tax_rate=tax_rate,
        )
        progress = free_delivery_progress(quote.subtotal, config.free_delivery_threshold)
    except StorefrontError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return DeliveryQuoteResponse(
        **quote.dict(),
        fee_type=config.fee_type.value,
        free_delivery=FreeDeliveryProgressOut(
            threshold=float(config.free_delivery_threshold),
            amount_remaining=float(progress.amount_remaining),
            percent=progress.percent,
            qualifies=progress.qualifies,
        ),
        zone=DeliveryZoneOut(**asdict(zone)) if zone else None,
    )
