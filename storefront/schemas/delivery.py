from typing import List, Optional
from pydantic import BaseModel, Field


class CartLineIn(BaseModel):
    product_id: int
    unit_price: float = Field(..., ge=0)
    quantity: int = Field(..., ge=1)


class Coordinates(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class DeliveryQuoteRequest(BaseModel):
    lines: List[CartLineIn]
    distance_miles: Optional[float] = Field(None, ge=0, description="Known distance; ignored when customer coordinates are sent")
    customer_location: Optional[Coordinates] = None
    discount: float = Field(0, ge=0, description="Already-validated promo discount")
    include_tax: bool = True


class DeliveryZoneOut(BaseModel):
    distance_miles: float
    within_zone: bool
    radius_miles: float


class FreeDeliveryProgressOut(BaseModel):
    threshold: float
    amount_remaining: float
    percent: int
    qualifies: bool


class DeliveryQuoteResponse(BaseModel):
    subtotal: float
    discount: float
    delivery_fee: float
    tax: float
    total: float
    item_count: int
    fee_type: str
    free_delivery: FreeDeliveryProgressOut
    zone: Optional[DeliveryZoneOut] = None


class FeeSettingsOut(BaseModel):
    fee_type: str
    flat_fee: float
    per_mile_fee: float
    per_item_fee: float
    free_delivery_threshold: float


class FeeSettingsUpdate(BaseModel):
    fee_type: str = Field(..., description="flat, per_mile, per_item or combined")
    flat_fee: float
    per_mile_fee: float
    per_item_fee: float
    free_delivery_threshold: Optional[float] = None
