"""
Pricing services package.

This package contains the checkout math for the delivery portal:
- Cart subtotal aggregation
- Delivery fee calculation with the free-delivery override
- Checkout quotes with promo discount and sales tax
- Delivery zone distance checks
"""

from .cart import CartLine, aggregate, count_items
from .delivery import (
    FeeType,
    FeeConfig,
    PricingResult,
    FreeDeliveryProgress,
    compute_delivery,
    delivery_fee_for,
    free_delivery_progress
)
from .checkout import CheckoutQuote, quote_checkout
from .distance import DeliveryZoneCheck, check_delivery_zone, distance_miles
from .settings_store import FeeSettingsStore, fee_settings_store

__all__ = [
    'CartLine',
    'aggregate',
    'count_items',
    'FeeType',
    'FeeConfig',
    'PricingResult',
    'FreeDeliveryProgress',
    'compute_delivery',
    'delivery_fee_for',
    'free_delivery_progress',
    'CheckoutQuote',
    'quote_checkout',
    'DeliveryZoneCheck',
    'check_delivery_zone',
    'distance_miles',
    'FeeSettingsStore',
    'fee_settings_store'
]
