"""
In-process delivery fee settings.
Seeded from env config; admins replace the whole config through the API.
"""
import logging
import threading
from typing import Optional

from storefront.core.config import settings
from storefront.services.pricing.delivery import FeeConfig

logger = logging.getLogger(__name__)


def default_fee_config() -> FeeConfig:
    return FeeConfig(
        fee_type=settings.DELIVERY_FEE_TYPE,
        flat_fee=settings.DELIVERY_FLAT_FEE,
        per_mile_fee=settings.DELIVERY_PER_MILE_FEE,
        per_item_fee=settings.DELIVERY_PER_ITEM_FEE,
        free_delivery_threshold=settings.FREE_DELIVERY_THRESHOLD,
    )


class FeeSettingsStore:
    """holds the active fee config (can be backed by the settings table later)."""

    def __init__(self, initial: Optional[FeeConfig] = None):
        self._lock = threading.Lock()
        self._config = initial or default_fee_config()

    def get(self) -> FeeConfig:
        return self._config

    def update(self, fee_type, flat_fee, per_mile_fee, per_item_fee,
               free_delivery_threshold=None) -> FeeConfig:
        """replace the active config; raises InvalidConfig and keeps the old one on bad values."""
        with self._lock:
            if free_delivery_threshold is None:
                free_delivery_threshold = self._config.free_delivery_threshold
            new_config = FeeConfig(
                fee_type=fee_type,
                flat_fee=flat_fee,
                per_mile_fee=per_mile_fee,
                per_item_fee=per_item_fee,
                free_delivery_threshold=free_delivery_threshold,
            )
            self._config = new_config

        logger.info(f"Delivery fee settings updated: type={new_config.fee_type.value}")
        return new_config

    def reset(self) -> FeeConfig:
        with self._lock:
            config = default_fee_config()
            self._config = config
        return config


# global instance
fee_settings_store = FeeSettingsStore()
