"""
Delivery fee calculation.

A fee config picks one of four formulas (flat, per mile, per item, or per mile
plus per item). Orders at or above the free-delivery threshold never pay a fee,
whatever the formula.
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Optional

from storefront.core.errors import InvalidConfig, InvalidInput
from storefront.services.pricing.money import ZERO, non_negative, round_money


class FeeType(str, Enum):
    FLAT = "flat"
    PER_MILE = "per_mile"
    PER_ITEM = "per_item"
    COMBINED = "combined"

    @classmethod
    def resolve(cls, value) -> "FeeType":
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(t.value for t in cls)
            raise InvalidConfig(f"Invalid fee type {value!r}. Use: {allowed}")


@dataclass(frozen=True)
class FeeConfig:
    """delivery fee settings; fields the fee type doesn't use are ignored."""
    fee_type: FeeType = FeeType.FLAT
    flat_fee: Decimal = Decimal('10.00')
    per_mile_fee: Decimal = Decimal('1.50')
    per_item_fee: Decimal = Decimal('0.50')
    free_delivery_threshold: Decimal = Decimal('99.00')

    def __post_init__(self):
        object.__setattr__(self, "fee_type", FeeType.resolve(self.fee_type))
        for name in ("flat_fee", "per_mile_fee", "per_item_fee", "free_delivery_threshold"):
            try:
                amount = non_negative(getattr(self, name), name)
            except InvalidInput as exc:
                raise InvalidConfig(str(exc))
            object.__setattr__(self, name, amount)

    def dict(self):
        return {
            "fee_type": self.fee_type.value,
            "flat_fee": float(self.flat_fee),
            "per_mile_fee": float(self.per_mile_fee),
            "per_item_fee": float(self.per_item_fee),
            "free_delivery_threshold": float(self.free_delivery_threshold),
        }


@dataclass(frozen=True)
class PricingResult:
    """subtotal and total are rounded to cents; the threshold is checked against the unrounded subtotal."""
    subtotal: Decimal
    delivery_fee: Decimal
    total: Decimal

    @property
    def is_free_delivery(self) -> bool:
        return self.delivery_fee == 0

    def dict(self):
        return {
            "subtotal": float(self.subtotal),
            "delivery_fee": float(self.delivery_fee),
            "total": float(self.total),
        }


@dataclass(frozen=True)
class FreeDeliveryProgress:
    """how far a cart is from the free-delivery threshold."""
    amount_remaining: Decimal
    percent: int

    @property
    def qualifies(self) -> bool:
        return self.amount_remaining == 0


def _required_distance(distance_miles) -> Decimal:
    if distance_miles is None:
        raise InvalidInput("distance_miles is required for this fee type")
    return non_negative(distance_miles, "distance_miles")


def _required_item_count(item_count) -> int:
    if item_count is None:
        raise InvalidInput("item_count is required for this fee type")
    if isinstance(item_count, bool) or not isinstance(item_count, int):
        raise InvalidInput("item_count must be an integer")
    if item_count < 0:
        raise InvalidInput("item_count must not be negative")
    return item_count


def delivery_fee_for(config: FeeConfig, distance_miles=None, item_count: Optional[int] = None) -> Decimal:
    """fee by formula alone, before any free-delivery override."""
    fee_type = config.fee_type
    if fee_type is FeeType.FLAT:
        fee = config.flat_fee
    elif fee_type is FeeType.PER_MILE:
        fee = config.per_mile_fee * _required_distance(distance_miles)
    elif fee_type is FeeType.PER_ITEM:
        fee = config.per_item_fee * _required_item_count(item_count)
    elif fee_type is FeeType.COMBINED:
        fee = (config.per_mile_fee * _required_distance(distance_miles)
               + config.per_item_fee * _required_item_count(item_count))
    else:
        raise InvalidConfig(f"Invalid fee type {fee_type!r}")
    return round_money(fee)


def compute_delivery(subtotal, config: FeeConfig, distance_miles=None,
                     item_count: Optional[int] = None) -> PricingResult:
    """price breakdown for a cart subtotal under the given fee config."""
    subtotal = non_negative(subtotal, "subtotal")
    # bad context is rejected even when delivery ends up free
    if distance_miles is not None:
        non_negative(distance_miles, "distance_miles")
    if item_count is not None:
        _required_item_count(item_count)

    if subtotal >= config.free_delivery_threshold:
        fee = ZERO
    else:
        fee = delivery_fee_for(config, distance_miles, item_count)

    # fee is whole cents, so rounding the sum equals rounded subtotal + fee
    return PricingResult(subtotal=round_money(subtotal), delivery_fee=fee, total=round_money(subtotal + fee))


def free_delivery_progress(subtotal, threshold) -> FreeDeliveryProgress:
    subtotal = non_negative(subtotal, "subtotal")
    threshold = non_negative(threshold, "free_delivery_threshold")
    if threshold == 0:
        return FreeDeliveryProgress(amount_remaining=ZERO, percent=100)

    remaining = round_money(max(ZERO, threshold - subtotal))
    percent = min(Decimal(100), subtotal / threshold * 100)
    return FreeDeliveryProgress(amount_remaining=remaining, percent=int(percent.quantize(Decimal(1), rounding=ROUND_HALF_UP)))
