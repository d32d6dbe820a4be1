"""
Cart aggregation.
Lines are summed at full precision and rounded once, so many small lines
don't drift by a cent each.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from storefront.core.errors import InvalidInput
from storefront.services.pricing.money import ZERO, non_negative, round_money


@dataclass(frozen=True)
class CartLine:
    """one product row of a cart."""
    product_id: int
    unit_price: Decimal
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return round_money(Decimal(str(self.unit_price)) * self.quantity)


def _check_line(line: CartLine) -> Decimal:
    price = non_negative(line.unit_price, f"unit_price for product {line.product_id}")
    if isinstance(line.quantity, bool) or not isinstance(line.quantity, int):
        raise InvalidInput(f"quantity for product {line.product_id} must be an integer")
    if line.quantity <= 0:
        raise InvalidInput(f"quantity for product {line.product_id} must be positive")
    return price


def aggregate(lines: Iterable[CartLine]) -> Decimal:
    """cart subtotal: sum of unit_price * quantity, rounded once at the end."""
    subtotal = ZERO
    for line in lines:
        price = _check_line(line)
        subtotal += price * line.quantity
    return round_money(subtotal)


def count_items(lines: Iterable[CartLine]) -> int:
    """total units in the cart, used by per-item delivery fees."""
    total = 0
    for line in lines:
        _check_line(line)
        total += line.quantity
    return total
