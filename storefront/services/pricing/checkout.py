"""
Checkout quote: cart subtotal, promo discount, delivery fee and sales tax.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence

from storefront.services.pricing.cart import CartLine, aggregate, count_items
from storefront.services.pricing.delivery import FeeConfig, compute_delivery
from storefront.services.pricing.money import ZERO, non_negative, round_money


@dataclass(frozen=True)
class CheckoutQuote:
    subtotal: Decimal
    discount: Decimal
    delivery_fee: Decimal
    tax: Decimal
    total: Decimal
    item_count: int

    def dict(self):
        return {
            "subtotal": float(self.subtotal),
            "discount": float(self.discount),
            "delivery_fee": float(self.delivery_fee),
            "tax": float(self.tax),
            "total": float(self.total),
            "item_count": self.item_count,
        }


def quote_checkout(
    lines: Sequence[CartLine],
    config: FeeConfig,
    distance_miles=None,
    discount=ZERO,
    tax_rate=ZERO,
) -> CheckoutQuote:
    """full order breakdown; tax applies to the discounted subtotal only."""
    subtotal = aggregate(lines)
    item_count = count_items(lines)

    # discount can't push the total below zero
    discount = min(round_money(non_negative(discount, "discount")), subtotal)
    tax_rate = non_negative(tax_rate, "tax_rate")
    discounted_subtotal = subtotal - discount

    # free delivery is judged on what's in the cart, before promos
    pricing = compute_delivery(subtotal, config, distance_miles=distance_miles, item_count=item_count)
    tax = round_money(discounted_subtotal * tax_rate)

    return CheckoutQuote(
        subtotal=subtotal,
        discount=discount,
        delivery_fee=pricing.delivery_fee,
        tax=tax,
        total=discounted_subtotal + pricing.delivery_fee + tax,
        item_count=item_count,
    )
