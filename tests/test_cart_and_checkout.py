"""
Cart and checkout tests
=======================
Subtotal aggregation, promo discount and sales tax
"""

from decimal import Decimal

import pytest

from storefront.core.errors import InvalidInput
from storefront.services.pricing import (
    CartLine, FeeConfig, aggregate, count_items, quote_checkout
)


# ═══════════════════════════════════════════════════════════
# FIXTURES
# ═══════════════════════════════════════════════════════════

@pytest.fixture
def flat_config():
    return FeeConfig(fee_type="flat", flat_fee=Decimal("10.00"), free_delivery_threshold=Decimal("99.00"))


@pytest.fixture
def sixty_dollar_cart():
    return [CartLine(product_id=1, unit_price=Decimal("20.00"), quantity=3)]


TAX_RATE = Decimal("0.0825")


# ═══════════════════════════════════════════════════════════
# CART AGGREGATION
# ═══════════════════════════════════════════════════════════

class TestAggregate:

    def test_sums_lines(self):
        lines = [
            CartLine(product_id=1, unit_price=Decimal("19.99"), quantity=3),
            CartLine(product_id=2, unit_price=Decimal("5.00"), quantity=2),
        ]
        assert aggregate(lines) == Decimal("69.97")
        assert count_items(lines) == 5

    def test_empty_cart(self):
        assert aggregate([]) == Decimal("0.00")
        assert count_items([]) == 0

    def test_rounds_once_at_the_end(self):
        # rounding each line would give 0.03
        lines = [CartLine(product_id=i, unit_price=Decimal("0.005"), quantity=1) for i in range(3)]
        assert aggregate(lines) == Decimal("0.02")

    def test_line_total(self):
        line = CartLine(product_id=7, unit_price=Decimal("4.99"), quantity=4)
        assert line.line_total == Decimal("19.96")

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity(self, quantity):
        with pytest.raises(InvalidInput):
            aggregate([CartLine(product_id=1, unit_price=Decimal("1.00"), quantity=quantity)])

    def test_negative_price(self):
        with pytest.raises(InvalidInput):
            aggregate([CartLine(product_id=1, unit_price=Decimal("-0.01"), quantity=1)])

    def test_free_item_allowed(self):
        assert aggregate([CartLine(product_id=1, unit_price=Decimal("0"), quantity=2)]) == Decimal("0.00")


# ═══════════════════════════════════════════════════════════
# CHECKOUT QUOTES
# ═══════════════════════════════════════════════════════════

class TestQuoteCheckout:

    def test_discount_and_tax(self, sixty_dollar_cart, flat_config):
        quote = quote_checkout(sixty_dollar_cart, flat_config, discount=Decimal("5"), tax_rate=TAX_RATE)

        assert quote.subtotal == Decimal("60.00")
        assert quote.discount == Decimal("5.00")
        assert quote.delivery_fee == Decimal("10.00")
        # 55.00 * 8.25% = 4.5375
        assert quote.tax == Decimal("4.54")
        assert quote.total == Decimal("69.54")
        assert quote.item_count == 3

    def test_discount_capped_at_subtotal(self, sixty_dollar_cart, flat_config):
        quote = quote_checkout(sixty_dollar_cart, flat_config, discount=Decimal("100"), tax_rate=TAX_RATE)

        assert quote.discount == Decimal("60.00")
        assert quote.tax == Decimal("0.00")
        assert quote.total == Decimal("10.00")

    def test_free_delivery_judged_before_discount(self, flat_config):
        lines = [CartLine(product_id=1, unit_price=Decimal("50.00"), quantity=2)]
        quote = quote_checkout(lines, flat_config, discount=Decimal("10"), tax_rate=TAX_RATE)

        assert quote.delivery_fee == 0
        # 90.00 * 8.25% = 7.425
        assert quote.tax == Decimal("7.43")
        assert quote.total == Decimal("97.43")

    def test_per_item_fee_uses_cart_units(self):
        config = FeeConfig(fee_type="per_item", per_item_fee=Decimal("0.50"))
        lines = [
            CartLine(product_id=1, unit_price=Decimal("4.00"), quantity=3),
            CartLine(product_id=2, unit_price=Decimal("6.00"), quantity=2),
        ]
        quote = quote_checkout(lines, config)

        assert quote.delivery_fee == Decimal("2.50")
        assert quote.tax == 0
        assert quote.total == Decimal("26.50")

    def test_negative_discount(self, sixty_dollar_cart, flat_config):
        with pytest.raises(InvalidInput):
            quote_checkout(sixty_dollar_cart, flat_config, discount=Decimal("-1"))

    def test_negative_tax_rate(self, sixty_dollar_cart, flat_config):
        with pytest.raises(InvalidInput):
            quote_checkout(sixty_dollar_cart, flat_config, tax_rate=Decimal("-0.1"))

    def test_dict_uses_floats(self, sixty_dollar_cart, flat_config):
        data = quote_checkout(sixty_dollar_cart, flat_config).dict()
        assert data == {
            "subtotal": 60.0,
            "discount": 0.0,
            "delivery_fee": 10.0,
            "tax": 0.0,
            "total": 70.0,
            "item_count": 3,
        }
