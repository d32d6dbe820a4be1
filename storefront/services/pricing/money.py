from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from storefront.core.errors import InvalidInput

CENTS = Decimal('0.01')
ZERO = Decimal('0.00')


def to_decimal(value, field: str) -> Decimal:
    """coerce ints, floats, strings and Decimals to a finite Decimal."""
    if isinstance(value, bool):
        raise InvalidInput(f"{field} must be a number")
    try:
        # go through str() so 0.1 stays 0.1 instead of its binary expansion
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidInput(f"{field} must be a number, got {value!r}")
    if not result.is_finite():
        raise InvalidInput(f"{field} must be finite")
    return result


def non_negative(value, field: str) -> Decimal:
    result = to_decimal(value, field)
    if result < 0:
        raise InvalidInput(f"{field} must not be negative")
    return result


def round_money(amount: Decimal) -> Decimal:
    """round to cents, half-up."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)
