"""
Errors raised by the pricing and store hours services.

Both are plain precondition failures with nothing to retry; the API layer
turns them into 400 responses.
"""


class StorefrontError(ValueError):
    """base class for storefront computation errors."""


class InvalidInput(StorefrontError):
    """missing or out-of-range input (negative price, missing distance, bad time token)."""


class InvalidConfig(StorefrontError):
    """unrecognized configuration value, e.g. an unknown fee type."""
