"""Environment-driven settings that sit outside Protean's domain configuration."""

import os
from decimal import Decimal, InvalidOperation

DEFAULT_TAX_RATE = Decimal("0.21")


def tax_rate() -> Decimal:
    """VAT rate applied to cart subtotals (``STOREFRONT_TAX_RATE``)."""
    raw = os.getenv("STOREFRONT_TAX_RATE")
    if not raw:
        return DEFAULT_TAX_RATE

    try:
        rate = Decimal(raw)
    except InvalidOperation:
        raise ValueError(f"STOREFRONT_TAX_RATE must be a decimal number, got {raw!r}") from None

    if rate < 0:
        raise ValueError(f"STOREFRONT_TAX_RATE must not be negative, got {raw!r}")
    return rate


def secret_key() -> str:
    """Key used to sign the session cookie."""
    return os.getenv("STOREFRONT_SECRET_KEY", "storefront-dev-secret")


def session_cookie() -> str:
    return os.getenv("STOREFRONT_SESSION_COOKIE", "storefront_session")


def session_max_age() -> int:
    """Session cookie lifetime in seconds (defaults to 30 days)."""
    return int(os.getenv("STOREFRONT_SESSION_MAX_AGE", str(30 * 24 * 60 * 60)))
