"""Storefront bounded context — catalogue, session carts and checkout.

Hosts the product catalogue, the per-session shopping cart engine and the
checkout flow that freezes a cart into an order.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

storefront = Domain(name="storefront")
