"""Cart engine — the session-scoped API used by the HTTP layer.

Every mutation holds the session's lock for the whole command, including the
unit-of-work commit, so concurrent requests from one session are applied one
after another. Reads take no lock.
"""

from decimal import Decimal

from protean.utils.globals import current_domain

from storefront import settings
from storefront.cart.cart import ShoppingCart
from storefront.cart.items import AddToCart, RemoveFromCart, UpdateCartQuantity
from storefront.cart.locking import SessionLocks, session_locks
from storefront.cart.management import ClearCart
from storefront.cart.pricing import CartLine, CartSummary, summarize
from storefront.catalogue.queries import find_product
from storefront.domain import logger


def add_item(session_id: str, product_id: str, quantity: int = 1, locks: SessionLocks = session_locks) -> CartLine:
    """Add units of a product to the session's cart and return the affected line."""
    with locks.hold(session_id):
        item_id = current_domain.process(
            AddToCart(session_id=session_id, product_id=product_id, quantity=quantity),
            asynchronous=False,
        )

    logger.info("Added to cart", session_id=session_id, product_id=product_id, quantity=quantity)
    return _line(session_id, item_id)


def update_quantity(
    session_id: str, item_id: str, quantity: int, locks: SessionLocks = session_locks
) -> CartLine | None:
    """Overwrite a line's quantity. Returns None when a quantity of zero or less removed it."""
    with locks.hold(session_id):
        updated_id = current_domain.process(
            UpdateCartQuantity(session_id=session_id, item_id=item_id, quantity=quantity),
            asynchronous=False,
        )

    if updated_id is None:
        logger.info("Removed cart line by zero quantity", session_id=session_id, item_id=item_id)
        return None

    logger.info("Updated cart quantity", session_id=session_id, item_id=item_id, quantity=quantity)
    return _line(session_id, updated_id)


def remove_item(session_id: str, item_id: str, locks: SessionLocks = session_locks) -> bool:
    with locks.hold(session_id):
        removed = current_domain.process(
            RemoveFromCart(session_id=session_id, item_id=item_id),
            asynchronous=False,
        )

    logger.info("Removed cart line", session_id=session_id, item_id=item_id, removed=removed)
    return bool(removed)


def clear(session_id: str, locks: SessionLocks = session_locks) -> None:
    with locks.hold(session_id):
        removed = current_domain.process(ClearCart(session_id=session_id), asynchronous=False)

    logger.info("Cleared cart", session_id=session_id, items_removed=removed)


def get_items(session_id: str) -> list[CartLine]:
    """The session's lines joined with current product data.

    Lines whose product has left the catalogue are skipped.
    """
    cart = current_domain.repository_for(ShoppingCart).for_session(session_id)
    if cart is None:
        return []

    lines = []
    for item in cart.ordered_items():
        product = find_product(str(item.product_id))
        if product is None:
            logger.debug("Skipping cart line for missing product", session_id=session_id, item_id=str(item.id))
            continue
        lines.append(
            CartLine(
                item_id=str(item.id),
                product_id=str(item.product_id),
                quantity=item.quantity,
                product=product,
            )
        )
    return lines


def get_summary(session_id: str, tax_rate: Decimal | None = None) -> CartSummary:
    return summarize(get_items(session_id), settings.tax_rate() if tax_rate is None else tax_rate)


def _line(session_id, item_id):
    return next((line for line in get_items(session_id) if line.item_id == item_id), None)
