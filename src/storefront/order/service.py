"""Checkout — turn the session's cart into an order, and look orders up."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.cart.locking import SessionLocks, session_locks
from storefront.domain import logger
from storefront.exceptions import OrderNotFound
from storefront.order.order import Order
from storefront.order.placement import BUYER_FIELDS, PlaceOrder


def create_order(session_id: str, buyer: dict, locks: SessionLocks = session_locks) -> Order:
    """Place an order for everything in the session's cart.

    ``buyer`` holds the snake_case buyer fields (email, first_name, ...). Raises
    ``EmptyCart`` or ``InvalidOrderData``; in both cases nothing is written.
    """
    fields = {field: buyer.get(field) for field in BUYER_FIELDS}

    with locks.hold(session_id):
        order_id = current_domain.process(PlaceOrder(session_id=session_id, **fields), asynchronous=False)

    order = get_order(order_id)
    logger.info(
        "Order placed",
        order_id=order_id,
        session_id=session_id,
        total=str(order.total),
        item_count=order.item_count,
    )
    return order


def get_order(order_id: str) -> Order:
    try:
        return current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        raise OrderNotFound(order_id) from None
