"""Typed failures raised by the storefront.

Every error is recoverable by the caller. Lookups that miss are
``ObjectNotFoundError`` subclasses (HTTP 404); rule violations are
``ValidationError`` subclasses (HTTP 400). All of them carry a ``messages`` dict
of ``{field: [message, ...]}``.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError


class NotFound(ObjectNotFoundError):
    """Base for lookups that miss. Unlike Protean's own exception it keeps ``messages``."""

    def __init__(self, messages):
        super().__init__(messages)
        self.messages = messages


class CategoryNotFound(NotFound):
    def __init__(self, slug):
        super().__init__({"slug": [f"Category `{slug}` does not exist"]})
        self.slug = slug


class ProductNotFound(NotFound):
    def __init__(self, key, field="product_id"):
        super().__init__({field: [f"Product `{key}` does not exist"]})
        self.key = key


class CartItemNotFound(NotFound):
    def __init__(self, item_id):
        super().__init__({"item_id": [f"Cart item `{item_id}` does not exist"]})
        self.item_id = item_id


class OrderNotFound(NotFound):
    def __init__(self, order_id):
        super().__init__({"order_id": [f"Order `{order_id}` does not exist"]})
        self.order_id = order_id


class InsufficientStock(ValidationError):
    """Requested quantity exceeds the physical stock on hand."""

    def __init__(self, product_id, requested, available):
        super().__init__({"quantity": [f"Only {available} unit(s) available, {requested} requested"]})
        self.product_id = product_id
        self.requested = requested
        self.available = available


class EmptyCart(ValidationError):
    def __init__(self, session_id):
        super().__init__({"cart": ["Cannot place an order from an empty cart"]})
        self.session_id = session_id


class InvalidOrderData(ValidationError):
    """Buyer details failed validation; ``messages`` lists every offending field."""

    def __init__(self, errors):
        super().__init__(errors)
        self.errors = errors
