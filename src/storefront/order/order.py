"""Order aggregate — the frozen financial record produced at checkout.

Subtotal, tax and total are copied from the cart summary when the order is
placed and are never recomputed, whatever happens to catalogue prices later.
The line snapshot is kept for auditing only.
"""

from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum

from protean.fields import DateTime, HasMany, Identifier, Integer, String

from storefront.domain import storefront
from storefront.order.events import OrderPlaced
from storefront.shared.money import from_cents, to_cents


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


@storefront.entity(part_of="Order")
class OrderLine:
    product_id = Identifier(required=True)
    product_name = String(required=True, max_length=255)
    unit_price_cents = Integer(required=True, min_value=0)
    quantity = Integer(required=True, min_value=1)
    line_total_cents = Integer(required=True, min_value=0)

    @property
    def unit_price(self) -> Decimal:
        return from_cents(self.unit_price_cents)

    @property
    def line_total(self) -> Decimal:
        return from_cents(self.line_total_cents)


@storefront.aggregate
class Order:
    session_id = String(required=True, max_length=255)
    email = String(required=True, max_length=254)
    first_name = String(required=True, max_length=100)
    last_name = String(required=True, max_length=100)
    address = String(max_length=255)
    city = String(max_length=100)
    postal_code = String(max_length=20)
    country = String(max_length=100)
    phone = String(max_length=20)
    lines = HasMany(OrderLine)
    subtotal_cents = Integer(required=True, min_value=0)
    tax_cents = Integer(required=True, min_value=0)
    total_cents = Integer(required=True, min_value=0)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    created_at = DateTime()

    @property
    def subtotal(self) -> Decimal:
        return from_cents(self.subtotal_cents)

    @property
    def tax(self) -> Decimal:
        return from_cents(self.tax_cents)

    @property
    def total(self) -> Decimal:
        return from_cents(self.total_cents)

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)

    @classmethod
    def place(cls, session_id, buyer, summary):
        """Create a pending order from buyer details and the cart summary taken at checkout."""

        def optional(field):
            return (buyer.get(field) or "").strip() or None

        order = cls(
            session_id=session_id,
            email=buyer["email"].strip(),
            first_name=buyer["first_name"].strip(),
            last_name=buyer["last_name"].strip(),
            address=optional("address"),
            city=optional("city"),
            postal_code=optional("postal_code"),
            country=optional("country"),
            phone=optional("phone"),
            subtotal_cents=to_cents(summary.subtotal),
            tax_cents=to_cents(summary.tax),
            total_cents=to_cents(summary.total),
            status=OrderStatus.PENDING.value,
            created_at=datetime.now(UTC),
        )

        for line in summary.lines:
            order.add_lines(
                OrderLine(
                    product_id=line.product_id,
                    product_name=line.product.name,
                    unit_price_cents=to_cents(line.unit_price),
                    quantity=line.quantity,
                    line_total_cents=to_cents(line.line_total),
                )
            )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                session_id=session_id,
                email=order.email,
                item_count=summary.item_count,
                subtotal_cents=order.subtotal_cents,
                tax_cents=order.tax_cents,
                total_cents=order.total_cents,
            )
        )
        return order
