"""Cart pricing — derive subtotal, tax, total and item count from cart lines.

``summarize`` is a pure function of its inputs: the same lines and rate always
produce the same summary. Summaries are never stored; every cart read builds a
fresh one from the products' current prices.
"""

from dataclasses import dataclass
from decimal import Decimal

from storefront.shared.money import ZERO, quantize


@dataclass(frozen=True)
class CartLine:
    """A cart line joined with the current catalogue record of its product."""

    item_id: str
    product_id: str
    quantity: int
    product: object  # storefront.catalogue.product.product.Product

    @property
    def unit_price(self) -> Decimal:
        return self.product.price

    @property
    def line_total(self) -> Decimal:
        return quantize(self.unit_price * self.quantity)


@dataclass(frozen=True)
class CartSummary:
    lines: tuple[CartLine, ...]
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    item_count: int
    tax_rate: Decimal

    @property
    def is_empty(self) -> bool:
        return self.item_count == 0

    @property
    def has_physical_items(self) -> bool:
        return any(line.product.is_physical for line in self.lines)


def summarize(lines, tax_rate: Decimal) -> CartSummary:
    lines = tuple(lines)

    subtotal = quantize(sum((line.unit_price * line.quantity for line in lines), ZERO))
    tax = quantize(subtotal * tax_rate)

    return CartSummary(
        lines=lines,
        subtotal=subtotal,
        tax=tax,
        total=quantize(subtotal + tax),
        item_count=sum(line.quantity for line in lines),
        tax_rate=tax_rate,
    )
