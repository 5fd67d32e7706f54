"""Typed product filter for catalogue listings.

Every clause is optional. Clauses that are set are AND-combined; a clause
left as ``None`` imposes no constraint.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ProductFilter:
    category: str | None = None  # category name, case-insensitive exact match
    product_type: str | None = None
    search: str | None = None  # substring of name, description or any tag
    featured: bool | None = None
    on_sale: bool | None = None
    price_min: Decimal | None = None  # inclusive
    price_max: Decimal | None = None  # inclusive
    brands: frozenset[str] | None = None

    def matches(self, product) -> bool:
        if self.category is not None and product.category.lower() != self.category.lower():
            return False

        if self.product_type is not None and product.product_type != self.product_type:
            return False

        if self.search:
            term = self.search.lower()
            haystack = [product.name, product.description, *product.tag_list]
            if not any(term in (text or "").lower() for text in haystack):
                return False

        # featured=False and on_sale=False mean "don't care", not "exclude"
        if self.featured and not product.is_featured:
            return False

        if self.on_sale and not product.is_on_sale:
            return False

        if self.price_min is not None and product.price < self.price_min:
            return False

        if self.price_max is not None and product.price > self.price_max:
            return False

        if self.brands and product.brand not in self.brands:
            return False

        return True
