"""Repository for the Product aggregate."""

from storefront.catalogue.category.repository import CATALOGUE_SCAN_LIMIT
from storefront.catalogue.product.product import Product
from storefront.catalogue.product.search import ProductFilter
from storefront.domain import storefront


@storefront.repository(part_of=Product)
class ProductRepository:
    def find_by_slug(self, slug: str) -> Product | None:
        results = self._dao.query.filter(slug=slug).all().items
        return results[0] if results else None

    def search(self, product_filter: ProductFilter | None = None) -> list[Product]:
        """Products matching ``product_filter``, oldest first.

        Filtering runs in Python so the memory and SQL providers answer
        identically (case-insensitive matching, tag search over JSON).
        """
        product_filter = product_filter or ProductFilter()
        products = self._dao.query.limit(CATALOGUE_SCAN_LIMIT).all().items
        matching = [product for product in products if product_filter.matches(product)]
        return sorted(matching, key=lambda product: product.created_at)
