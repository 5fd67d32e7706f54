"""Read side of the catalogue.

Side-effect free lookups used by the HTTP layer and by the cart engine. Misses
raise the typed ``*NotFound`` errors instead of returning ``None``.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.catalogue.category.category import Category
from storefront.catalogue.category.repository import CategoryRepository
from storefront.catalogue.product.product import Product
from storefront.catalogue.product.repository import ProductRepository
from storefront.catalogue.product.search import ProductFilter
from storefront.exceptions import CategoryNotFound, ProductNotFound


def _categories() -> CategoryRepository:
    return current_domain.repository_for(Category)


def _products() -> ProductRepository:
    return current_domain.repository_for(Product)


def list_categories() -> list[Category]:
    return _categories().list_all()


def get_category_by_slug(slug: str) -> Category:
    category = _categories().find_by_slug(slug)
    if category is None:
        raise CategoryNotFound(slug)
    return category


def list_products(product_filter: ProductFilter | None = None) -> list[Product]:
    return _products().search(product_filter)


def get_product(product_id: str) -> Product:
    try:
        return _products().get(product_id)
    except ObjectNotFoundError:
        raise ProductNotFound(product_id) from None


def get_product_by_slug(slug: str) -> Product:
    product = _products().find_by_slug(slug)
    if product is None:
        raise ProductNotFound(slug, field="slug")
    return product


def find_product(product_id: str) -> Product | None:
    """Like ``get_product`` but returns ``None`` for products no longer in the catalogue."""
    try:
        return get_product(product_id)
    except ProductNotFound:
        return None
