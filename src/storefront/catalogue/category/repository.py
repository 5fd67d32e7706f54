"""Repository for the Category aggregate."""

from storefront.catalogue.category.category import Category
from storefront.domain import storefront

# Upper bound for catalogue scans; the storefront catalogue is small.
CATALOGUE_SCAN_LIMIT = 10_000


@storefront.repository(part_of=Category)
class CategoryRepository:
    def find_by_slug(self, slug: str) -> Category | None:
        results = self._dao.query.filter(slug=slug).all().items
        return results[0] if results else None

    def list_all(self) -> list[Category]:
        categories = self._dao.query.limit(CATALOGUE_SCAN_LIMIT).all().items
        return sorted(categories, key=lambda category: category.created_at)
