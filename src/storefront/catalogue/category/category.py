"""Category aggregate — top-level grouping shown in the storefront navigation."""

from datetime import datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Integer, String

from storefront.catalogue.category.events import CategoryCreated
from storefront.domain import storefront
from storefront.shared.slugs import is_valid_slug


@storefront.aggregate
class Category:
    """A named group of products.

    ``product_count`` is display data captured when the category is loaded into
    the catalogue. Cart and order operations never touch it.
    """

    name: String(required=True, max_length=100)
    slug: String(required=True, max_length=100, unique=True)
    icon: String(required=True, max_length=100)
    product_count: Integer(default=0, min_value=0)
    created_at: DateTime(default=datetime.now)

    @invariant.post
    def slug_must_be_url_safe(self):
        if self.slug and not is_valid_slug(self.slug):
            raise ValidationError({"slug": ["Slug must contain only lowercase alphanumeric characters and hyphens"]})

    @classmethod
    def create(cls, name, slug, icon, product_count=0):
        category = cls(
            name=name,
            slug=slug,
            icon=icon,
            product_count=product_count,
            created_at=datetime.now(),
        )
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=name,
                slug=slug,
            )
        )
        return category
