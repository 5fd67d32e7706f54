"""Category management — command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Integer, String
from protean.utils.globals import current_domain

from storefront.catalogue.category.category import Category
from storefront.catalogue.category.repository import CategoryRepository
from storefront.domain import storefront


@storefront.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    slug: String(required=True, max_length=100)
    icon: String(required=True, max_length=100)
    product_count: Integer(default=0, min_value=0)


@storefront.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        repo: CategoryRepository = current_domain.repository_for(Category)
        if repo.find_by_slug(command.slug) is not None:
            raise ValidationError({"slug": [f"Category slug `{command.slug}` is already taken"]})

        category = Category.create(
            name=command.name,
            slug=command.slug,
            icon=command.icon,
            product_count=command.product_count or 0,
        )
        repo.add(category)
        return str(category.id)
