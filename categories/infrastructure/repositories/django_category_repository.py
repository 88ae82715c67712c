"""
Django implementation of CategoryRepository port.

This adapter converts between domain entities and Django ORM models.
"""
from typing import List, Optional

from categories.domain.category import Category
from categories.infrastructure.models import Category as CategoryModel
from categories.ports.category_repository import CategoryRepository


class DjangoCategoryRepository(CategoryRepository):
    """Django ORM implementation of CategoryRepository."""

    def _to_domain(self, model: CategoryModel) -> Category:
        """Convert Django model to domain entity."""
        return Category(
            id=model.id,
            name=model.name,
            parent_id=model.parent_category_id,
        )

    def _to_model(self, category: Category) -> CategoryModel:
        """Convert domain entity to Django model, loading the row if it exists."""
        if category.id is None:
            return CategoryModel(name=category.name, parent_category_id=category.parent_id)
        # pylint: disable=no-member
        model = CategoryModel.objects.filter(id=category.id).first()
        if model is None:
            return CategoryModel(
                id=category.id,
                name=category.name,
                parent_category_id=category.parent_id,
            )
        model.name = category.name
        model.parent_category_id = category.parent_id
        return model

    def save(self, category: Category) -> Category:
        """
        Save a category entity.

        Args:
            category: Category entity to save

        Returns:
            Saved category entity with its id populated
        """
        model = self._to_model(category)
        model.save()
        return self._to_domain(model)

    def find_by_id(self, category_id: int) -> Optional[Category]:
        """
        Find a category by ID.

        Args:
            category_id: Category id

        Returns:
            Category entity or None if not found
        """
        try:
            # pylint: disable=no-member
            model = CategoryModel.objects.get(id=category_id)
            return self._to_domain(model)
        except CategoryModel.DoesNotExist:  # pylint: disable=no-member
            return None

    def find_all(self) -> List[Category]:
        """List all categories, roots and subcategories alike."""
        # pylint: disable=no-member
        return [self._to_domain(model) for model in CategoryModel.objects.all()]

    def exists_by_name(self, name: str) -> bool:
        """Check if a category with the given name exists."""
        # pylint: disable=no-member
        return CategoryModel.objects.filter(name=name).exists()

    def delete_by_id(self, category_id: int) -> None:
        """
        Delete a category by ID. Absent ids are ignored.

        Raises:
            ProtectedError: If subcategories or products still reference it
        """
        # pylint: disable=no-member
        CategoryModel.objects.filter(id=category_id).delete()
