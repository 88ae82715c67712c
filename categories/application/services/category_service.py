"""
CategoryService.

Create, read, update and delete categories. A category may name a
parent category by id; the parent must already exist.
"""
import logging
from typing import List, Optional

from categories.application.dto.category_dto import CategoryDTO, CategorySerializer
from categories.domain.category import Category
from categories.ports.category_repository import CategoryRepository
from core.application.serializers import collect_violations
from core.domain.exceptions import (
    CategoryNotFoundError,
    NameAlreadyTakenError,
    ValidationError,
)
from core.infrastructure.database import transactional

logger = logging.getLogger(__name__)


class CategoryService:
    """Application service for categories."""

    def __init__(self, category_repository: CategoryRepository):
        """Initialize service with its repository."""
        self.category_repository = category_repository

    @transactional
    def list_all(self) -> List[CategoryDTO]:
        """List every category in storage order."""
        return [self._to_dto(category) for category in self.category_repository.find_all()]

    @transactional
    def get_by_id(self, category_id: int) -> CategoryDTO:
        """
        Get a category by id.

        Raises:
            CategoryNotFoundError: If category not found
        """
        return self._to_dto(self._get_category(category_id))

    @transactional
    def create(self, dto: CategoryDTO) -> CategoryDTO:
        """
        Create a new category.

        Args:
            dto: Category data; its id is ignored

        Returns:
            CategoryDTO of the saved category, with its assigned id

        Raises:
            ValidationError: If the name or parent id violate constraints
            NameAlreadyTakenError: If a category with this name exists
            CategoryNotFoundError: If the parent category does not exist
        """
        self._validate(dto)
        self._ensure_name_is_not_taken(dto.name)
        parent = self._get_parent_category(dto.parent_category_id)

        saved = self.category_repository.save(Category.create(name=dto.name, parent=parent))

        logger.info(
            "Category created",
            extra={
                "category_id": saved.id,
                "category_name": saved.name,
                "parent_category_id": saved.parent_id,
            },
        )
        return self._to_dto(saved)

    @transactional
    def update(self, category_id: int, dto: CategoryDTO) -> CategoryDTO:
        """
        Rename and re-parent an existing category.

        Name uniqueness is not re-checked, and no cycle check is made
        on the new parent.

        Raises:
            ValidationError: If the name or parent id violate constraints
            CategoryNotFoundError: If the category or its new parent does not exist
        """
        self._validate(dto)
        category = self._get_category(category_id)
        parent = self._get_parent_category(dto.parent_category_id)

        saved = self.category_repository.save(category.update(name=dto.name, parent=parent))

        logger.info(
            "Category updated",
            extra={
                "category_id": saved.id,
                "category_name": saved.name,
                "parent_category_id": saved.parent_id,
            },
        )
        return self._to_dto(saved)

    @transactional
    def delete(self, category_id: int) -> None:
        """
        Delete a category. Deleting an absent id is not an error.

        The store refuses to delete a category that still has
        subcategories or products; that error propagates unchanged.
        """
        self.category_repository.delete_by_id(category_id)
        logger.info("Category deleted", extra={"category_id": category_id})

    def _validate(self, dto: CategoryDTO) -> None:
        violations = collect_violations(CategorySerializer, dto)
        if violations:
            logger.warning(
                "Category rejected: %d constraint violation(s)",
                len(violations),
                extra={"violations": [str(v) for v in violations]},
            )
            raise ValidationError(violations)

    def _ensure_name_is_not_taken(self, name: str) -> None:
        if self.category_repository.exists_by_name(name):
            logger.warning("Category name already taken", extra={"category_name": name})
            raise NameAlreadyTakenError("Category", name)

    def _get_category(self, category_id: int) -> Category:
        category = self.category_repository.find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(f"Category {category_id} not found")
        return category

    def _get_parent_category(self, parent_id: Optional[int]) -> Optional[Category]:
        if parent_id is None:
            return None
        parent = self.category_repository.find_by_id(parent_id)
        if parent is None:
            raise CategoryNotFoundError(f"Parent category {parent_id} not found")
        return parent

    @staticmethod
    def _to_dto(category: Category) -> CategoryDTO:
        return CategoryDTO(
            id=category.id,
            name=category.name,
            parent_category_id=category.parent_id,
        )
