"""
Unit tests for CategoryService against a mocked repository.
"""
from unittest.mock import create_autospec

import pytest

from categories.application.dto.category_dto import CategoryDTO
from categories.application.services.category_service import CategoryService
from categories.domain.category import Category
from categories.ports.category_repository import CategoryRepository
from core.domain.exceptions import (
    CategoryNotFoundError,
    NameAlreadyTakenError,
    ValidationError,
)

pytestmark = pytest.mark.django_db


@pytest.fixture
def repository():
    repository = create_autospec(CategoryRepository, instance=True)
    repository.exists_by_name.return_value = False
    repository.save.side_effect = lambda category: Category(
        id=category.id or 10, name=category.name, parent_id=category.parent_id
    )
    return repository


@pytest.fixture
def service(repository):
    return CategoryService(repository)


class TestCategoryService:
    """Tests for CategoryService."""

    def test_list_all(self, service, repository):
        """Test list_all maps parent ids."""
        repository.find_all.return_value = [
            Category(id=1, name="Root"),
            Category(id=2, name="Child", parent_id=1),
        ]

        assert service.list_all() == [
            CategoryDTO(id=1, name="Root", parent_category_id=None),
            CategoryDTO(id=2, name="Child", parent_category_id=1),
        ]

    def test_get_by_id_not_found(self, service, repository):
        """Test get_by_id raises when the category is absent."""
        repository.find_by_id.return_value = None

        with pytest.raises(CategoryNotFoundError):
            service.get_by_id(1)

    def test_create_root(self, service, repository):
        """Test a null parent id skips the parent lookup."""
        result = service.create(CategoryDTO(name="Root"))

        repository.find_by_id.assert_not_called()
        repository.save.assert_called_once_with(Category(id=None, name="Root", parent_id=None))
        assert result == CategoryDTO(id=10, name="Root", parent_category_id=None)

    def test_create_with_parent(self, service, repository):
        """Test the parent is resolved before saving."""
        repository.find_by_id.return_value = Category(id=1, name="Root")

        result = service.create(CategoryDTO(name="Child", parent_category_id=1))

        repository.find_by_id.assert_called_once_with(1)
        repository.save.assert_called_once_with(Category(id=None, name="Child", parent_id=1))
        assert result.parent_category_id == 1

    def test_create_parent_not_found(self, service, repository):
        """Test an unresolved parent aborts creation."""
        repository.find_by_id.return_value = None

        with pytest.raises(CategoryNotFoundError):
            service.create(CategoryDTO(name="Child", parent_category_id=99))

        repository.save.assert_not_called()

    def test_create_name_taken(self, service, repository):
        """Test create refuses a taken name before resolving the parent."""
        repository.exists_by_name.return_value = True

        with pytest.raises(NameAlreadyTakenError):
            service.create(CategoryDTO(name="Root", parent_category_id=1))

        repository.find_by_id.assert_not_called()
        repository.save.assert_not_called()

    @pytest.mark.parametrize(
        "dto, fields",
        [
            (CategoryDTO(name=" "), ["name"]),
            (CategoryDTO(name=None, parent_category_id=0), ["name", "parent_category_id"]),
            (CategoryDTO(name="x" * 256, parent_category_id=-1), ["name", "parent_category_id"]),
        ],
    )
    def test_create_invalid(self, service, repository, dto, fields):
        """Test every violation is reported and storage is untouched."""
        with pytest.raises(ValidationError) as exc_info:
            service.create(dto)

        assert [v.field for v in exc_info.value.violations] == fields
        repository.exists_by_name.assert_not_called()
        repository.save.assert_not_called()

    def test_update(self, service, repository):
        """Test update renames and re-parents."""
        existing = Category(id=5, name="Phones")
        parent = Category(id=1, name="Electronics")
        repository.find_by_id.side_effect = lambda category_id: {5: existing, 1: parent}.get(
            category_id
        )

        result = service.update(5, CategoryDTO(name="Smartphones", parent_category_id=1))

        repository.save.assert_called_once_with(Category(id=5, name="Smartphones", parent_id=1))
        assert result == CategoryDTO(id=5, name="Smartphones", parent_category_id=1)
        repository.exists_by_name.assert_not_called()

    def test_update_not_found(self, service, repository):
        """Test update raises when the category is absent."""
        repository.find_by_id.return_value = None

        with pytest.raises(CategoryNotFoundError):
            service.update(5, CategoryDTO(name="Phones"))

        repository.save.assert_not_called()

    def test_update_parent_not_found(self, service, repository):
        """Test update raises when the new parent is absent."""
        existing = Category(id=5, name="Phones")
        repository.find_by_id.side_effect = lambda category_id: {5: existing}.get(category_id)

        with pytest.raises(CategoryNotFoundError, match="Parent category 7"):
            service.update(5, CategoryDTO(name="Phones", parent_category_id=7))

        repository.save.assert_not_called()

    def test_update_invalid(self, service, repository):
        """Test invalid input is rejected before any lookup."""
        with pytest.raises(ValidationError):
            service.update(5, CategoryDTO(name=""))

        repository.find_by_id.assert_not_called()

    def test_delete(self, service, repository):
        """Test delete delegates to the repository."""
        service.delete(3)

        repository.delete_by_id.assert_called_once_with(3)
