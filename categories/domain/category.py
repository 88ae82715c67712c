"""
Category domain entity.

Categories form a tree. Each category keeps the id of its parent
rather than a reference to the parent object, so the tree is just
a set of rows indexed by id.
"""
from dataclasses import dataclass
from typing import Optional

NAME_MAX_LENGTH = 255


@dataclass(frozen=True)
class Category:
    """Category domain entity."""

    id: Optional[int]
    name: str
    parent_id: Optional[int] = None

    def __post_init__(self):
        """Validate category entity."""
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Category name cannot be empty")
        if len(self.name) > NAME_MAX_LENGTH:
            raise ValueError("Category name too long")
        if self.parent_id is not None and self.parent_id <= 0:
            raise ValueError("Parent category id must be positive")

    @classmethod
    def create(cls, name: str, parent: Optional["Category"] = None) -> "Category":
        """
        Create a new, not yet persisted Category entity.

        Args:
            name: Category name
            parent: Resolved parent category, or None for a root category

        Returns:
            Category entity instance without an id
        """
        return cls(id=None, name=name, parent_id=parent.id if parent else None)

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    def update(self, name: str, parent: Optional["Category"] = None) -> "Category":
        """
        Create a new Category instance with updated name and parent.

        No cycle check is made; a category may be re-parented anywhere.

        Args:
            name: New category name
            parent: Resolved parent category, or None to make it a root

        Returns:
            New Category instance with the same id
        """
        return Category(id=self.id, name=name, parent_id=parent.id if parent else None)
