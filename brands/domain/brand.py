"""
Brand domain entity.

This is the core domain entity representing a brand.
It contains business logic and is independent of infrastructure.
"""
from dataclasses import dataclass
from typing import Optional

NAME_MAX_LENGTH = 255


@dataclass(frozen=True)
class Brand:
    """
    Brand domain entity.

    The id is assigned by the store on first save and never changes.
    """

    id: Optional[int]
    name: str

    def __post_init__(self):
        """Validate brand entity."""
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Brand name cannot be empty")
        if len(self.name) > NAME_MAX_LENGTH:
            raise ValueError("Brand name too long")

    @classmethod
    def create(cls, name: str) -> "Brand":
        """
        Create a new, not yet persisted Brand entity.

        Args:
            name: Brand display name

        Returns:
            Brand entity instance without an id
        """
        return cls(id=None, name=name)

    def update_name(self, new_name: str) -> "Brand":
        """
        Create a new Brand instance with updated name.

        Args:
            new_name: New brand name

        Returns:
            New Brand instance with the same id
        """
        return Brand(id=self.id, name=new_name)
