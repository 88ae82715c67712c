"""
Product domain entity.

This is the core domain entity representing a product.
It contains business logic and is independent of infrastructure.
"""
from dataclasses import dataclass
from typing import Optional

from brands.domain.brand import Brand
from categories.domain.category import Category

NAME_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 2000


@dataclass(frozen=True)
class Product:
    """
    Product domain entity.

    A product always belongs to exactly one category and one brand.
    """

    id: Optional[int]
    name: str
    description: str
    price: float
    quantity: int
    category_id: int
    brand_id: int

    def __post_init__(self):
        """Validate product entity."""
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Product name cannot be empty")
        if len(self.name) > NAME_MAX_LENGTH:
            raise ValueError("Product name too long")
        if not self.description or len(self.description.strip()) == 0:
            raise ValueError("Product description cannot be empty")
        if len(self.description) > DESCRIPTION_MAX_LENGTH:
            raise ValueError("Product description too long")
        if self.price is None or self.price <= 0:
            raise ValueError("Product price must be positive")
        if self.quantity is None or self.quantity < 0:
            raise ValueError("Product quantity cannot be negative")
        if not self.category_id:
            raise ValueError("Category ID is required")
        if not self.brand_id:
            raise ValueError("Brand ID is required")

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        price: float,
        quantity: int,
        category: Category,
        brand: Brand,
    ) -> "Product":
        """
        Create a new, not yet persisted Product entity.

        Args:
            name: Product name
            description: Product description
            price: Unit price
            quantity: Units in stock
            category: Resolved category the product belongs to
            brand: Resolved brand the product belongs to

        Returns:
            Product entity instance without an id
        """
        return cls(
            id=None,
            name=name,
            description=description,
            price=price,
            quantity=quantity,
            category_id=category.id,
            brand_id=brand.id,
        )

    def update(
        self,
        name: str,
        description: str,
        price: float,
        quantity: int,
        category: Category,
        brand: Brand,
    ) -> "Product":
        """
        Create a new Product instance with every mutable field replaced.

        Returns:
            New Product instance with the same id
        """
        return Product(
            id=self.id,
            name=name,
            description=description,
            price=price,
            quantity=quantity,
            category_id=category.id,
            brand_id=brand.id,
        )
