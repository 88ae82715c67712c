"""
Product repository port (interface).

This defines the contract for product persistence operations.
Implementations are in the infrastructure layer.
"""
from core.ports.repository import Repository
from products.domain.product import Product


class ProductRepository(Repository[Product]):
    """Abstract repository for Product entities."""
