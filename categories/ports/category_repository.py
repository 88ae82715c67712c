"""
Category repository port (interface).

This defines the contract for category persistence operations.
Implementations are in the infrastructure layer.
"""
from categories.domain.category import Category
from core.ports.repository import Repository


class CategoryRepository(Repository[Category]):
    """
    Abstract repository for Category entities.

    Parent categories are resolved through find_by_id on this same port.
    """
