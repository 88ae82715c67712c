"""
Brand repository port (interface).

This defines the contract for brand persistence operations.
Implementations are in the infrastructure layer.
"""
from brands.domain.brand import Brand
from core.ports.repository import Repository


class BrandRepository(Repository[Brand]):
    """
    Abstract repository for Brand entities.

    Brand names are unique; exists_by_name backs the uniqueness check.
    """
