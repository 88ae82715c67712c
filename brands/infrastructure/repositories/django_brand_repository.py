"""
Django implementation of BrandRepository port.

This adapter converts between domain entities and Django ORM models.
"""
from typing import List, Optional

from brands.domain.brand import Brand
from brands.infrastructure.models import Brand as BrandModel
from brands.ports.brand_repository import BrandRepository


class DjangoBrandRepository(BrandRepository):
    """
    Django ORM implementation of BrandRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements repository interface
    """

    def _to_domain(self, model: BrandModel) -> Brand:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Brand model

        Returns:
            Brand domain entity
        """
        return Brand(id=model.id, name=model.name)

    def _to_model(self, brand: Brand) -> BrandModel:
        """
        Convert domain entity to Django model.

        Entities with an id are loaded so that saving updates the
        existing row; entities without one become a new row.

        Args:
            brand: Brand domain entity

        Returns:
            Django Brand model
        """
        if brand.id is None:
            return BrandModel(name=brand.name)
        # pylint: disable=no-member
        model = BrandModel.objects.filter(id=brand.id).first()
        if model is None:
            return BrandModel(id=brand.id, name=brand.name)
        model.name = brand.name
        return model

    def save(self, brand: Brand) -> Brand:
        """
        Save a brand entity.

        Args:
            brand: Brand entity to save

        Returns:
            Saved brand entity with its id populated
        """
        model = self._to_model(brand)
        model.save()
        return self._to_domain(model)

    def find_by_id(self, brand_id: int) -> Optional[Brand]:
        """
        Find a brand by ID.

        Args:
            brand_id: Brand id

        Returns:
            Brand entity or None if not found
        """
        try:
            # pylint: disable=no-member
            model = BrandModel.objects.get(id=brand_id)
            return self._to_domain(model)
        except BrandModel.DoesNotExist:  # pylint: disable=no-member
            return None

    def find_all(self) -> List[Brand]:
        """
        List all brands.

        Returns:
            List of Brand entities
        """
        # pylint: disable=no-member
        return [self._to_domain(model) for model in BrandModel.objects.all()]

    def exists_by_name(self, name: str) -> bool:
        """
        Check if a brand with the given name exists.

        Args:
            name: Brand name

        Returns:
            True if brand exists, False otherwise
        """
        # pylint: disable=no-member
        return BrandModel.objects.filter(name=name).exists()

    def delete_by_id(self, brand_id: int) -> None:
        """
        Delete a brand by ID. Absent ids are ignored.

        Args:
            brand_id: Brand id
        """
        # pylint: disable=no-member
        BrandModel.objects.filter(id=brand_id).delete()
