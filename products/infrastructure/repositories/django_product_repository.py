"""
Django implementation of ProductRepository port.

This adapter converts between domain entities and Django ORM models.
"""
from typing import List, Optional

from products.domain.product import Product
from products.infrastructure.models import Product as ProductModel
from products.ports.product_repository import ProductRepository


class DjangoProductRepository(ProductRepository):
    """
    Django ORM implementation of ProductRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements repository interface
    """

    def _to_domain(self, model: ProductModel) -> Product:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Product model

        Returns:
            Product domain entity
        """
        return Product(
            id=model.id,
            name=model.name,
            description=model.description,
            price=model.price,
            quantity=model.quantity,
            category_id=model.category_id,
            brand_id=model.brand_id,
        )

    def _to_model(self, product: Product) -> ProductModel:
        """
        Convert domain entity to Django model.

        Args:
            product: Product domain entity

        Returns:
            Django Product model
        """
        fields = {
            "name": product.name,
            "description": product.description,
            "price": product.price,
            "quantity": product.quantity,
            "category_id": product.category_id,
            "brand_id": product.brand_id,
        }
        if product.id is None:
            return ProductModel(**fields)
        model = ProductModel.objects.filter(id=product.id).first()
        if model is None:
            return ProductModel(id=product.id, **fields)
        for attr, value in fields.items():
            setattr(model, attr, value)
        return model

    def save(self, product: Product) -> Product:
        """
        Save a product entity.

        Args:
            product: Product entity to save

        Returns:
            Saved product entity with its id populated
        """
        model = self._to_model(product)
        model.save()
        return self._to_domain(model)

    def find_by_id(self, product_id: int) -> Optional[Product]:
        """
        Find a product by ID.

        Args:
            product_id: Product id

        Returns:
            Product entity or None if not found
        """
        try:
            model = ProductModel.objects.get(id=product_id)
            return self._to_domain(model)
        except ProductModel.DoesNotExist:
            return None

    def find_all(self) -> List[Product]:
        """
        List all products.

        Returns:
            List of Product entities
        """
        return [self._to_domain(model) for model in ProductModel.objects.all()]

    def exists_by_name(self, name: str) -> bool:
        """
        Check if a product with the given name exists.

        Args:
            name: Product name

        Returns:
            True if product exists, False otherwise
        """
        return ProductModel.objects.filter(name=name).exists()

    def delete_by_id(self, product_id: int) -> None:
        """
        Delete a product by ID. Absent ids are ignored.

        Args:
            product_id: Product id
        """
        ProductModel.objects.filter(id=product_id).delete()
