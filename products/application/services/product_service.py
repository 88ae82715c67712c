"""
ProductService.

Create, read, update and delete products. Every product references
an existing category and an existing brand by id.
"""
import logging
from typing import List

from brands.domain.brand import Brand
from brands.ports.brand_repository import BrandRepository
from categories.domain.category import Category
from categories.ports.category_repository import CategoryRepository
from core.application.serializers import collect_violations
from core.domain.exceptions import (
    BrandNotFoundError,
    CategoryNotFoundError,
    NameAlreadyTakenError,
    ProductNotFoundError,
    ValidationError,
)
from core.infrastructure.database import transactional
from products.application.dto.product_dto import ProductDTO, ProductSerializer
from products.domain.product import Product
from products.ports.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService:
    """Application service for products."""

    def __init__(
        self,
        product_repository: ProductRepository,
        category_repository: CategoryRepository,
        brand_repository: BrandRepository,
    ):
        """Initialize service with its repositories."""
        self.product_repository = product_repository
        self.category_repository = category_repository
        self.brand_repository = brand_repository

    @transactional
    def list_all(self) -> List[ProductDTO]:
        """
        List every product in storage order.

        Returns:
            List of ProductDTO
        """
        return [self._to_dto(product) for product in self.product_repository.find_all()]

    @transactional
    def get_by_id(self, product_id: int) -> ProductDTO:
        """
        Get a product by id.

        Args:
            product_id: Product id

        Returns:
            ProductDTO

        Raises:
            ProductNotFoundError: If product not found
        """
        product = self.product_repository.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(f"Product {product_id} not found")
        return self._to_dto(product)

    @transactional
    def create(self, dto: ProductDTO) -> ProductDTO:
        """
        Create a new product.

        Args:
            dto: Product data; its id is ignored

        Returns:
            ProductDTO of the saved product, with its assigned id

        Raises:
            ValidationError: If any field violates its constraints
            NameAlreadyTakenError: If a product with this name exists
            CategoryNotFoundError: If the category does not exist
            BrandNotFoundError: If the brand does not exist
        """
        self._validate(dto)
        self._ensure_name_is_not_taken(dto.name)
        category = self._get_category(dto.category_id)
        brand = self._get_brand(dto.brand_id)

        product = Product.create(
            name=dto.name,
            description=dto.description,
            price=dto.price,
            quantity=dto.quantity,
            category=category,
            brand=brand,
        )
        saved = self.product_repository.save(product)

        logger.info(
            "Product created",
            extra={
                "product_id": saved.id,
                "product_name": saved.name,
                "category_id": saved.category_id,
                "brand_id": saved.brand_id,
            },
        )
        return self._to_dto(saved)

    @transactional
    def update(self, product_id: int, dto: ProductDTO) -> ProductDTO:
        """
        Replace every field of an existing product.

        Name uniqueness is not re-checked here.

        Args:
            product_id: Id of the product to update
            dto: New product data; its id is ignored

        Returns:
            ProductDTO of the updated product

        Raises:
            ValidationError: If any field violates its constraints
            ProductNotFoundError: If product not found
            CategoryNotFoundError: If the category does not exist
            BrandNotFoundError: If the brand does not exist
        """
        self._validate(dto)
        product = self.product_repository.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(f"Product {product_id} not found")
        category = self._get_category(dto.category_id)
        brand = self._get_brand(dto.brand_id)

        updated = product.update(
            name=dto.name,
            description=dto.description,
            price=dto.price,
            quantity=dto.quantity,
            category=category,
            brand=brand,
        )
        saved = self.product_repository.save(updated)

        logger.info(
            "Product updated",
            extra={
                "product_id": saved.id,
                "product_name": saved.name,
                "category_id": saved.category_id,
                "brand_id": saved.brand_id,
            },
        )
        return self._to_dto(saved)

    @transactional
    def delete(self, product_id: int) -> None:
        """
        Delete a product. Deleting an absent id is not an error.

        Args:
            product_id: Product id
        """
        self.product_repository.delete_by_id(product_id)
        logger.info("Product deleted", extra={"product_id": product_id})

    def _validate(self, dto: ProductDTO) -> None:
        violations = collect_violations(ProductSerializer, dto)
        if violations:
            logger.warning(
                "Product rejected: %d constraint violation(s)",
                len(violations),
                extra={"violations": [str(v) for v in violations]},
            )
            raise ValidationError(violations)

    def _ensure_name_is_not_taken(self, name: str) -> None:
        if self.product_repository.exists_by_name(name):
            logger.warning("Product name already taken", extra={"product_name": name})
            raise NameAlreadyTakenError("Product", name)

    def _get_category(self, category_id: int) -> Category:
        category = self.category_repository.find_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(f"Category {category_id} not found")
        return category

    def _get_brand(self, brand_id: int) -> Brand:
        brand = self.brand_repository.find_by_id(brand_id)
        if brand is None:
            raise BrandNotFoundError(f"Brand {brand_id} not found")
        return brand

    @staticmethod
    def _to_dto(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            quantity=product.quantity,
            category_id=product.category_id,
            brand_id=product.brand_id,
        )
