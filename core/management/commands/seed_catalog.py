"""
Django management command to seed the catalog with sample data.

Creates:
- A brand
- A root category and a subcategory beneath it
- A product in the subcategory, made by the brand

Entities whose names already exist are reused, so the command can be
run repeatedly.
"""
import logging

from django.core.management.base import BaseCommand
from django.db import transaction

from brands.application.dto.brand_dto import BrandDTO
from brands.application.services.brand_service import BrandService
from brands.infrastructure.repositories.django_brand_repository import DjangoBrandRepository
from categories.application.dto.category_dto import CategoryDTO
from categories.application.services.category_service import CategoryService
from categories.infrastructure.repositories.django_category_repository import (
    DjangoCategoryRepository,
)
from core.domain.exceptions import NameAlreadyTakenError
from products.application.dto.product_dto import ProductDTO
from products.application.services.product_service import ProductService
from products.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Command to seed the catalog."""

    help = "Seed the catalog with a brand, a two-level category tree and a product"

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            "--brand-name",
            type=str,
            default="Sample Brand",
            help="Brand name (default: Sample Brand)",
        )
        parser.add_argument(
            "--category-name",
            type=str,
            default="Electronics",
            help="Root category name (default: Electronics)",
        )
        parser.add_argument(
            "--subcategory-name",
            type=str,
            default="Phones",
            help="Subcategory name (default: Phones)",
        )
        parser.add_argument(
            "--product-name",
            type=str,
            default="Sample Phone",
            help="Product name (default: Sample Phone)",
        )
        parser.add_argument(
            "--price",
            type=float,
            default=499.99,
            help="Product price (default: 499.99)",
        )
        parser.add_argument(
            "--quantity",
            type=int,
            default=10,
            help="Product quantity (default: 10)",
        )

    def handle(self, *args, **options):
        """Execute the command."""
        category_repository = DjangoCategoryRepository()
        brand_repository = DjangoBrandRepository()
        brand_service = BrandService(brand_repository)
        category_service = CategoryService(category_repository)
        product_service = ProductService(
            DjangoProductRepository(), category_repository, brand_repository
        )

        with transaction.atomic():
            brand = self._create_or_get(
                brand_service, BrandDTO(name=options["brand_name"]), "brand"
            )
            category = self._create_or_get(
                category_service, CategoryDTO(name=options["category_name"]), "category"
            )
            subcategory = self._create_or_get(
                category_service,
                CategoryDTO(name=options["subcategory_name"], parent_category_id=category.id),
                "subcategory",
            )
            product = self._create_or_get(
                product_service,
                ProductDTO(
                    name=options["product_name"],
                    description=f"{options['product_name']} by {brand.name}",
                    price=options["price"],
                    quantity=options["quantity"],
                    category_id=subcategory.id,
                    brand_id=brand.id,
                ),
                "product",
            )

        self.print_summary(brand, category, subcategory, product)

    def _create_or_get(self, service, dto, label: str):
        """Create an entity through its service, or return the one with the same name."""
        try:
            created = service.create(dto)
        except NameAlreadyTakenError:
            # pylint: disable=no-member
            self.stdout.write(self.style.WARNING(f"{label.capitalize()} '{dto.name}' already exists"))
            return next(item for item in service.list_all() if item.name == dto.name)

        # pylint: disable=no-member
        self.stdout.write(
            self.style.SUCCESS(f"Created {label}: {created.name} (id: {created.id})")
        )
        return created

    def print_summary(self, brand, category, subcategory, product):
        """Print summary of seeded data."""
        # pylint: disable=no-member
        self.stdout.write(self.style.SUCCESS("\n" + "=" * 60))
        self.stdout.write(self.style.SUCCESS("Catalog Seed Summary"))
        self.stdout.write(self.style.SUCCESS("=" * 60))

        self.stdout.write(f"\nBrand:       {brand.name} (id: {brand.id})")
        self.stdout.write(f"Category:    {category.name} (id: {category.id})")
        self.stdout.write(
            f"Subcategory: {subcategory.name} (id: {subcategory.id}, "
            f"parent: {subcategory.parent_category_id})"
        )
        self.stdout.write(
            f"Product:     {product.name} (id: {product.id}, price: {product.price}, "
            f"quantity: {product.quantity})"
        )

        self.stdout.write(self.style.SUCCESS("\n" + "=" * 60 + "\n"))
        logger.info("Catalog seeded", extra={"product_id": product.id})
