"""
Pytest configuration and shared fixtures.
"""
import pytest

from brands.application.services.brand_service import BrandService
from brands.domain.brand import Brand
from brands.infrastructure.repositories.django_brand_repository import DjangoBrandRepository
from categories.application.services.category_service import CategoryService
from categories.domain.category import Category
from categories.infrastructure.repositories.django_category_repository import (
    DjangoCategoryRepository,
)
from products.application.services.product_service import ProductService
from products.domain.product import Product
from products.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)


@pytest.fixture
def brand_repository():
    """Fixture for BrandRepository."""
    return DjangoBrandRepository()


@pytest.fixture
def category_repository():
    """Fixture for CategoryRepository."""
    return DjangoCategoryRepository()


@pytest.fixture
def product_repository():
    """Fixture for ProductRepository."""
    return DjangoProductRepository()


@pytest.fixture
def brand_service(brand_repository):
    """Fixture for BrandService backed by the test database."""
    return BrandService(brand_repository)


@pytest.fixture
def category_service(category_repository):
    """Fixture for CategoryService backed by the test database."""
    return CategoryService(category_repository)


@pytest.fixture
def product_service(product_repository, category_repository, brand_repository):
    """Fixture for ProductService backed by the test database."""
    return ProductService(product_repository, category_repository, brand_repository)


@pytest.fixture
def sample_brand():
    """Fixture for a persisted-looking Brand entity."""
    return Brand(id=1, name="Brand 1")


@pytest.fixture
def sample_category():
    """Fixture for a persisted-looking root Category entity."""
    return Category(id=1, name="Category 1")


@pytest.fixture
def sample_product(sample_category, sample_brand):
    """Fixture for a persisted-looking Product entity."""
    return Product(
        id=1,
        name="Product 1",
        description="Description 1",
        price=0.99,
        quantity=1,
        category_id=sample_category.id,
        brand_id=sample_brand.id,
    )


@pytest.fixture
def db_brand(db, brand_repository):
    """Fixture for a Brand saved in database."""
    return brand_repository.save(Brand.create(name="Saved Brand"))


@pytest.fixture
def db_category(db, category_repository):
    """Fixture for a root Category saved in database."""
    return category_repository.save(Category.create(name="Saved Category"))


@pytest.fixture
def db_product(db, db_category, db_brand, product_repository):
    """Fixture for a Product saved in database."""
    product = Product.create(
        name="Saved Product",
        description="A product saved for tests",
        price=9.99,
        quantity=3,
        category=db_category,
        brand=db_brand,
    )
    return product_repository.save(product)
