"""
Unit tests for Brand domain entity.
"""
import pytest

from brands.domain.brand import Brand


class TestBrandEntity:
    """Tests for Brand domain entity."""

    def test_create_brand(self):
        """Test creating a brand entity."""
        brand = Brand.create(name="Brand 1")

        assert brand.name == "Brand 1"
        assert brand.id is None

    def test_update_name(self):
        """Test updating brand name keeps the id."""
        brand = Brand(id=7, name="Brand 1")
        updated = brand.update_name("Brand 2")

        assert updated.name == "Brand 2"
        assert updated.id == 7
        assert brand.name == "Brand 1"

    def test_brand_is_immutable(self):
        """Test brand fields cannot be reassigned."""
        brand = Brand(id=1, name="Brand 1")
        with pytest.raises(AttributeError):
            brand.name = "Other"

    def test_invalid_name_empty(self):
        """Test invalid empty name."""
        with pytest.raises(ValueError, match="cannot be empty"):
            Brand.create(name="")

    def test_invalid_name_blank(self):
        """Test invalid whitespace-only name."""
        with pytest.raises(ValueError, match="cannot be empty"):
            Brand.create(name="   ")

    def test_invalid_name_too_long(self):
        """Test invalid name too long."""
        with pytest.raises(ValueError, match="too long"):
            Brand.create(name="x" * 256)
