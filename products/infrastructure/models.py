"""
Product model.
"""
from django.db import models


class Product(models.Model):
    """
    Represents a sellable product.
    Products belong to one brand and one category.
    """

    name = models.CharField(max_length=255, unique=True, help_text="Product display name")
    description = models.CharField(max_length=2000)
    price = models.FloatField()
    quantity = models.PositiveIntegerField(help_text="Units in stock")
    category = models.ForeignKey(
        "categories.Category", on_delete=models.PROTECT, related_name="products"
    )
    brand = models.ForeignKey("brands.Brand", on_delete=models.PROTECT, related_name="products")

    class Meta:
        db_table = "products"
        ordering = ["id"]

    def clean(self):
        """Validate product fields."""
        from django.core.exceptions import ValidationError

        if not self.brand_id:
            raise ValidationError("Brand is required")
        if not self.category_id:
            raise ValidationError("Category is required")
        if self.price is not None and self.price <= 0:
            raise ValidationError("Price must be positive")

    def save(self, *args, **kwargs):
        """Save product with validation."""
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name
