"""
Brand model.
"""
from django.db import models


class Brand(models.Model):
    """
    Represents a product brand (e.g., Acme, Globex).
    Brand names are unique across the catalog.
    """

    name = models.CharField(max_length=255, unique=True, help_text="Brand display name")

    class Meta:
        db_table = "brands"
        ordering = ["id"]

    def clean(self):
        """Validate brand fields."""
        from django.core.exceptions import ValidationError

        if not self.name or not self.name.strip():
            raise ValidationError("Name is required")

    def save(self, *args, **kwargs):
        """Save brand with validation."""
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name
