"""
Category model.
"""
from django.db import models


class Category(models.Model):
    """
    Represents a node in the category tree (e.g., Electronics > Phones).
    A category without a parent is a root.
    """

    name = models.CharField(max_length=255, unique=True, help_text="Category name")
    parent_category = models.ForeignKey(
        "self",
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="subcategories",
    )

    class Meta:
        db_table = "categories"
        ordering = ["id"]

    def clean(self):
        """Validate category fields."""
        from django.core.exceptions import ValidationError

        if not self.name or not self.name.strip():
            raise ValidationError("Name is required")

    def save(self, *args, **kwargs):
        """Save category with validation."""
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self):
        return self.name
