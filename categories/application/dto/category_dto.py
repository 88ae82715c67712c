"""
Category DTOs exchanged with service callers.
"""
from dataclasses import dataclass
from typing import Optional

from rest_framework import serializers

from core.application.serializers import StrictCharField, StrictIntegerField


@dataclass
class CategoryDTO:
    """
    DTO for category information.

    The parent is referenced by id; None means a root category.
    """

    id: Optional[int] = None
    name: Optional[str] = None
    parent_category_id: Optional[int] = None


class CategorySerializer(serializers.Serializer):
    """Field rules for CategoryDTO input."""

    name = StrictCharField(max_length=255)
    parent_category_id = StrictIntegerField(required=False, allow_null=True, min_value=1)
