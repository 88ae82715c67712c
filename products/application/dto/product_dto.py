"""
Product DTOs exchanged with service callers.
"""
from dataclasses import dataclass
from typing import Optional

from rest_framework import serializers

from core.application.serializers import (
    StrictCharField,
    StrictFloatField,
    StrictIntegerField,
    positive,
)


@dataclass
class ProductDTO:
    """DTO for product information. Category and brand are referenced by id."""

    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    quantity: Optional[int] = None
    category_id: Optional[int] = None
    brand_id: Optional[int] = None


class ProductSerializer(serializers.Serializer):
    """Field rules for ProductDTO input."""

    name = StrictCharField(max_length=255)
    description = StrictCharField(max_length=2000)
    price = StrictFloatField(validators=[positive])
    quantity = StrictIntegerField(min_value=0)
    category_id = StrictIntegerField(min_value=1)
    brand_id = StrictIntegerField(min_value=1)
