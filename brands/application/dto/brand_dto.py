"""
Brand DTOs exchanged with service callers.
"""
from dataclasses import dataclass
from typing import Optional

from rest_framework import serializers

from core.application.serializers import StrictCharField


@dataclass
class BrandDTO:
    """DTO for brand information. The id is ignored on input."""

    id: Optional[int] = None
    name: Optional[str] = None


class BrandSerializer(serializers.Serializer):
    """Field rules for BrandDTO input."""

    name = StrictCharField(max_length=255)
