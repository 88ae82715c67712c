"""
Serializer building blocks for validating inbound DTOs.

Each DTO module declares a rest_framework Serializer describing its
field rules. `collect_violations` runs that serializer over a DTO and
flattens every error DRF reports into ConstraintViolation records.

The strict fields below reject values of the wrong type instead of
coercing them, so a DTO that validates is stored exactly as given.
"""
import dataclasses
from dataclasses import dataclass
from typing import Any, List, Type

from rest_framework import serializers


@dataclass(frozen=True)
class ConstraintViolation:
    """A single failed rule on a single field."""

    field: str
    message: str
    invalid_value: Any = None

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class StrictCharField(serializers.CharField):
    """CharField that refuses non-string input."""

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail("invalid")
        return super().to_internal_value(data)


class StrictIntegerField(serializers.IntegerField):
    """IntegerField that refuses strings, floats and booleans."""

    def to_internal_value(self, data):
        # bool is an int subclass
        if isinstance(data, bool) or not isinstance(data, int):
            self.fail("invalid")
        return super().to_internal_value(data)


class StrictFloatField(serializers.FloatField):
    """FloatField that accepts only int or float input, never bool or str."""

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, (int, float)):
            self.fail("invalid")
        return super().to_internal_value(data)


def positive(value):
    """Validator requiring a number strictly greater than zero."""
    if value <= 0:
        raise serializers.ValidationError("Ensure this value is greater than 0.")


def collect_violations(
    serializer_class: Type[serializers.Serializer], dto: Any
) -> List[ConstraintViolation]:
    """
    Validate a DTO with its serializer and report every failure.

    Args:
        serializer_class: Serializer declaring the DTO's field rules
        dto: Dataclass instance to validate

    Returns:
        List of violations in field declaration order, empty if valid
    """
    data = dataclasses.asdict(dto)
    serializer = serializer_class(data=data)
    if serializer.is_valid():
        return []

    return [
        ConstraintViolation(field=field, message=str(message), invalid_value=data.get(field))
        for field, messages in serializer.errors.items()
        for message in messages
    ]
