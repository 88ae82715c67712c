"""
Django model discovery for the categories app.
"""
from categories.infrastructure.models import Category  # noqa: F401
