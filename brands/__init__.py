"""
Brands module - Brand management.

This module handles:
- Brand entity and domain logic
- Brand repository (port)
- Brand infrastructure (Django ORM adapter)
- BrandService
"""
