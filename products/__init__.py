"""
Products module - Product management.

This module handles:
- Product entity and domain logic
- Product repository (port)
- Product infrastructure (Django ORM adapter)
- ProductService, resolving category and brand references
"""
