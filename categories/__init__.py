"""
Categories module - the category tree.

This module handles:
- Category entity and domain logic
- Category repository (port)
- Category infrastructure (Django ORM adapter)
- CategoryService
"""
