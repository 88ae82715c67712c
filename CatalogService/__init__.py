"""
Catalog Service Django project.

Brands, a category tree and products, managed through validated
application services on top of the Django ORM.
"""
