"""
Core module for shared domain infrastructure.

This module contains:
- Domain exceptions
- Serializer fields and violation mapping for DTO validation
- The generic repository port
- Transaction helpers
- Management commands
"""
