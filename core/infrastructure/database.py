"""
Database utilities and transaction management.
"""
import functools
import logging
from typing import Callable, TypeVar

from django.db import transaction

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable)


def transactional(func: F) -> F:
    """
    Run the decorated call inside a single database transaction.

    Every read and write performed by the call commits together,
    or none of them does if an exception escapes.

    Usage:
        @transactional
        def create(self, dto):
            # Database operations
            pass
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            with transaction.atomic():
                return func(*args, **kwargs)
        except Exception:
            logger.debug("Transaction rolled back in %s", func.__qualname__)
            raise

    return wrapper
