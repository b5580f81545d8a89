"""
Helpers for repository implementations backed by the Django ORM.
"""
import logging
from contextlib import contextmanager

from django.db import DatabaseError

from shared.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)


@contextmanager
def translate_database_errors(operation: str):
    """Re-raise ORM failures as PersistenceError; no retries are attempted."""
    try:
        yield
    except DatabaseError as e:
        logger.warning(f"Database error during {operation}: {e}")
        raise PersistenceError(message=str(e), operation=operation) from e
