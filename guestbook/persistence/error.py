"""Persistence layer errors."""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError


class PersistenceError(Exception):
    """Storage unavailable or a query failed."""

    def __init__(self, operation: str, cause: Exception):
        self.operation = operation
        super().__init__(f"{operation} failed: {cause}")


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Re-raise SQLAlchemy errors raised inside the block as PersistenceError.

    Args:
        operation: Name of the repository operation, used in the message
    """
    try:
        yield
    except SQLAlchemyError as e:
        raise PersistenceError(operation, e) from e
