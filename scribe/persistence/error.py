"""Persistence layer error translation."""

from contextlib import contextmanager
from typing import Iterator

import logfire
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from scribe.domain.error import ConflictError, StoreError


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so ``value`` matches literally (escape char ``\\``)."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


@contextmanager
def translate_errors(operation: str, unique_constraint: str | None = None) -> Iterator[None]:
    """Turn driver failures into domain errors.

    Args:
        operation: Name used in logs
        unique_constraint: Constraint whose violation means ConflictError

    Raises:
        ConflictError: If ``unique_constraint`` was violated
        StoreError: For any other database failure
    """
    try:
        yield
    except IntegrityError as e:
        if unique_constraint and unique_constraint in str(e.orig):
            raise ConflictError(f"Unique constraint violated: {unique_constraint}") from e
        logfire.error("Integrity error", operation=operation, error=str(e.orig))
        raise StoreError(f"{operation} failed") from e
    except SQLAlchemyError as e:
        logfire.error("Database error", operation=operation, error=str(e))
        raise StoreError(f"{operation} failed") from e
