"""
Shared helpers for repositories.
"""
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pos_backend.error_handlers import DuplicateResourceError, ValidationError
from pos_backend.logging_config import get_logger

logger = get_logger("repositories")

# SQLSTATE for unique_violation (PostgreSQL)
UNIQUE_VIOLATION = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """Check whether an integrity error was raised by a unique index."""
    orig = exc.orig
    if getattr(orig, "sqlstate", None) == UNIQUE_VIOLATION:
        return True
    if getattr(orig, "pgcode", None) == UNIQUE_VIOLATION:
        return True
    # SQLite and other drivers only report it in the message
    return "unique" in str(orig).lower()


class Repository:
    """Base repository bound to one store session."""

    resource: str = "Document"
    key_field: str = "id"

    def __init__(self, session: AsyncSession):
        self.session = session

    async def commit(self, key_value) -> None:
        """
        Commit pending changes, translating store constraint errors.

        Raises:
            DuplicateResourceError: a unique index rejected the write
            ValidationError: any other integrity constraint failed
        """
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            if is_unique_violation(exc):
                logger.info(f"{self.resource} {self.key_field}={key_value!r} rejected as duplicate")
                raise DuplicateResourceError(self.resource, self.key_field, key_value) from exc
            raise ValidationError(str(exc.orig)) from exc
