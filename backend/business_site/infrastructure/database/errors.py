"""Translation of driver-level failures into domain PersistenceError."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError

from business_site.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def store_errors(entity_type: str, operation: str) -> AsyncIterator[None]:
    """Log any SQLAlchemy failure and re-raise it as PersistenceError.

    Usage:
        async with store_errors("Service", "list"):
            result = await session.execute(stmt)
    """
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("%s %s failed", entity_type, operation)
        raise PersistenceError(entity_type, operation) from exc
