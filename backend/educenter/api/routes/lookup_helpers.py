"""Lookup Helpers — load-or-404 shared by the resource routes."""

from typing import TypeVar
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from educenter.core.errors import ResourceNotFoundError
from educenter.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


async def get_or_404(
    db: AsyncSession, model: type[ModelT], resource_id: UUID, resource_type: str,
) -> ModelT:
    """Get a row by primary key or raise ResourceNotFoundError."""
    row = await db.get(model, resource_id)
    if not row:
        raise ResourceNotFoundError(resource_type, str(resource_id))
    return row
