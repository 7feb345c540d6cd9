"""FastAPI dependency injection setup."""

from typing import AsyncGenerator
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.database import get_session
from infrastructure.database.repositories import SQLAlchemyActivityRepository
from application.services import ActivityService
from domain.repositories import IActivityRepository


# Database session dependency
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency."""
    async for session in get_session():
        yield session


# Repository dependencies
def get_activity_repository(
    session: AsyncSession = Depends(get_db_session),
) -> IActivityRepository:
    """Get activity repository dependency."""
    return SQLAlchemyActivityRepository(session)


# Service dependency
def get_activity_service(
    activity_repository: IActivityRepository = Depends(get_activity_repository),
) -> ActivityService:
    """Get a per-request activity service."""
    return ActivityService(activity_repository)
