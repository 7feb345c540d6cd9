"""Activity service - validation and orchestration of activity operations."""

from typing import Any, Optional
from uuid import uuid4

from domain.entities import Activity
from domain.enums import ActivityType
from domain.exceptions import ActivityNotFoundError, ActivityValidationError
from domain.repositories import IActivityRepository
from domain.value_objects import ActivityOption, ActivityQuery
from infrastructure.config import get_logger


class ActivityService:
    """
    Create, list, read, update and delete activities.
    
    The service holds no state of its own; a new instance is built for
    each request around that request's repository.
    """
    
    def __init__(self, activity_repository: IActivityRepository):
        self.activity_repo = activity_repository
        self.logger = get_logger(self.__class__.__name__)
    
    async def create(
        self,
        activity_type: ActivityType,
        options: list[ActivityOption],
        active: bool = True,
        search: Optional[str] = None,
    ) -> Activity:
        """
        Validate and store a new activity under a freshly generated id.
        
        Raises:
            ActivityValidationError: If the activity breaks a creation rule
        """
        activity = Activity(
            id=str(uuid4()),
            type=activity_type,
            options=list(options),
            active=active,
            search=search,
        )
        
        try:
            activity.validate()
        except ActivityValidationError as e:
            self.logger.warning(f"⚠️ Rejected {activity_type} activity: {e.message}")
            raise
        
        saved = await self.activity_repo.create(activity)
        self.logger.info(f"✅ Activity created: {saved.id}")
        return saved
    
    async def find_all(self, query: ActivityQuery) -> tuple[list[Activity], int]:
        """
        List one page of activities.
        
        Returns:
            (activities on the requested page, total number of matches)
        """
        total = await self.activity_repo.count(query)
        activities = await self.activity_repo.find(query)
        return activities, total
    
    async def find_one(self, activity_id: str) -> Activity:
        """Get an activity by id or raise ActivityNotFoundError."""
        activity = await self.activity_repo.get_by_id(activity_id)
        
        if activity is None:
            self.logger.info(f"Activity not found: {activity_id}")
            raise ActivityNotFoundError(activity_id)
        
        return activity
    
    async def update(self, activity_id: str, changes: dict[str, Any]) -> Activity:
        """
        Overwrite the given fields of an activity.
        
        Creation rules are not re-checked here.
        """
        activity = await self.activity_repo.update(activity_id, changes)
        
        if activity is None:
            self.logger.info(f"Activity not found for update: {activity_id}")
            raise ActivityNotFoundError(activity_id)
        
        self.logger.info(f"✅ Activity updated: {activity_id} ({', '.join(changes) or 'no fields'})")
        return activity
    
    async def remove(self, activity_id: str) -> None:
        """Delete an activity or raise ActivityNotFoundError."""
        if not await self.activity_repo.delete(activity_id):
            self.logger.info(f"Activity not found for delete: {activity_id}")
            raise ActivityNotFoundError(activity_id)
        
        self.logger.info(f"🗑️ Activity deleted: {activity_id}")
