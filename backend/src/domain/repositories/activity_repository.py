"""Activity repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from domain.entities import Activity
from domain.value_objects import ActivityQuery


class IActivityRepository(ABC):
    """
    Abstract repository interface for Activity entity.
    
    This interface defines the contract for activity persistence.
    Concrete implementations will be in the infrastructure layer.
    """
    
    @abstractmethod
    async def create(self, activity: Activity) -> Activity:
        """
        Insert a new activity.
        
        Args:
            activity: Activity entity to store
            
        Returns:
            Stored Activity with timestamps set
        """
        pass
    
    @abstractmethod
    async def count(self, query: ActivityQuery) -> int:
        """
        Count activities matching the query filter, ignoring pagination.
        
        Args:
            query: Listing descriptor
            
        Returns:
            Number of matching activities
        """
        pass
    
    @abstractmethod
    async def find(self, query: ActivityQuery) -> list[Activity]:
        """
        Retrieve one sorted page of activities matching the query filter.
        
        Args:
            query: Listing descriptor
            
        Returns:
            At most query.page_size activities
        """
        pass
    
    @abstractmethod
    async def get_by_id(self, activity_id: str) -> Optional[Activity]:
        """
        Retrieve an activity by ID.
        
        Args:
            activity_id: Activity identifier
            
        Returns:
            Activity if found, None otherwise
        """
        pass
    
    @abstractmethod
    async def update(self, activity_id: str, changes: dict[str, Any]) -> Optional[Activity]:
        """
        Overwrite some fields of an activity in a single round trip.
        
        Args:
            activity_id: Activity identifier
            changes: Field name to new value
            
        Returns:
            Updated Activity, None if not found
        """
        pass
    
    @abstractmethod
    async def delete(self, activity_id: str) -> bool:
        """
        Delete an activity.
        
        Args:
            activity_id: Activity identifier
            
        Returns:
            True if deleted, False if not found
        """
        pass
