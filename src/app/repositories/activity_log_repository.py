from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import ActivityLog


class IActivityLogRepository(ABC):
    """Activity log repository interface - application layer"""

    @abstractmethod
    async def create(self, activity: ActivityLog) -> ActivityLog:
        """Append an activity entry (immutable)"""
        pass

    @abstractmethod
    async def get_latest(
        self, entity_id: UUID, action: str, target_user_id: Optional[UUID] = None
    ) -> Optional[ActivityLog]:
        """
        Most recent entry for an entity and action.

        target_user_id narrows the search to entries whose metadata names
        that user as the target.
        """
        pass
