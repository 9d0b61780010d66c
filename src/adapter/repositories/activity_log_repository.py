from typing import Optional
from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.activity_log_repository import IActivityLogRepository
from src.domain.entities import ActivityLog


class ActivityLogRepository(IActivityLogRepository):
    """Activity log repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, activity: ActivityLog) -> ActivityLog:
        """Append an activity entry (immutable)"""
        self.session.add(activity)
        await self.session.flush()
        await self.session.refresh(activity)
        return activity

    async def get_latest(
        self, entity_id: UUID, action: str, target_user_id: Optional[UUID] = None
    ) -> Optional[ActivityLog]:
        """Most recent entry for an entity and action, optionally for one target user"""
        stmt = select(ActivityLog).where(
            ActivityLog.entity_id == entity_id, ActivityLog.action == action
        )
        if target_user_id is not None:
            stmt = stmt.where(
                col(ActivityLog.event_metadata)["target_user_id"].as_string()
                == str(target_user_id)
            )
        stmt = stmt.order_by(col(ActivityLog.created_at).desc()).limit(1)

        result = await self.session.exec(stmt)
        return result.first()
