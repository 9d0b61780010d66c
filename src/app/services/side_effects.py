"""
Best-effort side channels.

Activity log, in-app notifications, email and cache invalidation run after
the primary transition committed. A failure in any of them is logged and
swallowed: it never reaches the caller and never undoes the transition.
"""

import logging
from typing import Any, Dict, Optional
from uuid import UUID

from src.app.services.cache_service import ICacheService
from src.app.services.email_sender import IEmailSender
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ActivityLog, Notification

logger = logging.getLogger(__name__)


class SideEffects:
    def __init__(self, uow: UnitOfWork, email_sender: IEmailSender, cache: ICacheService):
        self.uow = uow
        self.email_sender = email_sender
        self.cache = cache

    async def log_activity(
        self,
        user_id: UUID,
        action: str,
        entity_id: UUID,
        entity_type: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Append an ActivityLog row in its own commit"""
        try:
            await self.uow.activity_logs.create(
                ActivityLog(
                    user_id=user_id,
                    action=action,
                    entity_id=entity_id,
                    entity_type=entity_type,
                    event_metadata=metadata,
                )
            )
            await self.uow.commit()
        except Exception:
            logger.exception(f"Failed to log activity '{action}' for {entity_type} {entity_id}")
            await self._rollback_quietly()

    async def notify(
        self,
        user_id: UUID,
        type: str,
        title: str,
        message: str,
        link: Optional[str] = None,
        entity_type: Optional[str] = None,
        entity_id: Optional[UUID] = None,
    ) -> None:
        """Persist an in-app notification for user_id"""
        try:
            await self.uow.notifications.create(
                Notification(
                    user_id=user_id,
                    type=type,
                    title=title,
                    message=message,
                    action_url=link,
                    entity_type=entity_type,
                    entity_id=entity_id,
                )
            )
            await self.uow.commit()
        except Exception:
            logger.exception(f"Failed to create '{type}' notification for user {user_id}")
            await self._rollback_quietly()

    async def send_email(self, to: str, subject: str, html: str) -> None:
        try:
            await self.email_sender.send(to, subject, html)
        except Exception:
            logger.exception(f"Failed to send email '{subject}' to {to}")

    async def invalidate(self, *patterns: str) -> None:
        for pattern in patterns:
            try:
                await self.cache.invalidate_pattern(pattern)
            except Exception:
                logger.exception(f"Failed to invalidate cache pattern {pattern}")

    async def _rollback_quietly(self) -> None:
        try:
            await self.uow.rollback()
        except Exception:
            logger.exception("Rollback after failed side effect also failed")
