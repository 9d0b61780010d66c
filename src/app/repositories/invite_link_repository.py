from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.domain.entities import InviteLink


class IInviteLinkRepository(ABC):
    """Invite link repository interface - application layer"""

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[InviteLink]:
        """Get invite link by token"""
        pass

    @abstractmethod
    async def create(self, invite_link: InviteLink) -> InviteLink:
        """Create a new invite link"""
        pass

    @abstractmethod
    async def consume(self, link_id: UUID, now: datetime) -> bool:
        """
        Atomically increment uses_count if the link is still usable at now.

        Returns False when the link expired or reached max_uses.
        """
        pass
