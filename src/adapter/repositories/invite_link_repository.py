from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import or_, update
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.invite_link_repository import IInviteLinkRepository
from src.domain.entities import InviteLink


class InviteLinkRepository(IInviteLinkRepository):
    """Invite link repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_token(self, token: str) -> Optional[InviteLink]:
        """Get invite link by token"""
        stmt = select(InviteLink).where(InviteLink.token == token)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, invite_link: InviteLink) -> InviteLink:
        """Create a new invite link"""
        self.session.add(invite_link)
        await self.session.flush()
        await self.session.refresh(invite_link)
        return invite_link

    async def consume(self, link_id: UUID, now: datetime) -> bool:
        """
        Conditional increment in a single UPDATE.

        The capacity and expiry checks run inside the statement, so two
        concurrent joins cannot both take the last slot.
        """
        stmt = (
            update(InviteLink)
            .where(
                col(InviteLink.id) == link_id,
                or_(
                    col(InviteLink.max_uses).is_(None),
                    col(InviteLink.uses_count) < col(InviteLink.max_uses),
                ),
                or_(
                    col(InviteLink.expires_at).is_(None),
                    col(InviteLink.expires_at) > now,
                ),
            )
            .values(uses_count=col(InviteLink.uses_count) + 1)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1
