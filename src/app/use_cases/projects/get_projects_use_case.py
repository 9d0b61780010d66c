"""
Get Projects Use Case

Lists the caller's projects through a short-TTL read-through cache.
"""

import logging
from typing import Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.cache_service import ICacheService, project_list_key
from src.app.services.unit_of_work import UnitOfWork

from .dtos import ProjectListResponse, ProjectResponse

logger = logging.getLogger(__name__)


class GetProjectsUseCase:
    """
    Projects where the user holds an active membership (owned ones included).

    Cache-aside under projects:<user_id>; every membership transition
    invalidates that key, the TTL bounds staleness otherwise.
    """

    def __init__(self, uow: UnitOfWork, cache: ICacheService, ttl_seconds: Optional[int] = None):
        self.uow = uow
        self.cache = cache
        self.ttl_seconds = ttl_seconds

    async def execute(self, user_id: UUID) -> Result[ProjectListResponse]:
        key = project_list_key(user_id)

        cached = await self.cache.get(key)
        if cached is not None:
            logger.debug(f"Project list cache hit for user {user_id}")
            return Return.ok(ProjectListResponse.model_validate(cached))

        async with self.uow:
            memberships = await self.uow.memberships.get_active_by_user_id(user_id)
            projects = await self.uow.projects.get_by_ids(
                [membership.project_id for membership in memberships]
            )

            response = ProjectListResponse(
                projects=[
                    ProjectResponse(
                        id=str(project.id),
                        name=project.name,
                        description=project.description,
                        status=project.status.value,
                        owner_id=str(project.owner_id),
                        created_at=project.created_at.isoformat(),
                    )
                    for project in projects
                ]
            )

        await self.cache.set(key, response.model_dump(mode="json"), self.ttl_seconds)
        return Return.ok(response)
