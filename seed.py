"""
Create tables and load the role/permission catalog.

    python seed.py
"""

import asyncio
import logging

from sqlmodel import SQLModel

import src.domain.entities  # noqa: F401  (registers tables on SQLModel.metadata)
from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.rbac import SeedRolesUseCase
from src.depends import AsyncSessionLocal, engine

logger = logging.getLogger("seed")


async def main() -> None:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async with AsyncSessionLocal() as session:
        result = await SeedRolesUseCase(SqlAlchemyUnitOfWork(session)).execute()

    summary = result.value
    logger.info(
        f"Catalog ready: +{summary.roles_created} roles, "
        f"+{summary.permissions_created} permissions, +{summary.grants_created} grants"
    )
    await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=ApplicationConfig.LOG_LEVEL)
    asyncio.run(main())
