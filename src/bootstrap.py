"""Schema bootstrap

Creates all tables for the configured database.

Usage:
    # Create missing tables
    python -m src.bootstrap

    # Drop everything first
    python -m src.bootstrap --drop
"""

import asyncio
import logging
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlmodel import SQLModel

import src.domain  # noqa: F401  registers every table on SQLModel.metadata

logger = logging.getLogger(__name__)


async def create_schema(engine: AsyncEngine, drop: bool = False) -> None:
    async with engine.begin() as conn:
        if drop:
            logger.info("Dropping all tables")
            await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info(f"Schema ready: {', '.join(sorted(SQLModel.metadata.tables))}")


async def main():
    import argparse
    from config import ApplicationConfig
    from src.depends import engine

    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Create database schema")
    parser.add_argument(
        "--drop", action="store_true", help="Drop all tables before creating them"
    )
    args = parser.parse_args()

    try:
        await create_schema(engine, drop=args.drop)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
