#!/usr/bin/env python3
"""
Database seeding script.
Creates the tables if needed and inserts the reference property types,
neighborhoods and FAQs.
"""

import asyncio
import sys
import argparse
import logging

from noticeboard.config import settings
from noticeboard.database import AsyncSessionLocal, Base, close_db_connection, create_tables, engine
from noticeboard.services.seed import seed_all

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def reset_database() -> None:
    """Drop and recreate every table."""
    if not (settings.is_development or settings.is_testing):
        raise RuntimeError("Database reset is only allowed in development or test mode")

    logger.warning("Resetting database - all data will be lost!")
    import noticeboard.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        logger.info("All tables dropped")


async def run(reset: bool = False) -> bool:
    """
    Seed the configured database.

    Returns:
        True when every record was created or already present
    """
    try:
        if reset:
            await reset_database()
        await create_tables()

        async with AsyncSessionLocal() as session:
            results = await seed_all(session)
    finally:
        await close_db_connection()

    for name, result in results.items():
        logger.info(
            f"{name}: {len(result.created)} created, "
            f"{len(result.skipped)} skipped, {len(result.failed)} failed"
        )
    return not any(result.failed for result in results.values())


def main():
    """CLI entry point for seeding reference data."""
    parser = argparse.ArgumentParser(description="Seed the notice board database with reference data")
    parser.add_argument("--reset", action="store_true", help="Drop all tables before seeding (development only)")
    parser.add_argument("--confirm", action="store_true", help="Confirm database reset")
    args = parser.parse_args()

    if args.reset and not args.confirm:
        print("Database reset requires --confirm flag")
        return

    try:
        if not asyncio.run(run(reset=args.reset)):
            sys.exit(1)
    except Exception as e:
        logger.error(f"Seeding failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
