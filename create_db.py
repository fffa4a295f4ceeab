# create_db.py
import asyncio
import logging
import sys

from shared.db import engine, Base

# Import all models here so they are registered with SQLAlchemy's metadata
import services.school_management.models

logger = logging.getLogger(__name__)


async def init_models():
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except Exception:
        logger.exception("Database initialization failed")
        raise
    logger.info("Database initialized successfully")


if __name__ == "__main__":
    from shared.config import settings
    from shared.logging_config import setup_logging

    setup_logging(settings.log_level, settings.log_file)
    try:
        asyncio.run(init_models())
    except Exception:
        sys.exit(1)
