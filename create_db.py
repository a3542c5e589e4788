# create_db.py
import asyncio
from shared.db import engine, Base
from shared.logger import get_logger

# Import all models here so they are registered with SQLAlchemy's metadata
import services.user_management.models
import services.school_directory.models
import services.content_management.models

logger = get_logger("create_db")


async def init_models():
    async with engine.begin() as conn:
        logger.info("Creating tables...")
        await conn.run_sync(Base.metadata.create_all)
        logger.info("Tables created.")

if __name__ == "__main__":
    asyncio.run(init_models())
