# reset_db.py
import asyncio
from shared.db import engine, Base
from shared.logger import get_logger
import create_db  # registers all models on Base.metadata

logger = get_logger("reset_db")


async def reset_models():
    async with engine.begin() as conn:
        logger.warning("Dropping all tables...")
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
        logger.info("Tables recreated.")

if __name__ == "__main__":
    asyncio.run(reset_models())
