import logging

import asyncpg
from asyncpg.pool import Pool
from bizcards.core.config import settings

logger = logging.getLogger(__name__)

db_pool: Pool | None = None


async def get_pool() -> Pool:
    global db_pool
    if db_pool is None:
        await connect_db_pool()
    return db_pool


async def connect_db_pool():
    global db_pool
    if db_pool is None:
        try:
            db_pool = await asyncpg.create_pool(
                dsn=settings.asyncpg_url,
                min_size=settings.DB_POOL_MIN,
                max_size=settings.DB_POOL_MAX,
                timeout=30,
            )
            logger.info("AsyncPG connection pool created (%s:%s/%s)",
                        settings.DB_HOST, settings.DB_PORT, settings.DB_NAME)
        except Exception as e:
            logger.error(f"Error connecting to database: {e}")
            raise


async def close_db_pool():
    global db_pool
    if db_pool:
        await db_pool.close()
        db_pool = None
        logger.info("AsyncPG connection pool closed.")

