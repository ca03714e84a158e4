import logging
import os

from redis.asyncio import Redis
from redis.exceptions import RedisError

logger = logging.getLogger(__name__)


async def init_redis() -> Redis | None:
    """Initialize the Redis client for token storage from REDIS_URL.

    Returns None if REDIS_URL is not configured or the server does not
    answer, in which case tokens are kept in process memory.
    """
    url = os.getenv("REDIS_URL")
    if not url:
        logger.info("REDIS_URL not set; keeping auth tokens in memory.")
        return None

    logger.info("Connecting to Redis...")
    client = Redis.from_url(url, decode_responses=True)
    # Verify connectivity
    try:
        await client.ping()
        logger.info("Redis connection established.")
    except (RedisError, OSError):
        logger.warning(
            "Redis ping failed; keeping auth tokens in memory.", exc_info=True
        )
        await client.aclose()
        return None

    return client


async def close_redis(client: Redis | None) -> None:
    """Gracefully close the Redis connection."""
    if client:
        await client.aclose()
        logger.info("Redis connection closed.")
