# app/db/redis.py
import logging

import redis.asyncio as redis
from app.core.config import get_settings

logger = logging.getLogger(__name__)

redis_client: redis.Redis | None = None


async def connect():
    """
    Build the Redis client from REDIS_URL.
    An unreachable server at startup is logged but the client is kept:
    the product list has no fallback path, so requests report the failure.
    """
    global redis_client
    settings = get_settings()

    logger.info("Connecting to Redis at %s", settings.REDIS_URL)
    redis_client = redis.from_url(settings.REDIS_URL, decode_responses=True)
    try:
        await redis_client.ping()
        logger.info("Redis connection successful")
    except Exception as e:
        logger.warning("Redis ping at startup failed: %s", e)


async def disconnect():
    """Close the Redis connection if it exists."""
    global redis_client
    if redis_client:
        await redis_client.aclose()
        redis_client = None
        logger.info("Redis disconnected")


def get_redis() -> redis.Redis:
    assert redis_client is not None, "Redis client not initialized"
    return redis_client
