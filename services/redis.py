"""Redis connection backing the shared geocode cache (GEOCODE_CACHE_BACKEND=redis)"""

import logging

import redis.asyncio as redis
from core.config import settings

logger = logging.getLogger(__name__)

_redis_client: redis.Redis | None = None


async def get_redis() -> redis.Redis:
    """Client for REDIS_URL, created on first use by the geocode cache"""
    global _redis_client
    if _redis_client is None:
        logger.info("Connecting geocode cache to Redis")
        _redis_client = redis.from_url(
            settings.REDIS_URL,
            encoding="utf-8",
            decode_responses=True
        )
    return _redis_client


async def close_redis():
    """Close the geocode cache connection on shutdown"""
    global _redis_client
    if _redis_client:
        await _redis_client.aclose()
        _redis_client = None
