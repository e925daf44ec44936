"""Redis JSON cache helpers"""

import json
import logging
from typing import Any, Optional
from services.redis import get_redis

logger = logging.getLogger(__name__)


async def cache_get(key: str) -> Optional[Any]:
    """Get value from cache, returns None if not found or Redis unavailable."""
    try:
        redis = await get_redis()
        value = await redis.get(key)
        if value:
            return json.loads(value)
        return None
    except Exception as e:
        logger.warning(f"Cache read failed for {key}: {e}")
        return None


async def cache_set(key: str, value: Any, ttl: int | None = None) -> None:
    """Set value in cache, with a TTL in seconds when given"""
    try:
        redis = await get_redis()
        if ttl:
            await redis.setex(key, ttl, json.dumps(value))
        else:
            await redis.set(key, json.dumps(value))
    except Exception as e:
        # Caching is optional
        logger.warning(f"Cache write failed for {key}: {e}")


async def cache_delete_pattern(pattern: str) -> None:
    """Delete all keys matching pattern (e.g., 'geocode:*')"""
    try:
        redis = await get_redis()
        cursor = 0
        while True:
            cursor, keys = await redis.scan(cursor, match=pattern, count=100)
            if keys:
                await redis.delete(*keys)
            if cursor == 0:
                break
    except Exception as e:
        logger.warning(f"Cache delete failed for {pattern}: {e}")
