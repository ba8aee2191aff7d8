import logging
from typing import Optional
import redis.asyncio as aioredis
from redis.exceptions import RedisError
from config import REDIS_URL, SHARE_CACHE_TTL_SECONDS

logger = logging.getLogger(__name__)

redis_client = None

def _key(share_hash: str) -> str:
    return f"share_hash:{share_hash}"

async def init_cache():
    global redis_client
    if not REDIS_URL:
        logger.info("REDIS_URL is empty, share lookups are not cached")
        return
    redis_client = aioredis.from_url(REDIS_URL, encoding="utf-8", decode_responses=True)

async def close_cache():
    global redis_client
    if redis_client is not None:
        await redis_client.aclose()
        redis_client = None

async def get_share_owner(share_hash: str) -> Optional[int]:
    if redis_client is None:
        return None
    try:
        cached = await redis_client.get(_key(share_hash))
    except RedisError as e:
        logger.warning("Share cache read failed: %s", e)
        return None
    return int(cached) if cached is not None else None

async def set_share_owner(share_hash: str, user_id: int):
    if redis_client is None:
        return
    try:
        await redis_client.setex(_key(share_hash), SHARE_CACHE_TTL_SECONDS, str(user_id))
    except RedisError as e:
        logger.warning("Share cache write failed: %s", e)

async def evict_share_owner(share_hash: str):
    if redis_client is None:
        return
    try:
        await redis_client.delete(_key(share_hash))
    except RedisError as e:
        logger.warning("Share cache eviction failed for %s: %s", share_hash, e)
