"""
Hybrid in-memory + Redis rate limiting utilities

Counters live in process memory; when REDIS_URL is configured they are
periodically mirrored to Redis so several workers share one window.
"""

import logging
import time
from threading import Lock
from typing import Optional

import redis
from fastapi import HTTPException, Request

from .config import REDIS_URL, TRUSTED_PROXIES

logger = logging.getLogger(__name__)

# Set on first use; stays None without REDIS_URL or after a failed connect
redis_client: Optional[redis.Redis] = None
redis_unavailable = False

# key -> {"count", "reset_time", "last_redis_sync"}, all in epoch seconds except count
memory_cache: dict[str, dict] = {}
cache_lock = Lock()

MEMORY_CACHE_SYNC_INTERVAL = 10  # seconds between Redis writes per key
MEMORY_CACHE_CLEANUP_INTERVAL = 60
last_cleanup_time = 0


def get_redis_client() -> Optional[redis.Redis]:
    """
    Get or create the Redis client.

    Returns None when REDIS_URL is not configured or the server cannot be
    reached; limiting then runs on the in-memory counters alone.
    """
    global redis_client, redis_unavailable

    if redis_client is not None or redis_unavailable or not REDIS_URL:
        return redis_client

    logger.info("🔄 Initializing Redis connection for rate limiting...")

    # Mask password in URL for logging
    if "@" in REDIS_URL:
        url_parts = REDIS_URL.split("@")
        protocol = url_parts[0].split(":")[0]
        masked_url = f"{protocol}:****@{url_parts[1]}"
    else:
        masked_url = "****"
    logger.info(f"📡 Using Redis URL connection: {masked_url}")

    try:
        client = redis.from_url(
            REDIS_URL,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
            retry_on_timeout=True,
            health_check_interval=30,
        )
        client.ping()
        redis_client = client
        logger.info("Redis connected successfully via URL")
    except redis.RedisError as e:
        redis_unavailable = True
        logger.error(f"❌ Failed to connect to Redis via URL: {str(e)}")
        logger.warning("⚠️ Rate limiting will use per-process memory only")

    return redis_client


def reset_rate_limits() -> None:
    """Drop every in-memory window"""
    global last_cleanup_time
    with cache_lock:
        memory_cache.clear()
    last_cleanup_time = 0


def cleanup_expired_cache():
    """Remove expired entries from memory cache"""
    global last_cleanup_time
    current_time = int(time.time())

    if current_time - last_cleanup_time < MEMORY_CACHE_CLEANUP_INTERVAL:
        return

    with cache_lock:
        expired_keys = [
            k for k, v in memory_cache.items() if current_time >= v.get("reset_time", 0)
        ]
        for k in expired_keys:
            del memory_cache[k]

        if expired_keys:
            logger.debug(f"🧹 Cleaned up {len(expired_keys)} expired rate limit entries")

    last_cleanup_time = current_time


def load_entry(key: str, window_seconds: int, client: Optional[redis.Redis], current_time: int) -> dict:
    """Start a window, continuing the Redis copy when another worker already opened it"""
    if client is not None:
        try:
            redis_count = client.get(key)
            redis_ttl = client.ttl(key)
            if redis_count and redis_ttl > 0:
                return {
                    "count": int(redis_count),
                    "reset_time": current_time + redis_ttl,
                    "last_redis_sync": current_time,
                }
        except redis.RedisError as e:
            logger.warning(f"⚠️ Failed to load from Redis, using memory only: {e}")

    return {
        "count": 0,
        "reset_time": current_time + window_seconds,
        "last_redis_sync": current_time,
    }


def check_rate_limit(
    key: str, limit: int, window_seconds: int, client: Optional[redis.Redis] = None
) -> tuple[bool, int, int]:
    """Count one attempt against a fixed window

    Rejected attempts are not counted, so a blocked client is let back in
    as soon as its window ends.

    Args:
        key: Counter key, e.g. ``login:203.0.113.7``
        limit: Attempts allowed per window
        window_seconds: Window length in seconds
        client: Redis client the counter is mirrored to, if any

    Returns:
        Tuple of (allowed, attempts_in_window, seconds_until_reset)
    """
    now = int(time.time())
    cleanup_expired_cache()

    with cache_lock:
        entry = memory_cache.get(key)
        if entry is None:
            entry = memory_cache[key] = load_entry(key, window_seconds, client, now)
        elif now >= entry["reset_time"]:
            entry.update(count=0, reset_time=now + window_seconds, last_redis_sync=0)

        allowed = entry["count"] < limit
        if allowed:
            entry["count"] += 1

        if client is not None and now - entry["last_redis_sync"] >= MEMORY_CACHE_SYNC_INTERVAL:
            mirror_entry(client, key, entry, window_seconds, now)

        return allowed, entry["count"], max(0, entry["reset_time"] - now)


def mirror_entry(client: redis.Redis, key: str, entry: dict, window_seconds: int, now: int) -> None:
    """Copy a window's count to Redis; a failed write keeps the memory copy authoritative"""
    try:
        client.set(key, entry["count"], ex=window_seconds)
        entry["last_redis_sync"] = now
        logger.debug(f"📡 Mirrored {key} to Redis: {entry['count']}")
    except redis.RedisError as e:
        logger.warning(f"⚠️ Could not mirror {key} to Redis: {e}")


def client_ip(request: Request) -> str:
    """
    Address a request is rate limited under.

    X-Forwarded-For is only read when the direct peer is a trusted proxy,
    and then the nearest hop that is not one of those proxies is used.
    """
    peer = request.client.host if request.client else "unknown"
    if peer not in TRUSTED_PROXIES:
        return peer

    forwarded = request.headers.get("X-Forwarded-For", "")
    hops = [hop.strip() for hop in forwarded.split(",") if hop.strip()]
    for hop in reversed(hops):
        if hop not in TRUSTED_PROXIES:
            return hop
    return hops[0] if hops else peer


async def rate_limit_dependency(
    request: Request,
    limit: int,
    window_seconds: int,
    key_prefix: str = "rate_limit",
    use_ip: bool = True,
):
    """
    FastAPI dependency for rate limiting

    Args:
        request: FastAPI request object
        limit: Maximum requests allowed
        window_seconds: Time window in seconds
        key_prefix: Prefix for the counter key
        use_ip: If True, use client IP in key (per-IP limit), otherwise global
    """
    key = f"{key_prefix}:{client_ip(request)}" if use_ip else f"{key_prefix}:global"

    is_allowed, current_count, ttl = check_rate_limit(
        key, limit, window_seconds, get_redis_client()
    )

    if not is_allowed:
        logger.warning(f"🚫 Rate limit EXCEEDED for {key} - {current_count}/{limit} requests used")
        raise HTTPException(
            status_code=429,
            detail={
                "message": f"Rate limit exceeded. Maximum {limit} requests per {window_seconds} seconds.",
                "retry_after": ttl,
                "limit": limit,
                "window_seconds": window_seconds,
            },
            headers={"Retry-After": str(ttl)},
        )

    request.state.rate_limit_remaining = limit - current_count
    request.state.rate_limit_limit = limit
    request.state.rate_limit_reset = int(time.time()) + ttl


def create_rate_limiter(
    limit: int, window_seconds: int, key_prefix: str = "rate_limit", use_ip: bool = True
):
    """
    Create a rate limiter dependency with specific parameters

    Example usage:
        rate_limit_login = create_rate_limiter(limit=10, window_seconds=300, key_prefix="login")

        @router.post("/login")
        async def login(data: LoginRequest, _: None = Depends(rate_limit_login)):
            ...
    """

    async def rate_limiter(request: Request):
        return await rate_limit_dependency(request, limit, window_seconds, key_prefix, use_ip)

    return rate_limiter
