"""
Redis Client Factory.

Builds a pooled Redis client with health checks and retry logic. Used by the
session store behind the authorization context.

Responsibility:
    - Create a connection pool per client (max connections from Settings)
    - Verify the connection with PING, retrying with exponential backoff
    - Health check that never raises
    - Explicit close at shutdown

Architecture Notes:
    - Infrastructure Layer (external dependency on Redis)
    - No module-level singleton: the API lifespan owns the client it creates
      and closes it on shutdown

Business Rules:
    - Max connections: REDIS_MAX_CONNECTIONS (default 10)
    - Connection timeout: REDIS_TIMEOUT (default 5s)
    - Retry attempts: REDIS_RETRY_ATTEMPTS (default 3)
    - Exponential backoff: 1s, 2s, 4s (base=1s, multiplier=2)
    - Decode responses: True (return strings not bytes)

Examples:
    >>> client = create_redis_client(settings)
    >>> health_check(client)
    True
    >>> close_client(client)
"""

import logging
import time
from typing import Optional

from redis import ConnectionPool, Redis
from redis.exceptions import ConnectionError, RedisError, TimeoutError

from hr_tracker.shared.config import Settings

logger = logging.getLogger(__name__)

BACKOFF_BASE_SECONDS = 1


def create_redis_client(settings: Settings, verify: bool = True) -> Redis:
    """
    Create a Redis client backed by its own connection pool.

    Args:
        settings: Runtime settings (REDIS_URL and pool options)
        verify: PING the server before returning, with retries

    Returns:
        Redis client instance

    Raises:
        RedisError: If the server is unreachable after all retry attempts
    """
    logger.info(
        f"Creating Redis connection pool: url={settings.redis_url}, "
        f"max_connections={settings.redis_max_connections}, "
        f"timeout={settings.redis_timeout}s"
    )

    pool = ConnectionPool.from_url(
        settings.redis_url,
        max_connections=settings.redis_max_connections,
        socket_timeout=settings.redis_timeout,
        socket_connect_timeout=settings.redis_timeout,
        socket_keepalive=True,
        decode_responses=True,
    )
    client = Redis(connection_pool=pool)

    if verify:
        _ping_with_retry(client, settings.redis_retry_attempts)
    return client


def _ping_with_retry(client: Redis, retry_attempts: int) -> None:
    last_error: Optional[Exception] = None

    for attempt in range(retry_attempts):
        try:
            client.ping()
            logger.debug(f"Redis connection established (attempt {attempt + 1})")
            return

        except (ConnectionError, TimeoutError) as e:
            last_error = e
            if attempt < retry_attempts - 1:
                delay = BACKOFF_BASE_SECONDS * (2**attempt)
                logger.warning(
                    f"Redis connection failed (attempt {attempt + 1}/{retry_attempts}): {e}. "
                    f"Retrying in {delay}s..."
                )
                time.sleep(delay)
            else:
                logger.error(f"Redis connection failed after {retry_attempts} attempts: {e}")

    raise RedisError(
        f"Failed to connect to Redis after {retry_attempts} attempts. "
        f"Last error: {last_error}"
    )


def health_check(client: Redis) -> bool:
    """
    Check Redis health with PING.

    Returns False on any Redis error (doesn't raise).
    """
    try:
        if client.ping():
            logger.debug("Redis health check: OK")
            return True
        logger.warning("Redis health check: PING returned False")
        return False

    except RedisError as e:
        logger.warning(f"Redis health check failed: {e}")
        return False


def close_client(client: Redis) -> None:
    """Disconnect every pooled connection of the client."""
    logger.info("Closing Redis connection pool")
    try:
        client.connection_pool.disconnect()
    except RedisError as e:
        logger.error(f"Error closing Redis connection pool: {e}")
