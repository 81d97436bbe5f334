"""
Redis Infrastructure Module

Exports:
    - RedisSessionStore: Session token -> Caller lookup
    - create_redis_client: Pooled Redis client with PING retry
    - health_check: Check Redis health with PING
    - close_client: Close a client's connection pool
"""

from .connection import close_client, create_redis_client, health_check
from .session_store import RedisSessionStore

__all__ = [
    "RedisSessionStore",
    "create_redis_client",
    "health_check",
    "close_client",
]
