"""
Redis Session Store

Resolves session tokens to callers for the authorization context.

Storage Format:
    Key: "{SESSION_KEY_PREFIX}{token}" (default "session:{token}")
    Value: JSON object {"id": "<user id>", "role": "<role>"}
    TTL: managed by whoever issues the session (not this service)

Missing keys, undecodable JSON and objects without a string id/role all
resolve to None, which the gate reports as 401.
"""

import json
import logging
from typing import Optional

from redis import Redis
from redis.exceptions import RedisError

from hr_tracker.application.models import Caller
from hr_tracker.domain.shared.exceptions import TransientStoreError

logger = logging.getLogger(__name__)


class RedisSessionStore:
    """
    Session lookup backed by Redis.

    Usage:
        >>> store = RedisSessionStore(client)
        >>> store.resolve("abc123")
        Caller(id='42', role='HR')
    """

    def __init__(self, client: Redis, key_prefix: str = "session:") -> None:
        self.client = client
        self.key_prefix = key_prefix

    def _key(self, token: str) -> str:
        return f"{self.key_prefix}{token}"

    def resolve(self, token: str) -> Optional[Caller]:
        """
        Look up the caller behind a session token.

        Raises:
            TransientStoreError: Redis unreachable
        """
        if not token:
            return None

        try:
            raw = self.client.get(self._key(token))
        except RedisError as e:
            logger.error(f"Session lookup failed: {e}")
            raise TransientStoreError("Session store unavailable", original_error=e) from e

        if raw is None:
            logger.debug("Session token not found")
            return None

        try:
            data = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("Session data is not valid JSON")
            return None

        if not isinstance(data, dict):
            return None
        user_id, role = data.get("id"), data.get("role")
        if not isinstance(user_id, (str, int)) or not isinstance(role, str):
            logger.warning("Session data missing id or role")
            return None

        return Caller(id=str(user_id), role=role)
