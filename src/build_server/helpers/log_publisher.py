"""Redis pub/sub log publisher for pipeline progress events."""

import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import redis
import typer

from .logger import get_logger

logger = get_logger("log_publisher")

DEFAULT_REDIS_URL = "redis://localhost:6379"


def channel_name(project_id: str) -> str:
    """Pub/sub channel carrying the logs of one project."""
    return f"logs:{project_id}"


class LogPublisher:
    """
    Echo pipeline log lines to the console and publish them to Redis.

    Publishing is fire-and-forget: failures are written to the diagnostic
    logger and never raised to the caller. Console output happens even when
    the remote side is disabled or broken.
    """

    def __init__(self, project_id: Optional[str] = None, client=None):
        """
        Initialize publisher.

        Args:
            project_id: Project identifier scoping the channel name
            client: Connected redis client, or None for console-only mode
        """
        self.project_id = project_id
        self._client = client if project_id else None

    @classmethod
    def connect(
        cls, redis_url: Optional[str], project_id: Optional[str]
    ) -> "LogPublisher":
        """
        Build a publisher connected to Redis.

        Falls back to console-only mode when the connection cannot be
        established.
        """
        if not project_id:
            return cls(project_id=None, client=None)

        try:
            client = redis.Redis.from_url(redis_url or DEFAULT_REDIS_URL)
            client.ping()
        except Exception as e:
            logger.warning(f"Failed to connect to Redis, remote logs disabled: {e}")
            return cls(project_id=project_id, client=None)

        return cls(project_id=project_id, client=client)

    @property
    def enabled(self) -> bool:
        """Whether events are delivered to Redis."""
        return self._client is not None

    def build_event(self, message: str) -> Dict[str, Any]:
        """Build the wire payload for one log line."""
        return {
            "log": message,
            "projectId": self.project_id,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    def publish(self, message: str) -> None:
        """Echo a log line and publish it on the project channel."""
        try:
            typer.echo(message)
        except OSError as e:
            logger.error(f"Error writing log to console: {e}")

        if not self.enabled:
            return

        try:
            self._client.publish(
                channel_name(self.project_id), json.dumps(self.build_event(message))
            )
        except Exception as e:
            logger.error(f"Error publishing log to {channel_name(self.project_id)}: {e}")

    def close(self) -> None:
        """Release the Redis connection. Safe to call more than once."""
        client, self._client = self._client, None
        if client is None:
            return

        try:
            client.close()
        except Exception as e:
            logger.debug(f"Error closing Redis connection: {e}")

    def __enter__(self) -> "LogPublisher":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
