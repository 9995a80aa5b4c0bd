"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from actionstore.config import StoreSettings, RemoteSettings

    # Load from environment variables (ACTIONSTORE_*, REMOTE_*)
    store_settings = StoreSettings()
    remote_settings = RemoteSettings()

    # Or override with explicit values
    store_settings = StoreSettings(history_limit=50, trace_enabled=True)
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from actionstore.effects.models import RetryPolicy


class StoreSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for stores built by create_store().

    Attributes:
        history_limit: Maximum undo records kept (None for unbounded).
        trace_enabled: Record every dispatched action in an action log.
        trace_capacity: Records kept by the default in-memory action log.
        timer_delay: Default delay in seconds of timer effects.

    Environment Variables:
        ACTIONSTORE_HISTORY_LIMIT
        ACTIONSTORE_TRACE_ENABLED
        ACTIONSTORE_TRACE_CAPACITY
        ACTIONSTORE_TIMER_DELAY
    """

    model_config = SettingsConfigDict(
        env_prefix="ACTIONSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    history_limit: int | None = Field(default=None, ge=1)
    trace_enabled: bool = False
    trace_capacity: int = Field(default=1000, ge=1)
    timer_delay: float = Field(default=1.0, ge=0.0)


class RemoteSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the GraphQL remote-call performer.

    Attributes:
        url: GraphQL endpoint.
        timeout: Request timeout in seconds.
        max_attempts: Attempts per remote call (1 = no retry).
        backoff: Backoff strategy between attempts.
        base_delay: Base delay in seconds for backoff calculation.

    Environment Variables:
        REMOTE_URL
        REMOTE_TIMEOUT
        REMOTE_MAX_ATTEMPTS
        REMOTE_BACKOFF
        REMOTE_BASE_DELAY
    """

    model_config = SettingsConfigDict(
        env_prefix="REMOTE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    url: str = "http://localhost:4000/"
    timeout: float = 10.0
    max_attempts: int = Field(default=1, ge=1)
    backoff: Literal["none", "linear", "exponential"] = "none"
    base_delay: float = 0.1

    def retry_policy(self) -> RetryPolicy:
        return RetryPolicy(
            max_attempts=self.max_attempts,
            backoff=self.backoff,
            base_delay=self.base_delay,
        )
