"""Configuration module using Pydantic Settings.

Usage:
    from actionstore.config import StoreSettings, RemoteSettings

    settings = StoreSettings(history_limit=100)
    remote = RemoteSettings(url="http://localhost:4000/", max_attempts=3)
"""

from actionstore.config.settings import RemoteSettings, StoreSettings

__all__ = [
    "RemoteSettings",
    "StoreSettings",
]
