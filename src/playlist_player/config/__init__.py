"""Configuration: environment-driven settings and the dependency container."""

from playlist_player.config.container import Container, create_container
from playlist_player.config.settings import Settings, clear_settings_cache, get_settings

__all__ = [
    "Container",
    "Settings",
    "clear_settings_cache",
    "create_container",
    "get_settings",
]
