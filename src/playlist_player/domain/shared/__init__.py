"""
Shared Domain Kernel

Contains message constants, reusable types and helpers shared by the domain.
"""

from playlist_player.domain.shared.messages import (
    ErrorMessages,
    LogTemplates,
    NotificationMessages,
)

__all__ = [
    "ErrorMessages",
    "LogTemplates",
    "NotificationMessages",
]
