"""
Domain Layer

Contains pure playlist logic organized by bounded contexts:
- shared/: Message constants, reusable types and helpers
- music/: Playlist aggregate, its notifications and shuffling
"""

from playlist_player.domain.music.entities import Playlist

__all__ = [
    "Playlist",
]
