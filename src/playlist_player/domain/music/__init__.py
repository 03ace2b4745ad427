"""
Music Bounded Context

Domain logic for the playlist, its notifications and shuffling.
"""

from playlist_player.domain.music.entities import Playlist
from playlist_player.domain.music.events import (
    DuplicateTrackRejected,
    NowPlaying,
    PlaylistEvent,
    PlaylistShuffled,
    ShuffleUnavailable,
    SkipUnavailable,
    TrackSkipped,
    TracksListed,
)
from playlist_player.domain.music.notifier import InMemoryNotifier, LoggingNotifier, Notifier
from playlist_player.domain.music.services import ShuffleDomainService

__all__ = [
    # Entities
    "Playlist",
    # Events
    "PlaylistEvent",
    "NowPlaying",
    "TrackSkipped",
    "SkipUnavailable",
    "TracksListed",
    "PlaylistShuffled",
    "ShuffleUnavailable",
    "DuplicateTrackRejected",
    # Notifiers
    "Notifier",
    "LoggingNotifier",
    "InMemoryNotifier",
    # Services
    "ShuffleDomainService",
]
