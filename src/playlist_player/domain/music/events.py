"""Notification events emitted by the playlist aggregate."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from playlist_player.domain.shared.datetime_utils import utcnow
from playlist_player.domain.shared.messages import NotificationMessages
from playlist_player.domain.shared.types import NonNegativeInt, UtcDatetimeField


class PlaylistEvent(BaseModel):
    """Base class for all playlist notifications."""

    model_config = {"frozen": True}

    playlist_name: str
    timestamp: UtcDatetimeField = Field(default_factory=utcnow)

    @property
    def message(self) -> str:
        """Human-readable text of the notification."""
        raise NotImplementedError


class NowPlaying(PlaylistEvent):
    event_type: Literal["NowPlaying"] = "NowPlaying"
    track_title: str

    @property
    def message(self) -> str:
        return NotificationMessages.NOW_PLAYING.format(title=self.track_title)


class TrackSkipped(PlaylistEvent):
    event_type: Literal["TrackSkipped"] = "TrackSkipped"
    skipped_title: str
    track_title: str

    @property
    def message(self) -> str:
        return NotificationMessages.SKIPPED_NOW_PLAYING.format(title=self.track_title)


class SkipUnavailable(PlaylistEvent):
    event_type: Literal["SkipUnavailable"] = "SkipUnavailable"
    track_count: NonNegativeInt

    @property
    def message(self) -> str:
        return NotificationMessages.NO_MORE_SONGS_TO_SKIP


class TracksListed(PlaylistEvent):
    """Listing of a playlist: its name on one line, the joined titles on the next."""

    event_type: Literal["TracksListed"] = "TracksListed"
    rendered_tracks: str

    @property
    def message(self) -> str:
        return "\n".join(
            (
                NotificationMessages.PLAYLIST_HEADER.format(name=self.playlist_name),
                NotificationMessages.PLAYLIST_SONGS.format(songs=self.rendered_tracks),
            )
        )


class PlaylistShuffled(PlaylistEvent):
    event_type: Literal["PlaylistShuffled"] = "PlaylistShuffled"
    track_count: NonNegativeInt

    @property
    def message(self) -> str:
        return NotificationMessages.PLAYLIST_SHUFFLED


class ShuffleUnavailable(PlaylistEvent):
    event_type: Literal["ShuffleUnavailable"] = "ShuffleUnavailable"

    @property
    def message(self) -> str:
        return NotificationMessages.NO_SONGS_TO_SHUFFLE


class DuplicateTrackRejected(PlaylistEvent):
    event_type: Literal["DuplicateTrackRejected"] = "DuplicateTrackRejected"
    track_title: str

    @property
    def message(self) -> str:
        return NotificationMessages.DUPLICATE_TRACK.format(title=self.track_title)
