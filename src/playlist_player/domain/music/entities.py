"""Core domain entities for the music bounded context."""

from __future__ import annotations

import logging
import random
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, TypeAdapter

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
from playlist_player.domain.music.notifier import LoggingNotifier, Notifier
from playlist_player.domain.music.services import ShuffleDomainService
from playlist_player.domain.shared.messages import LogTemplates, NotificationMessages
from playlist_player.domain.shared.types import TrackTitleStr

logger = logging.getLogger(__name__)

_TRACK_TITLE = TypeAdapter(TrackTitleStr)


class Playlist(BaseModel):
    """Aggregate root holding an ordered list of track titles and what is playing.

    The currently playing track is always the head of ``tracks`` right after
    ``play_first``, ``skip`` or ``shuffle_and_play``. Notifications go to the
    injected notifier; empty or single-track playlists are handled by notifying
    (or staying silent), never by raising.
    """

    model_config = ConfigDict(strict=True, validate_assignment=True)

    name: str = Field(frozen=True)
    tracks: list[TrackTitleStr] = Field(default_factory=list)
    current_track: TrackTitleStr | None = None
    allow_duplicates: bool = True

    _notifier: Notifier = PrivateAttr(default_factory=LoggingNotifier)
    _rng: random.Random = PrivateAttr(default_factory=random.Random)

    def __init__(
        self,
        name: str,
        *,
        notifier: Notifier | None = None,
        rng: random.Random | None = None,
        **data: Any,
    ) -> None:
        super().__init__(name=name, **data)
        if notifier is not None:
            self._notifier = notifier
        if rng is not None:
            self._rng = rng

    @property
    def track_count(self) -> int:
        return len(self.tracks)

    @property
    def is_empty(self) -> bool:
        return not self.tracks

    @property
    def rendered_tracks(self) -> str:
        """Titles in current order, comma-joined without a trailing separator."""
        return NotificationMessages.TRACK_SEPARATOR.join(self.tracks)

    def _emit(self, event: PlaylistEvent) -> None:
        self._notifier.notify(event)

    def add_track(self, title: str) -> None:
        """Append a title to the end of the playlist.

        Duplicates are kept unless ``allow_duplicates`` is off, in which case a
        repeated title is dropped and a notification is emitted instead.
        """
        title = _TRACK_TITLE.validate_python(title, strict=True)
        if not self.allow_duplicates and title in self.tracks:
            self._emit(DuplicateTrackRejected(playlist_name=self.name, track_title=title))
            return

        self.tracks.append(title)
        logger.debug(LogTemplates.TRACK_ADDED, title, self.name, len(self.tracks))

    def play_first(self) -> None:
        """Start playing the head of the playlist; silently does nothing when empty."""
        if not self.tracks:
            return

        self.current_track = self.tracks[0]
        self._emit(NowPlaying(playlist_name=self.name, track_title=self.current_track))

    def skip(self) -> None:
        """Drop the head for good and play the next track.

        With one track or none there is nothing to skip to; the playlist is
        left untouched.
        """
        if len(self.tracks) <= 1:
            self._emit(SkipUnavailable(playlist_name=self.name, track_count=len(self.tracks)))
            return

        skipped = self.tracks.pop(0)
        logger.debug(LogTemplates.TRACK_DISCARDED, skipped, self.name)
        self.current_track = self.tracks[0]
        self._emit(
            TrackSkipped(
                playlist_name=self.name,
                skipped_title=skipped,
                track_title=self.current_track,
            )
        )

    def list_tracks(self) -> None:
        """Announce the playlist name and its titles in current order."""
        self._emit(TracksListed(playlist_name=self.name, rendered_tracks=self.rendered_tracks))

    def shuffle_and_play(self) -> None:
        """Randomly reorder the tracks in place, then play the new head."""
        if not self.tracks:
            self._emit(ShuffleUnavailable(playlist_name=self.name))
            return

        ShuffleDomainService.fisher_yates(self.tracks, self._rng)
        logger.debug(LogTemplates.PLAYLIST_SHUFFLED, len(self.tracks), self.name)
        self.play_first()
        self._emit(PlaylistShuffled(playlist_name=self.name, track_count=len(self.tracks)))
