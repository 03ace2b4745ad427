"""Dependency Injection Container

Builds the notifier and the shuffle RNG from settings and hands them to every
playlist it creates. Components are created on first access and cached.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..domain.music.entities import Playlist
from ..domain.music.notifier import LoggingNotifier, Notifier
from ..domain.shared.messages import LogTemplates

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    Pass ``_notifier`` to route notifications somewhere other than the log.
    """

    settings: Settings
    _notifier: Notifier | None = None
    _rng: random.Random | None = None

    @property
    def notifier(self) -> Notifier:
        if self._notifier is None:
            self._notifier = LoggingNotifier()
        return self._notifier

    @property
    def rng(self) -> random.Random:
        """Shared shuffle RNG, seeded from ``playlist.shuffle_seed`` when set."""
        if self._rng is None:
            seed = self.settings.playlist.shuffle_seed
            if seed is None:
                logger.debug(LogTemplates.RNG_UNSEEDED)
            else:
                logger.debug(LogTemplates.RNG_SEEDED, seed)
            self._rng = random.Random(seed)
        return self._rng

    def create_playlist(self, name: str) -> Playlist:
        """Create an empty playlist wired to this container's collaborators."""
        allow_duplicates = self.settings.playlist.allow_duplicates
        playlist = Playlist(
            name,
            notifier=self.notifier,
            rng=self.rng,
            allow_duplicates=allow_duplicates,
        )
        logger.debug(LogTemplates.PLAYLIST_CREATED, name, allow_duplicates)
        return playlist


def create_container(settings: Settings | None = None, notifier: Notifier | None = None) -> Container:
    """Factory function to create a configured container."""
    if settings is None:
        from .settings import get_settings

        settings = get_settings()

    return Container(settings=settings, _notifier=notifier)
