"""Port and stock adapters for delivering playlist notifications."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from playlist_player.domain.music.events import PlaylistEvent

NOTIFICATION_LOGGER_NAME = "playlist_player.notifications"


class Notifier(ABC):
    """Interface for the channel that receives playlist notifications."""

    @abstractmethod
    def notify(self, event: PlaylistEvent) -> None:
        """Deliver a single notification."""
        ...


class LoggingNotifier(Notifier):
    """Writes every notification line to a logger at INFO level."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(NOTIFICATION_LOGGER_NAME)

    def notify(self, event: PlaylistEvent) -> None:
        for line in event.message.splitlines():
            self._logger.info(line)


class InMemoryNotifier(Notifier):
    """Collects notifications in order of emission."""

    def __init__(self) -> None:
        self.events: list[PlaylistEvent] = []

    def notify(self, event: PlaylistEvent) -> None:
        self.events.append(event)

    @property
    def messages(self) -> list[str]:
        return [event.message for event in self.events]

    def clear(self) -> None:
        self.events.clear()
