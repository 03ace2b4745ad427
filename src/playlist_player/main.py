#!/usr/bin/env python3
"""Main entry point: runs the playlist demo scenario."""

from __future__ import annotations

import json
import logging
import logging.config
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from playlist_player.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from playlist_player.config.container import Container
    from playlist_player.domain.music.entities import Playlist

_LOGGING_CONFIG_PATH = Path(__file__).resolve().parents[2] / "logging_config.json"


def setup_logging(log_level: str = "INFO") -> None:
    resolved_level = getattr(logging, log_level.upper(), logging.INFO)

    try:
        with open(_LOGGING_CONFIG_PATH) as f:
            config = json.load(f)
        logging.config.dictConfig(config)
    except (FileNotFoundError, json.JSONDecodeError, ValueError):
        logging.warning(LogTemplates.LOGGING_CONFIG_FALLBACK, _LOGGING_CONFIG_PATH)
        logging.basicConfig(
            level=resolved_level,
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    logging.getLogger().setLevel(resolved_level)


def run_demo(container: Container) -> Playlist:
    """Build the demo playlist, play it, skip once and list what is left."""
    demo = container.settings.demo
    playlist = container.create_playlist(demo.playlist_name)
    for title in demo.tracks:
        playlist.add_track(title)

    playlist.play_first()
    playlist.skip()
    playlist.list_tracks()
    return playlist


def main() -> int:
    from playlist_player.config.settings import get_settings

    settings = get_settings()
    setup_logging(settings.log_level)

    logger = logging.getLogger(__name__)
    logger.info(LogTemplates.APP_STARTING.format(environment=settings.environment))

    from playlist_player.config.container import create_container

    container = create_container(settings)

    try:
        run_demo(container)
        logger.info(LogTemplates.APP_FINISHED)
        return 0
    except KeyboardInterrupt:
        logger.info(LogTemplates.APP_KEYBOARD_INTERRUPT)
        return 0
    except Exception as e:
        logger.exception(LogTemplates.APP_FATAL_ERROR, e)
        return 1


def cli() -> None:
    """Console script entry point (used by pyproject.toml [project.scripts])."""
    sys.exit(main())


if __name__ == "__main__":
    cli()  # pragma: no cover
