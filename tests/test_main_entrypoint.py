"""
Tests for main.py - Main Entry Point

Tests for the main entry point including:
- Logging configuration
- Demo scenario
- Error handling
"""

import json
import logging
from unittest.mock import MagicMock, mock_open, patch

from playlist_player.config.container import Container
from playlist_player.config.settings import DemoSettings, Settings
from playlist_player.domain.music.notifier import InMemoryNotifier
from playlist_player.main import _LOGGING_CONFIG_PATH, main, run_demo, setup_logging


class TestLoggingSetup:
    """Tests for logging configuration."""

    def _make_valid_config(self) -> dict:
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "handlers": {},
            "loggers": {"playlist_player.notifications": {"level": "INFO"}},
            "root": {"level": "INFO", "handlers": []},
        }

    def test_dictconfig_called_when_json_exists(self):
        """Should call dictConfig when logging_config.json exists."""
        config = self._make_valid_config()
        m = mock_open(read_data=json.dumps(config))
        with (
            patch("builtins.open", m),
            patch("logging.config.dictConfig") as mock_dc,
        ):
            setup_logging()

            mock_dc.assert_called_once_with(config)

    def test_fallback_to_basicconfig_when_json_missing(self):
        """Should fallback to basicConfig when logging_config.json is missing."""
        with (
            patch("builtins.open", side_effect=FileNotFoundError),
            patch("logging.basicConfig") as mock_bc,
        ):
            setup_logging()

            mock_bc.assert_called_once()
            assert mock_bc.call_args[1]["level"] == logging.INFO

    def test_fallback_to_basicconfig_when_json_malformed(self):
        """Should fallback to basicConfig when JSON is malformed."""
        m = mock_open(read_data="{invalid json")
        with (
            patch("builtins.open", m),
            patch("logging.basicConfig") as mock_bc,
        ):
            setup_logging()

            mock_bc.assert_called_once()

    def test_root_logger_level_overridden_by_settings(self):
        """Should override root logger level with the provided log_level."""
        config = self._make_valid_config()
        m = mock_open(read_data=json.dumps(config))
        with (
            patch("builtins.open", m),
            patch("logging.config.dictConfig"),
            patch("logging.getLogger") as mock_get_logger,
        ):
            mock_root = MagicMock()
            mock_get_logger.return_value = mock_root

            setup_logging("DEBUG")

            mock_root.setLevel.assert_called_once_with(logging.DEBUG)

    def test_shipped_config_uses_colored_formatter(self):
        """Should point the shipped console formatter at ColoredFormatter."""
        with open(_LOGGING_CONFIG_PATH) as f:
            config = json.load(f)

        formatter = config["formatters"]["colored"]
        assert formatter["()"] == "playlist_player.utils.logging.ColoredFormatter"
        assert config["root"]["handlers"] == ["console"]


class TestRunDemo:
    """Tests for the demo scenario."""

    def test_default_demo(self):
        """Should leave two tracks with the second original track playing."""
        notifier = InMemoryNotifier()
        container = Container(settings=Settings(), _notifier=notifier)

        playlist = run_demo(container)

        assert playlist.name == "My Chill Mix"
        assert playlist.tracks == ["Chillhop Beats", "Evening Jazz"]
        assert playlist.current_track == "Chillhop Beats"
        assert notifier.messages == [
            "Now playing: Lofi Study",
            "Skipped! Now playing: Chillhop Beats",
            "Playlist: My Chill Mix\nSongs: Chillhop Beats, Evening Jazz",
        ]

    def test_custom_demo(self):
        """Should use the configured name and tracks."""
        notifier = InMemoryNotifier()
        settings = Settings(demo=DemoSettings(playlist_name="Solo", tracks=("Only One",)))
        container = Container(settings=settings, _notifier=notifier)

        playlist = run_demo(container)

        assert playlist.tracks == ["Only One"]
        assert playlist.current_track == "Only One"
        assert notifier.messages == [
            "Now playing: Only One",
            "No more songs to skip.",
            "Playlist: Solo\nSongs: Only One",
        ]


class TestMainFunction:
    """Tests for main entry point function."""

    def test_main_successful_run(self, caplog):
        """Should return 0 and log the demo notifications."""
        caplog.set_level(logging.INFO)
        with patch("playlist_player.main.setup_logging") as mock_setup:
            exit_code = main()

        assert exit_code == 0
        mock_setup.assert_called_once_with("INFO")
        notifications = [
            r.getMessage() for r in caplog.records if r.name == "playlist_player.notifications"
        ]
        assert notifications == [
            "Now playing: Lofi Study",
            "Skipped! Now playing: Chillhop Beats",
            "Playlist: My Chill Mix",
            "Songs: Chillhop Beats, Evening Jazz",
        ]

    def test_main_passes_log_level_from_env(self, monkeypatch):
        """Should configure logging with the level from settings."""
        monkeypatch.setenv("LOG_LEVEL", "warning")
        with patch("playlist_player.main.setup_logging") as mock_setup:
            main()

        mock_setup.assert_called_once_with("WARNING")

    def test_main_handles_keyboard_interrupt(self):
        """Should return 0 on KeyboardInterrupt."""
        with (
            patch("playlist_player.main.setup_logging"),
            patch("playlist_player.main.run_demo", side_effect=KeyboardInterrupt()),
        ):
            exit_code = main()

        assert exit_code == 0

    def test_main_handles_exception(self, caplog):
        """Should return error code and log unhandled exceptions."""
        with (
            patch("playlist_player.main.setup_logging"),
            patch("playlist_player.main.run_demo", side_effect=RuntimeError("boom")),
        ):
            exit_code = main()

        assert exit_code == 1
        assert any(r.levelno == logging.ERROR and r.exc_info for r in caplog.records)

    def test_main_creates_container_with_settings(self):
        """Should create the container from the loaded settings."""
        with (
            patch("playlist_player.main.setup_logging"),
            patch("playlist_player.config.container.create_container") as mock_create,
            patch("playlist_player.main.run_demo"),
        ):
            main()

        settings = mock_create.call_args[0][0]
        assert isinstance(settings, Settings)
