"""Centralized message constants for error messages, notifications, and logging."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Time/Date Validation Errors
    TIMEZONE_REQUIRED_UTC_DATETIME = "timestamp must be timezone-aware"

    # Settings Validation Errors
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"
    EMPTY_DEMO_TRACKS = "Demo needs at least one track"


class NotificationMessages:
    """User-facing texts emitted through the notifier.

    Templates take keyword arguments and are rendered with ``str.format``.
    """

    NOW_PLAYING = "Now playing: {title}"
    SKIPPED_NOW_PLAYING = "Skipped! Now playing: {title}"
    NO_MORE_SONGS_TO_SKIP = "No more songs to skip."
    PLAYLIST_HEADER = "Playlist: {name}"
    PLAYLIST_SONGS = "Songs: {songs}"
    PLAYLIST_SHUFFLED = "Playlist has been shuffled."
    NO_SONGS_TO_SHUFFLE = "No songs to shuffle."
    DUPLICATE_TRACK = "'{title}' is already in the playlist."

    # Separator between titles when a playlist is rendered
    TRACK_SEPARATOR = ", "


class LogTemplates:
    """Log message templates for structured logging.

    Use these with logger.info(), logger.error(), etc. and pass values as parameters
    for proper log formatting.
    """

    # Application Lifecycle
    APP_STARTING = "Starting playlist demo (environment={environment})"
    APP_FINISHED = "Playlist demo finished"
    APP_KEYBOARD_INTERRUPT = "Interrupted by user"
    APP_FATAL_ERROR = "Fatal error: %s"
    LOGGING_CONFIG_FALLBACK = "Could not load %s, falling back to basic config"

    # Container
    RNG_SEEDED = "Shuffle RNG seeded with %d"
    RNG_UNSEEDED = "Shuffle RNG is unseeded"
    PLAYLIST_CREATED = "Created playlist '%s' (allow_duplicates=%s)"

    # Playlist
    TRACK_ADDED = "Added '%s' to playlist '%s' (%d tracks)"
    TRACK_DISCARDED = "Discarded '%s' from playlist '%s'"
    PLAYLIST_SHUFFLED = "Shuffled %d tracks in playlist '%s'"
