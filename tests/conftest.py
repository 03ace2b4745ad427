import random

import pytest

# ============================================================================
# Environment Isolation
# ============================================================================

_SETTINGS_ENV_VARS = (
    "ENVIRONMENT",
    "DEBUG",
    "LOG_LEVEL",
    "PLAYLIST__SHUFFLE_SEED",
    "PLAYLIST__ALLOW_DUPLICATES",
    "DEMO__PLAYLIST_NAME",
    "DEMO__TRACKS",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep host environment variables and cached settings out of every test."""
    from playlist_player.config.settings import clear_settings_cache

    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


# ============================================================================
# Domain Fixtures
# ============================================================================


@pytest.fixture
def notifier():
    """Notifier that records every event it receives."""
    from playlist_player.domain.music.notifier import InMemoryNotifier

    return InMemoryNotifier()


@pytest.fixture
def seeded_rng():
    """Deterministic RNG for shuffle tests."""
    return random.Random(1234)


@pytest.fixture
def empty_playlist(notifier, seeded_rng):
    """An empty playlist wired to the recording notifier."""
    from playlist_player.domain.music.entities import Playlist

    return Playlist("Empty Mix", notifier=notifier, rng=seeded_rng)


@pytest.fixture
def chill_mix(notifier, seeded_rng):
    """The demo playlist with its three tracks, nothing playing yet."""
    from playlist_player.domain.music.entities import Playlist

    playlist = Playlist("My Chill Mix", notifier=notifier, rng=seeded_rng)
    playlist.add_track("Lofi Study")
    playlist.add_track("Chillhop Beats")
    playlist.add_track("Evening Jazz")
    return playlist
