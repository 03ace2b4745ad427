"""playlist-player: an in-memory music playlist with shuffle and skip."""

from playlist_player.domain.music.entities import Playlist

__all__ = ["Playlist"]
