"""High-level API facade."""

from .client import MusicBrainzAPI, SyncMusicBrainzAPI

__all__ = ["MusicBrainzAPI", "SyncMusicBrainzAPI"]
