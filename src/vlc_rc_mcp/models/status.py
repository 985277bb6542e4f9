"""Playback status snapshot."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass
class PlaybackStatus:
    """Point-in-time view of the player, assembled from individual queries.

    Never cached: build a new one whenever fresh values are needed.
    """

    title: str
    time: int
    length: int
    progress: int
    playing: bool
    stopped: bool
    volume: int

    def to_dict(self) -> dict:
        return asdict(self)
