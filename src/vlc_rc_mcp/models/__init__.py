"""Data models built from player replies."""

from .status import PlaybackStatus
