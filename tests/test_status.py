"""Tests for the playback status snapshot."""

from vlc_rc_mcp.models.status import PlaybackStatus


def test_to_dict_has_every_field():
    status = PlaybackStatus(
        title="Track",
        time=42,
        length=200,
        progress=21,
        playing=True,
        stopped=False,
        volume=128,
    )
    assert status.to_dict() == {
        "title": "Track",
        "time": 42,
        "length": 200,
        "progress": 21,
        "playing": True,
        "stopped": False,
        "volume": 128,
    }


def test_neither_playing_nor_stopped_is_kept():
    """Both flags may be False at once; no third state is derived."""
    status = PlaybackStatus(
        title="", time=0, length=0, progress=0,
        playing=False, stopped=False, volume=0,
    )
    data = status.to_dict()
    assert data["playing"] is False
    assert data["stopped"] is False
    assert set(data) == {
        "title", "time", "length", "progress", "playing", "stopped", "volume",
    }
