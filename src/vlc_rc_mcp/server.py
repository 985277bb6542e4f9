"""MCP server exposing VLC playback controls.

Exposes tools and resources via the Model Context Protocol using the
official Python MCP SDK. The server never opens the player socket: the
embedding application passes in a connection it already owns.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from mcp.server.fastmcp import FastMCP

from .controls import MediaControls
from .errors import InvalidArgumentError
from .models.status import PlaybackStatus
from .transport.connection import Connection

logger = logging.getLogger(__name__)

SERVER_NAME = "vlc-rc"
DEFAULT_TRANSPORT = "stdio"

mcp = FastMCP(
    SERVER_NAME,
    instructions="Control a running VLC player through its remote-control interface",
)

# Global connection state
_controls: MediaControls | None = None


def attach(connection: Connection) -> MediaControls:
    """Route all tools through ``connection``."""
    global _controls
    _controls = MediaControls(connection)
    logger.info("Attached player connection")
    return _controls


def detach() -> None:
    """Forget the attached connection. Closing it is the owner's job."""
    global _controls
    _controls = None
    logger.info("Detached player connection")


def _get_controls() -> MediaControls:
    """Get the active controls, raising if no connection is attached."""
    if _controls is None:
        raise RuntimeError(
            "No player connection attached. Call attach() before using tools."
        )
    return _controls


# ─── PLAYBACK TOOLS ──────────────────────────────────────────────────

@mcp.tool()
def play(media: str | None = None) -> dict[str, Any]:
    """Play a file or URL, or resume the current item.

    Args:
        media: Path or URL to add and play. Omit to resume playback.
    """
    try:
        _get_controls().play(media)
    except InvalidArgumentError as e:
        return {"error": str(e)}
    return {"playing": "current item" if media is None else media}


@mcp.tool()
def pause() -> dict[str, bool]:
    """Pause playback."""
    _get_controls().pause()
    return {"paused": True}


@mcp.tool()
def stop() -> dict[str, bool]:
    """Stop playback."""
    _get_controls().stop()
    return {"stopped": True}


@mcp.tool()
def next_item() -> dict[str, bool]:
    """Skip to the next playlist item."""
    _get_controls().next()
    return {"skipped": True}


@mcp.tool()
def previous_item() -> dict[str, bool]:
    """Go back to the previous playlist item."""
    _get_controls().prev()
    return {"skipped": True}


@mcp.tool()
def shutdown_player() -> dict[str, bool]:
    """Terminate the VLC process. It will not come back until restarted externally."""
    _get_controls().shutdown()
    return {"shutdown": True}


# ─── PLAYLIST TOOLS ──────────────────────────────────────────────────

@mcp.tool()
def add_to_playlist(media: str) -> dict[str, Any]:
    """Append a file or URL to the playlist without playing it.

    Args:
        media: Path or URL to enqueue.
    """
    try:
        _get_controls().add_to_playlist(media)
    except InvalidArgumentError as e:
        return {"error": str(e)}
    return {"enqueued": media}


@mcp.tool()
def get_playlist() -> dict[str, Any]:
    """Request the playlist listing from the player."""
    listing = _get_controls().playlist()
    return {"playlist": listing if isinstance(listing, str) else None}


@mcp.tool()
def toggle_loop() -> dict[str, bool]:
    """Toggle playlist looping."""
    _get_controls().loop()
    return {"toggled": True}


@mcp.tool()
def toggle_random() -> dict[str, bool]:
    """Toggle random playlist order."""
    _get_controls().random()
    return {"toggled": True}


@mcp.tool()
def clear_playlist() -> dict[str, bool]:
    """Remove every item from the playlist."""
    _get_controls().clear()
    return {"cleared": True}


# ─── STATUS & VOLUME TOOLS ───────────────────────────────────────────

@mcp.tool()
def get_status() -> dict[str, Any]:
    """Get title, position, length, progress, play state and volume."""
    controls = _get_controls()
    status = PlaybackStatus(
        title=controls.title(),
        time=controls.time(),
        length=controls.length(),
        progress=controls.progress(),
        playing=controls.playing(),
        stopped=controls.stopped(),
        volume=controls.get_volume(),
    )
    return status.to_dict()


@mcp.tool()
def get_volume() -> dict[str, int]:
    """Get the current volume level."""
    return {"volume": _get_controls().get_volume()}


@mcp.tool()
def set_volume(volume: int) -> dict[str, Any]:
    """Set the volume level.

    Args:
        volume: New volume level as understood by the player.
    """
    try:
        _get_controls().set_volume(volume)
    except InvalidArgumentError as e:
        return {"error": str(e)}
    return {"volume": volume}


# ─── RESOURCES ───────────────────────────────────────────────────────

@mcp.resource("vlc://playback/status")
def resource_playback_status() -> str:
    """Current playback status."""
    return json.dumps(get_status(), indent=2)


# ─── ENTRY POINT ─────────────────────────────────────────────────────

def serve(connection: Connection, transport: str = DEFAULT_TRANSPORT) -> None:
    """Attach ``connection`` and run the MCP server until it exits."""
    logging.basicConfig(level=logging.INFO)
    attach(connection)
    try:
        mcp.run(transport=transport)
    finally:
        detach()
