"""Tests for the MCP tool layer."""

from __future__ import annotations

import json
import sys
from unittest.mock import MagicMock, patch

import pytest


def _get_server_module():
    """Import server module with FastMCP mocked to avoid init issues."""
    mock_fastmcp_cls = MagicMock()
    mock_fastmcp_instance = MagicMock()
    # Make the @mcp.tool() decorator a no-op that returns the function unchanged
    mock_fastmcp_instance.tool.return_value = lambda fn: fn
    mock_fastmcp_instance.resource.return_value = lambda fn: fn
    mock_fastmcp_cls.return_value = mock_fastmcp_instance

    with patch.dict(sys.modules, {}):
        with patch("mcp.server.fastmcp.FastMCP", mock_fastmcp_cls):
            sys.modules.pop("vlc_rc_mcp.server", None)
            import vlc_rc_mcp.server as server_mod

    return server_mod


def _make_connection(replies: dict[str, str] | None = None) -> MagicMock:
    replies = replies or {}
    conn = MagicMock()
    conn.write.side_effect = lambda line, expect_reply=True: (
        replies.get(line, "") if expect_reply else None
    )
    return conn


@pytest.fixture
def server():
    server_mod = _get_server_module()
    yield server_mod
    server_mod.detach()


def test_tools_require_connection(server):
    """Without an attached connection, tools refuse to run."""
    with pytest.raises(RuntimeError):
        server.pause()


def test_play_tool(server):
    conn = _make_connection()
    server.attach(conn)

    assert server.play("/music/a.mp3") == {"playing": "/music/a.mp3"}
    assert server.play() == {"playing": "current item"}
    assert [c.args for c in conn.write.call_args_list] == [
        ("add /music/a.mp3", False),
        ("play", False),
    ]


def test_playlist_tools(server):
    conn = _make_connection()
    server.attach(conn)

    server.add_to_playlist("/music/b.mp3")
    server.toggle_loop()
    server.toggle_random()
    server.clear_playlist()
    server.next_item()
    server.previous_item()
    assert [c.args[0] for c in conn.write.call_args_list] == [
        "enqueue /music/b.mp3",
        "loop",
        "random",
        "clear",
        "next",
        "prev",
    ]


def test_get_playlist_ignores_non_text_ack(server):
    server.attach(_make_connection())
    assert server.get_playlist() == {"playlist": None}


def test_get_status(server):
    server.attach(_make_connection({
        "get_title": "Track",
        "get_time": "42",
        "get_length": "200",
        "is_playing": "1",
        "volume": "64",
    }))
    status = server.get_status()
    assert status["progress"] == 21
    assert status["playing"] is True
    assert status["stopped"] is False
    assert status["volume"] == 64


def test_status_resource_is_json(server):
    server.attach(_make_connection({"get_title": "Track"}))
    data = json.loads(server.resource_playback_status())
    assert data["title"] == "Track"
    assert data["progress"] == 0


def test_set_volume_tool(server):
    conn = _make_connection()
    server.attach(conn)
    assert server.set_volume(80) == {"volume": 80}
    conn.write.assert_called_once_with("volume 80", False)


def test_set_volume_tool_reports_invalid_level(server):
    """Invalid levels come back as an error and nothing is sent."""
    conn = _make_connection()
    server.attach(conn)
    result = server.set_volume("loud")
    assert "error" in result
    conn.write.assert_not_called()


def test_get_volume_tool(server):
    server.attach(_make_connection({"volume": "??"}))
    assert server.get_volume() == {"volume": 0}


def test_serve_attaches_and_detaches(server):
    conn = _make_connection()
    with patch.object(server, "attach", wraps=server.attach) as attach:
        server.serve(conn, transport="stdio")
    attach.assert_called_once_with(conn)
    server.mcp.run.assert_called_once_with(transport="stdio")
    with pytest.raises(RuntimeError):
        server.stop()


@pytest.mark.parametrize("media", ["", "a.mp3\nshutdown"])
def test_media_tools_report_invalid_media(server, media):
    """Empty or multi-line media is an error, and nothing is sent."""
    conn = _make_connection()
    server.attach(conn)
    assert "error" in server.play(media)
    assert "error" in server.add_to_playlist(media)
    conn.write.assert_not_called()


def test_get_status_keeps_both_flags_false(server):
    server.attach(_make_connection({"is_playing": "x"}))
    status = server.get_status()
    assert status["playing"] is False
    assert status["stopped"] is False
