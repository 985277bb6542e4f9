"""Playback controls for the VLC remote-control interface.

:class:`MediaControls` turns playback operations into command lines,
writes them through an injected connection, and decodes the replies.
It keeps no state of its own: volume, position and playlist live in the
player and are queried fresh on every call.
"""

from __future__ import annotations

import logging
from typing import Any

from .protocol.commands import (
    Command,
    build_command,
    build_enqueue,
    build_get_volume,
    build_play,
    build_set_volume,
)
from .protocol.parser import (
    PLAYING_FLAG,
    STOPPED_FLAG,
    coerce_level,
    parse_flag,
    parse_int,
)
from .transport.connection import Connection

logger = logging.getLogger(__name__)


class MediaControls:
    """Command translator for a connected player.

    Usage::

        controls = MediaControls(connection)
        controls.play("http://example.org/media.mp3")
        controls.pause()
        controls.play()  # resume
        print(controls.progress())
    """

    def __init__(self, connection: Connection) -> None:
        self._connection = connection

    # ─── internals ────────────────────────────────────────────────────

    def _send(self, line: str) -> Any:
        """Write a command that produces no reply."""
        logger.debug("Sending %r", line)
        return self._connection.write(line, False)

    def _query(self, line: str) -> str:
        """Write a query command and return its reply line."""
        reply = self._connection.write(line, True)
        logger.debug("Sent %r, reply %r", line, reply)
        return reply

    def _query_int(self, line: str) -> int:
        reply = self._query(line)
        value = parse_int(reply)
        if value is None:
            logger.debug("Unparseable reply %r to %r, using 0", reply, line)
            return 0
        return value

    # ─── playback ─────────────────────────────────────────────────────

    def play(self, media=None) -> None:
        """Play media, or resume the current item.

        Args:
            media: Optional path, URI, path-like or open file. When given,
                it is added to the playlist and played; otherwise playback
                of the current (or paused) item resumes.

        Raises:
            InvalidArgumentError: If ``media`` is not a supported reference,
                is empty, or spans more than one line.
        """
        self._send(build_play(media))

    def pause(self) -> None:
        """Pause playback."""
        self._send(build_command(Command.PAUSE))

    def stop(self) -> None:
        """Stop the media currently playing."""
        self._send(build_command(Command.STOP))

    def next(self) -> None:
        """Play the next item in the playlist."""
        self._send(build_command(Command.NEXT))

    def prev(self) -> None:
        """Play the previous item in the playlist."""
        self._send(build_command(Command.PREV))

    def shutdown(self) -> None:
        """Terminate the player process.

        This kills the daemon itself; the client cannot bring it back.
        """
        logger.warning("Shutting down the player")
        self._send(build_command(Command.SHUTDOWN))

    # ─── playlist ─────────────────────────────────────────────────────

    def add_to_playlist(self, media) -> None:
        """Append media to the playlist without starting it."""
        self._send(build_enqueue(media))

    def playlist(self) -> Any:
        """Request the playlist listing.

        The command is sent without waiting for a reply line; whatever the
        connection returns for it is passed through unchanged.
        """
        return self._send(build_command(Command.PLAYLIST))

    def loop(self) -> None:
        """Toggle playlist looping."""
        self._send(build_command(Command.LOOP))

    def random(self) -> None:
        """Toggle random playlist order."""
        self._send(build_command(Command.RANDOM))

    def clear(self) -> None:
        """Remove every item from the playlist."""
        self._send(build_command(Command.CLEAR))

    # ─── queries ──────────────────────────────────────────────────────

    def title(self) -> str:
        """Title of the media being played, as reported by the player."""
        return self._query(build_command(Command.GET_TITLE))

    def time(self) -> int:
        """Elapsed playback time in seconds, or 0 if the reply is not an integer."""
        return self._query_int(build_command(Command.GET_TIME))

    def length(self) -> int:
        """Length of the current media in seconds, or 0 if unknown."""
        return self._query_int(build_command(Command.GET_LENGTH))

    def progress(self) -> int:
        """Playback progress as a percentage of the media length.

        Returns 0 when the length is 0 without asking for the time. The
        result is not clamped: a player reporting more elapsed time than
        length (live streams) yields values above 100.
        """
        length = self.length()
        if length == 0:
            return 0
        return 100 * self.time() // length

    def playing(self) -> bool:
        """True only when the player answers ``is_playing`` with ``1``."""
        return parse_flag(self._query(build_command(Command.IS_PLAYING)), PLAYING_FLAG)

    def stopped(self) -> bool:
        """True only when the player answers ``is_playing`` with ``0``.

        Not the negation of :meth:`playing`: any other reply makes both
        report False.
        """
        return parse_flag(self._query(build_command(Command.IS_PLAYING)), STOPPED_FLAG)

    # ─── volume ───────────────────────────────────────────────────────

    def get_volume(self) -> int:
        """Current volume level, or 0 if the reply is not an integer."""
        return self._query_int(build_get_volume())

    def set_volume(self, level) -> None:
        """Set the volume level.

        Args:
            level: Anything with an integer form (int, Decimal, float,
                numeric str).

        Raises:
            InvalidArgumentError: If ``level`` cannot be converted. Nothing
                is sent in that case.
        """
        self._send(build_set_volume(coerce_level(level)))
