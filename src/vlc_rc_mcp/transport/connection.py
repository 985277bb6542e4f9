"""Connection contract for talking to the player.

The client never opens sockets itself. Whatever owns the socket (TCP or
Unix domain) hands an object satisfying :class:`Connection` to
:class:`~vlc_rc_mcp.controls.MediaControls`.
"""

from __future__ import annotations

from typing import Protocol


class Connection(Protocol):
    """A blocking, line-oriented link to the player.

    Usage::

        controls = MediaControls(connection)
        controls.play("/music/track.mp3")
    """

    def write(self, command: str, expect_reply: bool = True) -> str:
        """Send one command line.

        Args:
            command: Command text without the line terminator.
            expect_reply: Whether to block for one reply line.

        Returns:
            The reply line with its terminator stripped when
            ``expect_reply`` is set; otherwise an implementation-defined
            acknowledgement.

        Raises:
            OSError: On any transport failure. Callers see it unchanged.
        """
        ...
