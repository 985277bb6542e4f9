"""Command keywords and command-line builders.

Every request to the player is a single text line: a keyword, optionally
followed by one argument token. The line terminator is added by the
connection, not here.
"""

from __future__ import annotations

import os
from enum import Enum
from urllib.parse import ParseResult, SplitResult

from ..errors import InvalidArgumentError


class Command(str, Enum):
    """Command keywords understood by the remote-control interface."""

    PLAY = "play"
    ADD = "add"
    ENQUEUE = "enqueue"
    PLAYLIST = "playlist"
    NEXT = "next"
    PREV = "prev"
    PAUSE = "pause"
    STOP = "stop"
    LOOP = "loop"
    RANDOM = "random"
    CLEAR = "clear"
    SHUTDOWN = "shutdown"
    GET_TITLE = "get_title"
    GET_TIME = "get_time"
    GET_LENGTH = "get_length"
    IS_PLAYING = "is_playing"
    VOLUME = "volume"


def media_token(media) -> str:
    """Convert a media reference into the token embedded in a command.

    Accepts a plain string (path or bare identifier), a parsed URI, a
    path-like object, or an open file object. The token is used verbatim:
    nothing is quoted, so references containing spaces will not survive
    the trip to the player.

    Raises:
        InvalidArgumentError: If ``media`` is none of the accepted kinds,
            or its token is empty or spans more than one line.
    """
    token = _raw_token(media)
    if not token:
        raise InvalidArgumentError(f"Can not play an empty media reference: {media!r}")
    if "\n" in token or "\r" in token:
        raise InvalidArgumentError(f"Media reference must be a single line, got {token!r}")
    return token


def _raw_token(media) -> str:
    if isinstance(media, str):
        return media
    if isinstance(media, (ParseResult, SplitResult)):
        return media.geturl()
    if isinstance(media, os.PathLike):
        path = os.fspath(media)
        if isinstance(path, str):
            return path
    name = getattr(media, "name", None)
    if isinstance(name, str) and hasattr(media, "read"):
        return name
    raise InvalidArgumentError(f"Can not play {media!r}")


def build_command(command: Command, argument: str | int | None = None) -> str:
    """Build a command line from a keyword and an optional argument."""
    if argument is None:
        return command.value
    return f"{command.value} {argument}"


def build_play(media=None) -> str:
    """Build a play command.

    Without media this resumes the current item; with media the item is
    added to the playlist and started.
    """
    if media is None:
        return build_command(Command.PLAY)
    return build_command(Command.ADD, media_token(media))


def build_enqueue(media) -> str:
    """Build a command that appends media to the playlist without playing it."""
    return build_command(Command.ENQUEUE, media_token(media))


def build_set_volume(level: int) -> str:
    """Build a Volume write command.

    Args:
        level: Volume level, already coerced to an integer.
    """
    return build_command(Command.VOLUME, level)


def build_get_volume() -> str:
    """Build a Volume read command."""
    return build_command(Command.VOLUME)
