"""Reply decoding for player responses.

Replies are single lines of free-form text. Numeric decoders never raise
on bad input; they return ``None`` and leave the choice of fallback to
the caller.
"""

from __future__ import annotations

import numbers
import operator
import re
from decimal import Decimal

from ..errors import InvalidArgumentError

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

PLAYING_FLAG = "1"
STOPPED_FLAG = "0"


def parse_int(reply: str | None) -> int | None:
    """Parse a reply as a whole decimal number.

    Surrounding whitespace and line terminators are ignored. Anything else
    that is not a clean integer (empty text, floats, error messages)
    yields ``None``.
    """
    if reply is None:
        return None
    text = reply.strip()
    if not _INTEGER_RE.fullmatch(text):
        return None
    return int(text)


def parse_flag(reply: str | None, expected: str) -> bool:
    """Return True only when the reply is exactly ``expected``.

    ``is_playing`` is answered with ``"1"`` or ``"0"``; any other reply is
    neither playing nor stopped.
    """
    return reply == expected


def coerce_level(level) -> int:
    """Convert a caller-supplied volume level to the integer sent on the wire.

    Exact integers (anything supporting ``__index__``) pass through, other
    finite real numbers are truncated toward zero and strings must hold a
    clean integer.

    Raises:
        InvalidArgumentError: If the level has no integer form.
    """
    if isinstance(level, bool):
        raise InvalidArgumentError(f"Volume level must be an integer, got {level!r}")
    try:
        return operator.index(level)
    except TypeError:
        pass
    if isinstance(level, (numbers.Real, Decimal)):
        try:
            return int(level)
        except (ValueError, OverflowError):
            raise InvalidArgumentError(f"Volume level must be finite, got {level!r}") from None
    if isinstance(level, str):
        value = parse_int(level)
        if value is not None:
            return value
    raise InvalidArgumentError(f"Volume level must be an integer, got {level!r}")
