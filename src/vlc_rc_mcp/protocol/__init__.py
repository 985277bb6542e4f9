"""Protocol layer: command keywords, command builders, and reply decoding."""

from .commands import Command, build_command, media_token
from .parser import coerce_level, parse_flag, parse_int
