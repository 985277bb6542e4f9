"""Client for the VLC remote-control text interface, with an MCP tool server."""

from .controls import MediaControls
from .errors import InvalidArgumentError
from .transport.connection import Connection

__all__ = ["Connection", "InvalidArgumentError", "MediaControls"]

__version__ = "0.1.0"
