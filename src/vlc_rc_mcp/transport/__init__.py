"""Transport contract shared with the embedding application."""

from .connection import Connection
