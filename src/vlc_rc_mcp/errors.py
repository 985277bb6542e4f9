"""Exceptions raised to callers of the remote-control client."""


class InvalidArgumentError(ValueError):
    """A caller-supplied value has no valid wire form.

    Raised before any command is written, so the player never receives a
    malformed line.
    """
