"""Custom exception hierarchy for simworld."""

from __future__ import annotations


class SimWorldError(Exception):
    """Base exception for all simworld errors."""


class SimWorldConfigError(SimWorldError):
    """Invalid or missing configuration (e.g. vehicle dimensions)."""


class SimWorldMessageError(SimWorldError):
    """An inbound payload could not be parsed into a message model."""

    def __init__(self, message: str, *, kind: str = "") -> None:
        self.kind = kind
        super().__init__(message)


class SimWorldUnsupportedMessageError(SimWorldError):
    """No update handler is registered for the given message type.

    Raised by :meth:`simworld.service.SimulationWorldService.update` when the
    caller hands over an object that is not one of the five inbound message
    models.  Routing is the caller's responsibility, so this is never
    swallowed internally.
    """
