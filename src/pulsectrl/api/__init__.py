"""Transport adapter and error types for the PulseAudio D-Bus protocol."""

from pulsectrl.api.errors import (
    CapabilityConflictError,
    ProtocolError,
    PulseError,
    ResolutionError,
    TransportError,
    UnknownStateError,
)
from pulsectrl.api.transport import Connection, RemoteObject, get_address, resolve_address

__all__ = [
    "CapabilityConflictError",
    "Connection",
    "ProtocolError",
    "PulseError",
    "RemoteObject",
    "ResolutionError",
    "TransportError",
    "UnknownStateError",
    "get_address",
    "resolve_address",
]
