"""Exception types raised by the PulseAudio control layer."""


class PulseError(Exception):
    """Base class for every error raised by pulsectrl."""


class TransportError(PulseError, ConnectionError):
    """The connection to the server is unusable.

    Raised for closed connections, authentication failures and malformed
    addresses. Never retried.
    """


class ResolutionError(PulseError):
    """A base volume could not be determined for a percent conversion."""


class ProtocolError(PulseError):
    """The remote object rejected a property read/write or a method call.

    Attributes:
        name: D-Bus error name (e.g. ``org.freedesktop.DBus.Error.UnknownProperty``).
        message: Error message from the server.
    """

    def __init__(self, message: str, name: str = "") -> None:
        super().__init__(f"{name}: {message}" if name else message)
        self.name = name
        self.message = message


class UnknownStateError(ProtocolError):
    """A device reported a state index outside the known enumeration."""


class CapabilityConflictError(PulseError, TypeError):
    """An entity capability shadows a remote property of the same name."""
