"""Device state enumeration."""

from enum import Enum

from pulsectrl.api.errors import UnknownStateError


class DeviceState(Enum):
    """State of a sink or source.

    Member order matches the server's zero-based state index.
    """

    RUNNING = "running"  # used by at least one non-corked stream
    IDLE = "idle"  # active, but no non-corked streams connected
    SUSPENDED = "suspended"  # not in use, may be closed

    @classmethod
    def from_index(cls, index: int) -> "DeviceState":
        """Decode the raw ``State`` property.

        Raises:
            UnknownStateError: If ``index`` is not a known state.
        """
        states = list(cls)
        if not 0 <= index < len(states):
            raise UnknownStateError(f"Unknown device state index {index}")
        return states[index]
