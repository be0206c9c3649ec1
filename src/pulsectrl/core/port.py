"""Device ports."""

from typing import ClassVar

from pulsectrl.core.entity import Entity

PORT_INTERFACE = "org.PulseAudio.Core1.DevicePort"


class Port(Entity):
    """A jack or profile of a device, as referenced by ``ActivePort``."""

    INTERFACE: ClassVar[str] = PORT_INTERFACE
    REMOTE_PROPERTIES: ClassVar[frozenset[str]] = frozenset({"Name", "Description", "Priority"})

    def get_name(self) -> str:
        """Return the port name (e.g. ``analog-output-headphones``)."""
        return str(self._get("Name"))

    def get_description(self) -> str:
        """Return the human-readable description."""
        return str(self._get("Description"))

    def get_priority(self) -> int:
        """Return the port priority; higher is preferred."""
        return int(self._get("Priority"))
