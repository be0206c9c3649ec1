"""Sinks and sources."""

from __future__ import annotations

import logging
from typing import ClassVar

from pulsectrl.core.entity import AudioEntity
from pulsectrl.models.device_state import DeviceState

logger = logging.getLogger(__name__)

DEVICE_INTERFACE = "org.PulseAudio.Core1.Device"


class Device(AudioEntity):
    """A PulseAudio sink (output) or source (input).

    Example:
        sink = Device(conn, core.get_sinks()[0])
        sink.set_muted(True)
        sink.toggle_muted()
        sink.set_volume_percent([75])
    """

    INTERFACE: ClassVar[str] = DEVICE_INTERFACE
    REMOTE_PROPERTIES: ClassVar[frozenset[str]] = AudioEntity.REMOTE_PROPERTIES | {
        "ActivePort",
        "BaseVolume",
        "Channels",
        "HasHardwareVolume",
        "Name",
        "Ports",
        "State",
    }

    def _resolve_base_volume(self) -> int:
        return self.get_base_volume()

    def get_base_volume(self) -> int:
        """Return the raw volume that corresponds to 100%."""
        return int(self._get("BaseVolume"))

    def get_state(self) -> DeviceState:
        """Return whether the device is running, idle or suspended.

        Raises:
            UnknownStateError: If the server reports an unknown state.
        """
        return DeviceState.from_index(int(self._get("State")))

    def get_active_port(self) -> str | None:
        """Return the active port object path, or None if there is none."""
        return self._get("ActivePort") or None

    def set_active_port(self, path: str) -> None:
        """Select the active port. The path is not checked against ``get_ports``."""
        self._set("ActivePort", path, "o")

    def get_ports(self) -> list[str]:
        """Return the object paths of the device's ports."""
        return list(self._get("Ports"))

    def get_name(self) -> str:
        """Return the device name (e.g. ``alsa_output.pci-0000_00_1f.3.analog-stereo``)."""
        return str(self._get("Name"))

    def get_channels(self) -> list[int]:
        """Return the channel positions, one per channel."""
        return list(self._get("Channels"))

    def has_hardware_volume(self) -> bool:
        """Return True if volume changes are applied in hardware."""
        return bool(self._get("HasHardwareVolume"))
