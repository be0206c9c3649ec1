"""Control PulseAudio devices and streams over its D-Bus interface.

The server needs ``load-module module-dbus-protocol`` in ``default.pa``.

Example:
    import pulsectrl

    address = pulsectrl.get_address()
    with pulsectrl.Connection.open(address) as conn:
        core = pulsectrl.get_core(conn)
        sink = pulsectrl.get_device(conn, core.get_sinks()[0])
        sink.set_muted(True)
        sink.toggle_muted()
        assert not sink.is_muted()
        sink.set_volume_percent([75])
"""

from pulsectrl.api.errors import (
    CapabilityConflictError,
    ProtocolError,
    PulseError,
    ResolutionError,
    TransportError,
    UnknownStateError,
)
from pulsectrl.api.transport import Connection, get_address, resolve_address
from pulsectrl.core.device import Device
from pulsectrl.core.port import Port
from pulsectrl.core.registry import Core, get_core, get_device, get_port, get_stream
from pulsectrl.core.stream import Stream
from pulsectrl.models.device_state import DeviceState
from pulsectrl.models.volume import DEFAULT_VOLUME_MAX, DEFAULT_VOLUME_STEP, VolumeControl

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_VOLUME_MAX",
    "DEFAULT_VOLUME_STEP",
    "CapabilityConflictError",
    "Connection",
    "Core",
    "Device",
    "DeviceState",
    "Port",
    "ProtocolError",
    "PulseError",
    "ResolutionError",
    "Stream",
    "TransportError",
    "UnknownStateError",
    "VolumeControl",
    "get_address",
    "get_core",
    "get_device",
    "get_port",
    "get_stream",
    "resolve_address",
]
