"""Core control layer.

Classes:
    Core: Registry of devices, cards and streams.
    Device: A sink or source with volume, mute, state and ports.
    Stream: A playback or record stream with volume and mute.
    Port: A device port.

The server watcher (``pulsectrl.core.discovery``) and the QSettings
preferences (``pulsectrl.core.config``) are imported from their modules.
"""

from pulsectrl.core.device import Device
from pulsectrl.core.entity import AudioEntity, Entity
from pulsectrl.core.port import Port
from pulsectrl.core.registry import Core, get_core, get_device, get_port, get_stream
from pulsectrl.core.stream import Stream, resolve_device_base_volume

__all__ = [
    "AudioEntity",
    "Core",
    "Device",
    "Entity",
    "Port",
    "Stream",
    "get_core",
    "get_device",
    "get_port",
    "get_stream",
    "resolve_device_base_volume",
]
