"""The server core object and entity factories."""

from __future__ import annotations

import logging
from typing import ClassVar

from pulsectrl.core.device import Device
from pulsectrl.core.entity import Entity, ProxyFactory
from pulsectrl.core.port import Port
from pulsectrl.core.stream import Stream
from pulsectrl.models.volume import VolumeControl

logger = logging.getLogger(__name__)

CORE_PATH = "/org/pulseaudio/core1"
CORE_INTERFACE = "org.PulseAudio.Core1"


class Core(Entity):
    """Registry of the server's devices, cards and streams.

    The lists are read from the server on every call but may already be
    out of date when they arrive; callers must re-fetch to see changes.
    """

    INTERFACE: ClassVar[str] = CORE_INTERFACE
    REMOTE_PROPERTIES: ClassVar[frozenset[str]] = frozenset(
        {
            "Cards",
            "FallbackSink",
            "FallbackSource",
            "Name",
            "PlaybackStreams",
            "RecordStreams",
            "Sinks",
            "Sources",
            "Version",
        }
    )

    def __init__(self, connection: ProxyFactory, path: str = CORE_PATH) -> None:
        """Initialize the registry.

        Args:
            connection: Connection to the server.
            path: Core object path (always ``/org/pulseaudio/core1`` in practice).
        """
        super().__init__(connection, path)

    def _paths(self, prop: str) -> list[str]:
        return [str(p) for p in self._get(prop)]

    def get_sinks(self) -> list[str]:
        """Return the object paths of all sinks."""
        return self._paths("Sinks")

    def get_sources(self) -> list[str]:
        """Return the object paths of all sources."""
        return self._paths("Sources")

    def get_cards(self) -> list[str]:
        """Return the object paths of all cards."""
        return self._paths("Cards")

    def get_playback_streams(self) -> list[str]:
        """Return the object paths of all playback streams."""
        return self._paths("PlaybackStreams")

    def get_record_streams(self) -> list[str]:
        """Return the object paths of all record streams."""
        return self._paths("RecordStreams")

    def get_fallback_sink(self) -> str | None:
        """Return the fallback sink path, or None if none is set."""
        return self._get("FallbackSink") or None

    def set_fallback_sink(self, path: str) -> None:
        """Make the sink at ``path`` the fallback sink."""
        self._set("FallbackSink", path, "o")

    def get_fallback_source(self) -> str | None:
        """Return the fallback source path, or None if none is set."""
        return self._get("FallbackSource") or None

    def set_fallback_source(self, path: str) -> None:
        """Make the source at ``path`` the fallback source."""
        self._set("FallbackSource", path, "o")

    def get_name(self) -> str:
        """Return the server name."""
        return str(self._get("Name"))

    def get_version(self) -> str:
        """Return the server version string."""
        return str(self._get("Version"))


def get_core(connection: ProxyFactory) -> Core:
    """Return the core registry of the server behind ``connection``."""
    return Core(connection)


def get_device(
    connection: ProxyFactory, path: str, control: VolumeControl | None = None
) -> Device:
    """Return the sink or source at ``path``."""
    return Device(connection, path, control)


def get_stream(
    connection: ProxyFactory, path: str, control: VolumeControl | None = None
) -> Stream:
    """Return the playback or record stream at ``path``."""
    return Stream(connection, path, control)


def get_port(connection: ProxyFactory, path: str) -> Port:
    """Return the device port at ``path``."""
    return Port(connection, path)
