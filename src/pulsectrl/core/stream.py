"""Playback and record streams."""

from __future__ import annotations

import logging
from typing import ClassVar

from pulsectrl.api.errors import ResolutionError
from pulsectrl.core.device import DEVICE_INTERFACE
from pulsectrl.core.entity import AudioEntity, ProxyFactory

logger = logging.getLogger(__name__)

STREAM_INTERFACE = "org.PulseAudio.Core1.Stream"


def resolve_device_base_volume(connection: ProxyFactory, device_path: str | None) -> int:
    """Return the base volume of the device at ``device_path``.

    Streams have no base volume of their own; percentages are relative to
    the device they are connected to.

    Raises:
        ResolutionError: If there is no device path or the device reports
            a non-positive base volume.
    """
    if not device_path:
        raise ResolutionError("Stream has no device to take the base volume from")
    base = connection.get_proxy(device_path, DEVICE_INTERFACE).get("BaseVolume")
    if not base or base <= 0:
        raise ResolutionError(f"Device {device_path} has no usable base volume ({base!r})")
    return int(base)


class Stream(AudioEntity):
    """An application's playback or record stream."""

    INTERFACE: ClassVar[str] = STREAM_INTERFACE
    REMOTE_PROPERTIES: ClassVar[frozenset[str]] = AudioEntity.REMOTE_PROPERTIES | {"Device"}

    def _resolve_base_volume(self) -> int:
        # Looked up on every call: the stream may have moved to another device
        return resolve_device_base_volume(self._connection, self.get_device())

    def get_device(self) -> str:
        """Return the object path of the device the stream is connected to."""
        return str(self._get("Device"))

    def move(self, device_path: str) -> None:
        """Move the stream to another device."""
        logger.debug("Moving stream %s to %s", self._path, device_path)
        self._proxy.call("Move", device_path, signature="o")

    def kill(self) -> None:
        """Disconnect the stream from the server."""
        logger.debug("Killing stream %s", self._path)
        self._proxy.call("Kill")
