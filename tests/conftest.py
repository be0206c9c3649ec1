"""Test fixtures for pulsectrl tests."""

import copy
from typing import Any

import pytest

from pulsectrl.api.errors import ProtocolError

CORE = "/org/pulseaudio/core1"
SINK0 = "/org/pulseaudio/core1/sink0"
SINK1 = "/org/pulseaudio/core1/sink1"
SOURCE0 = "/org/pulseaudio/core1/source0"
CARD0 = "/org/pulseaudio/core1/card0"
PORT_SPEAKER = "/org/pulseaudio/core1/sink0/analog_output_speaker"
PORT_HEADPHONES = "/org/pulseaudio/core1/sink0/analog_output_headphones"
PLAYBACK0 = "/org/pulseaudio/core1/playback_stream0"
RECORD0 = "/org/pulseaudio/core1/record_stream0"


class FakeRemote:
    """In-memory stand-in for a RemoteObject."""

    def __init__(self, bus: "FakeBus", path: str, interface: str) -> None:
        self.bus = bus
        self.path = path
        self.interface = interface

    def _props(self) -> dict[str, Any]:
        try:
            return self.bus.objects[self.path]
        except KeyError:
            raise ProtocolError(
                f"No such object {self.path}", name="org.freedesktop.DBus.Error.UnknownObject"
            ) from None

    def get(self, prop: str, interface: str | None = None) -> Any:
        self.bus.reads.append((self.path, interface or self.interface, prop))
        props = self._props()
        if prop not in props:
            raise ProtocolError(
                f"No such property {prop}", name="org.freedesktop.DBus.Error.UnknownProperty"
            )
        return copy.deepcopy(props[prop])

    def set(self, prop: str, value: Any, signature: str, interface: str | None = None) -> None:
        self.bus.writes.append((self.path, interface or self.interface, prop, value, signature))
        if self.bus.fail_writes:
            raise ProtocolError("Access denied", name="org.freedesktop.DBus.Error.AccessDenied")
        props = self._props()
        # The server applies a single volume value to every channel
        if prop == "Volume" and len(value) == 1:
            value = list(value) * len(props.get("Volume", value))
        props[prop] = copy.deepcopy(value)

    def call(self, method: str, *args: Any, signature: str = "") -> Any:
        self.bus.calls.append((self.path, method, args, signature))
        return None


class FakeBus:
    """In-memory PulseAudio object model implementing ``get_proxy``."""

    def __init__(self, objects: dict[str, dict[str, Any]]) -> None:
        self.objects = objects
        self.reads: list[tuple[str, str, str]] = []
        self.writes: list[tuple[str, str, str, Any, str]] = []
        self.calls: list[tuple[str, str, tuple[Any, ...], str]] = []
        self.proxies: list[tuple[str, str]] = []
        self.fail_writes = False

    def get_proxy(self, path: str, interface: str, name: str | None = None) -> FakeRemote:
        self.proxies.append((path, interface))
        return FakeRemote(self, path, interface)


def _default_objects() -> dict[str, dict[str, Any]]:
    return {
        CORE: {
            "Name": "pulseaudio",
            "Version": "16.1",
            "Sinks": [SINK0, SINK1],
            "Sources": [SOURCE0],
            "Cards": [CARD0],
            "PlaybackStreams": [PLAYBACK0],
            "RecordStreams": [RECORD0],
            "FallbackSink": SINK0,
            "FallbackSource": SOURCE0,
        },
        SINK0: {
            "Name": "alsa_output.pci-0000_00_1f.3.analog-stereo",
            "BaseVolume": 65536,
            "Volume": [65536, 65536],
            "Mute": False,
            "State": 1,
            "ActivePort": PORT_SPEAKER,
            "Ports": [PORT_SPEAKER, PORT_HEADPHONES],
            "Channels": [1, 2],
            "HasHardwareVolume": True,
        },
        SINK1: {
            "Name": "bluez_sink.00_11_22_33_44_55.a2dp_sink",
            "BaseVolume": 100000,
            "Volume": [50000],
            "Mute": True,
            "State": 2,
            "ActivePort": "",
            "Ports": [],
            "Channels": [0],
            "HasHardwareVolume": False,
        },
        SOURCE0: {
            "Name": "alsa_input.pci-0000_00_1f.3.analog-stereo",
            "BaseVolume": 65536,
            "Volume": [32768, 32768],
            "Mute": False,
            "State": 0,
        },
        PORT_SPEAKER: {
            "Name": "analog-output-speaker",
            "Description": "Speakers",
            "Priority": 10000,
        },
        PORT_HEADPHONES: {
            "Name": "analog-output-headphones",
            "Description": "Headphones",
            "Priority": 9900,
        },
        PLAYBACK0: {
            "Volume": [32768, 32768],
            "Mute": False,
            "Device": SINK0,
        },
        RECORD0: {
            "Volume": [65536],
            "Mute": True,
            "Device": SOURCE0,
        },
    }


@pytest.fixture
def bus() -> FakeBus:
    """Return a fake server with two sinks, a source, ports and streams."""
    return FakeBus(_default_objects())
