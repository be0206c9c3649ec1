"""Tests for the Core registry, Port and the entity factories."""

from conftest import (
    CARD0,
    CORE,
    PLAYBACK0,
    PORT_HEADPHONES,
    PORT_SPEAKER,
    RECORD0,
    SINK0,
    SINK1,
    SOURCE0,
    FakeBus,
)

from pulsectrl.core.device import Device
from pulsectrl.core.port import PORT_INTERFACE, Port
from pulsectrl.core.registry import (
    CORE_INTERFACE,
    CORE_PATH,
    Core,
    get_core,
    get_device,
    get_port,
    get_stream,
)
from pulsectrl.core.stream import Stream
from pulsectrl.models.volume import VolumeControl


class TestCoreListings:
    """Tests for the object path listings."""

    def test_core_path(self, bus: FakeBus) -> None:
        """Test that the core lives at the well-known path."""
        core = Core(bus)
        assert core.path == CORE_PATH == CORE
        assert bus.proxies == [(CORE, CORE_INTERFACE)]

    def test_sinks(self, bus: FakeBus) -> None:
        """Test listing sinks."""
        assert Core(bus).get_sinks() == [SINK0, SINK1]

    def test_sources(self, bus: FakeBus) -> None:
        """Test listing sources."""
        assert Core(bus).get_sources() == [SOURCE0]

    def test_cards(self, bus: FakeBus) -> None:
        """Test listing cards."""
        assert Core(bus).get_cards() == [CARD0]

    def test_streams(self, bus: FakeBus) -> None:
        """Test listing playback and record streams."""
        core = Core(bus)
        assert core.get_playback_streams() == [PLAYBACK0]
        assert core.get_record_streams() == [RECORD0]

    def test_listings_are_refetched(self, bus: FakeBus) -> None:
        """Test that every call reads the server again."""
        core = Core(bus)
        assert core.get_sinks() == [SINK0, SINK1]
        bus.objects[CORE]["Sinks"] = [SINK1]
        assert core.get_sinks() == [SINK1]

    def test_server_info(self, bus: FakeBus) -> None:
        """Test reading the server name and version."""
        core = Core(bus)
        assert core.get_name() == "pulseaudio"
        assert core.get_version() == "16.1"


class TestCoreFallback:
    """Tests for fallback sink/source selection."""

    def test_get_fallbacks(self, bus: FakeBus) -> None:
        """Test reading the fallback devices."""
        core = Core(bus)
        assert core.get_fallback_sink() == SINK0
        assert core.get_fallback_source() == SOURCE0

    def test_no_fallback(self, bus: FakeBus) -> None:
        """Test that an empty fallback reads as None."""
        bus.objects[CORE]["FallbackSink"] = ""
        assert Core(bus).get_fallback_sink() is None

    def test_set_fallback_sink(self, bus: FakeBus) -> None:
        """Test selecting the fallback sink."""
        core = Core(bus)
        core.set_fallback_sink(SINK1)
        assert bus.writes == [(CORE, CORE_INTERFACE, "FallbackSink", SINK1, "o")]
        assert core.get_fallback_sink() == SINK1
        assert core.cached == {"FallbackSink": SINK1}

    def test_set_fallback_source(self, bus: FakeBus) -> None:
        """Test selecting the fallback source."""
        core = Core(bus)
        core.set_fallback_source(SOURCE0)
        assert bus.writes == [(CORE, CORE_INTERFACE, "FallbackSource", SOURCE0, "o")]


class TestPort:
    """Tests for Port."""

    def test_identity(self, bus: FakeBus) -> None:
        """Test that a port is addressable."""
        port = Port(bus, PORT_SPEAKER)
        assert port.path == PORT_SPEAKER
        assert bus.proxies == [(PORT_SPEAKER, PORT_INTERFACE)]

    def test_has_no_volume(self, bus: FakeBus) -> None:
        """Test that ports carry no volume or mute behaviour."""
        port = Port(bus, PORT_SPEAKER)
        assert not hasattr(port, "get_volume")
        assert not hasattr(port, "toggle_muted")

    def test_properties(self, bus: FakeBus) -> None:
        """Test the read-only accessors."""
        port = Port(bus, PORT_HEADPHONES)
        assert port.get_name() == "analog-output-headphones"
        assert port.get_description() == "Headphones"
        assert port.get_priority() == 9900

    def test_resolve_active_port(self, bus: FakeBus) -> None:
        """Test turning an ActivePort reference into a Port."""
        path = Device(bus, SINK0).get_active_port()
        assert path is not None
        assert Port(bus, path).get_description() == "Speakers"


class TestFactories:
    """Tests for the module-level factories."""

    def test_get_core(self, bus: FakeBus) -> None:
        """Test get_core."""
        assert isinstance(get_core(bus), Core)

    def test_get_device(self, bus: FakeBus) -> None:
        """Test get_device with and without configuration."""
        device = get_device(bus, SINK0)
        assert isinstance(device, Device)
        assert device.control == VolumeControl()
        assert get_device(bus, SINK0, VolumeControl(step=1)).volume_step == 1

    def test_get_stream(self, bus: FakeBus) -> None:
        """Test get_stream."""
        stream = get_stream(bus, PLAYBACK0, VolumeControl(max=100))
        assert isinstance(stream, Stream)
        assert stream.volume_max == 100

    def test_get_port(self, bus: FakeBus) -> None:
        """Test get_port."""
        assert get_port(bus, PORT_SPEAKER) == Port(bus, PORT_SPEAKER)

    def test_walk_from_core(self, bus: FakeBus) -> None:
        """Test enumerating sinks and muting the first one."""
        core = get_core(bus)
        sink = get_device(bus, core.get_sinks()[0])
        sink.set_muted(True)
        sink.toggle_muted()
        assert not sink.is_muted()
        sink.set_volume_percent([75])
        assert sink.get_volume_percent() == [75, 75]
