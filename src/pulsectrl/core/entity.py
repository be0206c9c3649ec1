"""Base classes for PulseAudio objects.

``Entity`` is a lightweight view on one remote object: a connection, an
object path and a property proxy. ``AudioEntity`` adds the volume and mute
capabilities shared by devices and streams.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, ClassVar, Protocol

from pulsectrl.api.errors import CapabilityConflictError
from pulsectrl.core.volume import percent_of, raw_of, step_down, step_up
from pulsectrl.models.volume import VolumeControl

logger = logging.getLogger(__name__)

_UINT32_MAX = 0xFFFFFFFF


class PropertyProxy(Protocol):
    """What an entity needs from a remote object proxy."""

    def get(self, prop: str, interface: str | None = None) -> Any: ...

    def set(self, prop: str, value: Any, signature: str, interface: str | None = None) -> None: ...

    def call(self, method: str, *args: Any, signature: str = "") -> Any: ...


class ProxyFactory(Protocol):
    """What an entity needs from a connection."""

    def get_proxy(self, path: str, interface: str, name: str | None = None) -> PropertyProxy: ...


class Entity:
    """An addressable remote object.

    Subclasses declare ``INTERFACE`` and the ``REMOTE_PROPERTIES`` they read
    or write. A public attribute sharing a name with a remote property is
    rejected when the subclass is defined.
    """

    INTERFACE: ClassVar[str] = ""
    REMOTE_PROPERTIES: ClassVar[frozenset[str]] = frozenset()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        clashes = sorted(
            name for name in dir(cls) if not name.startswith("_") and name in cls.REMOTE_PROPERTIES
        )
        if clashes:
            raise CapabilityConflictError(
                f"{cls.__name__} cannot override remote attribute(s): {', '.join(clashes)}"
            )

    def __init__(self, connection: ProxyFactory, path: str) -> None:
        """Initialize the entity.

        Args:
            connection: Connection used to reach the server. Not owned.
            path: Object path of the remote object.
        """
        self._connection = connection
        self._path = path
        self._proxy = connection.get_proxy(path, self.INTERFACE)
        self._cached: dict[str, Any] = {}

    @property
    def connection(self) -> ProxyFactory:
        """Return the connection this entity belongs to."""
        return self._connection

    @property
    def path(self) -> str:
        """Return the object path."""
        return self._path

    @property
    def cached(self) -> dict[str, Any]:
        """Return the last values written through this entity.

        Advisory only: getters always read from the server.
        """
        return dict(self._cached)

    def _get(self, prop: str, interface: str | None = None) -> Any:
        return self._proxy.get(prop, interface)

    def _set(self, prop: str, value: Any, signature: str) -> None:
        self._proxy.set(prop, value, signature)
        self._cached[prop] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return (
            type(self) is type(other)
            and self._path == other._path
            and self._connection is other._connection
        )

    def __hash__(self) -> int:
        return hash((type(self), self._path, id(self._connection)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._path!r})"


class AudioEntity(Entity, ABC):
    """Volume and mute capabilities shared by devices and streams.

    Subclasses supply ``_resolve_base_volume``. Read-modify-write operations
    such as ``volume_up`` are not atomic across callers.
    """

    REMOTE_PROPERTIES: ClassVar[frozenset[str]] = frozenset({"Volume", "Mute"})

    def __init__(
        self,
        connection: ProxyFactory,
        path: str,
        control: VolumeControl | None = None,
    ) -> None:
        """Initialize the entity.

        Args:
            connection: Connection used to reach the server.
            path: Object path of the device or stream.
            control: Default step/max for volume_up and volume_down.
        """
        super().__init__(connection, path)
        self._control = control or VolumeControl()

    @property
    def control(self) -> VolumeControl:
        """Return the default volume step configuration."""
        return self._control

    @property
    def volume_step(self) -> int:
        """Return the default volume step in percent."""
        return self._control.step

    @property
    def volume_max(self) -> int:
        """Return the default volume ceiling in percent."""
        return self._control.max

    @abstractmethod
    def _resolve_base_volume(self) -> int:
        """Return the raw volume that corresponds to 100%."""

    def get_volume(self) -> list[int]:
        """Return the raw volume, one value per channel."""
        return list(self._get("Volume"))

    def get_volume_percent(self) -> list[int]:
        """Return the volume as percentages, one value per channel.

        Raises:
            ResolutionError: If no base volume can be determined.
        """
        return percent_of(self.get_volume(), self._resolve_base_volume())

    def set_volume(self, volume: Sequence[int]) -> None:
        """Set the raw volume of each channel.

        A single value is applied to every channel by the server. Any other
        length must match the current channel count.

        Raises:
            ValueError: If ``volume`` is empty, has a length other than one
                or the channel count, or holds a value that is not an
                unsigned 32-bit integer.
        """
        values = list(volume)
        if not values:
            raise ValueError("Volume vector must not be empty")
        for v in values:
            if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= _UINT32_MAX:
                raise ValueError(f"Invalid channel volume {v!r}")
        if len(values) > 1:
            channels = len(self.get_volume())
            if len(values) != channels:
                raise ValueError(
                    f"{self!r} has {channels} channel(s), got {len(values)} volume values"
                )
        self._set("Volume", values, "au")

    def set_volume_percent(self, percent: Sequence[float]) -> None:
        """Set the volume of each channel as a percentage.

        A single value is applied to every channel.
        """
        self.set_volume(raw_of(percent, self._resolve_base_volume()))

    def volume_up(self, step: int | None = None, max: int | None = None) -> list[int]:  # noqa: A002
        """Step the volume up, never above the ceiling.

        Args:
            step: Step in percent (defaults to ``volume_step``).
            max: Ceiling in percent (defaults to ``volume_max``).

        Returns:
            The percentages that were written.
        """
        control = self._control.resolve(step, max)
        percent = step_up(self.get_volume_percent(), control.step, control.max)
        self.set_volume_percent(percent)
        return percent

    def volume_down(self, step: int | None = None) -> list[int]:
        """Step the volume down, never below zero.

        Args:
            step: Step in percent (defaults to ``volume_step``).

        Returns:
            The percentages that were written.
        """
        control = self._control.resolve(step)
        percent = step_down(self.get_volume_percent(), control.step)
        self.set_volume_percent(percent)
        return percent

    def is_muted(self) -> bool:
        """Return True if muted."""
        return bool(self._get("Mute"))

    def set_muted(self, value: bool) -> None:
        """Mute or unmute."""
        self._set("Mute", bool(value), "b")

    def toggle_muted(self) -> bool:
        """Invert the mute state.

        Returns:
            The mute state read back from the server after the write.
        """
        self.set_muted(not self.is_muted())
        return self.is_muted()
