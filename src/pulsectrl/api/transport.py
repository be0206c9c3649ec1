"""dbus-python adapter for the PulseAudio D-Bus protocol.

PulseAudio exposes its object model on a private peer-to-peer D-Bus server
(``module-dbus-protocol``). The address of that server is published on the
session bus by the ``org.PulseAudio1`` lookup service.

This module is the only place that imports ``dbus``. Entities in
``pulsectrl.core`` only need an object with a ``get_proxy(path, interface)``
method returning something with ``get``/``set``/``call``.

Example:
    address = resolve_address()
    with Connection.open(address) as conn:
        core = conn.get_proxy(CORE_PATH, CORE_INTERFACE)
        print(core.get("Sinks"))
"""

from __future__ import annotations

import logging
import os
from typing import Any

import dbus
import dbus.connection
import dbus.exceptions

from pulsectrl.api.errors import ProtocolError, TransportError

logger = logging.getLogger(__name__)

# Session bus lookup service publishing the peer-to-peer server address
LOOKUP_BUS_NAME = "org.PulseAudio1"
LOOKUP_PATH = "/org/pulseaudio/server_lookup1"
LOOKUP_INTERFACE = "org.PulseAudio.ServerLookup1"

# Environment override understood by PulseAudio's own tooling
ADDRESS_ENV_VAR = "PULSE_DBUS_SERVER"

PROPERTIES_INTERFACE = "org.freedesktop.DBus.Properties"

# D-Bus error names that mean the connection itself is unusable
_TRANSPORT_ERROR_NAMES = frozenset(
    {
        "org.freedesktop.DBus.Error.AuthFailed",
        "org.freedesktop.DBus.Error.BadAddress",
        "org.freedesktop.DBus.Error.Disconnected",
        "org.freedesktop.DBus.Error.NoNetwork",
        "org.freedesktop.DBus.Error.NoReply",
        "org.freedesktop.DBus.Error.NoServer",
        "org.freedesktop.DBus.Error.ServiceUnknown",
        "org.freedesktop.DBus.Error.Timeout",
        "org.freedesktop.DBus.Error.TimedOut",
    }
)

_SCALAR_WRAPPERS: dict[str, Any] = {
    "b": dbus.Boolean,
    "d": dbus.Double,
    "i": dbus.Int32,
    "o": dbus.ObjectPath,
    "s": dbus.String,
    "u": dbus.UInt32,
}


def translate_error(error: dbus.exceptions.DBusException) -> ProtocolError | TransportError:
    """Map a dbus-python exception onto the pulsectrl error taxonomy."""
    name = error.get_dbus_name() or ""
    message = error.get_dbus_message() or str(error)
    if name in _TRANSPORT_ERROR_NAMES:
        return TransportError(f"{name}: {message}" if name else message)
    return ProtocolError(message, name=name)


def wrap(value: Any, signature: str) -> Any:
    """Wrap a plain Python value in the dbus type for ``signature``.

    Supports the scalar types used by the PulseAudio object model and
    arrays of them (``au``, ``ao``, ...).

    Raises:
        ValueError: If the signature is not supported.
    """
    if signature.startswith("a") and len(signature) == 2:  # noqa: PLR2004
        inner = signature[1:]
        return dbus.Array([wrap(v, inner) for v in value], signature=inner)
    wrapper = _SCALAR_WRAPPERS.get(signature)
    if wrapper is None:
        raise ValueError(f"Unsupported D-Bus signature: {signature!r}")
    return wrapper(value)


def unwrap(value: Any) -> Any:
    """Convert dbus-python values to plain Python types."""
    # Boolean subclasses int, so it must be checked first
    if isinstance(value, dbus.Boolean):
        return bool(value)
    if isinstance(value, str):
        return str(value)
    if isinstance(value, bytes):
        return bytes(value)
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return float(value)
    if isinstance(value, dict):
        return {unwrap(k): unwrap(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return tuple(unwrap(v) for v in value)
    if isinstance(value, list):
        return [unwrap(v) for v in value]
    return value


def get_address(bus: Any = None) -> str:
    """Ask the session bus lookup service for the PulseAudio D-Bus address.

    Args:
        bus: Bus to query. Defaults to the session bus.

    Returns:
        A D-Bus address such as ``unix:path=/run/user/1000/pulse/dbus-socket``.

    Raises:
        TransportError: If the lookup service is not running.
    """
    try:
        if bus is None:
            bus = dbus.SessionBus()
        lookup = bus.get_object(LOOKUP_BUS_NAME, LOOKUP_PATH, introspect=False)
        address = lookup.Get(LOOKUP_INTERFACE, "Address", dbus_interface=PROPERTIES_INTERFACE)
    except dbus.exceptions.DBusException as e:
        raise translate_error(e) from e
    logger.debug("Lookup service reports address %s", address)
    return str(address)


def resolve_address(explicit: str | None = None, configured: str | None = None) -> str:
    """Pick the server address to connect to.

    Order: ``explicit``, then ``$PULSE_DBUS_SERVER``, then ``configured``,
    then the session bus lookup service.
    """
    for candidate in (explicit, os.environ.get(ADDRESS_ENV_VAR), configured):
        if candidate:
            return candidate
    return get_address()


class RemoteObject:
    """Property/method proxy for one object path and interface.

    Every read goes to the server; nothing is cached here.
    """

    def __init__(self, proxy: Any, path: str, interface: str) -> None:
        """Initialize the remote object.

        Args:
            proxy: dbus-python proxy object for ``path``.
            path: Object path.
            interface: Interface used for properties and method calls.
        """
        self._proxy = proxy
        self._path = path
        self._interface = interface

    @property
    def path(self) -> str:
        """Return the object path."""
        return self._path

    @property
    def interface(self) -> str:
        """Return the default interface."""
        return self._interface

    def get(self, prop: str, interface: str | None = None) -> Any:
        """Read a property and return it as plain Python data.

        Raises:
            ProtocolError: If the server rejects the read.
            TransportError: If the connection is gone.
        """
        try:
            value = self._proxy.Get(
                interface or self._interface, prop, dbus_interface=PROPERTIES_INTERFACE
            )
        except dbus.exceptions.DBusException as e:
            raise translate_error(e) from e
        return unwrap(value)

    def set(self, prop: str, value: Any, signature: str, interface: str | None = None) -> None:
        """Write a property, wrapping ``value`` according to ``signature``.

        Raises:
            ProtocolError: If the server rejects the write.
            TransportError: If the connection is gone.
        """
        iface = interface or self._interface
        logger.debug("Set %s %s.%s = %r (%s)", self._path, iface, prop, value, signature)
        try:
            self._proxy.Set(
                iface, prop, wrap(value, signature), dbus_interface=PROPERTIES_INTERFACE
            )
        except dbus.exceptions.DBusException as e:
            raise translate_error(e) from e

    def call(self, method: str, *args: Any, signature: str = "") -> Any:
        """Invoke a method on the default interface.

        Args:
            method: Method name.
            *args: Arguments, wrapped pairwise with the characters of ``signature``.
            signature: One single-character type code per argument.
        """
        if len(signature) != len(args):
            raise ValueError(f"Signature {signature!r} does not match {len(args)} argument(s)")
        wrapped = [wrap(a, s) for a, s in zip(args, signature, strict=True)]
        logger.debug("Call %s %s.%s%r", self._path, self._interface, method, tuple(args))
        try:
            result = self._proxy.get_dbus_method(method, self._interface)(*wrapped)
        except dbus.exceptions.DBusException as e:
            raise translate_error(e) from e
        return unwrap(result)


class Connection:
    """A peer-to-peer connection to the PulseAudio D-Bus server.

    Example:
        with Connection.open(get_address()) as conn:
            device = Device(conn, "/org/pulseaudio/core1/sink0")
    """

    def __init__(self, bus: Any, address: str = "") -> None:
        """Initialize from an already opened dbus-python connection.

        Args:
            bus: dbus-python connection object.
            address: Address the connection was opened with (informational).
        """
        self._bus = bus
        self._address = address

    @classmethod
    def open(cls, address: str, check: bool = True) -> Connection:
        """Open a connection to ``address``.

        Args:
            address: D-Bus address of the PulseAudio server.
            check: Raise if the connection is not alive after opening.

        Raises:
            TransportError: On malformed address, refused connection,
                authentication failure, or (with ``check``) a closed
                connection.
        """
        try:
            bus = dbus.connection.Connection(address)
        except dbus.exceptions.DBusException as e:
            raise TransportError(f"Failed to connect to {address}: {e}") from e

        conn = cls(bus, address)
        if check and not conn.is_alive:
            raise TransportError(f"Connection to '{address}' is closed")
        logger.info("Connected to PulseAudio at %s", address)
        return conn

    @property
    def address(self) -> str:
        """Return the server address."""
        return self._address

    @property
    def is_alive(self) -> bool:
        """Return True if the underlying connection is still open."""
        return bool(self._bus.get_is_connected())

    def get_proxy(self, path: str, interface: str, name: str | None = None) -> RemoteObject:
        """Build a proxy for ``path`` speaking ``interface``.

        Args:
            path: Object path.
            interface: Interface name.
            name: Well-known bus name, None on a peer-to-peer connection.
        """
        try:
            proxy = self._bus.get_object(name, path, introspect=False)
        except dbus.exceptions.DBusException as e:
            raise translate_error(e) from e
        return RemoteObject(proxy, path, interface)

    def close(self) -> None:
        """Close the connection."""
        self._bus.close()
        logger.info("Closed connection to %s", self._address or "PulseAudio")

    def __enter__(self) -> Connection:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
