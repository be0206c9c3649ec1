"""Session bus watch for the PulseAudio lookup service."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import dbus

from pulsectrl.api.errors import PulseError
from pulsectrl.api.transport import LOOKUP_BUS_NAME, get_address

logger = logging.getLogger(__name__)


class ServerWatcher:
    """Reports when the PulseAudio D-Bus server appears or goes away.

    Callbacks are delivered from the D-Bus main loop, so the caller must run
    one (for example ``dbus.mainloop.glib.DBusGMainLoop(set_as_default=True)``
    and a ``GLib.MainLoop``).

    Example:
        def on_appeared(address: str) -> None:
            conn = Connection.open(address)
            core = get_core(conn)

        watcher = ServerWatcher()
        watcher.start(on_appeared=on_appeared)
        # ... later ...
        watcher.stop()
    """

    def __init__(self, bus: Any = None) -> None:
        """Initialize the watcher.

        Args:
            bus: Session bus to watch. Created on ``start`` if omitted.
        """
        self._bus = bus
        self._watch: Any = None
        self._on_appeared: Callable[[str], None] | None = None
        self._on_vanished: Callable[[], None] | None = None
        self._address: str | None = None

    @property
    def address(self) -> str | None:
        """Return the address of the running server, None if not running."""
        return self._address

    @property
    def is_running(self) -> bool:
        """Return True while the watch is active."""
        return self._watch is not None

    def start(
        self,
        on_appeared: Callable[[str], None] | None = None,
        on_vanished: Callable[[], None] | None = None,
    ) -> None:
        """Start watching.

        If the server is already running ``on_appeared`` fires once the main
        loop dispatches the initial owner notification.

        Args:
            on_appeared: Called with the server address when it appears.
            on_vanished: Called when the server goes away.
        """
        if self._watch is not None:
            return  # Already running

        if self._bus is None:
            self._bus = dbus.SessionBus()
        self._on_appeared = on_appeared
        self._on_vanished = on_vanished
        self._watch = self._bus.watch_name_owner(LOOKUP_BUS_NAME, self._owner_changed)
        logger.debug("Watching %s on the session bus", LOOKUP_BUS_NAME)

    def stop(self) -> None:
        """Stop watching."""
        if self._watch is not None:
            self._watch.cancel()
            self._watch = None
        self._on_appeared = None
        self._on_vanished = None
        logger.debug("Stopped watching %s", LOOKUP_BUS_NAME)

    def _owner_changed(self, owner: str) -> None:
        if not owner:
            # Initial notification when the server is not running
            if self._address is None:
                return
            logger.info("PulseAudio server at %s went away", self._address)
            self._address = None
            if self._on_vanished:
                self._on_vanished()
            return

        try:
            address = get_address(self._bus)
        except PulseError as e:
            logger.warning("PulseAudio appeared but its address is unavailable: %s", e)
            return

        self._address = address
        logger.info("PulseAudio server available at %s", address)
        if self._on_appeared:
            self._on_appeared(address)
