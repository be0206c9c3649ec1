"""Configuration manager using QSettings for persistent storage."""

import logging

from PySide6.QtCore import QSettings

from pulsectrl.models.volume import DEFAULT_VOLUME_MAX, DEFAULT_VOLUME_STEP, VolumeControl

logger = logging.getLogger(__name__)

# Settings keys
_KEY_VOLUME_STEP = "volume/step"
_KEY_VOLUME_MAX = "volume/max"
_KEY_SERVER_ADDRESS = "server/address"

# Limits
_STEP_RANGE = (1, 100)
_MAX_RANGE = (0, 1000)


def _clamp(value: int, bounds: tuple[int, int]) -> int:
    low, high = bounds
    return max(low, min(high, value))


class ConfigManager:
    """Wrapper around QSettings for type-safe config access.

    Holds command line preferences only. Device volume and mute are never
    stored here.

    QSettings stores config in platform-specific locations, on Linux
    ``~/.config/PulseCTRL/PulseCTRL.conf``.

    Example:
        config = ConfigManager()
        sink = Device(conn, path, config.get_volume_control())
    """

    def __init__(self, organization: str = "PulseCTRL", application: str = "PulseCTRL") -> None:
        """Initialize the config manager.

        Args:
            organization: Organization name for QSettings.
            application: Application name for QSettings.
        """
        self._settings = QSettings(organization, application)

    @property
    def settings(self) -> QSettings:
        """Return the underlying QSettings instance."""
        return self._settings

    # -- Volume settings -------------------------------------------------------

    def get_volume_step(self) -> int:
        """Return the default volume step in percent.

        Returns:
            Step in percent (default 5).
        """
        value = self._settings.value(_KEY_VOLUME_STEP, DEFAULT_VOLUME_STEP, int)
        return _clamp(int(value), _STEP_RANGE)  # type: ignore[arg-type]

    def set_volume_step(self, step: int) -> None:
        """Set the default volume step.

        Args:
            step: Step in percent (1-100).
        """
        clamped = _clamp(step, _STEP_RANGE)
        if clamped != step:
            logger.warning("Volume step %d out of range, clamped to %d", step, clamped)
        self._settings.setValue(_KEY_VOLUME_STEP, clamped)

    def get_volume_max(self) -> int:
        """Return the volume ceiling in percent.

        Returns:
            Ceiling in percent (default 150).
        """
        value = self._settings.value(_KEY_VOLUME_MAX, DEFAULT_VOLUME_MAX, int)
        return _clamp(int(value), _MAX_RANGE)  # type: ignore[arg-type]

    def set_volume_max(self, maximum: int) -> None:
        """Set the volume ceiling.

        Args:
            maximum: Ceiling in percent (0-1000).
        """
        clamped = _clamp(maximum, _MAX_RANGE)
        if clamped != maximum:
            logger.warning("Volume max %d out of range, clamped to %d", maximum, clamped)
        self._settings.setValue(_KEY_VOLUME_MAX, clamped)

    def get_volume_control(self) -> VolumeControl:
        """Return the stored step and ceiling as a VolumeControl."""
        return VolumeControl(step=self.get_volume_step(), max=self.get_volume_max())

    # -- Server settings -------------------------------------------------------

    def get_server_address(self) -> str:
        """Return the configured server address.

        Returns:
            D-Bus address, or empty string to use the lookup service.
        """
        value = self._settings.value(_KEY_SERVER_ADDRESS, "", str)
        return str(value) if value else ""

    def set_server_address(self, address: str) -> None:
        """Set the server address.

        Args:
            address: D-Bus address, or empty string for the lookup service.
        """
        self._settings.setValue(_KEY_SERVER_ADDRESS, address)

    # -- General settings ------------------------------------------------------

    def clear(self) -> None:
        """Clear all settings (useful for testing or reset)."""
        self._settings.clear()

    def sync(self) -> None:
        """Force settings to be written to disk."""
        self._settings.sync()
