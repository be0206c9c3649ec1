"""Value types shared by the PulseAudio entities."""

from pulsectrl.models.device_state import DeviceState
from pulsectrl.models.volume import DEFAULT_VOLUME_MAX, DEFAULT_VOLUME_STEP, VolumeControl

__all__ = [
    "DEFAULT_VOLUME_MAX",
    "DEFAULT_VOLUME_STEP",
    "DeviceState",
    "VolumeControl",
]
