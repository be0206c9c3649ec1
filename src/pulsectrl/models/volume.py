"""Per-entity volume stepping configuration."""

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_VOLUME_STEP = 5
DEFAULT_VOLUME_MAX = 150


@dataclass(frozen=True, slots=True)
class VolumeControl:
    """Step size and ceiling used by volume_up/volume_down.

    Attributes:
        step: Volume step in percent.
        max: Highest percentage volume_up will ever set.
    """

    step: int = DEFAULT_VOLUME_STEP
    max: int = DEFAULT_VOLUME_MAX

    def __post_init__(self) -> None:
        """Reject a negative ceiling, warn about odd steps."""
        if self.max < 0:
            raise ValueError(f"Volume max must be >= 0, got {self.max}")
        if self.step <= 0:
            logger.warning("Volume step %d is not positive; stepping will misbehave", self.step)

    def resolve(self, step: int | None = None, max: int | None = None) -> "VolumeControl":  # noqa: A002
        """Return a copy with per-call overrides applied."""
        return VolumeControl(
            step=self.step if step is None else step,
            max=self.max if max is None else max,
        )
