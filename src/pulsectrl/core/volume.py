"""Volume conversion and stepping.

The server stores volume as one unsigned integer per channel on a linear
scale where ``base`` means 100%. These helpers convert between that scale
and percentages and compute stepped volume changes. All functions are pure
and work channel by channel, preserving order.
"""

import math
from collections.abc import Sequence

from pulsectrl.api.errors import ResolutionError

# Unity point in percent
UNITY_PERCENT = 100


def _check_base(base: float) -> None:
    if not base or base <= 0:
        raise ResolutionError(f"Base volume must be positive, got {base!r}")


def percent_of(volume: Sequence[int], base: float) -> list[int]:
    """Convert raw channel volumes to percentages, rounding up.

    Rounding is always toward +infinity, so a value just above a whole
    percent reports the next one. The product is formed before the
    division, so an exact quotient is never pushed up by float error:
    55000 at base 100000 is 55, where dividing first gives 56.

    Raises:
        ResolutionError: If ``base`` is not positive.
    """
    _check_base(base)
    # Multiply first so exact quotients stay exact in floating point
    return [math.ceil(v * 100 / base) for v in volume]


def raw_of(percent: Sequence[float], base: float) -> list[int]:
    """Convert channel percentages to raw volumes.

    The wire type is uint32, so the quotient is truncated to an int.

    Raises:
        ResolutionError: If ``base`` is not positive.
    """
    _check_base(base)
    return [int(p * base / 100) for p in percent]


def step_up(percent: Sequence[int], step: int, max: int) -> list[int]:  # noqa: A002
    """Raise every channel by ``step``, never exceeding ``max``.

    A channel below 100% that would jump past 100% stops at exactly 100%
    first (only when ``max`` allows going above 100%).
    """
    result: list[int] = []
    for v in percent:
        up = v + step
        if up > max:
            result.append(max)
        elif up > UNITY_PERCENT and v < UNITY_PERCENT and max > UNITY_PERCENT:
            result.append(UNITY_PERCENT)
        else:
            result.append(up)
    return result


def step_down(percent: Sequence[int], step: int) -> list[int]:
    """Lower every channel by ``step``, never going below zero.

    A channel above 100% that would drop below 100% stops at exactly 100%.
    """
    result: list[int] = []
    for v in percent:
        down = v - step
        if down < UNITY_PERCENT and v > UNITY_PERCENT:
            result.append(UNITY_PERCENT)
        elif down >= 0:
            result.append(down)
        else:
            result.append(0)
    return result
