"""Round 2 exponent policy: manual exponent or a random draw from a kit range."""

from enum import Enum
from typing import Optional, Union
from twolayerdh.crypto.randomness import RandomSource


class Mode(str, Enum):
    """Mode identifiers shared with existing peers; values are bit-exact."""
    MANUAL = "manual"
    AUTO_36M = "auto mode enabled 36m"
    AUTO_64M = "auto mode enabled 64m"
    AUTO_121M = "auto mode enabled 121m"
    AUTO_256M = "auto mode enabled 256m"
    AUTO_400M = "auto mode enabled 400m"


AUTO_RANGES = {
    Mode.AUTO_36M: 6000,
    Mode.AUTO_64M: 8000,
    Mode.AUTO_121M: 11000,
    Mode.AUTO_256M: 16000,
    Mode.AUTO_400M: 20000,
}

# Unrecognized auto-mode strings use the 64m kit
FALLBACK_RANGE = AUTO_RANGES[Mode.AUTO_64M]


def mode_value(mode: Union[Mode, str]) -> str:
    """Return the plain identifier string for an enum member or string."""
    if isinstance(mode, Mode):
        return mode.value
    return str(mode)


def range_for(mode: Union[Mode, str]) -> Optional[int]:
    """
    Look up the exponent range R for a mode.
    
    Args:
        mode: Mode enum member or identifier string
    
    Returns:
        None for manual mode, otherwise the range R
    """
    value = mode_value(mode)
    if value == Mode.MANUAL.value:
        return None
    for kit, upper in AUTO_RANGES.items():
        if kit.value == value:
            return upper
    return FALLBACK_RANGE


def draw_exponent(upper: int, source: RandomSource) -> int:
    """
    Pick a Round 2 private exponent from [0, upper).
    
    The draw is shifted up by 2 unless it is the top value upper - 1,
    which is kept as drawn.
    
    Args:
        upper: Range R for the active mode
        source: Random source supplying the uniform draw
    
    Returns:
        Exponent a2
    """
    a2 = source.uniform_below(upper)
    if upper - a2 >= 2:
        a2 += 2
    return a2
