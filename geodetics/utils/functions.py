"""Module for miscellaneous multi-use functions"""

__all__ = ['normalize_azimuth', 'round_half_up']

import math


def normalize_azimuth(angle: float) -> float:
    """
    Wraps an angle in radians to [0, 2*pi).

    Args:
        angle:
            The angle, in radians

    Returns:
        (float) the equivalent azimuth in [0, 2*pi)
    """
    wrapped = math.fmod(angle, 2 * math.pi) + 0.0
    if wrapped < 0:
        wrapped += 2 * math.pi

    # fmod of a tiny negative value can round up to exactly 2*pi
    if wrapped >= 2 * math.pi:
        wrapped = 0.0

    return wrapped


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)
