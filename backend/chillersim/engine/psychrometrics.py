"""
Closed-form psychrometric estimates.
"""

import math


def wet_bulb_stull(dry_bulb_c: float, relative_humidity_pct: float) -> float:
    """
    Wet-bulb temperature from dry-bulb and relative humidity (Stull, 2011).

    Empirical fit valid at sea-level pressure for roughly 5-99 %RH and
    -20..50 °C; error is within about 1 °C over that range.

    Args:
        dry_bulb_c: Dry-bulb temperature in °C.
        relative_humidity_pct: Relative humidity in percent (0-100), not a fraction.

    Returns:
        Wet-bulb temperature in °C. Inputs are not validated: RH above 100
        gives a defined but meaningless value, and negative RH, where the
        fit has no real value, gives NaN.
    """
    T = dry_bulb_c
    RH = relative_humidity_pct
    if RH < 0:
        return math.nan
    return (
        T * math.atan(0.151977 * math.sqrt(RH + 8.313659))
        + math.atan(T + RH)
        - math.atan(RH - 1.676331)
        + 0.00391838 * math.pow(RH, 1.5) * math.atan(0.023101 * RH)
        - 4.686035
    )


def clamp_relative_humidity(relative_humidity_pct: float) -> float:
    """Clamp RH to the physical 0-100 % range."""
    return min(100.0, max(0.0, relative_humidity_pct))
