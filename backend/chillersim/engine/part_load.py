"""
Part-load efficiency curve interpolation.
"""

from typing import Sequence

from chillersim.config import PART_LOAD_MIN_PCT, PART_LOAD_MAX_PCT
from chillersim.models.equipment import PartLoadPoint


def clamp_part_load(part_load_pct: float) -> float:
    """Clamp a part-load ratio to the curve domain (25-100 %)."""
    return max(PART_LOAD_MIN_PCT, min(PART_LOAD_MAX_PCT, part_load_pct))


def interpolate_efficiency_factor(
    curve: Sequence[PartLoadPoint],
    part_load_pct: float,
) -> float:
    """
    Efficiency factor at a part-load ratio, linear between curve points.

    The ratio is clamped to 25-100 % first; no extrapolation is done beyond
    the curve ends. Curve points must be sorted by load_percent ascending.

    Args:
        curve: Part-load curve, at least one point.
        part_load_pct: Part-load ratio in percent of nominal capacity.

    Returns:
        Interpolated efficiency factor (multiplier on nominal EER/COP).
    """
    pl = clamp_part_load(part_load_pct)

    lower = curve[0]
    for point in curve:
        if point.load_percent <= pl:
            lower = point

    upper = curve[-1]
    for point in reversed(curve):
        if point.load_percent >= pl:
            upper = point

    if lower.load_percent == upper.load_percent:
        return lower.efficiency_factor

    return lower.efficiency_factor + (
        (upper.efficiency_factor - lower.efficiency_factor)
        * (pl - lower.load_percent)
        / (upper.load_percent - lower.load_percent)
    )
