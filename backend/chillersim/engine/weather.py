"""
Hourly weather series: synthetic generation and weather-file import.

The synthetic model builds an illustrative 8760 h year from a region's
seasonal envelope (coldest/warmest monthly mean and mean RH) with a cosine
seasonal swing, a sine diurnal swing and uniform noise. It is not measured
data; pass a seed or a numpy Generator for reproducible output.

The importer reads comma-separated EnergyPlus-style data rows (at least 31
columns; month, day, hour, dry-bulb and RH at columns 1, 2, 3, 6 and 8).
"""

import csv
import io
import json
import logging
import math
import os
from functools import lru_cache
from typing import Optional

import numpy as np

from chillersim.config import (
    DAYS_PER_MONTH,
    HOURS_PER_DAY,
    HOURS_PER_YEAR,
    DIURNAL_TEMP_AMPLITUDE_C,
    DIURNAL_RH_AMPLITUDE_PCT,
    TEMP_NOISE_C,
    RH_NOISE_PCT,
    DIURNAL_PEAK_SHIFT_H,
    SEASONAL_ANCHOR_MONTH,
    WEATHER_MIN_COLUMNS,
    WEATHER_COLUMNS,
    WEATHER_DRY_BULB_LIMIT_C,
    WEATHER_RH_LIMIT_PCT,
)
from chillersim.engine.errors import MalformedInputError, UnknownRegionError
from chillersim.engine.psychrometrics import wet_bulb_stull, clamp_relative_humidity
from chillersim.models.climate import ClimatePoint, RegionClimateProfile

logger = logging.getLogger(__name__)

_DATA_PATH = os.path.join(os.path.dirname(__file__), "..", "data", "regions.json")


@lru_cache(maxsize=1)
def load_regions() -> tuple[RegionClimateProfile, ...]:
    """Load and cache the region climate table."""
    with open(_DATA_PATH, "r", encoding="utf-8") as f:
        return tuple(RegionClimateProfile(**r) for r in json.load(f))


def get_region(name: str) -> RegionClimateProfile:
    """Look up a region by name, case-insensitive."""
    name_lower = name.lower().strip()
    for region in load_regions():
        if region.name.lower() == name_lower:
            return region
    raise UnknownRegionError(f"Region '{name}' not found in climate table.")


def generate_annual_weather(
    profile: RegionClimateProfile,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> list[ClimatePoint]:
    """
    Synthesize an 8760 h climate series for a region.

    Per hour of month m (0-indexed) and hour of day h:
        seasonal  = cos((m - 7)·π/6)
        month_avg = min + (max - min)·(seasonal + 1)/2
        diurnal   = sin((h - 8)·π/12)
        Tdb = month_avg + 5·diurnal + U(-1, 1)
        RH  = avg_RH - 15·diurnal + U(-2, 2), clamped to 0-100
        Twb = Stull(Tdb, RH)
    All three values are rounded to 0.1.

    Args:
        profile: Region envelope.
        rng: Random source. Takes precedence over seed.
        seed: Seed for a fresh numpy Generator when rng is not given.

    Returns:
        8760 ClimatePoints in hour order.
    """
    if rng is None:
        rng = np.random.default_rng(seed)

    temp_noise = rng.uniform(-TEMP_NOISE_C, TEMP_NOISE_C, HOURS_PER_YEAR)
    rh_noise = rng.uniform(-RH_NOISE_PCT, RH_NOISE_PCT, HOURS_PER_YEAR)
    span = profile.max_temp_c - profile.min_temp_c

    points: list[ClimatePoint] = []
    hour_index = 0
    for m, n_days in enumerate(DAYS_PER_MONTH):
        seasonal = math.cos((m - SEASONAL_ANCHOR_MONTH) * math.pi / 6)
        month_avg = profile.min_temp_c + span * (seasonal + 1) / 2
        for d in range(n_days):
            for h in range(HOURS_PER_DAY):
                diurnal = math.sin((h - DIURNAL_PEAK_SHIFT_H) * math.pi / 12)
                tdb = round(
                    month_avg + DIURNAL_TEMP_AMPLITUDE_C * diurnal
                    + float(temp_noise[hour_index]),
                    1,
                )
                rh = clamp_relative_humidity(round(
                    profile.avg_relative_humidity_pct
                    - DIURNAL_RH_AMPLITUDE_PCT * diurnal
                    + float(rh_noise[hour_index]),
                    1,
                ))
                points.append(ClimatePoint(
                    hour_index=hour_index,
                    month=m + 1,
                    day=d + 1,
                    hour=h,
                    dry_bulb_c=tdb,
                    relative_humidity_pct=rh,
                    wet_bulb_c=round(wet_bulb_stull(tdb, rh), 1),
                ))
                hour_index += 1

    return points


def parse_weather_file(raw_text: str) -> list[ClimatePoint]:
    """
    Parse hourly weather text into ClimatePoints.

    Data rows are recognised by having at least 31 columns and an integer in
    the first column (the year); header records are ignored. Rows whose
    fields do not parse are skipped without aborting. A dry-bulb or RH value
    carrying a missing-value marker (|Tdb| > 70, RH > 110) keeps its row and
    takes the value of the nearest earlier valid hour (the first valid hour
    for leading gaps), so the hours stay aligned. hour_index is the running
    count of accepted rows, and the result stops at 8760 points. RH is
    clamped to 0-100 before the wet-bulb estimate.

    Raises:
        MalformedInputError: if no valid row is found.
    """
    cols = WEATHER_COLUMNS
    stamps: list[tuple[int, int, int]] = []
    dry_bulbs: list[Optional[float]] = []
    humidities: list[Optional[float]] = []
    skipped = 0

    for row in csv.reader(io.StringIO(raw_text)):
        if len(stamps) >= HOURS_PER_YEAR:
            break
        if len(row) < WEATHER_MIN_COLUMNS or not _is_int(row[0]):
            continue

        try:
            month = int(row[cols["month"]])
            day = int(row[cols["day"]])
            hour = int(row[cols["hour"]])
            tdb = float(row[cols["dry_bulb"]])
            rh = float(row[cols["relative_humidity"]])
            if not (1 <= month <= 12 and 1 <= day <= 31):
                raise ValueError(f"date out of range: {month}/{day}")
        except ValueError:
            skipped += 1
            continue

        stamps.append((month, day, (hour - 1) % HOURS_PER_DAY))  # EPW hours run 1-24
        dry_bulbs.append(None if abs(tdb) > WEATHER_DRY_BULB_LIMIT_C else tdb)
        humidities.append(None if rh > WEATHER_RH_LIMIT_PCT else rh)

    dry_bulbs, filled_tdb = _fill_missing(dry_bulbs)
    humidities, filled_rh = _fill_missing(humidities)
    if not stamps or filled_tdb == len(stamps) or filled_rh == len(stamps):
        raise MalformedInputError("No valid hourly records found in weather file.")

    points: list[ClimatePoint] = []
    for i, ((month, day, hour), tdb, rh) in enumerate(zip(stamps, dry_bulbs, humidities)):
        rh = clamp_relative_humidity(rh)
        points.append(ClimatePoint(
            hour_index=i,
            month=month,
            day=day,
            hour=hour,
            dry_bulb_c=tdb,
            relative_humidity_pct=rh,
            wet_bulb_c=round(wet_bulb_stull(tdb, rh), 1),
        ))

    if skipped:
        logger.warning("Skipped %d unreadable weather rows", skipped)
    if filled_tdb or filled_rh:
        logger.warning(
            "Filled %d missing dry-bulb and %d missing RH values from adjacent hours",
            filled_tdb,
            filled_rh,
        )
    if len(points) < HOURS_PER_YEAR:
        logger.warning(
            "Weather file holds %d hours; a full year needs %d",
            len(points),
            HOURS_PER_YEAR,
        )

    return points


def parse_weather_year(raw_text: str) -> list[ClimatePoint]:
    """
    Parse weather text that must cover a full 8760 h year.

    Raises:
        MalformedInputError: if no valid row is found or fewer than 8760
            hours are present.
    """
    points = parse_weather_file(raw_text)
    if len(points) < HOURS_PER_YEAR:
        raise MalformedInputError(
            f"Weather file is incomplete: {len(points)} hours, {HOURS_PER_YEAR} required."
        )
    return points


def _fill_missing(values: list[Optional[float]]) -> tuple[list[Optional[float]], int]:
    """Forward-fill None entries, back-filling a leading gap. Returns (values, count)."""
    missing = sum(1 for v in values if v is None)
    first = next((v for v in values if v is not None), None)
    if first is None:
        return values, missing

    filled: list[Optional[float]] = []
    previous = first
    for v in values:
        if v is not None:
            previous = v
        filled.append(previous)
    return filled, missing


def _is_int(text: str) -> bool:
    try:
        int(text)
        return True
    except ValueError:
        return False
