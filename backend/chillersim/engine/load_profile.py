"""
Hourly thermal load synthesis and load-series import.

Expands LoadProfileParameters (24 h weekday and weekend shapes, 7-day and
12-month factors, peak power) into an 8760 h series. The series is only
rebuilt when a caller asks for it; editing parameters does not recompute.
"""

import csv
import io
import json
import logging
import os
from functools import lru_cache

import numpy as np

from chillersim.config import (
    DAYS_PER_MONTH,
    DAYS_PER_WEEK,
    HOURS_PER_DAY,
    HOURS_PER_YEAR,
    MONTH_START_HOURS,
    WEEKEND_DAY_INDICES,
)
from chillersim.engine.errors import MalformedInputError, UnknownProfileError
from chillersim.models.load import LoadProfileParameters, StandardProfile

logger = logging.getLogger(__name__)

_DATA_PATH = os.path.join(os.path.dirname(__file__), "..", "data", "load_profiles.json")


def day_of_week(month_index: int, day_index: int) -> int:
    """
    Day-of-week index (0-6) of a day in the model year.

    The year is a repeating 7-day cycle starting at index 0 on the first
    day; it is not tied to a real calendar. Indices 5 and 6 are the weekend.
    """
    return (day_index + MONTH_START_HOURS[month_index] // HOURS_PER_DAY) % DAYS_PER_WEEK


def is_weekend(dow: int) -> bool:
    return dow in WEEKEND_DAY_INDICES


def synthesize_annual_load(params: LoadProfileParameters) -> list[float]:
    """
    Build the 8760 h load series (kW) from profile parameters.

    load[h] = peak × shape[hour] × weekly_factor[dow] × monthly_factor[month],
    where shape is the weekend shape on days 5 and 6 of the cycle.
    """
    loads = np.zeros(HOURS_PER_YEAR)

    for m, n_days in enumerate(DAYS_PER_MONTH):
        start = MONTH_START_HOURS[m]
        for d in range(n_days):
            dow = day_of_week(m, d)
            shape = params.weekend_shape if is_weekend(dow) else params.weekday_shape
            factor = params.weekly_factor[dow] * params.monthly_factor[m]
            for h in range(HOURS_PER_DAY):
                idx = start + d * HOURS_PER_DAY + h
                if idx < HOURS_PER_YEAR:
                    loads[idx] = params.peak_power_kw * shape[h] * factor

    return loads.tolist()


@lru_cache(maxsize=1)
def load_standard_profiles() -> tuple[StandardProfile, ...]:
    """Load and cache the named standard load profiles."""
    with open(_DATA_PATH, "r", encoding="utf-8") as f:
        return tuple(StandardProfile(**p) for p in json.load(f))


def get_standard_profile(name: str) -> StandardProfile:
    name_lower = name.lower().strip()
    for profile in load_standard_profiles():
        if profile.name.lower() == name_lower:
            return profile
    raise UnknownProfileError(f"Standard load profile '{name}' not found.")


def apply_standard_profile(
    params: LoadProfileParameters, name: str
) -> LoadProfileParameters:
    """Return new parameters with all four arrays replaced by a named profile."""
    profile = get_standard_profile(name)
    return params.model_copy(update={
        "weekday_shape": list(profile.weekday_shape),
        "weekend_shape": list(profile.weekend_shape),
        "weekly_factor": list(profile.weekly_factor),
        "monthly_factor": list(profile.monthly_factor),
    })


def parse_load_csv(raw_text: str) -> list[float]:
    """
    Parse an hourly load CSV into an 8760 h series (kW).

    Uses the second field of each row (`hour,value`), or the only field of a
    single-column row. Non-numeric rows such as headers are skipped. Negative
    values are clamped to 0. The series is truncated or zero-padded to 8760.

    Raises:
        MalformedInputError: if no numeric value is found.
    """
    values: list[float] = []
    clamped = 0

    for row in csv.reader(io.StringIO(raw_text)):
        if not row:
            continue
        field = row[1] if len(row) > 1 else row[0]
        try:
            value = float(field)
        except ValueError:
            continue
        if np.isnan(value):
            continue
        if value < 0:
            clamped += 1
            value = 0.0
        values.append(value)

    if not values:
        raise MalformedInputError("No numeric load values found in CSV.")

    if clamped:
        logger.warning("Clamped %d negative load values to zero", clamped)
    if len(values) < HOURS_PER_YEAR:
        logger.warning(
            "Load CSV holds %d values; padding to %d with zeros",
            len(values),
            HOURS_PER_YEAR,
        )
        values.extend([0.0] * (HOURS_PER_YEAR - len(values)))

    return values[:HOURS_PER_YEAR]


def load_series_rows(series: list[float]) -> list[tuple[int, float]]:
    """(hour, kW) rows in hour order, as written to a `hour,value` CSV."""
    return [(i, float(v)) for i, v in enumerate(series)]
