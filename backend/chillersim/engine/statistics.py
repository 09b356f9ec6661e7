"""
Summary statistics and rollups over hourly climate and load series.

Every reducer accepts an empty series and returns zeros or an empty list
rather than raising, since series may legitimately be empty before the
first generation or import.
"""

from typing import Sequence

import numpy as np

from chillersim.config import (
    DAYS_PER_WEEK,
    HOURS_PER_DAY,
    HOURS_PER_YEAR,
    MONTH_START_HOURS,
    TEMPERATURE_BIN_WIDTH_C,
    HUMIDITY_BIN_WIDTH_PCT,
)
from chillersim.engine.load_profile import is_weekend
from chillersim.models.climate import (
    ClimatePoint,
    ClimateSummary,
    ClimateAverages,
    HistogramBin,
    TemperatureHistogramBin,
)
from chillersim.models.load import (
    LoadStatistics,
    WeekdayWeekendHour,
    WeeklyCycleDay,
    MonthlyEnergy,
)


# --- Load series ---

def series_statistics(series: Sequence[float]) -> LoadStatistics:
    """
    Peak, mean, load factor, full-load hours and annual energy of a kW series.

    load_factor_pct = mean / peak × 100 and full_load_hours = sum / peak,
    both 0 when the peak is not positive.
    """
    arr = np.asarray(series, dtype=np.float64)
    if arr.size == 0:
        return LoadStatistics(
            peak_kw=0.0,
            average_kw=0.0,
            load_factor_pct=0.0,
            full_load_hours=0.0,
            annual_energy_mwh=0.0,
        )

    total = float(arr.sum())
    peak = float(arr.max())
    average = total / arr.size

    return LoadStatistics(
        peak_kw=peak,
        average_kw=average,
        load_factor_pct=average / peak * 100 if peak > 0 else 0.0,
        full_load_hours=total / peak if peak > 0 else 0.0,
        annual_energy_mwh=total / 1000,
    )


def average_day_profile(series: Sequence[float]) -> list[float]:
    """Mean kW for each hour of the day across all days in the series."""
    sums = np.zeros(HOURS_PER_DAY)
    counts = np.zeros(HOURS_PER_DAY)
    for i, value in enumerate(series):
        sums[i % HOURS_PER_DAY] += value
        counts[i % HOURS_PER_DAY] += 1
    return [
        float(s / c) if c > 0 else 0.0 for s, c in zip(sums, counts)
    ]


def weekday_weekend_profile(series: Sequence[float]) -> list[WeekdayWeekendHour]:
    """Mean 24 h profile of weekdays vs weekend days of the model cycle."""
    weekday_sum = np.zeros(HOURS_PER_DAY)
    weekend_sum = np.zeros(HOURS_PER_DAY)
    weekday_days = 0
    weekend_days = 0

    for i, value in enumerate(series):
        hour = i % HOURS_PER_DAY
        weekend = is_weekend((i // HOURS_PER_DAY) % DAYS_PER_WEEK)
        if weekend:
            weekend_sum[hour] += value
        else:
            weekday_sum[hour] += value
        if hour == 0:
            if weekend:
                weekend_days += 1
            else:
                weekday_days += 1

    return [
        WeekdayWeekendHour(
            hour=h,
            weekday_kw=float(weekday_sum[h]) / weekday_days if weekday_days else 0.0,
            weekend_kw=float(weekend_sum[h]) / weekend_days if weekend_days else 0.0,
        )
        for h in range(HOURS_PER_DAY)
    ]


def weekly_cycle(series: Sequence[float]) -> list[WeeklyCycleDay]:
    """Mean kW for each day index (0-6) of the repeating 7-day cycle."""
    totals = np.zeros(DAYS_PER_WEEK)
    hours = np.zeros(DAYS_PER_WEEK)
    for i, value in enumerate(series):
        dow = (i // HOURS_PER_DAY) % DAYS_PER_WEEK
        totals[dow] += value
        hours[dow] += 1
    return [
        WeeklyCycleDay(
            day_of_week=d,
            average_kw=float(totals[d] / hours[d]) if hours[d] > 0 else 0.0,
        )
        for d in range(DAYS_PER_WEEK)
    ]


def monthly_energy(series: Sequence[float]) -> list[MonthlyEnergy]:
    """Energy (MWh) per calendar month of the model year."""
    arr = np.asarray(series, dtype=np.float64)
    bounds = MONTH_START_HOURS + [HOURS_PER_YEAR]
    return [
        MonthlyEnergy(
            month=m + 1,
            energy_mwh=float(arr[bounds[m]:bounds[m + 1]].sum()) / 1000,
        )
        for m in range(12)
    ]


# --- Climate series ---

def climate_summary(points: Sequence[ClimatePoint]) -> ClimateSummary:
    """Min / max / mean of dry-bulb, wet-bulb and RH."""
    if not points:
        return ClimateSummary(
            hours=0,
            min_dry_bulb_c=0.0, max_dry_bulb_c=0.0, avg_dry_bulb_c=0.0,
            min_wet_bulb_c=0.0, max_wet_bulb_c=0.0, avg_wet_bulb_c=0.0,
            min_relative_humidity_pct=0.0, max_relative_humidity_pct=0.0,
            avg_relative_humidity_pct=0.0,
        )

    tdb = np.array([p.dry_bulb_c for p in points])
    twb = np.array([p.wet_bulb_c for p in points])
    rh = np.array([p.relative_humidity_pct for p in points])

    return ClimateSummary(
        hours=len(points),
        min_dry_bulb_c=float(tdb.min()),
        max_dry_bulb_c=float(tdb.max()),
        avg_dry_bulb_c=float(tdb.mean()),
        min_wet_bulb_c=float(twb.min()),
        max_wet_bulb_c=float(twb.max()),
        avg_wet_bulb_c=float(twb.mean()),
        min_relative_humidity_pct=float(rh.min()),
        max_relative_humidity_pct=float(rh.max()),
        avg_relative_humidity_pct=float(rh.mean()),
    )


def monthly_climate(points: Sequence[ClimatePoint]) -> list[ClimateAverages]:
    """Mean dry-bulb, wet-bulb and RH per month present in the series."""
    groups: dict[int, list[ClimatePoint]] = {}
    for p in points:
        groups.setdefault(p.month, []).append(p)
    return [_averages(month, groups[month]) for month in sorted(groups)]


def daily_climate(points: Sequence[ClimatePoint]) -> list[ClimateAverages]:
    """Mean conditions per consecutive 24 h window (key = day 1, 2, ...)."""
    return [
        _averages(i // HOURS_PER_DAY + 1, list(points[i:i + HOURS_PER_DAY]))
        for i in range(0, len(points), HOURS_PER_DAY)
    ]


def _averages(key: int, group: list[ClimatePoint]) -> ClimateAverages:
    n = len(group)
    return ClimateAverages(
        key=key,
        dry_bulb_c=sum(p.dry_bulb_c for p in group) / n,
        wet_bulb_c=sum(p.wet_bulb_c for p in group) / n,
        relative_humidity_pct=sum(p.relative_humidity_pct for p in group) / n,
    )


# --- Histograms ---

def histogram(values: Sequence[float], bin_width: float) -> list[HistogramBin]:
    """
    Sparse histogram with bins [k·w, (k+1)·w), sorted by lower edge.

    NaN values are ignored; empty bins are absent from the result.
    """
    arr = np.asarray(values, dtype=np.float64)
    arr = arr[~np.isnan(arr)]
    if arr.size == 0:
        return []
    keys = np.floor(arr / bin_width) * bin_width
    edges, counts = np.unique(keys, return_counts=True)
    return [
        HistogramBin(bin=float(e), count=int(c)) for e, c in zip(edges, counts)
    ]


def dry_bulb_histogram(points: Sequence[ClimatePoint]) -> list[HistogramBin]:
    return histogram([p.dry_bulb_c for p in points], TEMPERATURE_BIN_WIDTH_C)


def wet_bulb_histogram(points: Sequence[ClimatePoint]) -> list[HistogramBin]:
    return histogram([p.wet_bulb_c for p in points], TEMPERATURE_BIN_WIDTH_C)


def humidity_histogram(points: Sequence[ClimatePoint]) -> list[HistogramBin]:
    return histogram([p.relative_humidity_pct for p in points], HUMIDITY_BIN_WIDTH_PCT)


def temperature_histogram(
    points: Sequence[ClimatePoint],
) -> list[TemperatureHistogramBin]:
    """Dry-bulb and wet-bulb hour counts on shared 1 °C bins (union of occupied bins)."""
    dry = {b.bin: b.count for b in dry_bulb_histogram(points)}
    wet = {b.bin: b.count for b in wet_bulb_histogram(points)}
    return [
        TemperatureHistogramBin(
            bin=edge,
            dry_bulb_hours=dry.get(edge, 0),
            wet_bulb_hours=wet.get(edge, 0),
        )
        for edge in sorted(set(dry) | set(wet))
    ]
