"""
Pydantic models for parametric load profiles and hourly load series.
"""

from pydantic import BaseModel, Field


class LoadProfileParameters(BaseModel):
    """
    Compact description of an annual load profile.

    Each hour of the year is peak_power_kw × shape[hour] × weekly_factor[dow]
    × monthly_factor[month]. Shapes are fractions of peak power.
    """
    peak_power_kw: float = Field(..., gt=0.0)
    weekday_shape: list[float] = Field(..., min_length=24, max_length=24)
    weekend_shape: list[float] = Field(..., min_length=24, max_length=24)
    weekly_factor: list[float] = Field(..., min_length=7, max_length=7)
    monthly_factor: list[float] = Field(..., min_length=12, max_length=12)


class StandardProfile(BaseModel):
    """A named, reusable set of profile arrays (peak power excluded)."""
    name: str
    description: str = ""
    weekday_shape: list[float] = Field(..., min_length=24, max_length=24)
    weekend_shape: list[float] = Field(..., min_length=24, max_length=24)
    weekly_factor: list[float] = Field(..., min_length=7, max_length=7)
    monthly_factor: list[float] = Field(..., min_length=12, max_length=12)


class LoadStatistics(BaseModel):
    """Summary figures of an hourly power series."""
    peak_kw: float
    average_kw: float
    load_factor_pct: float
    full_load_hours: float
    annual_energy_mwh: float


class WeekdayWeekendHour(BaseModel):
    hour: int
    weekday_kw: float
    weekend_kw: float


class WeeklyCycleDay(BaseModel):
    day_of_week: int  # 0-6 of the model cycle
    average_kw: float


class MonthlyEnergy(BaseModel):
    month: int
    energy_mwh: float


class LoadSeriesOutput(BaseModel):
    """An hourly load series (kW, 8760 values) with its statistics."""
    source: str
    series: list[float]
    statistics: LoadStatistics


class LoadStatisticsInput(BaseModel):
    series: list[float]


class LoadStatisticsOutput(BaseModel):
    statistics: LoadStatistics
    average_day_kw: list[float]
    weekday_weekend: list[WeekdayWeekendHour]
    weekly_cycle: list[WeeklyCycleDay]
    monthly_energy: list[MonthlyEnergy]
