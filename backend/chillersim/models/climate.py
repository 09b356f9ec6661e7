"""
Pydantic models for hourly climate series, region profiles and climate statistics.
"""

from typing import Optional

from pydantic import BaseModel, Field


class RegionClimateProfile(BaseModel):
    """Seasonal envelope of a region used by the synthetic weather model."""
    name: str = ""
    country: str = ""
    min_temp_c: float           # coldest monthly mean
    max_temp_c: float           # warmest monthly mean
    avg_relative_humidity_pct: float = Field(..., ge=0.0, le=100.0)


class ClimatePoint(BaseModel):
    """One hour of climate data (SI units)."""
    hour_index: int = Field(..., ge=0)   # 0-8759
    month: int = Field(..., ge=1, le=12)
    day: int = Field(..., ge=1, le=31)
    hour: int = Field(0, ge=0, le=23)    # hour of day
    dry_bulb_c: float
    relative_humidity_pct: float         # percent 0-100
    wet_bulb_c: float


class WeatherGenerateInput(BaseModel):
    """Input for synthetic weather generation: a named region or an explicit envelope."""
    region: Optional[str] = None
    profile: Optional[RegionClimateProfile] = None
    seed: Optional[int] = Field(
        None, description="Seed for reproducible output. Omit for a fresh random series."
    )


class ClimateSummary(BaseModel):
    """Extremes and means of an hourly climate series."""
    hours: int
    min_dry_bulb_c: float
    max_dry_bulb_c: float
    avg_dry_bulb_c: float
    min_wet_bulb_c: float
    max_wet_bulb_c: float
    avg_wet_bulb_c: float
    min_relative_humidity_pct: float
    max_relative_humidity_pct: float
    avg_relative_humidity_pct: float


class ClimateSeriesOutput(BaseModel):
    """A climate series together with its source and summary."""
    source: str
    points: list[ClimatePoint]
    total_hours: int
    summary: ClimateSummary


class ClimateAverages(BaseModel):
    """Mean conditions over a group of hours (a month or a day)."""
    key: int  # month 1-12 or day of year 1-365
    dry_bulb_c: float
    wet_bulb_c: float
    relative_humidity_pct: float


class HistogramBin(BaseModel):
    """One occupied bin of a sparse histogram; `bin` is the lower edge."""
    bin: float
    count: int


class TemperatureHistogramBin(BaseModel):
    """Dry-bulb and wet-bulb hour counts sharing a 1 °C bin."""
    bin: float
    dry_bulb_hours: int
    wet_bulb_hours: int


class ClimateStatisticsInput(BaseModel):
    points: list[ClimatePoint]


class ClimateStatisticsOutput(BaseModel):
    summary: ClimateSummary
    monthly: list[ClimateAverages]
    daily: list[ClimateAverages]
    temperature_histogram: list[TemperatureHistogramBin]
    humidity_histogram: list[HistogramBin]
