"""
Chillersim configuration and constants.
"""

from enum import Enum


class CondensationMedium(str, Enum):
    AIR = "air"      # air-cooled condenser / air-source evaporator
    WATER = "water"  # tower, dry cooler or ground loop


class OperatingMode(str, Enum):
    COOLING = "cooling"
    HEATING = "heating"


# 8760 h model year (non-leap)
HOURS_PER_DAY = 24
DAYS_PER_WEEK = 7
DAYS_PER_MONTH: list[int] = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
MONTH_START_HOURS: list[int] = [
    sum(DAYS_PER_MONTH[:m]) * HOURS_PER_DAY for m in range(12)
]
HOURS_PER_YEAR = sum(DAYS_PER_MONTH) * HOURS_PER_DAY  # 8760
DAYS_PER_YEAR = sum(DAYS_PER_MONTH)  # 365

MONTH_NAMES: list[str] = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]

# Day-of-week indices 5 and 6 of the repeating 7-day cycle
WEEKEND_DAY_INDICES = (5, 6)

# Leaving fluid setpoint above which a run is treated as hot-water duty
HEATING_MODE_THRESHOLD_C = 25.0

# Part-load curve domain (%)
PART_LOAD_MIN_PCT = 25.0
PART_LOAD_MAX_PCT = 100.0

# Outdoor temperature correction for air-source units
COOLING_REFERENCE_TEMP_C = 35.0   # condenser entering air
COOLING_TEMP_COEFFICIENT = 0.032  # efficiency loss per °C above reference
HEATING_REFERENCE_TEMP_C = 7.0    # evaporator entering air
HEATING_TEMP_COEFFICIENT = 0.025  # efficiency gain per °C above reference

SEASONAL_LABELS = {
    OperatingMode.COOLING: "seasonal EER",
    OperatingMode.HEATING: "seasonal COP",
}

# Chart decimation stride (hours)
DEFAULT_SAMPLE_STRIDE = 24

# Economic / environmental defaults
DEFAULT_ELECTRICITY_PRICE = 0.15     # EUR/kWh
DEFAULT_EMISSION_FACTOR = 0.144      # kg CO2 per kWh electricity

# Synthetic weather model
DIURNAL_TEMP_AMPLITUDE_C = 5.0
DIURNAL_RH_AMPLITUDE_PCT = 15.0
TEMP_NOISE_C = 1.0
RH_NOISE_PCT = 2.0
DIURNAL_PEAK_SHIFT_H = 8
SEASONAL_ANCHOR_MONTH = 7  # 0-indexed, August

# Weather file layout (comma-separated, EnergyPlus-style data rows)
WEATHER_MIN_COLUMNS = 31
WEATHER_COLUMNS = {
    "month": 1,
    "day": 2,
    "hour": 3,
    "dry_bulb": 6,
    "relative_humidity": 8,
}
# Missing-value sentinels used by EPW files (99.9 °C, 999 %)
WEATHER_DRY_BULB_LIMIT_C = 70.0
WEATHER_RH_LIMIT_PCT = 110.0

# Histogram bin widths
TEMPERATURE_BIN_WIDTH_C = 1.0
HUMIDITY_BIN_WIDTH_PCT = 5.0

# Sensitivity sweeps
SENSITIVITY_PART_LOAD_PCT = 75.0
SENSITIVITY_COOLING_TEMPS_C: list[float] = [15, 20, 25, 30, 35, 40, 45, 50]
SENSITIVITY_HEATING_TEMPS_C: list[float] = [-10, -5, 0, 5, 7, 10, 15, 20]
SENSITIVITY_LOADS_PCT: list[float] = [25, 30, 40, 50, 60, 70, 80, 90, 100]
