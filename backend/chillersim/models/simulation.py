"""
Pydantic models for the hourly performance simulation, its inputs and outputs.
"""

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field

from chillersim.config import (
    OperatingMode,
    DEFAULT_ELECTRICITY_PRICE,
    DEFAULT_EMISSION_FACTOR,
    DEFAULT_SAMPLE_STRIDE,
)
from chillersim.models.climate import ClimatePoint
from chillersim.models.equipment import EquipmentRecord


class HourlyPerformance(BaseModel):
    """Operating point of the unit for one hour of the year."""
    hour_index: int
    month: int
    outdoor_temp_c: float
    load_kw: float
    part_load_pct: float
    part_load_factor: float
    temperature_correction: float
    real_efficiency: float
    electrical_input_kw: float


class MonthlyPerformance(BaseModel):
    month: int
    name: str
    thermal_energy_mwh: float
    electrical_energy_mwh: float
    average_efficiency: float  # mean of hourly real efficiency, 0 if no hours


class SimulationInputs(BaseModel):
    """
    Identity of everything a simulation result depends on.

    Series are represented by content digests so two fingerprints can be
    compared structurally without keeping the 8760-point arrays around.
    """
    model_config = ConfigDict(frozen=True)

    equipment_digest: str
    climate_digest: str
    load_digest: str
    target_output_temp_c: float
    electricity_price: float = DEFAULT_ELECTRICITY_PRICE
    emission_factor: float = DEFAULT_EMISSION_FACTOR


class SimulationSummary(BaseModel):
    """Annual figures shared by the engine result and the API output."""
    operating_mode: OperatingMode
    operating_mode_label: str  # "seasonal EER" | "seasonal COP"
    total_thermal_energy_mwh: float
    total_electrical_energy_mwh: float
    seasonal_efficiency: float
    average_efficiency: float
    annual_cost: float            # EUR
    co2_emissions_t: float        # tonnes CO2
    monthly: list[MonthlyPerformance]
    peak_day_index: int           # 0-364
    peak_day: list[HourlyPerformance]
    inputs: SimulationInputs


class SimulationResult(SimulationSummary):
    """Full engine result, one HourlyPerformance per hour of the year."""
    hourly: list[HourlyPerformance]


class SimulationInput(BaseModel):
    """Input for an annual simulation run."""
    equipment: Optional[EquipmentRecord] = None
    climate: list[ClimatePoint]
    load: list[Annotated[float, Field(ge=0.0)]]  # kW, non-negative
    target_output_temp_c: float = 7.0
    electricity_price: float = Field(DEFAULT_ELECTRICITY_PRICE, ge=0.0)
    emission_factor: float = Field(DEFAULT_EMISSION_FACTOR, ge=0.0)
    sample_stride: int = Field(DEFAULT_SAMPLE_STRIDE, ge=1)


class SimulationOutput(SimulationSummary):
    """Annual figures plus a decimated hourly trace for charting."""
    sample_stride: int
    hourly_samples: list[HourlyPerformance]


class SensitivityPoint(BaseModel):
    x: float  # outdoor temperature (°C) or part load (%)
    efficiency: float


class SensitivityInput(BaseModel):
    equipment: EquipmentRecord
    target_output_temp_c: float = 7.0


class SensitivityOutput(BaseModel):
    operating_mode: OperatingMode
    nominal_efficiency: float
    vs_temperature: list[SensitivityPoint]  # at fixed part load
    vs_load: list[SensitivityPoint]         # at reference outdoor temperature


class StalenessInput(BaseModel):
    last: Optional[SimulationInputs] = None
    current: SimulationInputs


class StalenessOutput(BaseModel):
    stale: bool
