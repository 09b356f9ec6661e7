"""
Pydantic models for the structured statistics handed to the narrative generator.
"""

from typing import Optional

from pydantic import BaseModel, Field

from chillersim.models.equipment import EquipmentRecord
from chillersim.models.simulation import SimulationSummary


class SimulationDigest(BaseModel):
    """Headline simulation figures quoted in a narrative."""
    operating_mode_label: str
    seasonal_efficiency: float
    total_thermal_energy_mwh: float
    total_electrical_energy_mwh: float
    annual_cost: float
    co2_emissions_t: float


class NarrativeStatistics(BaseModel):
    """Everything the external narrative generator receives."""
    project_name: str = ""
    location: str = ""
    peak_load_kw: float
    annual_load_mwh: float
    target_output_temp_c: float
    equipment: list[str] = Field(default_factory=list)  # "Brand Model"
    average_eer: float
    total_price: float
    simulation: Optional[SimulationDigest] = None


class NarrativeStatisticsInput(BaseModel):
    project_name: str = ""
    location: str = ""
    load: list[float]
    target_output_temp_c: float = 7.0
    equipment: list[EquipmentRecord] = Field(default_factory=list)
    simulation: Optional[SimulationSummary] = None
