"""
Pydantic models for vendor equipment records as supplied by the catalog.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from chillersim.config import CondensationMedium


class PartLoadPoint(BaseModel):
    """One point of a part-load efficiency curve."""
    load_percent: float = Field(..., ge=0.0)
    efficiency_factor: float


class EquipmentRecord(BaseModel):
    """
    A chiller or heat pump from the vendor catalog.

    Only the capacity, efficiency, curve and condensation fields feed the
    simulation; the descriptive fields are carried for reporting. The
    part-load curve must be sorted by load_percent ascending.
    """
    model_config = ConfigDict(frozen=True)

    id: str = ""
    brand: str = ""
    model: str = ""
    cooling_capacity_kw: float = Field(..., ge=0.0)
    heating_capacity_kw: float = Field(0.0, ge=0.0)  # 0 if not a heat pump
    eer: float = Field(..., ge=0.0)
    cop: float = Field(0.0, ge=0.0)
    part_load_curve: tuple[PartLoadPoint, ...] = Field(..., min_length=1)
    condensation_medium: CondensationMedium
    eseer: Optional[float] = None
    price: Optional[float] = None  # EUR
