"""
Input fingerprints for deciding whether a simulation result is out of date.

A result is stale when the equipment, climate series, load series, target
temperature or tariff settings differ from those it was computed with.
Hosts keep the SimulationInputs attached to a result and compare it with a
fingerprint of the current inputs instead of re-deriving their own hash.
"""

import hashlib
from typing import Optional, Sequence

import numpy as np

from chillersim.config import DEFAULT_ELECTRICITY_PRICE, DEFAULT_EMISSION_FACTOR
from chillersim.models.climate import ClimatePoint
from chillersim.models.equipment import EquipmentRecord
from chillersim.models.simulation import SimulationInputs


def series_digest(values: Sequence[float]) -> str:
    """Content digest of a numeric series."""
    arr = np.asarray(values, dtype=np.float64)
    return hashlib.sha256(arr.tobytes()).hexdigest()


def climate_digest(points: Sequence[ClimatePoint]) -> str:
    """Content digest of a climate series (all fields, in order)."""
    arr = np.array(
        [
            (p.hour_index, p.month, p.day, p.hour,
             p.dry_bulb_c, p.relative_humidity_pct, p.wet_bulb_c)
            for p in points
        ],
        dtype=np.float64,
    )
    return hashlib.sha256(arr.tobytes()).hexdigest()


def equipment_digest(equipment: Optional[EquipmentRecord]) -> str:
    if equipment is None:
        return ""
    return hashlib.sha256(equipment.model_dump_json().encode("utf-8")).hexdigest()


def simulation_inputs(
    equipment: Optional[EquipmentRecord],
    climate: Sequence[ClimatePoint],
    load: Sequence[float],
    target_output_temp_c: float,
    electricity_price: float = DEFAULT_ELECTRICITY_PRICE,
    emission_factor: float = DEFAULT_EMISSION_FACTOR,
) -> SimulationInputs:
    """Fingerprint the inputs of a simulation run."""
    return SimulationInputs(
        equipment_digest=equipment_digest(equipment),
        climate_digest=climate_digest(climate),
        load_digest=series_digest(load),
        target_output_temp_c=target_output_temp_c,
        electricity_price=electricity_price,
        emission_factor=emission_factor,
    )


def is_stale(last: Optional[SimulationInputs], current: SimulationInputs) -> bool:
    """
    True when a result computed from `last` no longer matches `current`.

    With no previous result (`last` is None) there is nothing to be stale.
    """
    if last is None:
        return False
    return last != current
