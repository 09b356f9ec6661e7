"""
Hour-by-hour annual performance simulation of a chiller or heat pump.

For each of the 8760 (climate, load) pairs the unit's part-load ratio,
part-load efficiency factor and outdoor-temperature correction give a real
efficiency, from which electrical input follows. Thermal and electrical
energy are summed into seasonal figures (seasonal EER in cooling, seasonal
COP in heating). The mode is fixed for the whole run by the leaving fluid
setpoint: above 25 °C is hot-water duty.
"""

import logging
import math
from typing import Optional, Sequence

import numpy as np

from chillersim.config import (
    CondensationMedium,
    OperatingMode,
    HOURS_PER_DAY,
    HOURS_PER_YEAR,
    DAYS_PER_YEAR,
    MONTH_NAMES,
    HEATING_MODE_THRESHOLD_C,
    COOLING_REFERENCE_TEMP_C,
    COOLING_TEMP_COEFFICIENT,
    HEATING_REFERENCE_TEMP_C,
    HEATING_TEMP_COEFFICIENT,
    SEASONAL_LABELS,
    DEFAULT_ELECTRICITY_PRICE,
    DEFAULT_EMISSION_FACTOR,
    DEFAULT_SAMPLE_STRIDE,
    SENSITIVITY_PART_LOAD_PCT,
    SENSITIVITY_COOLING_TEMPS_C,
    SENSITIVITY_HEATING_TEMPS_C,
    SENSITIVITY_LOADS_PCT,
)
from chillersim.engine.errors import InsufficientDataError
from chillersim.engine.part_load import clamp_part_load, interpolate_efficiency_factor
from chillersim.engine.staleness import simulation_inputs
from chillersim.models.climate import ClimatePoint
from chillersim.models.equipment import EquipmentRecord
from chillersim.models.simulation import (
    HourlyPerformance,
    MonthlyPerformance,
    SimulationResult,
    SensitivityOutput,
    SensitivityPoint,
)

logger = logging.getLogger(__name__)


def is_heating_mode(target_output_temp_c: float) -> bool:
    """Hot-water duty when the leaving fluid setpoint is above 25 °C."""
    return target_output_temp_c > HEATING_MODE_THRESHOLD_C


def operating_mode(target_output_temp_c: float) -> OperatingMode:
    if is_heating_mode(target_output_temp_c):
        return OperatingMode.HEATING
    return OperatingMode.COOLING


def nominal_rating(
    equipment: EquipmentRecord, mode: OperatingMode
) -> tuple[float, float]:
    """(nominal capacity kW, nominal EER or COP) for the operating mode."""
    if mode == OperatingMode.HEATING:
        return equipment.heating_capacity_kw, equipment.cop
    return equipment.cooling_capacity_kw, equipment.eer


def temperature_correction(
    medium: CondensationMedium,
    mode: OperatingMode,
    outdoor_temp_c: float,
) -> float:
    """
    Efficiency multiplier for outdoor dry-bulb temperature.

    Air-source cooling loses 3.2 %/°C above 35 °C; air-source heating gains
    2.5 %/°C above 7 °C and loses the same below it. Water-cooled units are
    unaffected (1.0).
    """
    if medium != CondensationMedium.AIR:
        return 1.0
    if mode == OperatingMode.HEATING:
        return 1 + (outdoor_temp_c - HEATING_REFERENCE_TEMP_C) * HEATING_TEMP_COEFFICIENT
    return 1 - (outdoor_temp_c - COOLING_REFERENCE_TEMP_C) * COOLING_TEMP_COEFFICIENT


def real_efficiency(
    equipment: EquipmentRecord,
    mode: OperatingMode,
    part_load_pct: float,
    outdoor_temp_c: float,
) -> float:
    """Nominal EER/COP × part-load factor × temperature correction."""
    _, nominal_eff = nominal_rating(equipment, mode)
    plf = interpolate_efficiency_factor(equipment.part_load_curve, part_load_pct)
    corr = temperature_correction(equipment.condensation_medium, mode, outdoor_temp_c)
    return nominal_eff * plf * corr


def simulate_annual_performance(
    equipment: Optional[EquipmentRecord],
    climate: Sequence[ClimatePoint],
    load: Sequence[float],
    target_output_temp_c: float,
    electricity_price: float = DEFAULT_ELECTRICITY_PRICE,
    emission_factor: float = DEFAULT_EMISSION_FACTOR,
) -> SimulationResult:
    """
    Run the 8760 h performance simulation.

    Args:
        equipment: Selected unit.
        climate: Hourly climate series, at least 8760 points (first 8760 used).
        load: Hourly thermal load in kW, at least 8760 values (first 8760 used).
        target_output_temp_c: Leaving fluid setpoint; selects cooling or heating.
        electricity_price: Tariff in EUR/kWh for the annual cost.
        emission_factor: kg CO2 per kWh of electricity.

    Returns:
        A new SimulationResult with the full hourly trace.

    Raises:
        InsufficientDataError: no equipment, or a series shorter than 8760.
    """
    if equipment is None:
        raise InsufficientDataError("No equipment selected for simulation.")
    if len(climate) < HOURS_PER_YEAR:
        raise InsufficientDataError(
            f"Climate series has {len(climate)} hours; {HOURS_PER_YEAR} required."
        )
    if len(load) < HOURS_PER_YEAR:
        raise InsufficientDataError(
            f"Load series has {len(load)} hours; {HOURS_PER_YEAR} required."
        )

    mode = operating_mode(target_output_temp_c)
    nominal_capacity, nominal_eff = nominal_rating(equipment, mode)
    served = nominal_capacity > 0

    if not served:
        logger.warning(
            "Equipment %s has no %s capacity; no load can be served",
            equipment.id or equipment.model,
            mode.value,
        )

    hourly: list[HourlyPerformance] = []
    thermal_kwh = 0.0
    electrical_kwh = 0.0
    eff_sum = 0.0

    for i in range(HOURS_PER_YEAR):
        point = climate[i]
        load_kw = float(load[i])
        if not math.isfinite(load_kw):
            load_kw = 0.0

        corr = temperature_correction(
            equipment.condensation_medium, mode, point.dry_bulb_c
        )
        if served:
            pl = clamp_part_load(load_kw / nominal_capacity * 100)
            plf = interpolate_efficiency_factor(equipment.part_load_curve, pl)
            eff = nominal_eff * plf * corr
            elec = load_kw / eff if eff > 0 else 0.0
            thermal_kwh += load_kw
            electrical_kwh += elec
            eff_sum += eff
        else:
            pl = plf = eff = elec = 0.0

        hourly.append(HourlyPerformance(
            hour_index=i,
            month=point.month,
            outdoor_temp_c=point.dry_bulb_c,
            load_kw=load_kw,
            part_load_pct=pl,
            part_load_factor=plf,
            temperature_correction=corr,
            real_efficiency=eff,
            electrical_input_kw=elec,
        ))

    seasonal = thermal_kwh / electrical_kwh if electrical_kwh > 0 else 0.0
    average_eff = eff_sum / HOURS_PER_YEAR if served else 0.0
    peak_day_index = _peak_day_index(hourly)

    result = SimulationResult(
        operating_mode=mode,
        operating_mode_label=SEASONAL_LABELS[mode],
        total_thermal_energy_mwh=thermal_kwh / 1000,
        total_electrical_energy_mwh=electrical_kwh / 1000,
        seasonal_efficiency=seasonal,
        average_efficiency=average_eff,
        annual_cost=electrical_kwh * electricity_price,
        co2_emissions_t=electrical_kwh * emission_factor / 1000,
        monthly=_monthly_breakdown(hourly, served),
        peak_day_index=peak_day_index,
        peak_day=hourly[
            peak_day_index * HOURS_PER_DAY:(peak_day_index + 1) * HOURS_PER_DAY
        ],
        inputs=simulation_inputs(
            equipment,
            climate,
            load,
            target_output_temp_c,
            electricity_price,
            emission_factor,
        ),
        hourly=hourly,
    )

    logger.info(
        "Simulated %s (%s): %.1f MWh thermal, %.1f MWh electric, %s %.2f",
        equipment.id or equipment.model,
        mode.value,
        result.total_thermal_energy_mwh,
        result.total_electrical_energy_mwh,
        result.operating_mode_label,
        seasonal,
    )
    return result


def decimate(
    hourly: Sequence[HourlyPerformance],
    stride: int = DEFAULT_SAMPLE_STRIDE,
) -> list[HourlyPerformance]:
    """Every `stride`-th hour starting at hour 0, for charting."""
    if stride < 1:
        raise ValueError("stride must be at least 1")
    return list(hourly[::stride])


def efficiency_sensitivity(
    equipment: EquipmentRecord,
    target_output_temp_c: float,
) -> SensitivityOutput:
    """
    Real efficiency over an outdoor-temperature sweep (at 75 % load) and over
    a part-load sweep (at the 35 °C / 7 °C reference temperature).
    """
    mode = operating_mode(target_output_temp_c)
    _, nominal_eff = nominal_rating(equipment, mode)

    if mode == OperatingMode.HEATING:
        temps = SENSITIVITY_HEATING_TEMPS_C
        reference_temp = HEATING_REFERENCE_TEMP_C
    else:
        temps = SENSITIVITY_COOLING_TEMPS_C
        reference_temp = COOLING_REFERENCE_TEMP_C

    vs_temperature = [
        SensitivityPoint(
            x=t,
            efficiency=round(
                real_efficiency(equipment, mode, SENSITIVITY_PART_LOAD_PCT, t), 2
            ),
        )
        for t in temps
    ]
    vs_load = [
        SensitivityPoint(
            x=pl,
            efficiency=round(real_efficiency(equipment, mode, pl, reference_temp), 2),
        )
        for pl in SENSITIVITY_LOADS_PCT
    ]

    return SensitivityOutput(
        operating_mode=mode,
        nominal_efficiency=nominal_eff,
        vs_temperature=vs_temperature,
        vs_load=vs_load,
    )


def _monthly_breakdown(
    hourly: list[HourlyPerformance], served: bool
) -> list[MonthlyPerformance]:
    """Thermal/electrical MWh and mean real efficiency per calendar month."""
    thermal = np.zeros(12)
    electrical = np.zeros(12)
    eff_sum = np.zeros(12)
    counts = np.zeros(12, dtype=int)

    for hp in hourly:
        m = hp.month - 1
        if served:
            thermal[m] += hp.load_kw
        electrical[m] += hp.electrical_input_kw
        eff_sum[m] += hp.real_efficiency
        counts[m] += 1

    return [
        MonthlyPerformance(
            month=m + 1,
            name=MONTH_NAMES[m],
            thermal_energy_mwh=float(thermal[m]) / 1000,
            electrical_energy_mwh=float(electrical[m]) / 1000,
            average_efficiency=(
                float(eff_sum[m]) / counts[m] if served and counts[m] > 0 else 0.0
            ),
        )
        for m in range(12)
    ]


def _peak_day_index(hourly: list[HourlyPerformance]) -> int:
    """Day of the model year (0-364) with the highest total load."""
    loads = np.array([hp.load_kw for hp in hourly[:HOURS_PER_YEAR]])
    daily = loads.reshape(DAYS_PER_YEAR, HOURS_PER_DAY).sum(axis=1)
    return int(np.argmax(daily))
