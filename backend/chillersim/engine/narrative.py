"""
Boundary to the external narrative (report text) generator.

The engine only assembles the structured statistics and calls whatever
generator the host supplies; prompt wording and the text service itself
live outside this package.
"""

import logging
from typing import Callable, Optional, Sequence

from chillersim.engine.errors import NarrativeError
from chillersim.engine.statistics import series_statistics
from chillersim.models.equipment import EquipmentRecord
from chillersim.models.narrative import NarrativeStatistics, SimulationDigest
from chillersim.models.simulation import SimulationSummary

logger = logging.getLogger(__name__)

NarrativeGenerator = Callable[[NarrativeStatistics], str]


def build_narrative_statistics(
    load: Sequence[float],
    equipment: Sequence[EquipmentRecord],
    target_output_temp_c: float,
    simulation: Optional[SimulationSummary] = None,
    project_name: str = "",
    location: str = "",
) -> NarrativeStatistics:
    """Collect load, equipment and (optional) simulation figures for a narrative."""
    stats = series_statistics(load)
    n = len(equipment)

    digest = None
    if simulation is not None:
        digest = SimulationDigest(
            operating_mode_label=simulation.operating_mode_label,
            seasonal_efficiency=simulation.seasonal_efficiency,
            total_thermal_energy_mwh=simulation.total_thermal_energy_mwh,
            total_electrical_energy_mwh=simulation.total_electrical_energy_mwh,
            annual_cost=simulation.annual_cost,
            co2_emissions_t=simulation.co2_emissions_t,
        )

    return NarrativeStatistics(
        project_name=project_name,
        location=location,
        peak_load_kw=stats.peak_kw,
        annual_load_mwh=stats.annual_energy_mwh,
        target_output_temp_c=target_output_temp_c,
        equipment=[f"{e.brand} {e.model}".strip() for e in equipment],
        average_eer=sum(e.eer for e in equipment) / n if n else 0.0,
        total_price=sum(e.price or 0.0 for e in equipment),
        simulation=digest,
    )


def request_narrative(
    generator: NarrativeGenerator,
    statistics: NarrativeStatistics,
) -> str:
    """
    Ask the generator for narrative text.

    Raises:
        NarrativeError: the generator raised or returned empty text.
    """
    try:
        text = generator(statistics)
    except Exception as e:
        logger.exception("Narrative generator failed")
        raise NarrativeError(f"Narrative generation failed: {e}") from e

    if not text or not text.strip():
        raise NarrativeError("Narrative generator returned no text.")
    return text
