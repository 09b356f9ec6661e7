"""
API routes for the annual performance simulation.
"""

from fastapi import APIRouter, HTTPException

from chillersim.engine.simulator import (
    simulate_annual_performance,
    decimate,
    efficiency_sensitivity,
)
from chillersim.engine.staleness import is_stale
from chillersim.models.simulation import (
    SimulationInput,
    SimulationOutput,
    SensitivityInput,
    SensitivityOutput,
    StalenessInput,
    StalenessOutput,
)

router = APIRouter(prefix="/api/v1", tags=["simulation"])


@router.post("/simulation/run", response_model=SimulationOutput)
def run_simulation(body: SimulationInput):
    """
    Run the 8760 h simulation and return annual figures with a decimated
    hourly trace (every `sample_stride` hours).
    """
    try:
        result = simulate_annual_performance(
            equipment=body.equipment,
            climate=body.climate,
            load=body.load,
            target_output_temp_c=body.target_output_temp_c,
            electricity_price=body.electricity_price,
            emission_factor=body.emission_factor,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Simulation error: {str(e)}")

    summary = result.model_dump(exclude={"hourly"})
    return SimulationOutput(
        **summary,
        sample_stride=body.sample_stride,
        hourly_samples=decimate(result.hourly, body.sample_stride),
    )


@router.post("/simulation/sensitivity", response_model=SensitivityOutput)
def simulation_sensitivity(body: SensitivityInput):
    """Efficiency vs outdoor temperature and vs part load for one unit."""
    return efficiency_sensitivity(body.equipment, body.target_output_temp_c)


@router.post("/simulation/staleness", response_model=StalenessOutput)
def simulation_staleness(body: StalenessInput):
    """Whether a result computed from `last` is out of date for `current`."""
    return StalenessOutput(stale=is_stale(body.last, body.current))
