"""
API route for the structured statistics passed to report narrative generation.
"""

from fastapi import APIRouter

from chillersim.engine.narrative import build_narrative_statistics
from chillersim.models.narrative import NarrativeStatistics, NarrativeStatisticsInput

router = APIRouter(prefix="/api/v1", tags=["report"])


@router.post("/report/statistics", response_model=NarrativeStatistics)
def report_statistics(body: NarrativeStatisticsInput):
    """Assemble load, equipment and optional simulation figures for the narrative generator."""
    return build_narrative_statistics(
        load=body.load,
        equipment=body.equipment,
        target_output_temp_c=body.target_output_temp_c,
        simulation=body.simulation,
        project_name=body.project_name,
        location=body.location,
    )
