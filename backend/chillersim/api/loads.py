"""
API routes for thermal load series: standard profiles, synthesis,
CSV upload and load statistics.
"""

from fastapi import APIRouter, HTTPException, UploadFile, File

from chillersim.engine.load_profile import (
    load_standard_profiles,
    synthesize_annual_load,
    parse_load_csv,
)
from chillersim.engine.statistics import (
    series_statistics,
    average_day_profile,
    weekday_weekend_profile,
    weekly_cycle,
    monthly_energy,
)
from chillersim.models.load import (
    LoadProfileParameters,
    StandardProfile,
    LoadSeriesOutput,
    LoadStatisticsInput,
    LoadStatisticsOutput,
)

router = APIRouter(prefix="/api/v1", tags=["loads"])


@router.get("/loads/profiles", response_model=list[StandardProfile])
def list_standard_profiles():
    """List the named standard load profiles."""
    return list(load_standard_profiles())


@router.post("/loads/synthesize", response_model=LoadSeriesOutput)
def synthesize_load(body: LoadProfileParameters):
    """Expand profile parameters into an 8760 h load series."""
    series = synthesize_annual_load(body)
    return LoadSeriesOutput(
        source="profile",
        series=series,
        statistics=series_statistics(series),
    )


@router.post("/loads/upload", response_model=LoadSeriesOutput)
async def upload_load_csv(file: UploadFile = File(...)):
    """Upload an `hour,value` CSV; short files are zero-padded to 8760 h."""
    filename = (file.filename or "").lower()
    if not filename.endswith(".csv"):
        raise HTTPException(status_code=400, detail="File must be a .csv file.")

    try:
        content = await file.read()
        text = content.decode("utf-8", errors="replace")
    except Exception as e:
        raise HTTPException(status_code=400, detail=f"Could not read file: {e}")

    try:
        series = parse_load_csv(text)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    return LoadSeriesOutput(
        source=file.filename or "upload",
        series=series,
        statistics=series_statistics(series),
    )


@router.post("/loads/statistics", response_model=LoadStatisticsOutput)
def load_statistics(body: LoadStatisticsInput):
    """Statistics and daily, weekly and monthly rollups of a load series."""
    series = body.series
    return LoadStatisticsOutput(
        statistics=series_statistics(series),
        average_day_kw=average_day_profile(series),
        weekday_weekend=weekday_weekend_profile(series),
        weekly_cycle=weekly_cycle(series),
        monthly_energy=monthly_energy(series),
    )
