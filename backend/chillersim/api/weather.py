"""
API routes for climate series: region table, synthetic generation,
weather-file upload and climate statistics.
"""

from fastapi import APIRouter, HTTPException, UploadFile, File

from chillersim.engine.errors import UnknownRegionError
from chillersim.engine.statistics import (
    climate_summary,
    monthly_climate,
    daily_climate,
    temperature_histogram,
    humidity_histogram,
)
from chillersim.engine.weather import (
    load_regions,
    get_region,
    generate_annual_weather,
    parse_weather_year,
)
from chillersim.models.climate import (
    RegionClimateProfile,
    WeatherGenerateInput,
    ClimateSeriesOutput,
    ClimateStatisticsInput,
    ClimateStatisticsOutput,
)

router = APIRouter(prefix="/api/v1", tags=["weather"])

ALLOWED_EXTENSIONS = (".csv", ".epw")


@router.get("/regions", response_model=list[RegionClimateProfile])
def list_regions():
    """List the regions available for synthetic weather."""
    return list(load_regions())


@router.post("/weather/generate", response_model=ClimateSeriesOutput)
def generate_weather(body: WeatherGenerateInput):
    """Generate a synthetic 8760 h climate series for a region or an explicit profile."""
    if body.profile is None and not body.region:
        raise HTTPException(
            status_code=422,
            detail="Either region or profile is required.",
        )

    try:
        profile = body.profile if body.profile is not None else get_region(body.region)
        points = generate_annual_weather(profile, seed=body.seed)
    except UnknownRegionError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    return ClimateSeriesOutput(
        source=profile.name or "custom",
        points=points,
        total_hours=len(points),
        summary=climate_summary(points),
    )


@router.post("/weather/upload", response_model=ClimateSeriesOutput)
async def upload_weather_file(file: UploadFile = File(...)):
    """Upload a full-year EPW (or EPW-layout CSV) weather file; shorter files are rejected."""
    filename = (file.filename or "").lower()
    if not any(filename.endswith(ext) for ext in ALLOWED_EXTENSIONS):
        raise HTTPException(
            status_code=400,
            detail="File must be a .csv or .epw file.",
        )

    try:
        content = await file.read()
        text = content.decode("utf-8", errors="replace")
    except Exception as e:
        raise HTTPException(status_code=400, detail=f"Could not read file: {e}")

    try:
        points = parse_weather_year(text)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    return ClimateSeriesOutput(
        source=file.filename or "upload",
        points=points,
        total_hours=len(points),
        summary=climate_summary(points),
    )


@router.post("/weather/statistics", response_model=ClimateStatisticsOutput)
def weather_statistics(body: ClimateStatisticsInput):
    """Summary, monthly and daily means, and histograms of a climate series."""
    points = body.points
    return ClimateStatisticsOutput(
        summary=climate_summary(points),
        monthly=monthly_climate(points),
        daily=daily_climate(points),
        temperature_histogram=temperature_histogram(points),
        humidity_histogram=humidity_histogram(points),
    )
