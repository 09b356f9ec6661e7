"""
Top-level API router that aggregates all sub-routers.
"""

from fastapi import APIRouter

from chillersim.api.weather import router as weather_router
from chillersim.api.loads import router as loads_router
from chillersim.api.simulation import router as simulation_router
from chillersim.api.report import router as report_router

router = APIRouter()
router.include_router(weather_router)
router.include_router(loads_router)
router.include_router(simulation_router)
router.include_router(report_router)
