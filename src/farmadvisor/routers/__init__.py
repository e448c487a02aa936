"""API routers for the farmadvisor application."""

from farmadvisor.routers.farms import router as farms_router
from farmadvisor.routers.livestock import router as livestock_router
from farmadvisor.routers.schedules import router as schedules_router

__all__ = [
    "farms_router",
    "livestock_router",
    "schedules_router",
]
