"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from farmadvisor import __version__
from farmadvisor.config import settings
from farmadvisor.database import Base, async_engine
from farmadvisor.logging_config import configure_logging, get_logger
from farmadvisor.routers import farms_router, livestock_router, schedules_router
from farmadvisor.schedules import get_catalog

# Configure logging on module load
configure_logging(settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup and shutdown events."""
    # Startup
    logger.info("Starting Farmadvisor API")
    logger.info(f"Schedule catalog loaded: {len(get_catalog().animal_types)} animal types")

    # Create database tables if they don't exist
    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables initialized")

    yield

    # Shutdown
    logger.info("Shutting down Farmadvisor API")
    await async_engine.dispose()


app = FastAPI(
    title="Farmadvisor API",
    description="Livestock health and production schedules with farm recommendations",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(farms_router)
app.include_router(livestock_router)
app.include_router(schedules_router)


@app.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok", "service": "farmadvisor-api"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "Farmadvisor API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }
