"""API routes for livestock entries and their generated schedules."""

import uuid
from datetime import date, datetime

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from farmadvisor.config import settings
from farmadvisor.database import get_db
from farmadvisor.dependencies import get_current_user_id
from farmadvisor.logging_config import get_logger
from farmadvisor.models import LivestockEntry
from farmadvisor.records import GenerationResult, generate_schedule_records, get_user_farm
from farmadvisor.schedules import expected_production, get_catalog
from farmadvisor.schemas import ExpectedProductionResponse

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/livestock", tags=["livestock"])


# =============================================================================
# Request/Response Schemas
# =============================================================================


class LivestockCreateRequest(BaseModel):
    """Request to add a livestock entry to a farm."""

    farm_id: str
    animal_type: str = Field(min_length=1, description="e.g. Layer, Broiler, Goat")
    quantity: int = Field(ge=1, default=1)
    acquired_date: date | None = Field(None, description="Defaults to today")
    name: str | None = None
    batch_id: str | None = None
    status: str = "ACTIVE"
    expected_selling_price: float | None = Field(None, ge=0)
    notes: str | None = None


class LivestockEntryResponse(BaseModel):
    """Stored livestock entry."""

    id: str
    farm_id: str
    animal_type: str
    quantity: int
    acquired_date: date | None = None
    name: str | None = None
    batch_id: str | None = None
    status: str

    class Config:
        from_attributes = True


class ScheduleGenerationResponse(BaseModel):
    """Outcome of generating health and production records."""

    livestock_entry_id: str
    animal_type: str
    resolved_health_type: str | None = None
    resolved_production_type: str | None = None
    health_records_generated: int = 0
    production_records_generated: int = 0

    @classmethod
    def from_result(cls, result: GenerationResult) -> "ScheduleGenerationResponse":
        return cls(
            livestock_entry_id=result.livestock_entry_id,
            animal_type=result.animal_type,
            resolved_health_type=result.resolved_health_type,
            resolved_production_type=result.resolved_production_type,
            health_records_generated=result.health_records,
            production_records_generated=result.production_records,
        )


class ScheduleTaskResponse(BaseModel):
    """Response from queueing a background schedule rebuild."""

    task_id: str
    status: str
    message: str


class LivestockCreateResponse(BaseModel):
    """Created entry together with the schedule generated for it."""

    entry: LivestockEntryResponse
    schedules: ScheduleGenerationResponse


# =============================================================================
# Helper Functions
# =============================================================================


async def get_user_livestock_entry(db: AsyncSession, user_id: str, entry_id: str) -> LivestockEntry:
    """Load a livestock entry owned by the user or raise 404."""
    result = await db.execute(
        select(LivestockEntry).where(
            LivestockEntry.id == entry_id,
            LivestockEntry.user_id == user_id,
        )
    )
    entry = result.scalar_one_or_none()
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Livestock entry {entry_id} not found",
        )
    return entry


# =============================================================================
# Endpoints
# =============================================================================


@router.post("", response_model=LivestockCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_livestock_entry(
    request: LivestockCreateRequest,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> LivestockCreateResponse:
    """
    Add livestock to a farm and generate its health and production schedule.

    A failure while generating the schedule is logged and reported as zero
    records; the entry itself is still created.
    """
    farm = await get_user_farm(db, user_id, request.farm_id)
    if farm is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Farm {request.farm_id} not found",
        )

    entry = LivestockEntry(
        id=str(uuid.uuid4()),
        user_id=user_id,
        farm_id=request.farm_id,
        animal_type=request.animal_type.strip(),
        name=request.name,
        batch_id=request.batch_id,
        quantity=request.quantity,
        acquired_date=request.acquired_date or date.today(),
        status=request.status,
        expected_selling_price=request.expected_selling_price,
        notes=request.notes,
        created_at=datetime.utcnow(),
    )
    db.add(entry)
    await db.commit()
    logger.info(f"Created livestock entry {entry.id}: {entry.quantity} x {entry.animal_type}")

    created = LivestockEntryResponse.model_validate(entry)
    catalog = get_catalog()
    result = GenerationResult(
        livestock_entry_id=entry.id,
        animal_type=entry.animal_type,
        resolved_health_type=catalog.resolve_health_key(entry.animal_type),
        resolved_production_type=catalog.resolve_production_key(entry.animal_type),
    )
    try:
        result = await generate_schedule_records(db, entry)
    except Exception:
        logger.exception(f"Schedule generation failed for livestock entry {entry.id}")
        await db.rollback()

    return LivestockCreateResponse(
        entry=created,
        schedules=ScheduleGenerationResponse.from_result(result),
    )


@router.post(
    "/{entry_id}/schedules/regenerate",
    response_model=ScheduleGenerationResponse,
)
async def regenerate_schedules(
    entry_id: str,
    horizon_days: int | None = Query(None, ge=1, le=1825),
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> ScheduleGenerationResponse:
    """Rebuild generated records, keeping completed treatments and recorded output."""
    entry = await get_user_livestock_entry(db, user_id, entry_id)
    result = await generate_schedule_records(db, entry, horizon_days=horizon_days)
    return ScheduleGenerationResponse.from_result(result)


@router.post(
    "/{entry_id}/schedules/regenerate/queue",
    response_model=ScheduleTaskResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
async def queue_schedule_regeneration(
    entry_id: str,
    horizon_days: int | None = Query(None, ge=1, le=1825),
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> ScheduleTaskResponse:
    """
    Queue a Celery task that rebuilds the generated records of an entry.

    Useful for long horizons; the result is written by the worker.
    """
    from farmadvisor.tasks.schedules import regenerate_entry_schedules_task

    entry = await get_user_livestock_entry(db, user_id, entry_id)

    try:
        task = regenerate_entry_schedules_task.delay(entry.id, horizon_days=horizon_days)
    except Exception as e:
        logger.error(f"Failed to queue schedule regeneration for {entry.id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to queue schedule regeneration: {e}",
        )

    logger.info(f"Queued schedule regeneration task {task.id} for livestock entry {entry.id}")
    return ScheduleTaskResponse(
        task_id=task.id,
        status="queued",
        message="Schedule regeneration queued.",
    )


@router.get("/{entry_id}/expected-production", response_model=ExpectedProductionResponse)
async def get_entry_expected_production(
    entry_id: str,
    as_of: date | None = Query(None, description="Defaults to today"),
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> ExpectedProductionResponse:
    """Expected daily output and revenue of a livestock entry."""
    entry = await get_user_livestock_entry(db, user_id, entry_id)
    days = ((as_of or date.today()) - entry.start_date).days
    estimate = expected_production(entry.animal_type, entry.quantity, days)
    return ExpectedProductionResponse.from_estimate(
        estimate,
        animal_type=entry.animal_type,
        resolved_type=get_catalog().resolve_production_key(entry.animal_type),
        quantity=entry.quantity,
        days_since_acquisition=days,
        currency=settings.currency_code,
    )
