"""API routes for browsing the livestock schedule catalog."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field

from farmadvisor.config import settings
from farmadvisor.logging_config import get_logger
from farmadvisor.schedules import (
    ScheduleCatalog,
    expand_health_events,
    expand_production_milestones,
    expected_production,
    get_catalog,
)
from farmadvisor.schemas import (
    ExpectedProductionResponse,
    HealthEventSchema,
    HealthMilestoneSchema,
    ProductionForecastSchema,
    ProductionMilestoneSchema,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/schedules", tags=["schedules"])


# =============================================================================
# Response Schemas
# =============================================================================


class AnimalTypeListResponse(BaseModel):
    """Animal types with a dedicated schedule."""

    animal_types: list[str]


class HealthScheduleResponse(BaseModel):
    """Health schedule for an animal type, optionally expanded to dates."""

    animal_type: str
    resolved_type: str | None = Field(None, description="Catalog key, null for the default")
    milestones: list[HealthMilestoneSchema]
    events: list[HealthEventSchema] | None = None


class ProductionScheduleResponse(BaseModel):
    """Production schedule for an animal type, optionally placed on the calendar."""

    animal_type: str
    resolved_type: str | None = None
    milestones: list[ProductionMilestoneSchema]
    forecasts: list[ProductionForecastSchema] | None = None


# =============================================================================
# Helper Functions
# =============================================================================


def _check_dates(acquired_on: date | None, as_of: date | None) -> date | None:
    """Return the effective as_of date when expansion was requested."""
    if acquired_on is None:
        return None
    as_of = as_of or date.today()
    if as_of < acquired_on:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="as_of must not be before acquired_on",
        )
    return as_of


# =============================================================================
# Endpoints
# =============================================================================


@router.get("", response_model=AnimalTypeListResponse)
async def list_animal_types(
    catalog: ScheduleCatalog = Depends(get_catalog),
) -> AnimalTypeListResponse:
    """List animal types that have their own schedules."""
    return AnimalTypeListResponse(animal_types=catalog.animal_types)


@router.get("/{animal_type}/health", response_model=HealthScheduleResponse)
async def get_health_schedule(
    animal_type: str,
    acquired_on: date | None = Query(None, description="Acquisition date to expand events from"),
    as_of: date | None = Query(None, description="Last date for repeat occurrences"),
    catalog: ScheduleCatalog = Depends(get_catalog),
) -> HealthScheduleResponse:
    """
    Get the vaccination and deworming schedule for an animal type.

    Unknown types get the default schedule. When ``acquired_on`` is given the
    milestones are also expanded into dated events up to ``as_of``.
    """
    milestones = catalog.health_schedule(animal_type)
    response = HealthScheduleResponse(
        animal_type=animal_type,
        resolved_type=catalog.resolve_health_key(animal_type),
        milestones=[HealthMilestoneSchema.model_validate(m) for m in milestones],
    )

    expand_until = _check_dates(acquired_on, as_of)
    if expand_until is not None:
        today = date.today()
        response.events = [
            HealthEventSchema(
                name=event.name,
                kind=event.kind,
                priority=event.priority,
                due_date=event.due_date,
                occurrence=event.occurrence,
                is_overdue=event.is_overdue(today),
            )
            for event in expand_health_events(milestones, acquired_on, expand_until)
        ]
    return response


@router.get("/{animal_type}/production", response_model=ProductionScheduleResponse)
async def get_production_schedule(
    animal_type: str,
    acquired_on: date | None = Query(None),
    as_of: date | None = Query(None),
    quantity: int = Query(1, ge=1, description="Herd or flock size for forecasts"),
    catalog: ScheduleCatalog = Depends(get_catalog),
) -> ProductionScheduleResponse:
    """Get the production milestones for an animal type."""
    schedule = catalog.production_schedule(animal_type)
    response = ProductionScheduleResponse(
        animal_type=animal_type,
        resolved_type=catalog.resolve_production_key(animal_type),
        milestones=[ProductionMilestoneSchema.model_validate(m) for m in schedule],
    )

    expand_until = _check_dates(acquired_on, as_of)
    if expand_until is not None:
        response.forecasts = [
            ProductionForecastSchema(
                name=forecast.milestone.name,
                kind=forecast.kind,
                start_date=forecast.start_date,
                end_date=forecast.end_date,
                unit=forecast.milestone.unit,
                expected_output=forecast.expected_output,
                expected_revenue=forecast.expected_revenue,
            )
            for forecast in expand_production_milestones(
                schedule, acquired_on, quantity, expand_until
            )
        ]
    return response


@router.get("/{animal_type}/expected-production", response_model=ExpectedProductionResponse)
async def get_expected_production(
    animal_type: str,
    quantity: int = Query(..., ge=0),
    days: int = Query(..., ge=0, description="Days since acquisition"),
    catalog: ScheduleCatalog = Depends(get_catalog),
) -> ExpectedProductionResponse:
    """Expected daily output and revenue for a group of animals of a given age."""
    estimate = expected_production(animal_type, quantity, days, catalog=catalog)
    return ExpectedProductionResponse.from_estimate(
        estimate,
        animal_type=animal_type,
        resolved_type=catalog.resolve_production_key(animal_type),
        quantity=quantity,
        days_since_acquisition=days,
        currency=settings.currency_code,
    )
