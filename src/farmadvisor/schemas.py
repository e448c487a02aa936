"""Response schemas shared by several routers."""

from datetime import date

from pydantic import BaseModel, Field

from farmadvisor.schedules import (
    HealthEventKind,
    Priority,
    ProductionEstimate,
    ProductionKind,
)


class HealthMilestoneSchema(BaseModel):
    """Health milestone template."""

    kind: HealthEventKind
    name: str
    description: str
    offset_days: int
    priority: Priority
    repeat_interval_days: int | None = None
    dosage_info: str | None = None
    notes: str | None = None

    class Config:
        from_attributes = True


class ProductionMilestoneSchema(BaseModel):
    """Production milestone template."""

    kind: ProductionKind
    name: str
    description: str
    offset_days: int
    unit: str
    expected_daily_output: float | None = None
    expected_revenue_per_unit: float | None = None
    duration_days: int | None = None
    notes: str | None = None

    class Config:
        from_attributes = True


class ExpectedProductionResponse(BaseModel):
    """Expected daily output of an animal group."""

    animal_type: str
    resolved_type: str | None = Field(None, description="Catalog key, null for the default")
    quantity: int
    days_since_acquisition: int
    phase: str | None = None
    daily_output: float
    daily_revenue: float
    unit: str
    currency: str

    @classmethod
    def from_estimate(
        cls,
        estimate: ProductionEstimate,
        *,
        animal_type: str,
        resolved_type: str | None,
        quantity: int,
        days_since_acquisition: int,
        currency: str,
    ) -> "ExpectedProductionResponse":
        return cls(
            animal_type=animal_type,
            resolved_type=resolved_type,
            quantity=quantity,
            days_since_acquisition=days_since_acquisition,
            phase=estimate.phase_name,
            daily_output=estimate.daily_output,
            daily_revenue=estimate.daily_revenue,
            unit=estimate.unit,
            currency=currency,
        )


class HealthEventSchema(BaseModel):
    """A dated health event."""

    name: str
    kind: HealthEventKind
    priority: Priority
    due_date: date
    occurrence: int
    is_overdue: bool = False


class ProductionForecastSchema(BaseModel):
    """A production milestone placed on the calendar."""

    name: str
    kind: ProductionKind
    start_date: date
    end_date: date
    unit: str
    expected_output: float | None = None
    expected_revenue: float | None = None
