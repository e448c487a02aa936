"""
Lifecycle scheduling for livestock entries.

Expands milestone templates into dated health events, determines which
production phase an animal group is in and estimates its daily output and
revenue. Everything here is pure: no I/O and no shared mutable state.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from datetime import date, timedelta

from farmadvisor.schedules.catalog import ScheduleCatalog, get_catalog
from farmadvisor.schedules.milestones import (
    HealthEventKind,
    HealthMilestone,
    Priority,
    ProductionKind,
    ProductionMilestone,
)

# Window length of a production milestone that does not declare a duration
DEFAULT_PHASE_DAYS = 30

NO_PHASE_UNIT = "units"


@dataclass(frozen=True)
class HealthEvent:
    """A dated occurrence of a health milestone."""

    milestone: HealthMilestone
    due_date: date
    occurrence: int  # 0 for the first dose, 1.. for repeats

    @property
    def name(self) -> str:
        return self.milestone.name

    @property
    def kind(self) -> HealthEventKind:
        return self.milestone.kind

    @property
    def priority(self) -> Priority:
        return self.milestone.priority

    def is_overdue(self, today: date) -> bool:
        return self.due_date < today


@dataclass(frozen=True)
class ProductionEstimate:
    """Expected output of an animal group on a given day of its lifecycle."""

    phase: ProductionMilestone | None
    daily_output: float
    daily_revenue: float
    unit: str

    @property
    def phase_name(self) -> str | None:
        return self.phase.name if self.phase else None


@dataclass(frozen=True)
class ProductionForecast:
    """A production milestone placed on the calendar for a specific herd size."""

    milestone: ProductionMilestone
    start_date: date
    end_date: date
    expected_output: float | None
    expected_revenue: float | None

    @property
    def kind(self) -> ProductionKind:
        return self.milestone.kind


def iter_occurrences(milestone: HealthMilestone, acquisition_date: date) -> Iterator[date]:
    """Yield due dates of a milestone; infinite for recurring milestones."""
    due = acquisition_date + timedelta(days=milestone.offset_days)
    yield due
    if milestone.repeat_interval_days is None:
        return
    step = timedelta(days=milestone.repeat_interval_days)
    while True:
        due += step
        yield due


def expand_health_events(
    milestones: Sequence[HealthMilestone],
    acquisition_date: date,
    as_of: date,
) -> list[HealthEvent]:
    """
    Turn health milestones into dated events.

    Every milestone contributes its first occurrence, even when it falls after
    ``as_of`` (an upcoming treatment). Recurring milestones additionally
    contribute each repeat that falls on or before ``as_of``.

    Returns:
        Events sorted by due date; events on the same day keep catalog order.
    """
    events: list[HealthEvent] = []
    for milestone in milestones:
        for occurrence, due in enumerate(iter_occurrences(milestone, acquisition_date)):
            if occurrence > 0 and due > as_of:
                break
            events.append(HealthEvent(milestone=milestone, due_date=due, occurrence=occurrence))
            if occurrence == 0 and due > as_of:
                break

    # sort is stable, so same-day events stay in catalog order
    events.sort(key=lambda event: event.due_date)
    return events


def phase_window(schedule: Sequence[ProductionMilestone], index: int) -> tuple[int, int]:
    """
    Half-open day range ``[start, end)`` in which milestone ``index`` is active.

    An explicit ``duration_days`` is used as-is. Otherwise the phase lasts
    DEFAULT_PHASE_DAYS, ending early where the next later-starting milestone
    begins, so a weekly weight check hands over to the following week.
    Trimming the authored 30-day windows is deliberate; DESIGN.md item
    "Phase windows" records why.
    """
    milestone = schedule[index]
    start = milestone.offset_days
    if milestone.duration_days is not None:
        return start, start + milestone.duration_days

    end = start + DEFAULT_PHASE_DAYS
    for following in schedule[index + 1 :]:
        if following.offset_days > start:
            end = min(end, following.offset_days)
            break
    return start, end


def current_production_phase(
    schedule: Sequence[ProductionMilestone],
    days_since_acquisition: int,
) -> ProductionMilestone | None:
    """First milestone, in list order, whose window contains the given day."""
    for index, milestone in enumerate(schedule):
        start, end = phase_window(schedule, index)
        if start <= days_since_acquisition < end:
            return milestone
    return None


def estimate_for_phase(phase: ProductionMilestone | None, quantity: int) -> ProductionEstimate:
    """Daily output and revenue of ``quantity`` animals in ``phase``."""
    if phase is None:
        return ProductionEstimate(
            phase=None, daily_output=0.0, daily_revenue=0.0, unit=NO_PHASE_UNIT
        )

    daily_output = (phase.expected_daily_output or 0) * quantity
    daily_revenue = daily_output * (phase.expected_revenue_per_unit or 0)
    return ProductionEstimate(
        phase=phase,
        daily_output=daily_output,
        daily_revenue=daily_revenue,
        unit=phase.unit,
    )


def expected_production(
    animal_type: str,
    quantity: int,
    days_since_acquisition: int,
    catalog: ScheduleCatalog | None = None,
) -> ProductionEstimate:
    """
    Expected daily output and revenue for an animal group.

    Args:
        animal_type: Free-form animal type, resolved through the catalog.
        quantity: Number of animals in the group.
        days_since_acquisition: Age of the group relative to its acquisition date.
        catalog: Catalog to resolve against; the default catalog when omitted.

    Returns:
        Estimate for the current phase, or zeros with unit "units" when no
        phase is active.
    """
    catalog = catalog or get_catalog()
    schedule = catalog.production_schedule(animal_type)
    phase = current_production_phase(schedule, days_since_acquisition)
    return estimate_for_phase(phase, quantity)


def expand_production_milestones(
    schedule: Sequence[ProductionMilestone],
    acquisition_date: date,
    quantity: int,
    as_of: date,
) -> list[ProductionForecast]:
    """Place every milestone that starts on or before ``as_of`` on the calendar."""
    forecasts: list[ProductionForecast] = []
    for index, milestone in enumerate(schedule):
        start, end = phase_window(schedule, index)
        start_date = acquisition_date + timedelta(days=start)
        if start_date > as_of:
            continue

        expected_output = None
        expected_revenue = None
        if milestone.expected_daily_output is not None:
            expected_output = milestone.expected_daily_output * quantity
            if milestone.expected_revenue_per_unit is not None:
                expected_revenue = expected_output * milestone.expected_revenue_per_unit

        forecasts.append(
            ProductionForecast(
                milestone=milestone,
                start_date=start_date,
                end_date=acquisition_date + timedelta(days=end),
                expected_output=expected_output,
                expected_revenue=expected_revenue,
            )
        )
    return forecasts
