"""Livestock schedule catalog and lifecycle scheduler."""

from farmadvisor.schedules.catalog import (
    DEFAULT_CATALOG,
    CatalogValidationError,
    ScheduleCatalog,
    get_catalog,
    resolve_health_schedule,
    resolve_production_schedule,
)
from farmadvisor.schedules.lifecycle import (
    HealthEvent,
    ProductionEstimate,
    ProductionForecast,
    current_production_phase,
    expand_health_events,
    expand_production_milestones,
    expected_production,
    iter_occurrences,
    phase_window,
)
from farmadvisor.schedules.milestones import (
    HealthEventKind,
    HealthMilestone,
    Priority,
    ProductionKind,
    ProductionMilestone,
)

__all__ = [
    "DEFAULT_CATALOG",
    "CatalogValidationError",
    "HealthEvent",
    "HealthEventKind",
    "HealthMilestone",
    "Priority",
    "ProductionEstimate",
    "ProductionForecast",
    "ProductionKind",
    "ProductionMilestone",
    "ScheduleCatalog",
    "current_production_phase",
    "expand_health_events",
    "expand_production_milestones",
    "expected_production",
    "get_catalog",
    "iter_occurrences",
    "phase_window",
    "resolve_health_schedule",
    "resolve_production_schedule",
]
