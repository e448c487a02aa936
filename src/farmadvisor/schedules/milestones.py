"""Milestone templates for livestock health and production schedules."""

from dataclasses import dataclass
from enum import Enum


class Priority(str, Enum):
    """Urgency of a health event or recommendation."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"


class HealthEventKind(str, Enum):
    """Type of preventive health treatment."""

    VACCINATION = "VACCINATION"
    DEWORMING = "DEWORMING"


class ProductionKind(str, Enum):
    """What a production milestone measures."""

    EGGS = "EGGS"
    MILK = "MILK"
    WEIGHT = "WEIGHT"
    OTHER = "OTHER"


@dataclass(frozen=True)
class HealthMilestone:
    """A vaccination or deworming that falls due a fixed number of days after acquisition."""

    kind: HealthEventKind
    name: str
    description: str
    offset_days: int
    priority: Priority
    repeat_interval_days: int | None = None
    dosage_info: str | None = None
    notes: str | None = None

    @property
    def is_recurring(self) -> bool:
        return self.repeat_interval_days is not None


@dataclass(frozen=True)
class ProductionMilestone:
    """
    A production phase starting a fixed number of days after acquisition.

    ``expected_daily_output`` is per animal and its meaning depends on ``kind``:
    a laying rate for eggs, liters for milk, a daily gain or a target weight in kg.
    """

    kind: ProductionKind
    name: str
    description: str
    offset_days: int
    unit: str
    expected_daily_output: float | None = None
    expected_revenue_per_unit: float | None = None
    duration_days: int | None = None
    notes: str | None = None
