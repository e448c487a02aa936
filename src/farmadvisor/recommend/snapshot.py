"""Read-only farm aggregate consumed by the recommendation engine."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CropSummary:
    """A crop entry reduced to what the rules look at."""

    name: str
    category: str | None = None
    area: float = 0.0

    def __post_init__(self) -> None:
        if self.area is None:
            object.__setattr__(self, "area", 0.0)


@dataclass(frozen=True)
class LivestockSummary:
    """
    A livestock entry with the number of health records attached to it.

    A ``health_record_count`` of None means the count is unknown, which is
    not the same as having no records.
    """

    id: str
    animal_type: str
    quantity: int = 0
    status: str = "ACTIVE"
    health_record_count: int | None = 0

    def __post_init__(self) -> None:
        if self.quantity is None:
            object.__setattr__(self, "quantity", 0)

    @property
    def has_health_records(self) -> bool:
        return bool(self.health_record_count)

    @property
    def lacks_health_records(self) -> bool:
        """True only when the entry is known to have no health records."""
        return self.health_record_count == 0


@dataclass(frozen=True)
class FarmSnapshot:
    """
    Point-in-time view of a farm.

    Assembled per request from the database (see
    ``farmadvisor.records.repository.build_farm_snapshot``) or by hand in
    tests. Numeric fields given as None are stored as zero so that rules never
    have to guard against missing data.
    """

    farm_id: str
    farm_name: str = ""
    total_farm_size: float = 0.0
    used_plot_area: float = 0.0
    crops: tuple[CropSummary, ...] = field(default_factory=tuple)
    livestock: tuple[LivestockSummary, ...] = field(default_factory=tuple)
    overdue_task_count: int = 0
    pending_task_count: int = 0
    monthly_income: float = 0.0
    monthly_expenses: float = 0.0
    yearly_income: float = 0.0
    yearly_expenses: float = 0.0

    def __post_init__(self) -> None:
        # frozen dataclass, so normalize through object.__setattr__
        for name in (
            "total_farm_size",
            "used_plot_area",
            "monthly_income",
            "monthly_expenses",
            "yearly_income",
            "yearly_expenses",
        ):
            if getattr(self, name) is None:
                object.__setattr__(self, name, 0.0)
        for name in ("overdue_task_count", "pending_task_count"):
            if getattr(self, name) is None:
                object.__setattr__(self, name, 0)
        object.__setattr__(self, "crops", tuple(self.crops or ()))
        object.__setattr__(self, "livestock", tuple(self.livestock or ()))
        if self.farm_name is None:
            object.__setattr__(self, "farm_name", "")

    @property
    def crop_count(self) -> int:
        return len(self.crops)

    @property
    def livestock_count(self) -> int:
        return len(self.livestock)

    @property
    def crop_categories(self) -> set[str | None]:
        return {crop.category for crop in self.crops}

    @property
    def livestock_without_health_records(self) -> list[LivestockSummary]:
        return [entry for entry in self.livestock if entry.lacks_health_records]

    @property
    def monthly_profit(self) -> float:
        return self.monthly_income - self.monthly_expenses

    @property
    def yearly_profit(self) -> float:
        return self.yearly_income - self.yearly_expenses

    @property
    def utilization_percent(self) -> float | None:
        """Share of farm land under plots, or None when the farm size is unknown."""
        if self.total_farm_size <= 0:
            return None
        return self.used_plot_area * 100 / self.total_farm_size
