"""Heuristic rules evaluated against a farm snapshot."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from farmadvisor.config import settings
from farmadvisor.recommend.snapshot import FarmSnapshot
from farmadvisor.schedules.milestones import Priority

UNDERUTILIZED_BELOW_PERCENT = 50
NEAR_CAPACITY_ABOVE_PERCENT = 90


class RecommendationCategory(str, Enum):
    """Area of the farm a recommendation is about."""

    CROP = "CROP"
    LIVESTOCK = "LIVESTOCK"
    WEATHER = "WEATHER"
    FINANCE = "FINANCE"
    TASK = "TASK"
    HEALTH = "HEALTH"
    MARKET = "MARKET"


class RecommendationKind(str, Enum):
    """How a client should present a recommendation."""

    WARNING = "warning"
    SUCCESS = "success"
    INFO = "info"
    ACTION = "action"


def confidence_label(confidence: float) -> str:
    """Bucket a 0..1 confidence into high/medium/low."""
    if confidence >= 0.8:
        return "high"
    if confidence >= 0.5:
        return "medium"
    return "low"


def format_currency(amount: float, currency_code: str | None = None) -> str:
    """Format an amount as e.g. ``GHS 1,234`` or ``GHS 1,234.50``."""
    code = currency_code or settings.currency_code
    if float(amount).is_integer():
        return f"{code} {amount:,.0f}"
    return f"{code} {amount:,.2f}"


def pluralize(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


@dataclass(frozen=True)
class Rule:
    """
    A single recommendation rule.

    ``predicate`` decides whether the rule fires; ``message`` and ``reasons``
    are only called when it does.
    """

    code: str
    title: str
    category: RecommendationCategory
    priority: Priority
    kind: RecommendationKind
    confidence: float
    predicate: Callable[[FarmSnapshot], bool]
    message: Callable[[FarmSnapshot], str]
    reasons: Callable[[FarmSnapshot], list[str]] = lambda snapshot: []

    def applies(self, snapshot: FarmSnapshot) -> bool:
        return self.predicate(snapshot)


# =============================================================================
# Predicates
# =============================================================================


def _has_overdue_tasks(snapshot: FarmSnapshot) -> bool:
    return snapshot.overdue_task_count > 0


def _is_underutilized(snapshot: FarmSnapshot) -> bool:
    utilization = snapshot.utilization_percent
    return utilization is not None and utilization < UNDERUTILIZED_BELOW_PERCENT


def _is_near_capacity(snapshot: FarmSnapshot) -> bool:
    utilization = snapshot.utilization_percent
    return utilization is not None and utilization > NEAR_CAPACITY_ABOVE_PERCENT


def _has_low_crop_diversity(snapshot: FarmSnapshot) -> bool:
    return snapshot.crop_count > 0 and len(snapshot.crop_categories) == 1


def _is_empty_farm(snapshot: FarmSnapshot) -> bool:
    return snapshot.crop_count == 0 and snapshot.livestock_count == 0


# =============================================================================
# Messages
# =============================================================================


def _overdue_message(snapshot: FarmSnapshot) -> str:
    count = snapshot.overdue_task_count
    return (
        f"You have {count} overdue {pluralize(count, 'task', 'tasks')}. "
        "Complete them to maintain farm productivity."
    )


def _underutilized_message(snapshot: FarmSnapshot) -> str:
    return (
        f"Only {round(snapshot.utilization_percent or 0)}% of your farm land is being used. "
        "Consider expanding crop cultivation or adding more livestock pens."
    )


def _near_capacity_message(snapshot: FarmSnapshot) -> str:
    return (
        f"Your farm is at {round(snapshot.utilization_percent or 0)}% capacity. "
        "Consider acquiring more land for expansion."
    )


def _loss_message(snapshot: FarmSnapshot) -> str:
    return (
        "Your farm is operating at a loss this month "
        f"({format_currency(abs(snapshot.monthly_profit))}). "
        "Review expenses and consider cost-cutting measures."
    )


def _profit_message(snapshot: FarmSnapshot) -> str:
    amount = format_currency(snapshot.monthly_profit)
    return f"Great job! Your farm made a profit of {amount} this month."


def _diversity_message(snapshot: FarmSnapshot) -> str:
    return (
        "Consider diversifying your crops across different categories "
        "to reduce risk and improve soil health."
    )


def _missing_health_message(snapshot: FarmSnapshot) -> str:
    count = len(snapshot.livestock_without_health_records)
    subject = pluralize(count, "entry has", "entries have")
    return (
        f"{count} livestock {subject} no health records. "
        "Generate health schedules to track vaccinations and treatments."
    )


def _get_started_message(snapshot: FarmSnapshot) -> str:
    return (
        "Your farm has no crops or livestock yet. "
        "Add your first crop or livestock entry to start tracking."
    )


# =============================================================================
# Reasons
# =============================================================================


def _utilization_reasons(snapshot: FarmSnapshot) -> list[str]:
    return [
        f"Plots cover {snapshot.used_plot_area:g} of {snapshot.total_farm_size:g} units of land",
        f"Utilization is {snapshot.utilization_percent or 0:.1f}%",
    ]


def _profit_reasons(snapshot: FarmSnapshot) -> list[str]:
    return [
        f"Income this month: {format_currency(snapshot.monthly_income)}",
        f"Expenses this month: {format_currency(snapshot.monthly_expenses)}",
    ]


DEFAULT_RULES: tuple[Rule, ...] = (
    Rule(
        code="overdue_tasks",
        title="Overdue Tasks",
        category=RecommendationCategory.TASK,
        priority=Priority.HIGH,
        kind=RecommendationKind.WARNING,
        confidence=1.0,
        predicate=_has_overdue_tasks,
        message=_overdue_message,
        reasons=lambda s: [f"{s.overdue_task_count} overdue, {s.pending_task_count} pending"],
    ),
    Rule(
        code="land_underutilized",
        title="Underutilized Land",
        category=RecommendationCategory.CROP,
        priority=Priority.MEDIUM,
        kind=RecommendationKind.INFO,
        confidence=0.7,
        predicate=_is_underutilized,
        message=_underutilized_message,
        reasons=_utilization_reasons,
    ),
    Rule(
        code="land_near_capacity",
        title="Near Capacity",
        category=RecommendationCategory.CROP,
        priority=Priority.MEDIUM,
        kind=RecommendationKind.WARNING,
        confidence=0.7,
        predicate=_is_near_capacity,
        message=_near_capacity_message,
        reasons=_utilization_reasons,
    ),
    Rule(
        code="negative_monthly_profit",
        title="Negative Monthly Profit",
        category=RecommendationCategory.FINANCE,
        priority=Priority.HIGH,
        kind=RecommendationKind.WARNING,
        confidence=0.9,
        predicate=lambda s: s.monthly_profit < 0,
        message=_loss_message,
        reasons=_profit_reasons,
    ),
    Rule(
        code="positive_monthly_profit",
        title="Profitable Month",
        category=RecommendationCategory.FINANCE,
        priority=Priority.LOW,
        kind=RecommendationKind.SUCCESS,
        confidence=0.9,
        predicate=lambda s: s.monthly_profit > 0,
        message=_profit_message,
        reasons=_profit_reasons,
    ),
    Rule(
        code="low_crop_diversity",
        title="Crop Diversification",
        category=RecommendationCategory.CROP,
        priority=Priority.MEDIUM,
        kind=RecommendationKind.INFO,
        confidence=0.6,
        predicate=_has_low_crop_diversity,
        message=_diversity_message,
        reasons=lambda s: [
            f"All {s.crop_count} crop entries share the category "
            f"{next(iter(s.crop_categories)) or 'unspecified'}"
        ],
    ),
    Rule(
        code="missing_health_records",
        title="Health Records Needed",
        category=RecommendationCategory.HEALTH,
        priority=Priority.MEDIUM,
        kind=RecommendationKind.ACTION,
        confidence=0.9,
        predicate=lambda s: len(s.livestock_without_health_records) > 0,
        message=_missing_health_message,
        reasons=lambda s: [
            f"{entry.animal_type} ({entry.quantity}) has no health records"
            for entry in s.livestock_without_health_records
        ],
    ),
    Rule(
        code="get_started",
        title="Get Started",
        category=RecommendationCategory.TASK,
        priority=Priority.HIGH,
        kind=RecommendationKind.ACTION,
        confidence=1.0,
        predicate=_is_empty_farm,
        message=_get_started_message,
        reasons=lambda s: ["No crop or livestock entries recorded"],
    ),
)
