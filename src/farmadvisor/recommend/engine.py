"""Rule-based recommendation engine."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from farmadvisor.logging_config import get_logger
from farmadvisor.recommend.rules import (
    DEFAULT_RULES,
    RecommendationCategory,
    RecommendationKind,
    Rule,
    confidence_label,
)
from farmadvisor.recommend.snapshot import FarmSnapshot
from farmadvisor.schedules.milestones import Priority

logger = get_logger(__name__)


@dataclass
class Recommendation:
    """A fired rule, ready to be shown to the farmer."""

    code: str
    category: RecommendationCategory
    priority: Priority
    kind: RecommendationKind
    title: str
    message: str
    confidence: float
    confidence_label: str
    reasons: list[str] = field(default_factory=list)


class RecommendationEngine:
    """
    Evaluates an ordered list of independent rules against a farm snapshot.

    Every rule that fires contributes one recommendation, in rule order.
    The engine does not rank, deduplicate or store anything; callers do that
    if they need to.
    """

    def __init__(self, rules: Iterable[Rule] | None = None, extra_rules: Iterable[Rule] = ()):
        self.rules: tuple[Rule, ...] = (
            *(DEFAULT_RULES if rules is None else rules),
            *extra_rules,
        )

    def evaluate(self, snapshot: FarmSnapshot) -> list[Recommendation]:
        recommendations = [
            self._build(rule, snapshot) for rule in self.rules if rule.applies(snapshot)
        ]
        logger.debug(
            f"Farm {snapshot.farm_id}: {len(recommendations)} of {len(self.rules)} rules fired"
        )
        return recommendations

    @staticmethod
    def _build(rule: Rule, snapshot: FarmSnapshot) -> Recommendation:
        return Recommendation(
            code=rule.code,
            category=rule.category,
            priority=rule.priority,
            kind=rule.kind,
            title=rule.title,
            message=rule.message(snapshot),
            confidence=rule.confidence,
            confidence_label=confidence_label(rule.confidence),
            reasons=list(rule.reasons(snapshot)),
        )


_default_engine = RecommendationEngine()


def generate_recommendations(snapshot: FarmSnapshot) -> list[Recommendation]:
    """Evaluate the default rule set against a snapshot."""
    return _default_engine.evaluate(snapshot)
