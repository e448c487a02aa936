"""Tests for the rule-based recommendation engine."""

from dataclasses import replace

import pytest

from farmadvisor.recommend import (
    DEFAULT_RULES,
    CropSummary,
    FarmSnapshot,
    LivestockSummary,
    RecommendationCategory,
    RecommendationEngine,
    RecommendationKind,
    Rule,
    confidence_label,
    format_currency,
    generate_recommendations,
)
from farmadvisor.schedules import Priority


def _codes(snapshot: FarmSnapshot) -> list[str]:
    return [r.code for r in generate_recommendations(snapshot)]


def _land(used: float, total: float = 100.0) -> FarmSnapshot:
    """Snapshot where only land usage can trigger a rule."""
    return FarmSnapshot(
        farm_id="farm-land",
        total_farm_size=total,
        used_plot_area=used,
        crops=(
            CropSummary(name="Maize", category="CEREAL"),
            CropSummary(name="Yam", category="TUBER"),
        ),
    )


class TestZeroState:
    """Tests for empty and partial snapshots."""

    def test_empty_farm_only_gets_started(self, empty_snapshot):
        """Test an all-zero snapshot yields exactly the onboarding recommendation."""
        recommendations = generate_recommendations(empty_snapshot)
        assert len(recommendations) == 1
        assert recommendations[0].code == "get_started"
        assert recommendations[0].priority is Priority.HIGH
        assert recommendations[0].category is RecommendationCategory.TASK

    def test_none_fields_are_treated_as_zero(self):
        """Test that missing values never raise and never fire rules."""
        snapshot = FarmSnapshot(
            farm_id="farm-none",
            farm_name=None,
            total_farm_size=None,
            used_plot_area=None,
            crops=None,
            livestock=None,
            overdue_task_count=None,
            monthly_income=None,
            monthly_expenses=None,
        )
        assert snapshot.total_farm_size == 0
        assert snapshot.crops == ()
        assert _codes(snapshot) == ["get_started"]

    def test_none_fields_on_entries(self):
        """Test that entries with missing values never raise."""
        snapshot = FarmSnapshot(
            farm_id="farm-partial",
            crops=(CropSummary(name="Maize", category="CEREAL", area=None),),
            livestock=(
                LivestockSummary(
                    id="ls-1", animal_type="Goat", quantity=None, health_record_count=None
                ),
            ),
        )

        assert snapshot.crops[0].area == 0.0
        assert snapshot.livestock[0].quantity == 0
        assert snapshot.livestock_without_health_records == []
        assert "missing_health_records" not in _codes(snapshot)

    def test_unknown_count_differs_from_zero(self):
        """Test that only a known zero count fires the health-records rule."""
        snapshot = FarmSnapshot(
            farm_id="farm-partial",
            livestock=(
                LivestockSummary(id="ls-1", animal_type="Goat", health_record_count=None),
                LivestockSummary(id="ls-2", animal_type="Pig", health_record_count=0),
            ),
        )

        assert [e.id for e in snapshot.livestock_without_health_records] == ["ls-2"]
        assert _codes(snapshot) == ["missing_health_records"]

    def test_healthy_farm_gets_nothing(self, balanced_snapshot):
        """Test no rule fires for a balanced farm."""
        assert generate_recommendations(balanced_snapshot) == []


class TestRules:
    """Tests for individual rule conditions."""

    def test_struggling_farm_rule_order(self, struggling_snapshot):
        """Test that fired rules come back in evaluation order."""
        assert _codes(struggling_snapshot) == [
            "overdue_tasks",
            "land_underutilized",
            "negative_monthly_profit",
            "low_crop_diversity",
            "missing_health_records",
        ]

    def test_overdue_tasks_message(self, struggling_snapshot):
        """Test overdue count and pluralization."""
        recommendation = generate_recommendations(struggling_snapshot)[0]
        assert recommendation.title == "Overdue Tasks"
        assert recommendation.kind is RecommendationKind.WARNING
        assert recommendation.priority is Priority.HIGH
        assert recommendation.message.startswith("You have 2 overdue tasks.")

    def test_single_overdue_task(self, balanced_snapshot):
        """Test singular task wording."""
        snapshot = replace(balanced_snapshot, overdue_task_count=1)
        recommendation = generate_recommendations(snapshot)[0]
        assert "1 overdue task." in recommendation.message

    def test_loss_message_uses_currency(self, struggling_snapshot):
        """Test loss amount is shown as an absolute currency value."""
        loss = next(
            r for r in generate_recommendations(struggling_snapshot)
            if r.code == "negative_monthly_profit"
        )
        assert "(GHS 1,234)" in loss.message
        assert loss.priority is Priority.HIGH
        assert loss.category is RecommendationCategory.FINANCE

    def test_profitable_month(self, balanced_snapshot):
        """Test positive profit gives a low-priority success."""
        snapshot = replace(balanced_snapshot, monthly_income=2500.0, monthly_expenses=1000.0)
        recommendations = generate_recommendations(snapshot)
        assert [r.code for r in recommendations] == ["positive_monthly_profit"]
        assert recommendations[0].priority is Priority.LOW
        assert recommendations[0].kind is RecommendationKind.SUCCESS
        assert "GHS 1,500" in recommendations[0].message

    def test_missing_health_records_counts_entries(self, struggling_snapshot):
        """Test only entries with zero health records are counted."""
        recommendation = next(
            r for r in generate_recommendations(struggling_snapshot)
            if r.code == "missing_health_records"
        )
        assert recommendation.message.startswith("2 livestock entries have no health records.")
        assert recommendation.priority is Priority.MEDIUM
        assert recommendation.category is RecommendationCategory.HEALTH
        assert len(recommendation.reasons) == 2

    def test_single_entry_missing_health_records(self):
        """Test singular wording for one entry."""
        snapshot = FarmSnapshot(
            farm_id="farm-3",
            livestock=(LivestockSummary(id="ls-1", animal_type="Rabbit", quantity=6),),
        )
        recommendation = generate_recommendations(snapshot)[0]
        assert recommendation.message.startswith("1 livestock entry has no health records.")

    def test_crop_diversity_needs_one_category(self, balanced_snapshot):
        """Test two categories do not trigger the diversity rule."""
        assert "low_crop_diversity" not in _codes(balanced_snapshot)

    def test_crop_diversity_with_single_crop(self):
        """Test one crop is a single category."""
        snapshot = FarmSnapshot(
            farm_id="farm-4", crops=(CropSummary(name="Cassava", category="TUBER"),)
        )
        assert _codes(snapshot) == ["low_crop_diversity"]

    def test_get_started_not_fired_with_livestock_only(self):
        """Test livestock alone is enough to skip onboarding."""
        snapshot = FarmSnapshot(
            farm_id="farm-5",
            livestock=(LivestockSummary(id="ls-1", animal_type="Pig", health_record_count=3),),
        )
        assert _codes(snapshot) == []


class TestLandUtilization:
    """Tests for land usage rules and their strict boundaries."""

    @pytest.mark.parametrize(
        ("used", "expected"),
        [
            (10.0, ["land_underutilized"]),
            (49.9, ["land_underutilized"]),
            (50.0, []),
            (70.0, []),
            (90.0, []),
            (90.1, ["land_near_capacity"]),
            (120.0, ["land_near_capacity"]),
        ],
    )
    def test_thresholds(self, used, expected):
        """Test < 50 and > 90 are strict."""
        assert _codes(_land(used)) == expected

    def test_fractional_boundary(self):
        """Test exactly 90% on a fractional farm size does not fire."""
        assert _codes(_land(used=0.9, total=1.0)) == []
        assert _codes(_land(used=0.5, total=1.0)) == []

    def test_unknown_farm_size_skips_land_rules(self):
        """Test a zero farm size disables both land rules."""
        assert _codes(_land(used=5.0, total=0.0)) == []

    def test_message_rounds_percent(self):
        """Test the percentage is rounded in the message."""
        recommendation = generate_recommendations(_land(used=33.4))[0]
        assert "Only 33% of your farm land is being used." in recommendation.message

    def test_near_capacity_message(self):
        """Test capacity wording."""
        recommendation = generate_recommendations(_land(used=95.0))[0]
        assert recommendation.title == "Near Capacity"
        assert "Your farm is at 95% capacity." in recommendation.message


class TestEngine:
    """Tests for engine behaviour independent of specific rules."""

    def test_idempotent(self, struggling_snapshot):
        """Test repeated evaluation of the same snapshot gives equal lists."""
        engine = RecommendationEngine()
        assert engine.evaluate(struggling_snapshot) == engine.evaluate(struggling_snapshot)

    def test_extra_rules_run_after_defaults(self, empty_snapshot):
        """Test the engine is open for extension."""
        always = Rule(
            code="always",
            title="Always",
            category=RecommendationCategory.MARKET,
            priority=Priority.LOW,
            kind=RecommendationKind.INFO,
            confidence=0.4,
            predicate=lambda s: True,
            message=lambda s: f"Farm {s.farm_id}",
        )
        engine = RecommendationEngine(extra_rules=[always])
        recommendations = engine.evaluate(empty_snapshot)
        assert [r.code for r in recommendations] == ["get_started", "always"]
        assert recommendations[1].message == "Farm farm-empty"
        assert recommendations[1].confidence_label == "low"
        assert recommendations[1].reasons == []

    def test_custom_rule_set(self, struggling_snapshot):
        """Test replacing the default rules."""
        engine = RecommendationEngine(rules=DEFAULT_RULES[:1])
        assert [r.code for r in engine.evaluate(struggling_snapshot)] == ["overdue_tasks"]

    def test_rule_codes_are_unique(self):
        """Test every default rule has its own code."""
        codes = [rule.code for rule in DEFAULT_RULES]
        assert len(codes) == len(set(codes))


class TestFormatting:
    """Tests for display helpers."""

    @pytest.mark.parametrize(
        ("confidence", "label"),
        [(1.0, "high"), (0.8, "high"), (0.79, "medium"), (0.5, "medium"), (0.49, "low")],
    )
    def test_confidence_label(self, confidence, label):
        """Test confidence buckets."""
        assert confidence_label(confidence) == label

    def test_format_currency(self):
        """Test thousands separators and decimals."""
        assert format_currency(1234) == "GHS 1,234"
        assert format_currency(1234.5) == "GHS 1,234.50"
        assert format_currency(0, "USD") == "USD 0"
