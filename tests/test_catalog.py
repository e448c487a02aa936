"""Tests for the livestock schedule catalog and animal type resolution."""

import pytest

from farmadvisor.schedules import (
    CatalogValidationError,
    HealthEventKind,
    HealthMilestone,
    Priority,
    ProductionKind,
    ProductionMilestone,
    ScheduleCatalog,
    resolve_health_schedule,
    resolve_production_schedule,
)
from farmadvisor.schedules.catalog import (
    ANIMAL_TYPE_SYNONYMS,
    DEFAULT_HEALTH_SCHEDULE,
    DEFAULT_PRODUCTION_SCHEDULE,
    HEALTH_TEMPLATES,
    PRODUCTION_TEMPLATES,
)


def _health(name="Check", offset=7, repeat=None):
    return HealthMilestone(
        kind=HealthEventKind.VACCINATION,
        name=name,
        description="",
        offset_days=offset,
        priority=Priority.HIGH,
        repeat_interval_days=repeat,
    )


def _production(name="Phase", offset=0, duration=None, output=None, price=None):
    return ProductionMilestone(
        kind=ProductionKind.WEIGHT,
        name=name,
        description="",
        offset_days=offset,
        unit="kg",
        expected_daily_output=output,
        expected_revenue_per_unit=price,
        duration_days=duration,
    )


def _catalog(health=None, production=None, synonyms=None):
    return ScheduleCatalog(
        health=health if health is not None else {"Goat": (_health(),)},
        production=production if production is not None else {"Goat": (_production(),)},
        default_health=(_health("Default"),),
        default_production=(_production("Default"),),
        synonyms=synonyms,
    )


class TestHealthResolution:
    """Tests for resolving free-form animal types to health schedules."""

    def test_exact_match(self):
        """Test exact catalog key match."""
        assert resolve_health_schedule("Goat") is HEALTH_TEMPLATES["Goat"]

    def test_case_insensitive(self):
        """Test that case does not matter."""
        assert (
            resolve_health_schedule("CHICKEN")
            == resolve_health_schedule("chicken")
            == resolve_health_schedule("Chicken")
        )
        assert resolve_health_schedule("chicken") is HEALTH_TEMPLATES["Chicken"]

    def test_input_contains_key(self):
        """Test substring match on a longer input."""
        assert resolve_health_schedule("Layer Chicken") == resolve_health_schedule("Layer")
        assert resolve_health_schedule("Broiler Chicken") is HEALTH_TEMPLATES["Broiler"]
        assert resolve_health_schedule("West African Dwarf Goat") is HEALTH_TEMPLATES["Goat"]

    def test_key_contains_input(self):
        """Test reverse substring match on a shorter input."""
        assert resolve_health_schedule("fowl") is HEALTH_TEMPLATES["Guinea Fowl"]
        assert resolve_health_schedule("turk") is HEALTH_TEMPLATES["Turkey"]

    def test_synonym(self):
        """Test synonym table lookup."""
        assert resolve_health_schedule("local chicken") is HEALTH_TEMPLATES["Chicken"]

    def test_unknown_type_returns_default(self):
        """Test that unknown animals get the default schedule exactly."""
        assert resolve_health_schedule("Elephant") is DEFAULT_HEALTH_SCHEDULE

    def test_empty_and_blank_input_returns_default(self):
        """Test that empty input does not match every key."""
        assert resolve_health_schedule("") is DEFAULT_HEALTH_SCHEDULE
        assert resolve_health_schedule("   ") is DEFAULT_HEALTH_SCHEDULE

    def test_whitespace_is_ignored(self):
        """Test that surrounding whitespace is stripped."""
        assert resolve_health_schedule("  goat ") is HEALTH_TEMPLATES["Goat"]

    @pytest.mark.parametrize(
        "animal_type",
        ["Chicken", "cattle", "Rabbit", "Elephant", "", "x", "Layer Chicken", "GUINEA FOWL"],
    )
    def test_never_empty(self, animal_type):
        """Test that every input resolves to a non-empty schedule."""
        assert len(resolve_health_schedule(animal_type)) > 0
        assert len(resolve_production_schedule(animal_type)) > 0


class TestProductionResolution:
    """Tests for resolving animal types to production schedules."""

    def test_layer(self):
        """Test the layer schedule starts at point of lay."""
        schedule = resolve_production_schedule("layers")
        assert schedule is PRODUCTION_TEMPLATES["Layer"]
        assert schedule[0].name == "Point of Lay"

    def test_synonym_shared_with_health(self, catalog):
        """Test that the synonym table also applies to production schedules."""
        assert catalog.resolve_production_key("local pig") == "Pig"
        assert catalog.resolve_health_key("local pig") == "Pig"

    def test_chicken_has_no_production_schedule(self, catalog):
        """Test that generic chicken falls back to the default production schedule."""
        assert catalog.resolve_health_key("Chicken") == "Chicken"
        assert catalog.resolve_production_key("Chicken") is None
        assert resolve_production_schedule("Chicken") is DEFAULT_PRODUCTION_SCHEDULE

    def test_unknown_type_returns_default(self):
        """Test production default fallback."""
        assert resolve_production_schedule("Alpaca") is DEFAULT_PRODUCTION_SCHEDULE

    def test_resolve_key_reports_match(self, catalog):
        """Test the resolved key for either table."""
        assert catalog.resolve_key("Layer Chicken") == "Layer"
        assert catalog.resolve_key("Elephant") is None


class TestCatalogData:
    """Tests for the static catalog contents."""

    def test_poultry_classes_precede_chicken(self, catalog):
        """Test catalog order so specific poultry classes win substring ties."""
        keys = catalog.animal_types
        assert keys.index("Layer") < keys.index("Chicken")
        assert keys.index("Broiler") < keys.index("Chicken")

    def test_production_offsets_non_decreasing(self):
        """Test production milestones are ordered by offset."""
        for animal_type, schedule in PRODUCTION_TEMPLATES.items():
            offsets = [m.offset_days for m in schedule]
            assert offsets == sorted(offsets), animal_type

    def test_synonyms_point_to_catalog_keys(self):
        """Test every synonym targets a real key."""
        for target in ANIMAL_TYPE_SYNONYMS.values():
            assert target in HEALTH_TEMPLATES

    def test_catalog_is_read_only(self, catalog):
        """Test that schedules cannot be mutated."""
        schedule = catalog.health_schedule("Goat")
        assert isinstance(schedule, tuple)
        with pytest.raises(AttributeError):
            schedule[0].offset_days = 1  # type: ignore[misc]


class TestCatalogValidation:
    """Tests for fail-fast validation of schedule data."""

    def test_valid_catalog(self):
        """Test a small valid catalog builds."""
        catalog = _catalog()
        assert catalog.animal_types == ["Goat"]

    def test_negative_offset(self):
        """Test negative offsets are rejected."""
        with pytest.raises(CatalogValidationError, match="offset_days"):
            _catalog(health={"Goat": (_health(offset=-1),)})

    def test_non_positive_repeat_interval(self):
        """Test zero repeat intervals are rejected."""
        with pytest.raises(CatalogValidationError, match="repeat_interval_days"):
            _catalog(health={"Goat": (_health(repeat=0),)})

    def test_non_positive_duration(self):
        """Test zero durations are rejected."""
        with pytest.raises(CatalogValidationError, match="duration_days"):
            _catalog(production={"Goat": (_production(duration=0),)})

    def test_negative_output_and_price(self):
        """Test negative output or price is rejected."""
        with pytest.raises(CatalogValidationError, match="expected_daily_output"):
            _catalog(production={"Goat": (_production(output=-1),)})
        with pytest.raises(CatalogValidationError, match="expected_revenue_per_unit"):
            _catalog(production={"Goat": (_production(price=-0.5),)})

    def test_unordered_production(self):
        """Test production milestones out of offset order are rejected."""
        with pytest.raises(CatalogValidationError, match="ordered"):
            _catalog(production={"Goat": (_production(offset=30), _production(offset=10))})

    def test_empty_schedule(self):
        """Test empty schedules are rejected."""
        with pytest.raises(CatalogValidationError, match="empty"):
            _catalog(health={"Goat": ()})

    def test_dangling_synonym(self):
        """Test synonyms must point at a catalog key."""
        with pytest.raises(CatalogValidationError, match="unknown type"):
            _catalog(synonyms={"billy": "Yak"})
