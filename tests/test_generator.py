"""Tests for turning lifecycle schedules into health and production records."""

from datetime import date, datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from farmadvisor.records import (
    build_health_records,
    build_production_records,
    generate_schedule_records,
)


class TestBuildHealthRecords:
    """Tests for build_health_records."""

    def test_broiler_first_month(self, make_livestock_entry):
        """A broiler batch gets its four treatments in due-date order."""
        entry = make_livestock_entry("Broiler")

        records = build_health_records(entry, as_of=date(2024, 1, 31), today=date(2024, 1, 1))

        assert [r.name for r in records] == [
            "Newcastle Disease (Day 7)",
            "Gumboro Disease",
            "Newcastle Booster",
            "Pre-Market Deworming",
        ]
        assert [r.scheduled_date for r in records] == [
            date(2024, 1, 8),
            date(2024, 1, 15),
            date(2024, 1, 22),
            date(2024, 1, 29),
        ]
        assert all(r.livestock_entry_id == entry.id for r in records)
        assert all(r.is_generated for r in records)

    def test_status_depends_on_today(self, make_livestock_entry):
        """Records due before today are OVERDUE, the rest SCHEDULED."""
        entry = make_livestock_entry("Broiler")

        records = build_health_records(entry, as_of=date(2024, 1, 31), today=date(2024, 1, 20))

        assert [r.status for r in records] == ["OVERDUE", "OVERDUE", "SCHEDULED", "SCHEDULED"]

    def test_record_fields_copied_from_milestone(self, make_livestock_entry):
        """Kind, priority and dosage come from the catalog milestone."""
        entry = make_livestock_entry("Broiler")

        first = build_health_records(entry, as_of=date(2024, 1, 31))[0]

        assert first.record_type == "VACCINATION"
        assert first.priority == "URGENT"
        assert first.dosage_info == "Eye drop or drinking water"
        assert first.occurrence == 0

    def test_recurring_milestone_repeats(self, make_livestock_entry):
        """Layer pre-lay Newcastle repeats every 90 days up to as_of."""
        entry = make_livestock_entry("Layer")
        as_of = date(2024, 1, 1) + timedelta(days=112 + 90 * 2)

        records = build_health_records(entry, as_of=as_of)
        newcastle = [r for r in records if r.name == "Newcastle (Pre-Lay)"]

        assert [r.occurrence for r in newcastle] == [0, 1, 2]
        assert newcastle[-1].scheduled_date == as_of

    def test_ids_are_unique(self, make_livestock_entry):
        """Every record gets its own id."""
        entry = make_livestock_entry("Layer")

        records = build_health_records(entry, as_of=date(2025, 1, 1))

        assert len({r.id for r in records}) == len(records)

    def test_falls_back_to_created_at(self, make_livestock_entry):
        """Without an acquisition date the schedule counts from creation."""
        entry = make_livestock_entry(
            "Broiler", acquired_date=None, created_at=datetime(2024, 3, 1, 9, 30)
        )

        records = build_health_records(entry, as_of=date(2024, 3, 31))

        assert records[0].scheduled_date == date(2024, 3, 8)


class TestBuildProductionRecords:
    """Tests for build_production_records."""

    def test_only_phases_started_by_as_of(self, make_livestock_entry):
        """Phases starting after as_of are not materialized."""
        entry = make_livestock_entry("Broiler", quantity=100)

        records = build_production_records(entry, as_of=date(2024, 1, 31))

        assert [r.name for r in records] == [
            "Week 1 Weight Check",
            "Week 2 Weight Check",
            "Week 3 Weight Check",
            "Week 4 Weight Check",
        ]
        assert all(r.status == "EXPECTED" for r in records)

    def test_quantities_scale_with_flock_size(self, make_livestock_entry):
        """Expected quantity is daily output per animal times quantity."""
        entry = make_livestock_entry("Broiler", quantity=100)

        first = build_production_records(entry, as_of=date(2024, 1, 31))[0]

        assert first.production_type == "WEIGHT"
        assert first.expected_quantity == pytest.approx(18.0)
        assert first.expected_revenue is None
        assert first.start_date == date(2024, 1, 8)
        assert first.end_date == date(2024, 1, 15)
        assert first.unit == "kg per bird"

    def test_nothing_before_first_phase(self, make_livestock_entry):
        """A batch acquired today has no production yet."""
        entry = make_livestock_entry("Broiler")

        assert build_production_records(entry, as_of=date(2024, 1, 3)) == []


class TestGenerateScheduleRecords:
    """Tests for generate_schedule_records with a mocked session."""

    @staticmethod
    def _session(kept_rows):
        db = AsyncMock()
        db.add_all = MagicMock()
        kept = MagicMock()
        kept.all.return_value = kept_rows
        db.execute.side_effect = [MagicMock(), MagicMock(), kept]
        return db

    @pytest.mark.asyncio
    async def test_writes_and_commits(self, make_livestock_entry):
        """Fresh entries get every health and production record."""
        entry = make_livestock_entry("Broiler")
        db = self._session([])

        result = await generate_schedule_records(db, entry, horizon_days=0)

        assert result.resolved_health_type == "Broiler"
        assert result.resolved_production_type == "Broiler"
        assert result.health_records == 4
        assert result.production_records == 7
        assert db.add_all.call_count == 2
        db.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_skips_records_already_kept(self, make_livestock_entry):
        """A completed treatment is not generated a second time."""
        entry = make_livestock_entry("Broiler")
        db = self._session([("Gumboro Disease", date(2024, 1, 15))])

        result = await generate_schedule_records(db, entry, horizon_days=0)

        assert result.health_records == 3
        written = db.add_all.call_args_list[0].args[0]
        assert "Gumboro Disease" not in [r.name for r in written]

    @pytest.mark.asyncio
    async def test_unknown_type_uses_defaults(self, make_livestock_entry):
        """Unknown animal types still get a schedule."""
        entry = make_livestock_entry("Zebra")
        db = self._session([])

        result = await generate_schedule_records(db, entry, horizon_days=0)

        assert result.resolved_health_type is None
        assert result.resolved_production_type is None
        assert result.health_records > 0
