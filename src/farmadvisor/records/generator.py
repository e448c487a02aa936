"""
Health and production record generation for livestock entries.

The builders turn lifecycle-scheduler output into unsaved ORM rows. The
generators persist them: ``generate_schedule_records`` for a single entry
from the API, ``generate_missing_schedules`` for the nightly Celery backfill.
"""

import uuid
from dataclasses import dataclass
from datetime import date, timedelta

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from farmadvisor.config import settings
from farmadvisor.logging_config import get_logger
from farmadvisor.models import HealthRecord, LivestockEntry, ProductionRecord
from farmadvisor.schedules import (
    expand_health_events,
    expand_production_milestones,
    get_catalog,
)

logger = get_logger(__name__)

COMPLETED_STATUSES = ("COMPLETED", "MISSED")


@dataclass
class GenerationResult:
    """Counts of records written for one livestock entry."""

    livestock_entry_id: str
    animal_type: str
    resolved_health_type: str | None
    resolved_production_type: str | None
    health_records: int = 0
    production_records: int = 0


def build_health_records(
    entry: LivestockEntry,
    as_of: date,
    today: date | None = None,
) -> list[HealthRecord]:
    """
    Build unsaved health records for an entry up to ``as_of``.

    Events already due before ``today`` are marked OVERDUE, the rest SCHEDULED.
    """
    today = today or date.today()
    milestones = get_catalog().health_schedule(entry.animal_type)
    events = expand_health_events(milestones, entry.start_date, as_of)

    return [
        HealthRecord(
            id=str(uuid.uuid4()),
            livestock_entry_id=entry.id,
            record_type=event.kind.value,
            name=event.name,
            description=event.milestone.description,
            scheduled_date=event.due_date,
            status="OVERDUE" if event.is_overdue(today) else "SCHEDULED",
            priority=event.priority.value,
            dosage_info=event.milestone.dosage_info,
            notes=event.milestone.notes,
            occurrence=event.occurrence,
            is_generated=True,
        )
        for event in events
    ]


def build_production_records(entry: LivestockEntry, as_of: date) -> list[ProductionRecord]:
    """Build unsaved EXPECTED production records for phases starting by ``as_of``."""
    schedule = get_catalog().production_schedule(entry.animal_type)
    forecasts = expand_production_milestones(schedule, entry.start_date, entry.quantity, as_of)

    return [
        ProductionRecord(
            id=str(uuid.uuid4()),
            livestock_entry_id=entry.id,
            production_type=forecast.kind.value,
            name=forecast.milestone.name,
            description=forecast.milestone.description,
            start_date=forecast.start_date,
            end_date=forecast.end_date,
            unit=forecast.milestone.unit,
            expected_quantity=forecast.expected_output,
            expected_revenue=forecast.expected_revenue,
            status="EXPECTED",
            notes=forecast.milestone.notes,
            is_generated=True,
        )
        for forecast in forecasts
    ]


def _horizon(horizon_days: int | None, default: int) -> date:
    return date.today() + timedelta(days=default if horizon_days is None else horizon_days)


def _without_duplicates(
    records: list[HealthRecord], kept: set[tuple[str, date]]
) -> list[HealthRecord]:
    return [r for r in records if (r.name, r.scheduled_date) not in kept]


async def generate_schedule_records(
    db: AsyncSession,
    entry: LivestockEntry,
    horizon_days: int | None = None,
) -> GenerationResult:
    """
    Replace the generated schedule of a livestock entry.

    Completed or missed health records and recorded production are kept;
    everything else previously generated is deleted and rebuilt.

    Args:
        db: Async session; committed on success.
        entry: Persisted livestock entry.
        horizon_days: How far past today to materialize records. Defaults to
            the configured health and production horizons.

    Returns:
        Counts of the records written.
    """
    catalog = get_catalog()
    result = GenerationResult(
        livestock_entry_id=entry.id,
        animal_type=entry.animal_type,
        resolved_health_type=catalog.resolve_health_key(entry.animal_type),
        resolved_production_type=catalog.resolve_production_key(entry.animal_type),
    )

    await db.execute(
        delete(HealthRecord).where(
            HealthRecord.livestock_entry_id == entry.id,
            HealthRecord.is_generated.is_(True),
            HealthRecord.status.notin_(COMPLETED_STATUSES),
        )
    )
    await db.execute(
        delete(ProductionRecord).where(
            ProductionRecord.livestock_entry_id == entry.id,
            ProductionRecord.is_generated.is_(True),
            ProductionRecord.status == "EXPECTED",
        )
    )

    kept_rows = await db.execute(
        select(HealthRecord.name, HealthRecord.scheduled_date).where(
            HealthRecord.livestock_entry_id == entry.id
        )
    )
    kept = {(name, scheduled) for name, scheduled in kept_rows.all()}

    health = _without_duplicates(
        build_health_records(
            entry, _horizon(horizon_days, settings.health_schedule_horizon_days)
        ),
        kept,
    )
    production = build_production_records(
        entry, _horizon(horizon_days, settings.production_schedule_horizon_days)
    )

    db.add_all(health)
    db.add_all(production)
    await db.commit()

    result.health_records = len(health)
    result.production_records = len(production)
    logger.info(
        f"Generated {result.health_records} health and {result.production_records} "
        f"production records for {entry.animal_type!r} entry {entry.id}"
    )
    return result


def generate_missing_schedules(
    session: Session,
    horizon_days: int | None = None,
    batch_size: int | None = None,
) -> dict[str, int]:
    """
    Generate schedules for active livestock entries that have no health records.

    Commits once per batch so a failure part-way keeps earlier batches.

    Returns:
        Dict with entries_processed, health_records and production_records.
    """
    batch_size = batch_size or settings.backfill_batch_size
    has_health_records = exists().where(HealthRecord.livestock_entry_id == LivestockEntry.id)
    entries = (
        session.execute(
            select(LivestockEntry).where(
                LivestockEntry.status == "ACTIVE",
                ~has_health_records,
            )
        )
        .scalars()
        .all()
    )

    stats = {"entries_processed": 0, "health_records": 0, "production_records": 0}
    if not entries:
        logger.info("No livestock entries without health records")
        return stats

    health_as_of = _horizon(horizon_days, settings.health_schedule_horizon_days)
    production_as_of = _horizon(horizon_days, settings.production_schedule_horizon_days)

    for index, entry in enumerate(entries, start=1):
        health = build_health_records(entry, health_as_of)
        production = build_production_records(entry, production_as_of)
        session.add_all(health)
        session.add_all(production)

        stats["entries_processed"] += 1
        stats["health_records"] += len(health)
        stats["production_records"] += len(production)

        if index % batch_size == 0:
            session.commit()
            logger.debug(f"Committed batch ending at entry {index}/{len(entries)}")

    session.commit()
    logger.info(
        f"Backfilled {stats['entries_processed']} entries: "
        f"{stats['health_records']} health, {stats['production_records']} production records"
    )
    return stats
