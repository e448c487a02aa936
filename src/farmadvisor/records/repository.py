"""Database queries that assemble a FarmSnapshot."""

from datetime import date

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from farmadvisor.logging_config import get_logger
from farmadvisor.models import (
    CropEntry,
    Expense,
    Farm,
    HealthRecord,
    Income,
    LivestockEntry,
    Plot,
    Task,
)
from farmadvisor.recommend.snapshot import CropSummary, FarmSnapshot, LivestockSummary

logger = get_logger(__name__)


async def get_user_farm(db: AsyncSession, user_id: str, farm_id: str) -> Farm | None:
    result = await db.execute(select(Farm).where(Farm.id == farm_id, Farm.user_id == user_id))
    return result.scalar_one_or_none()


async def _sum_amount(db: AsyncSession, column, farm_id: str, since: date) -> float:
    model = column.class_
    total = (
        await db.execute(
            select(func.coalesce(func.sum(column), 0)).where(
                model.farm_id == farm_id,
                model.transaction_date >= since,
            )
        )
    ).scalar()
    return float(total or 0)


async def _task_count(db: AsyncSession, farm_id: str, status: str) -> int:
    return (
        await db.execute(
            select(func.count(Task.id)).where(Task.farm_id == farm_id, Task.status == status)
        )
    ).scalar() or 0


async def build_farm_snapshot(
    db: AsyncSession,
    user_id: str,
    farm_id: str,
    today: date | None = None,
) -> FarmSnapshot | None:
    """
    Load everything the recommendation rules need for one farm.

    Returns:
        The snapshot, or None if the farm does not exist or belongs to
        another user.
    """
    farm = await get_user_farm(db, user_id, farm_id)
    if farm is None:
        return None

    today = today or date.today()
    month_start = today.replace(day=1)
    year_start = today.replace(month=1, day=1)

    used_area = (
        await db.execute(
            select(func.coalesce(func.sum(Plot.size), 0)).where(Plot.farm_id == farm_id)
        )
    ).scalar()

    crop_rows = await db.execute(
        select(CropEntry.crop_name, CropEntry.category, CropEntry.area).where(
            CropEntry.farm_id == farm_id
        )
    )
    crops = tuple(
        CropSummary(name=name, category=category, area=area or 0.0)
        for name, category, area in crop_rows.all()
    )

    health_count = (
        select(func.count(HealthRecord.id))
        .where(HealthRecord.livestock_entry_id == LivestockEntry.id)
        .correlate(LivestockEntry)
        .scalar_subquery()
    )
    livestock_rows = await db.execute(
        select(
            LivestockEntry.id,
            LivestockEntry.animal_type,
            LivestockEntry.quantity,
            LivestockEntry.status,
            health_count,
        ).where(LivestockEntry.farm_id == farm_id)
    )
    livestock = tuple(
        LivestockSummary(
            id=entry_id,
            animal_type=animal_type,
            quantity=quantity,
            status=status,
            health_record_count=records or 0,
        )
        for entry_id, animal_type, quantity, status, records in livestock_rows.all()
    )

    snapshot = FarmSnapshot(
        farm_id=farm.id,
        farm_name=farm.name,
        total_farm_size=farm.size or 0.0,
        used_plot_area=float(used_area or 0),
        crops=crops,
        livestock=livestock,
        overdue_task_count=await _task_count(db, farm_id, "OVERDUE"),
        pending_task_count=await _task_count(db, farm_id, "PENDING"),
        monthly_income=await _sum_amount(db, Income.total_amount, farm_id, month_start),
        monthly_expenses=await _sum_amount(db, Expense.amount, farm_id, month_start),
        yearly_income=await _sum_amount(db, Income.total_amount, farm_id, year_start),
        yearly_expenses=await _sum_amount(db, Expense.amount, farm_id, year_start),
    )
    logger.debug(
        f"Snapshot for farm {farm_id}: {snapshot.crop_count} crops, "
        f"{snapshot.livestock_count} livestock entries"
    )
    return snapshot
