"""Celery tasks for livestock schedule generation."""

import asyncio
from typing import Any

from sqlalchemy import select

from farmadvisor.celery_app import celery_app
from farmadvisor.config import settings
from farmadvisor.database import AsyncSessionLocal, SyncSessionLocal
from farmadvisor.logging_config import LoggingContext, configure_logging, get_logger
from farmadvisor.models import LivestockEntry
from farmadvisor.records import generate_missing_schedules, generate_schedule_records

# Configure logging for Celery workers
configure_logging(settings.log_level)
logger = get_logger(__name__)


def run_async(coro: Any) -> Any:
    """Run an async coroutine in a synchronous context."""
    try:
        loop = asyncio.get_event_loop()
        if loop.is_running():
            import concurrent.futures

            with concurrent.futures.ThreadPoolExecutor() as executor:
                future = executor.submit(asyncio.run, coro)
                return future.result()
        return loop.run_until_complete(coro)
    except RuntimeError:
        # No event loop in this thread
        return asyncio.run(coro)


@celery_app.task(
    bind=True,
    name="farmadvisor.tasks.schedules.backfill_livestock_schedules_task",
    max_retries=3,
    default_retry_delay=300,  # 5 minutes
    autoretry_for=(Exception,),
    retry_backoff=True,
    retry_backoff_max=3600,
    retry_jitter=True,
    acks_late=True,
    reject_on_worker_lost=True,
)
def backfill_livestock_schedules_task(self, horizon_days: int | None = None) -> dict[str, Any]:
    """
    Generate schedules for active livestock entries that have none.

    Scheduled daily at 1:30 AM by Celery Beat; picks up entries created
    while schedule generation was failing or before it existed.

    Args:
        horizon_days: Override of the configured materialization horizon.

    Returns:
        dict with entries_processed, health_records and production_records.
    """
    task_id = self.request.id

    with LoggingContext(task_id=task_id):
        logger.info(f"Starting schedule backfill task {task_id}")

        try:
            with SyncSessionLocal() as session:
                stats = generate_missing_schedules(session, horizon_days=horizon_days)
            logger.info(f"Schedule backfill task {task_id} finished: {stats}")
            return {"status": "completed", **stats}

        except Exception as e:
            logger.exception(f"Schedule backfill task {task_id} failed with error: {e}")
            # Re-raise to trigger Celery retry mechanism
            raise


async def _regenerate(entry_id: str, horizon_days: int | None) -> dict[str, Any]:
    async with AsyncSessionLocal() as db:
        entry = (
            await db.execute(select(LivestockEntry).where(LivestockEntry.id == entry_id))
        ).scalar_one_or_none()
        if entry is None:
            return {"status": "not_found", "livestock_entry_id": entry_id}

        result = await generate_schedule_records(db, entry, horizon_days=horizon_days)
        return {
            "status": "completed",
            "livestock_entry_id": entry_id,
            "health_records": result.health_records,
            "production_records": result.production_records,
        }


@celery_app.task(
    bind=True,
    name="farmadvisor.tasks.schedules.regenerate_entry_schedules_task",
    max_retries=3,
    default_retry_delay=60,
    autoretry_for=(Exception,),
    retry_backoff=True,
    retry_backoff_max=600,
    acks_late=True,
)
def regenerate_entry_schedules_task(
    self, entry_id: str, horizon_days: int | None = None
) -> dict[str, Any]:
    """Rebuild the generated health and production records of one livestock entry."""
    task_id = self.request.id

    with LoggingContext(task_id=task_id):
        logger.info(f"Regenerating schedules for livestock entry {entry_id}")

        try:
            result = run_async(_regenerate(entry_id, horizon_days))
            if result["status"] == "not_found":
                logger.warning(f"Livestock entry {entry_id} no longer exists")
            return result

        except Exception as e:
            logger.exception(f"Regenerating schedules for {entry_id} failed with error: {e}")
            raise
