"""Celery application configuration for background task processing."""

import os

from celery import Celery
from celery.schedules import crontab

from farmadvisor.config import settings

# Result backend lives in the application database (sync driver)
RESULT_BACKEND_URL = settings.database_url.replace("+asyncpg", "").replace(
    "postgresql://", "db+postgresql://"
)

celery_app = Celery(
    "farmadvisor",
    broker=settings.redis_url,
    backend=RESULT_BACKEND_URL,
    include=["farmadvisor.tasks.schedules"],
)

celery_app.conf.update(
    # Task settings
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="Africa/Accra",
    enable_utc=True,
    # Task execution settings
    task_acks_late=True,  # Acknowledge after task completes
    task_reject_on_worker_lost=True,  # Requeue if worker dies
    worker_prefetch_multiplier=1,
    # Result settings
    result_expires=86400 * 7,
    # Retry settings (default for all tasks)
    task_default_retry_delay=60,
    task_max_retries=3,
    # Beat scheduler settings
    beat_schedule={
        "backfill-livestock-schedules": {
            "task": "farmadvisor.tasks.schedules.backfill_livestock_schedules_task",
            "schedule": crontab(hour=1, minute=30),  # 1:30 AM daily
            "options": {"queue": "schedules"},
        },
    },
    # Queue routing
    task_routes={
        "farmadvisor.tasks.schedules.*": {"queue": "schedules"},
    },
    # Logging
    worker_hijack_root_logger=False,
)

if os.name == "nt":
    celery_app.conf.update(
        worker_pool="solo",  # Use solo pool on Windows
    )
