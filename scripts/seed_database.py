#!/usr/bin/env python
"""
Database seeding script for a demo farm.

It will:

1. Wait for PostgreSQL to be available
2. Create the tables if they don't exist
3. Create a demo user and farm with plots, crops, livestock, tasks and
   this month's income and expenses (skipped if the farm already exists)
4. Generate health and production schedules for the demo livestock

Run with: python scripts/seed_database.py

Environment Variables:
    SEED_USER_ID: Owner of the demo farm (default: default-user)
    SEED_FARM_ID: Id of the demo farm (default: demo-farm)
    DATABASE_URL: PostgreSQL connection string
"""

import os
import sys
import time
from datetime import date, timedelta

from sqlalchemy import select
from sqlalchemy.orm import Session

from farmadvisor.database import Base, sync_engine
from farmadvisor.logging_config import configure_logging, get_logger
from farmadvisor.models import (
    CropEntry,
    Expense,
    Farm,
    Income,
    LivestockEntry,
    Plot,
    Task,
    User,
)
from farmadvisor.records import generate_missing_schedules

configure_logging(log_level=os.getenv("LOG_LEVEL", "INFO"))
logger = get_logger(__name__)

SEED_USER_ID = os.getenv("SEED_USER_ID", "default-user")
SEED_FARM_ID = os.getenv("SEED_FARM_ID", "demo-farm")


def wait_for_postgres(max_retries: int = 30, retry_delay: int = 2) -> bool:
    """Wait for PostgreSQL to be available."""
    logger.info("Waiting for PostgreSQL to be ready...")

    for attempt in range(max_retries):
        try:
            with sync_engine.connect() as conn:
                conn.execute(select(1))
            logger.info("PostgreSQL is ready")
            return True
        except Exception as e:
            logger.debug(f"PostgreSQL not ready (attempt {attempt + 1}/{max_retries}): {e}")
            time.sleep(retry_delay)

    logger.error("PostgreSQL did not become ready in time")
    return False


def create_demo_farm(session: Session, today: date) -> bool:
    """Create the demo farm. Returns False if it already exists."""
    if session.get(Farm, SEED_FARM_ID) is not None:
        logger.info(f"Farm {SEED_FARM_ID} already exists, skipping")
        return False

    if session.get(User, SEED_USER_ID) is None:
        session.add(User(id=SEED_USER_ID, email=f"{SEED_USER_ID}@example.com", name="Demo Farmer"))

    session.add(Farm(id=SEED_FARM_ID, user_id=SEED_USER_ID, name="Demo Farm", size=10.0))
    session.add_all(
        [
            Plot(id=f"{SEED_FARM_ID}-plot-1", farm_id=SEED_FARM_ID, name="North field", size=3.0),
            Plot(id=f"{SEED_FARM_ID}-plot-2", farm_id=SEED_FARM_ID, name="Poultry pen", size=0.5),
        ]
    )
    session.add_all(
        [
            CropEntry(
                id=f"{SEED_FARM_ID}-maize",
                user_id=SEED_USER_ID,
                farm_id=SEED_FARM_ID,
                plot_id=f"{SEED_FARM_ID}-plot-1",
                crop_name="Maize",
                category="CEREAL",
                area=2.0,
                planting_date=today - timedelta(days=40),
            ),
            CropEntry(
                id=f"{SEED_FARM_ID}-rice",
                user_id=SEED_USER_ID,
                farm_id=SEED_FARM_ID,
                plot_id=f"{SEED_FARM_ID}-plot-1",
                crop_name="Rice",
                category="CEREAL",
                area=1.0,
                planting_date=today - timedelta(days=20),
            ),
        ]
    )
    session.add_all(
        [
            LivestockEntry(
                id=f"{SEED_FARM_ID}-layers",
                user_id=SEED_USER_ID,
                farm_id=SEED_FARM_ID,
                animal_type="Layer",
                batch_id="L-001",
                quantity=200,
                acquired_date=today - timedelta(days=130),
            ),
            LivestockEntry(
                id=f"{SEED_FARM_ID}-goats",
                user_id=SEED_USER_ID,
                farm_id=SEED_FARM_ID,
                animal_type="local goat",
                quantity=12,
                acquired_date=today - timedelta(days=45),
            ),
        ]
    )
    session.add_all(
        [
            Task(
                id=f"{SEED_FARM_ID}-task-1",
                user_id=SEED_USER_ID,
                farm_id=SEED_FARM_ID,
                title="Weed the north field",
                due_date=today - timedelta(days=3),
                status="OVERDUE",
            ),
            Task(
                id=f"{SEED_FARM_ID}-task-2",
                user_id=SEED_USER_ID,
                farm_id=SEED_FARM_ID,
                title="Buy layer mash",
                due_date=today + timedelta(days=2),
                status="PENDING",
            ),
        ]
    )
    session.add(
        Income(
            id=f"{SEED_FARM_ID}-income-1",
            user_id=SEED_USER_ID,
            farm_id=SEED_FARM_ID,
            source="EGG_SALES",
            total_amount=1500.0,
            transaction_date=today.replace(day=1),
        )
    )
    session.add(
        Expense(
            id=f"{SEED_FARM_ID}-expense-1",
            user_id=SEED_USER_ID,
            farm_id=SEED_FARM_ID,
            category="FEED",
            amount=900.0,
            transaction_date=today.replace(day=1),
        )
    )
    session.commit()
    logger.info(f"Created demo farm {SEED_FARM_ID} for user {SEED_USER_ID}")
    return True


def seed_database() -> dict:
    """
    Main seeding function.

    Returns:
        Dictionary with seeding results.
    """
    results: dict = {"status": "unknown", "farm_created": False}

    if not wait_for_postgres():
        results["status"] = "failed"
        results["error"] = "PostgreSQL not available"
        return results

    logger.info("Initializing database tables...")
    Base.metadata.create_all(sync_engine)

    with Session(sync_engine, expire_on_commit=False) as session:
        results["farm_created"] = create_demo_farm(session, date.today())
        results.update(generate_missing_schedules(session))

    results["status"] = "completed"
    logger.info(f"Seeding completed: {results}")
    return results


def main():
    """Entry point for the seed script."""
    try:
        results = seed_database()
        sys.exit(0 if results["status"] == "completed" else 1)

    except KeyboardInterrupt:
        logger.info("Seeding interrupted by user")
        sys.exit(130)
    except Exception as e:
        logger.exception(f"Seeding failed with error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
