"""Persistence-facing helpers: farm snapshots and schedule record generation."""

from farmadvisor.records.generator import (
    GenerationResult,
    build_health_records,
    build_production_records,
    generate_missing_schedules,
    generate_schedule_records,
)
from farmadvisor.records.repository import build_farm_snapshot, get_user_farm

__all__ = [
    "GenerationResult",
    "build_farm_snapshot",
    "build_health_records",
    "build_production_records",
    "generate_missing_schedules",
    "generate_schedule_records",
    "get_user_farm",
]
