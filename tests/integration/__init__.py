"""Integration tests for farmadvisor.

These tests require a PostgreSQL database (TEST_DATABASE_URL) and are
skipped when it is not reachable.

Run with: pytest tests/integration/ -v
Skip with: pytest -m "not integration"
"""
