from collections.abc import Generator

from debt_planner.db.store import DebtStore, debt_store


def get_store() -> Generator[DebtStore, None, None]:
    """FastAPI dependency that yields the application debt store."""
    yield debt_store
