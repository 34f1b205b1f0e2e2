import pytest

from debt_planner.db.store import InMemoryStore, debt_store
from debt_planner.services.payoff_service import plan_publisher


@pytest.fixture(autouse=True)
def _isolated_state():
    """Give every test an empty in-memory store and a fresh plan publisher."""
    debt_store.use(InMemoryStore())
    plan_publisher.reset()
    yield
    debt_store.close()
