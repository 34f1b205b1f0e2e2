"""Tests for the debt store backends."""
import json

import pytest

from debt_planner.db.store import DebtStore, InMemoryStore, JsonFileStore, StoreError
from debt_planner.models.debt import Debt
from debt_planner.models.plan import PlannerSettings
from debt_planner.models.schedule import Strategy


def _debts() -> list[Debt]:
    return [
        Debt(id=1, name="Card", amount=900.0, interest_rate=19.5, monthly_payment=45.0),
        Debt(id=2, name="Car", amount=8000.0, interest_rate=5.0, total_terms=60, remaining_terms=40),
    ]


class TestJsonFileStore:
    def test_missing_file_loads_none(self, tmp_path):
        store = JsonFileStore(tmp_path / "debts.json")
        assert store.load() is None
        assert store.load_settings() is None

    def test_save_and_load_debts(self, tmp_path):
        store = JsonFileStore(tmp_path / "debts.json")
        store.save(_debts())
        assert store.load() == _debts()

    def test_settings_do_not_clobber_debts(self, tmp_path):
        path = tmp_path / "debts.json"
        store = JsonFileStore(path)
        store.save(_debts())
        store.save_settings(PlannerSettings(strategy=Strategy.snowball, extra_contribution=250.0))

        assert store.load() == _debts()
        loaded = store.load_settings()
        assert loaded.strategy == Strategy.snowball
        assert loaded.extra_contribution == 250.0

        document = json.loads(path.read_text(encoding="utf-8"))
        assert set(document) == {"debts", "strategy", "extra_contribution"}

    def test_creates_parent_directory(self, tmp_path):
        store = JsonFileStore(tmp_path / "nested" / "dir" / "debts.json")
        store.save([])
        assert store.load() == []

    def test_corrupt_file_raises(self, tmp_path):
        path = tmp_path / "debts.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(StoreError):
            JsonFileStore(path).load()

    def test_invalid_record_raises(self, tmp_path):
        path = tmp_path / "debts.json"
        path.write_text(json.dumps({"debts": [{"id": 1, "name": "X"}]}), encoding="utf-8")
        with pytest.raises(StoreError):
            JsonFileStore(path).load()


class TestInMemoryStore:
    def test_returns_copies(self):
        store = InMemoryStore()
        debts = _debts()
        store.save(debts)
        debts[0].amount = 0.0
        loaded = store.load()
        assert loaded[0].amount == 900.0
        loaded[0].amount = 1.0
        assert store.load()[0].amount == 900.0


class TestDebtStore:
    def test_initialize_without_file_uses_memory(self):
        store = DebtStore()
        store.initialize("")
        assert store.status() == {"status": "memory"}

    def test_initialize_with_file(self, tmp_path):
        store = DebtStore()
        store.initialize(str(tmp_path / "debts.json"))
        store.save(_debts())
        assert store.status()["status"] == "file"
        assert store.load() == _debts()

    def test_close_resets_backend(self):
        store = DebtStore()
        store.initialize("")
        store.close()
        assert store.status() == {"status": "not_initialized"}

    def test_close_logs_only_when_open(self, caplog):
        store = DebtStore()
        with caplog.at_level("INFO", logger="debt_planner.db.store"):
            store.close()
        assert "Debt store closed" not in caplog.text

        store.initialize("")
        with caplog.at_level("INFO", logger="debt_planner.db.store"):
            store.close()
        assert "Debt store closed" in caplog.text
