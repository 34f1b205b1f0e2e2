"""Debt list and planner settings persistence.

The engine never touches storage; routes reach it through the
``debt_store`` singleton, which delegates to a JSON file when
``DATA_FILE`` is configured and to process memory otherwise.
"""
from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Optional, Protocol

from pydantic import ValidationError

from debt_planner.config import settings
from debt_planner.models.debt import Debt
from debt_planner.models.plan import PlannerSettings

logger = logging.getLogger(__name__)


class StoreError(RuntimeError):
    """Raised when stored data cannot be read or written."""


class DebtRepository(Protocol):
    """Load/save contract for the debt list and planner settings."""

    def load(self) -> Optional[list[Debt]]: ...

    def save(self, debts: list[Debt]) -> None: ...

    def load_settings(self) -> Optional[PlannerSettings]: ...

    def save_settings(self, planner_settings: PlannerSettings) -> None: ...

    def status(self) -> dict: ...


class InMemoryStore:
    """Keeps copies of the last saved values in process memory."""

    def __init__(self):
        self._debts: Optional[list[Debt]] = None
        self._settings: Optional[PlannerSettings] = None

    def load(self) -> Optional[list[Debt]]:
        if self._debts is None:
            return None
        return [debt.model_copy(deep=True) for debt in self._debts]

    def save(self, debts: list[Debt]) -> None:
        self._debts = [debt.model_copy(deep=True) for debt in debts]

    def load_settings(self) -> Optional[PlannerSettings]:
        return self._settings.model_copy() if self._settings else None

    def save_settings(self, planner_settings: PlannerSettings) -> None:
        self._settings = planner_settings.model_copy()

    def status(self) -> dict:
        return {"status": "memory"}


class JsonFileStore:
    """Stores debts and settings in a single JSON document.

    Layout: {"debts": [...], "strategy": "...", "extra_contribution": ...}.
    Writes go to a temp file in the same directory and are swapped in with
    os.replace.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read(self) -> dict[str, Any]:
        if not self.path.is_file():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, json.JSONDecodeError) as e:
            raise StoreError(f"Failed to read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StoreError(f"Unexpected document in {self.path}: expected an object")
        return data

    def _write(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StoreError(f"Failed to write {self.path}: {e}") from e

    def load(self) -> Optional[list[Debt]]:
        with self._lock:
            data = self._read()
        if "debts" not in data:
            return None
        try:
            return [Debt.model_validate(item) for item in data["debts"]]
        except (TypeError, ValidationError) as e:
            raise StoreError(f"Invalid debt record in {self.path}: {e}") from e

    def save(self, debts: list[Debt]) -> None:
        with self._lock:
            data = self._read()
            data["debts"] = [debt.model_dump(mode="json") for debt in debts]
            self._write(data)

    def load_settings(self) -> Optional[PlannerSettings]:
        with self._lock:
            data = self._read()
        if "strategy" not in data and "extra_contribution" not in data:
            return None
        fields = {k: data[k] for k in ("strategy", "extra_contribution") if k in data}
        try:
            return PlannerSettings.model_validate(fields)
        except ValidationError as e:
            raise StoreError(f"Invalid planner settings in {self.path}: {e}") from e

    def save_settings(self, planner_settings: PlannerSettings) -> None:
        with self._lock:
            data = self._read()
            data.update(planner_settings.model_dump(mode="json"))
            self._write(data)

    def status(self) -> dict:
        return {"status": "file", "path": str(self.path), "exists": self.path.is_file()}


class DebtStore:
    """Application-wide store facade, picked once at startup."""

    def __init__(self):
        self._backend: Optional[DebtRepository] = None

    def initialize(self, data_file: str | None = None) -> None:
        path = data_file if data_file is not None else settings.DATA_FILE
        if path:
            self._backend = JsonFileStore(path)
            logger.info("Debt store initialized with data file %s", path)
        else:
            self._backend = InMemoryStore()
            logger.warning("No DATA_FILE configured, debts are kept in memory only")

    def use(self, backend: DebtRepository) -> None:
        """Swap in a specific repository implementation."""
        self._backend = backend

    @property
    def backend(self) -> DebtRepository:
        if self._backend is None:
            self.initialize()
        return self._backend

    def load(self) -> Optional[list[Debt]]:
        return self.backend.load()

    def save(self, debts: list[Debt]) -> None:
        self.backend.save(debts)

    def load_settings(self) -> Optional[PlannerSettings]:
        return self.backend.load_settings()

    def save_settings(self, planner_settings: PlannerSettings) -> None:
        self.backend.save_settings(planner_settings)

    def status(self) -> dict:
        if self._backend is None:
            return {"status": "not_initialized"}
        return self.backend.status()

    def close(self) -> None:
        if self._backend is not None:
            logger.info("Debt store closed")
        self._backend = None


debt_store = DebtStore()
