# tests/conftest.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from priotask.advisory.service import AdvisoryService, LLMAdvisoryGenerator
from priotask.core.state import AppState
from priotask.tasks.task_store import TaskStore

from .fakes import FakeLLMClient, TickingClock

BASE_TIME = datetime(2026, 10, 19, 9, 0, 0)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the commands.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="priotask-test",
        data_dir=tmp_path,
        llm_models=["fake/model"],
        advisory_max_tasks=25,
    )


@pytest.fixture()
def clock() -> TickingClock:
    return TickingClock(BASE_TIME)


@pytest.fixture()
def store(clock: TickingClock) -> TaskStore:
    return TaskStore(clock=clock)


@pytest.fixture()
def llm() -> FakeLLMClient:
    return FakeLLMClient(next_text="Start with the report.")


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore, llm: FakeLLMClient) -> AppState:
    """AppState wired with the real in-memory store and a fake LLM."""
    return AppState(
        settings=settings,
        task_store=store,
        advisory=AdvisoryService(LLMAdvisoryGenerator(llm), clock=lambda: BASE_TIME),
    )
