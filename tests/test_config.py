# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from priotask.config import DEFAULT_LLM_MODELS, Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "PRIOTASK_APP_NAME",
        "PRIOTASK_OPENROUTER_API_KEY",
        "OPENROUTER_API_KEY",
        "PRIOTASK_LLM_MODELS",
        "PRIOTASK_DATA_DIR",
        "PRIOTASK_ADVISORY_MAX_TASKS",
        "PRIOTASK_LLM_READ_TIMEOUT_SECONDS",
        "PRIOTASK_APP_TITLE",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults_need_no_secrets() -> None:
    s = Settings.from_env()

    assert s.app_name == "priotask"
    assert s.openrouter_api_key is None
    assert s.llm_models == DEFAULT_LLM_MODELS
    assert s.data_dir == Path(".local/priotask")
    assert s.extra_headers["X-Title"] == "priotask"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PRIOTASK_OPENROUTER_API_KEY", "sk-test")
    monkeypatch.setenv("PRIOTASK_LLM_MODELS", "a/one, b/two  c/three")
    monkeypatch.setenv("PRIOTASK_ADVISORY_MAX_TASKS", "0")
    monkeypatch.setenv("PRIOTASK_LLM_READ_TIMEOUT_SECONDS", "not-a-number")
    monkeypatch.setenv("PRIOTASK_APP_TITLE", "My Tasks")

    s = Settings.from_env()

    assert s.openrouter_api_key == "sk-test"
    assert s.llm_models == ["a/one", "b/two", "c/three"]
    assert s.advisory_max_tasks == 1
    assert s.llm_read_timeout_seconds == 30.0
    assert s.extra_headers["X-Title"] == "My Tasks"
