# src/priotask/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) log directory exists,
- wires concrete implementations into AppState (task store, LLM, advisory).
"""

from __future__ import annotations

import logging

from ..advisory.service import AdvisoryService, LLMAdvisoryGenerator
from ..config import get_settings
from ..core.ports import LLMClient
from ..core.state import AppState
from ..llm.client import OpenRouterLLMClient
from ..llm.offline import OfflineLLMClient
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def build_llm_client(settings) -> LLMClient:
    try:
        return OpenRouterLLMClient(settings)
    except RuntimeError as e:
        # Missing key / base URL: fall back for demos and local runs.
        logger.info("LLM not configured (%s); using offline advisory client.", e)
        return OfflineLLMClient()


def create_initial_state(*, settings=None, llm: LLMClient | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)

    if llm is None:
        llm = build_llm_client(settings)

    advisory = AdvisoryService(
        LLMAdvisoryGenerator(llm),
        max_tasks=int(getattr(settings, "advisory_max_tasks", 25)),
    )

    return AppState(
        settings=settings,
        task_store=TaskStore(),
        advisory=advisory,
    )
