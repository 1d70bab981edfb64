# src/priotask/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps the LLM provider swappable and makes testing easier.
"""

from collections.abc import Iterable
from datetime import datetime
from typing import Any, Protocol

ChatMessage = dict[str, str]
# OpenAI-style chat messages: {"role": "...", "content": "..."}.


class LLMClient(Protocol):
    """Streaming chat completion client (OpenAI/OpenRouter-compatible)."""
    def stream_chat(self, messages: list[ChatMessage], system_prompt: str) -> Iterable[str]: ...


class AdvisoryGenerator(Protocol):
    """External text-completion capability: prompt context in, free-form advice out."""
    async def generate_advisory(self, prompt_context: str) -> str: ...


class ActiveTaskView(Protocol):
    """The only part of the task store the advisory layer may see."""
    def active_tasks(self) -> list[Any]: ...


class TaskRepo(ActiveTaskView, Protocol):
    def create(self, name: str, end_time: datetime, priority: Any) -> Any: ...
    def toggle_complete(self, task_id: str) -> None: ...
    def delete(self, task_id: str) -> None: ...
    def completed_tasks(self) -> list[Any]: ...
    def all_tasks(self) -> list[Any]: ...
    def get(self, task_id: str) -> Any | None: ...
    def count_tasks(self) -> int: ...
