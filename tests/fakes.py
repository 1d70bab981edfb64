# tests/fakes.py

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from datetime import datetime, timedelta

from priotask.core.ports import ChatMessage


class FakeLLMClient:
    """
    Deterministic LLM client for unit tests.

    - Captures calls for assertions
    - Yields a predefined text as a single chunk
    """

    def __init__(self, next_text: str = "ok") -> None:
        self.next_text = next_text
        self.calls: list[tuple[list[ChatMessage], str]] = []

    def stream_chat(self, messages: list[ChatMessage], system_prompt: str) -> Iterable[str]:
        self.calls.append((messages, system_prompt))
        yield self.next_text


class FailingAdvisoryGenerator:
    def __init__(self, exc: Exception) -> None:
        self.exc = exc
        self.prompts: list[str] = []

    async def generate_advisory(self, prompt_context: str) -> str:
        self.prompts.append(prompt_context)
        raise self.exc


class ControlledAdvisoryGenerator:
    """
    Advisory generator whose responses are released by the test.

    Each call parks on a future; tests resolve `pending[i][1]` in any order
    to simulate out-of-order network arrivals.
    """

    def __init__(self) -> None:
        self.pending: list[tuple[str, asyncio.Future[str]]] = []

    async def generate_advisory(self, prompt_context: str) -> str:
        fut: asyncio.Future[str] = asyncio.get_running_loop().create_future()
        self.pending.append((prompt_context, fut))
        return await fut


class TickingClock:
    """Returns `start`, `start + step`, `start + 2*step`, ... on successive calls."""

    def __init__(self, start: datetime, step: timedelta = timedelta(seconds=1)) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.step
        return current
