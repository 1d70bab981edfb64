# src/priotask/advisory/service.py

"""
Advisory text lifecycle.

The advisory layer reads the active-task snapshot and asks an external text
completion service for guidance. Its failures never touch task state.

Key invariants:
- the prompt is built synchronously from `active_tasks()` when the request is issued;
  the store is never read again while the request is in flight,
- responses are applied in arrival order (last write wins); older in-flight
  requests are neither cancelled nor discarded,
- `loading` is true while at least one request is in flight and is cleared on
  success, empty response and failure alike.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable
from datetime import datetime

from ..core.ports import ActiveTaskView, AdvisoryGenerator, LLMClient
from ..llm.client import friendly_llm_error_message
from .prompt import ADVISORY_SYSTEM_PROMPT, build_advisory_prompt

logger = logging.getLogger(__name__)

EMPTY_ADVICE_MESSAGE = "No advice was generated."


class LLMAdvisoryGenerator:
    """AdvisoryGenerator backed by a streaming LLMClient (run in a worker thread)."""

    def __init__(self, llm: LLMClient, system_prompt: str = ADVISORY_SYSTEM_PROMPT) -> None:
        self._llm = llm
        self._system_prompt = system_prompt

    def _collect(self, prompt_context: str) -> str:
        messages = [{"role": "user", "content": prompt_context}]
        return "".join(self._llm.stream_chat(messages, self._system_prompt))

    async def generate_advisory(self, prompt_context: str) -> str:
        return await asyncio.to_thread(self._collect, prompt_context)


class AdvisoryService:
    def __init__(
        self,
        generator: AdvisoryGenerator,
        *,
        max_tasks: int = 25,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._generator = generator
        self._max_tasks = max_tasks
        self._clock = clock
        self._lock = threading.Lock()

        self._text: str | None = None
        self._error: str | None = None
        self._in_flight = 0
        self._issued = 0

    # ---- observable state ----

    @property
    def text(self) -> str | None:
        with self._lock:
            return self._text

    @property
    def error(self) -> str | None:
        with self._lock:
            return self._error

    @property
    def loading(self) -> bool:
        with self._lock:
            return self._in_flight > 0

    @property
    def requests_issued(self) -> int:
        with self._lock:
            return self._issued

    # ---- request lifecycle ----

    def begin(self, view: ActiveTaskView) -> tuple[int, str]:
        """
        Snapshot the active tasks and mark a request as in flight.

        Must run on the thread that owns the store. Returns (request number, prompt).
        """
        prompt = build_advisory_prompt(view.active_tasks(), self._clock(), max_tasks=self._max_tasks)
        with self._lock:
            self._issued += 1
            self._in_flight += 1
            self._error = None
            request_no = self._issued
        logger.debug("Advisory request #%d issued (prompt_len=%d)", request_no, len(prompt))
        return request_no, prompt

    async def complete(self, request_no: int, prompt: str) -> None:
        """Await the generator and apply its outcome. Never raises for generator errors."""
        try:
            raw = await self._generator.generate_advisory(prompt)
        except Exception as e:
            msg = friendly_llm_error_message(e)
            logger.warning("Advisory request #%d failed: %s", request_no, msg)
            logger.debug("Advisory failure details", exc_info=True)
            with self._lock:
                self._error = msg
        else:
            text = (raw or "").strip()
            with self._lock:
                if text:
                    self._text = text
                    self._error = None
                else:
                    self._error = EMPTY_ADVICE_MESSAGE
            if text:
                logger.info("Advisory request #%d applied (len=%d)", request_no, len(text))
            else:
                logger.info("Advisory request #%d returned no content", request_no)
        finally:
            with self._lock:
                self._in_flight = max(0, self._in_flight - 1)

    async def request(self, view: ActiveTaskView) -> None:
        """Convenience: begin + complete on the current loop."""
        request_no, prompt = self.begin(view)
        await self.complete(request_no, prompt)
