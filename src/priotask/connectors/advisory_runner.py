# src/priotask/connectors/advisory_runner.py

"""
Background event loop for advisory requests.

Why a thread:
- the console REPL is blocking (input()),
- advisory calls are async network round trips and must not block task mutations.

The prompt snapshot is taken on the caller's thread (AdvisoryService.begin) before
the coroutine is handed to the loop, so the loop never touches the task store.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import threading
from concurrent.futures import Future
from dataclasses import dataclass

from ..advisory.service import AdvisoryService
from ..core.ports import ActiveTaskView

logger = logging.getLogger(__name__)


@dataclass
class AdvisoryRunner:
    thread: threading.Thread
    loop: asyncio.AbstractEventLoop
    stop_event: asyncio.Event

    def submit(self, service: AdvisoryService, view: ActiveTaskView) -> Future[None]:
        request_no, prompt = service.begin(view)
        logger.info("Submitting advisory request #%d", request_no)
        return asyncio.run_coroutine_threadsafe(service.complete(request_no, prompt), self.loop)

    def stop(self) -> None:
        try:
            self.loop.call_soon_threadsafe(self.stop_event.set)
        except RuntimeError:
            logger.debug("Failed to signal advisory loop stop.", exc_info=True)

    def join(self, timeout: float | None = None) -> None:
        self.thread.join(timeout=timeout)


def start_advisory_runner() -> AdvisoryRunner | None:
    ready = threading.Event()
    holder: dict[str, object] = {}

    def runner() -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        stop_event = asyncio.Event()

        holder["loop"] = loop
        holder["stop_event"] = stop_event
        ready.set()

        try:
            loop.run_until_complete(stop_event.wait())
        finally:
            # In-flight requests are abandoned at shutdown; there is no state to persist.
            for task in asyncio.all_tasks(loop):
                task.cancel()
            with contextlib.suppress(Exception):
                loop.run_until_complete(loop.shutdown_asyncgens())
            with contextlib.suppress(Exception):
                loop.run_until_complete(loop.shutdown_default_executor())
            loop.close()

    t = threading.Thread(target=runner, name="advisory-loop", daemon=True)
    t.start()

    ready.wait(timeout=5.0)
    loop = holder.get("loop")
    stop_event = holder.get("stop_event")

    if not isinstance(loop, asyncio.AbstractEventLoop) or not isinstance(stop_event, asyncio.Event):
        logger.error("Advisory thread did not initialize properly.")
        return None

    logger.info("Advisory background loop started.")
    return AdvisoryRunner(thread=t, loop=loop, stop_event=stop_event)
