# src/priotask/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..advisory.service import AdvisoryService
from .ports import TaskRepo

if TYPE_CHECKING:
    from ..connectors.advisory_runner import AdvisoryRunner


@dataclass
class AppState:
    # Settings kept on the state so commands can read them without global lookups.
    settings: Any

    task_store: TaskRepo
    advisory: AdvisoryService

    # Background loop for advisory requests; None means requests run inline.
    advisory_runner: AdvisoryRunner | None = None

    # Serializes store access between the REPL and anything else in the process.
    lock: threading.RLock = field(default_factory=threading.RLock)
