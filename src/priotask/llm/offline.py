# src/priotask/llm/offline.py

from __future__ import annotations

from collections.abc import Iterable

from ..core.ports import ChatMessage


class OfflineLLMClient:
    """
    Offline deterministic LLM client used when no external API is configured.

    Replies with a short canned note that echoes the first task line from the prompt,
    so the advisory flow can be exercised end to end without network access.
    """

    def stream_chat(self, messages: list[ChatMessage], system_prompt: str) -> Iterable[str]:
        user_text = ""
        for m in reversed(messages):
            if m["role"] == "user":
                user_text = m["content"]
                break

        first_task = ""
        for line in user_text.splitlines():
            if line.startswith("- "):
                first_task = line[2:].strip()
                break

        yield "Offline demo mode: no external LLM is configured.\n"
        yield "Set PRIOTASK_OPENROUTER_API_KEY (and PRIOTASK_LLM_MODELS) to enable real advice.\n"
        if first_task:
            yield f"\nStart with: {first_task}"
        else:
            yield "\nNo active tasks. Enjoy the free time."
