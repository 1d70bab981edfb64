"""Personal task list with a fixed priority order and optional LLM advice."""

__version__ = "0.1.0"
